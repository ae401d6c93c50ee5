"""Export domain rules."""
