"""Library use cases."""
