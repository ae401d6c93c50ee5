"""Platform adapters (filesystem, logging)."""
