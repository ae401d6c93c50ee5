"""Feature packages for the export pipeline."""
