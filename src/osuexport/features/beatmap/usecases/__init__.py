"""Beatmap descriptor use cases."""
