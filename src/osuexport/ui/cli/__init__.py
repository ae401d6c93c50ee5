"""CLI package; exposes the console script target."""

from osuexport.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
