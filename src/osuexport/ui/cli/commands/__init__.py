"""Command execution package for CLI."""

from osuexport.ui.cli.commands.export import ExportCommand

__all__ = ["ExportCommand"]
