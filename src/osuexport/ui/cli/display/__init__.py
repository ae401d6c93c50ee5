"""Display management for CLI interface."""

from osuexport.ui.cli.display.progress import ProgressDisplay, printable_title, truncate_title
from osuexport.ui.cli.display.summary import render_export_summary

__all__ = ["ProgressDisplay", "printable_title", "render_export_summary", "truncate_title"]
