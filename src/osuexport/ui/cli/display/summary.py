"""Utilities for rendering the end-of-run summary."""

from __future__ import annotations

from rich.console import Console

from osuexport.features.export import ExportSummary


def render_export_summary(console: Console, summary: ExportSummary) -> None:
    """Print the final export counts.

    Args:
        console: Rich console instance used to render output.
        summary: Finished run summary.
    """
    console.print("Done!", highlight=False)
    console.print(f"[green]Exported: {summary.exported}[/green]", highlight=False)
    if summary.skipped:
        console.print(f"[yellow]Skipped: {summary.skipped}[/yellow]", highlight=False)
    else:
        console.print(f"Skipped: {summary.skipped}", highlight=False)


__all__ = ["render_export_summary"]
