"""src/osuexport/ui/cli/commands/export.py
What: Execute an export run from parsed CLI arguments.
Why: Bridge parsed arguments with the export runner and the display helpers.
"""

from rich.console import Console

from osuexport.features.export import ExportSummary, run_export
from osuexport.ui.cli.args.options import ExportArgs
from osuexport.ui.cli.display import ProgressDisplay, render_export_summary


class ExportCommand:
    """Command that exports every song of a library."""

    args: ExportArgs
    console: Console
    progress_display: ProgressDisplay

    def __init__(self, args: ExportArgs, console: Console | None = None) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
            console: Output console (stdout when omitted).
        """
        self.args = args
        self.console = console or Console(highlight=False)
        self.progress_display = ProgressDisplay(self.console)

    def execute(self) -> ExportSummary:
        """Run the export and print the summary.

        Returns:
            ExportSummary: Results of the run.
        """
        try:
            summary = run_export(self.args.config, self.progress_display.update)
        finally:
            self.progress_display.clear()
        render_export_summary(self.console, summary)
        return summary
