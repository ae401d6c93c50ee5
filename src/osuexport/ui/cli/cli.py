"""Command line interface for osuexport."""

import sys
from typing import final

from osuexport.platform.logging import logger
from osuexport.shared.errors import ExportError
from osuexport.ui.cli.args import ArgumentParser, ExportArgs
from osuexport.ui.cli.commands import ExportCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Skipped songs do not affect the exit status; only run-level failures
        exit non-zero.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: ExportArgs = ArgumentParser.process_args(args_list)
            _ = ExportCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ExportError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
