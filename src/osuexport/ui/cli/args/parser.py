"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from osuexport import __version__
from osuexport.config.config import ExportConfig
from osuexport.config.settings import DEFAULT_OUTPUT_DIR
from osuexport.platform.logging import setup_logger
from osuexport.ui.cli.args.options import ExportArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="osuexport",
            description="Export the audio of osu! beatmaps as 'Artist - Title' files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "-p",
            "--songs-path",
            dest="songs_path",
            type=str,
            required=True,
            help="Path to the osu! Songs directory",
            metavar="SONGS_PATH",
        )
        _ = parser.add_argument(
            "-d",
            "--output",
            dest="output_path",
            type=str,
            default=DEFAULT_OUTPUT_DIR,
            help="Directory that receives the exported audio files (default: %(default)s)",
            metavar="OUTPUT_DIR",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show why individual songs were skipped",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Also write detailed logs to this file",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ExportArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ExportArgs: Processed command line arguments.

        Raises:
            SystemExit: With code 2 when arguments are missing or invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        log_file = Path(parsed_args.log_file) if parsed_args.log_file else None
        _ = setup_logger(log_file=log_file, console_level=log_level)

        return ExportArgs(
            config=ExportConfig.from_strings(parsed_args.songs_path, parsed_args.output_path),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=log_file,
        )


__all__ = ["ArgumentParser"]
