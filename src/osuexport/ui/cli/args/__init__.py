"""Command line argument handling package."""

from osuexport.ui.cli.args.parser import ArgumentParser
from osuexport.ui.cli.args.options import ExportArgs

__all__ = ["ArgumentParser", "ExportArgs"]
