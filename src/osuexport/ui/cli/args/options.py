"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from osuexport.config.config import ExportConfig


@final
@dataclass(slots=True)
class ExportArgs:
    """Parsed command line arguments for an export run."""

    config: ExportConfig
    verbose: bool
    quiet: bool
    log_file: Path | None


__all__ = ["ExportArgs"]
