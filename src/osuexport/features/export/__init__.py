"""Summary: Audio export feature exports.
Why: Provide a single import path for the runner, exporter and result types.
"""

from .domain.sanitizer import Sanitizer
from .usecases.export_types import ExportEvent, ExportSummary, SongResult
from .usecases.exporter import export_song, export_song_directory
from .usecases.runner import ProgressCallback, run_export

__all__ = [
    "ExportEvent",
    "ExportSummary",
    "ProgressCallback",
    "Sanitizer",
    "SongResult",
    "export_song",
    "export_song_directory",
    "run_export",
]
