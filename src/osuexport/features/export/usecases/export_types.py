"""src/osuexport/features/export/usecases/export_types.py
Where: Export feature usecases layer.
What: Shared enums and dataclasses for the export flow.
Why: Keep the exporter and runner free of type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from osuexport.shared.song_metadata import SongMetadata


class ExportEvent(StrEnum):
    """Structured event identifiers for export logs."""

    RUN_START = "export.run.start"
    RUN_COMPLETE = "export.run.complete"
    RUN_NO_SONGS = "export.run.no_songs"
    SONG_SUCCESS = "export.song.success"
    SONG_SKIP = "export.song.skip"


@dataclass
class SongResult:
    """Outcome of exporting one song directory."""

    source_path: Path
    success: bool = False
    target_path: Path | None = None
    metadata: SongMetadata | None = None
    error_message: str | None = None

    @property
    def display_title(self) -> str:
        """Title for progress output, falling back to the directory name."""
        if self.metadata is not None and self.metadata.title:
            return self.metadata.title
        return self.source_path.name


@dataclass
class ExportSummary:
    """Aggregate counts for a finished run."""

    results: list[SongResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def exported(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def skipped(self) -> int:
        return self.total - self.exported


__all__ = ["ExportEvent", "ExportSummary", "SongResult"]
