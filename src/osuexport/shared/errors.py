"""Summary: Exception hierarchy for the export pipeline.
Why: Separate fatal run-level failures from per-song failures that only skip.
"""

from __future__ import annotations

from pathlib import Path


class ExportError(Exception):
    """Base class for all export errors."""


class RootUnreadableError(ExportError):
    """The songs root could not be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Cannot read songs directory {root}: {reason}")
        self.root = root


class DestinationUncreatableError(ExportError):
    """The output directory could not be created."""

    def __init__(self, destination: Path, reason: str) -> None:
        super().__init__(f"Cannot create output directory {destination}: {reason}")
        self.destination = destination


class SongExportError(ExportError):
    """Failure while exporting a single song directory.

    These are caught per song and turned into a skip.
    """


class DescriptorNotFoundError(SongExportError):
    def __init__(self, song_dir: Path) -> None:
        super().__init__(f"No .osu descriptor found under {song_dir}")
        self.song_dir = song_dir


class DescriptorWalkError(SongExportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot walk {path}: {reason}")
        self.path = path


class DescriptorOpenError(SongExportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open descriptor {path}: {reason}")
        self.path = path


class DescriptorReadError(SongExportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read descriptor {path}: {reason}")
        self.path = path


class IncompleteMetadataError(SongExportError):
    """Descriptor ended before all required keys were found."""

    def __init__(self, path: Path, missing: list[str]) -> None:
        super().__init__(f"Descriptor {path} is missing: {', '.join(missing)}")
        self.path = path
        self.missing = missing


class AudioFileUnreadableError(SongExportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read audio file {path}: {reason}")
        self.path = path


class AudioFileWriteError(SongExportError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write audio file {path}: {reason}")
        self.path = path


__all__ = [
    "AudioFileUnreadableError",
    "AudioFileWriteError",
    "DescriptorNotFoundError",
    "DescriptorOpenError",
    "DescriptorReadError",
    "DescriptorWalkError",
    "DestinationUncreatableError",
    "ExportError",
    "IncompleteMetadataError",
    "RootUnreadableError",
    "SongExportError",
]
