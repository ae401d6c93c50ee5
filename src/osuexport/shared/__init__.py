"""Shared value objects and errors used across features."""

from osuexport.shared.errors import (
    AudioFileUnreadableError,
    AudioFileWriteError,
    DescriptorNotFoundError,
    DescriptorOpenError,
    DescriptorReadError,
    DescriptorWalkError,
    DestinationUncreatableError,
    ExportError,
    IncompleteMetadataError,
    RootUnreadableError,
    SongExportError,
)
from osuexport.shared.song_metadata import SongMetadata

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
    "SongMetadata",
]
