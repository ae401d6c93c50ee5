"""Summary: Read song metadata fields from an osu! descriptor file.
Why: Only three header keys are needed, so the scan stops as soon as they are known.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from osuexport.config.settings import ARTIST_KEY, AUDIO_FILENAME_KEY, TITLE_KEY
from osuexport.shared.errors import (
    DescriptorOpenError,
    DescriptorReadError,
    IncompleteMetadataError,
)
from osuexport.shared.song_metadata import SongMetadata

# Line prefix -> SongMetadata attribute, in match priority order.
FIELD_PREFIXES: Final[tuple[tuple[str, str], ...]] = (
    (f"{AUDIO_FILENAME_KEY}:", "audio_filename"),
    (f"{TITLE_KEY}:", "title"),
    (f"{ARTIST_KEY}:", "artist"),
)

VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z]+:(.*)")


def extract_value(line: str) -> str | None:
    """Return the trimmed value of a ``Key:value`` line.

    Args:
        line: Raw descriptor line.

    Returns:
        str | None: Value after the first colon, or None when the line does
        not start with an alphabetic key followed by ``:``.
    """
    match = VALUE_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1).strip()


def apply_line(metadata: SongMetadata, line: str) -> None:
    """Assign the field ``line`` carries unless that field is already set."""

    for prefix, attribute in FIELD_PREFIXES:
        if not line.startswith(prefix):
            continue
        if not getattr(metadata, attribute):
            value = extract_value(line)
            if value:
                setattr(metadata, attribute, value)
        return


def parse_descriptor(path: Path) -> SongMetadata:
    """Parse ``AudioFilename``, ``Title`` and ``Artist`` from a descriptor.

    Lines are matched by exact, case-sensitive prefix. Reading stops once all
    three fields are non-empty, so keys repeated later in the file are never
    seen.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so an
    audio file name still maps back to the exact bytes on disk.

    Args:
        path: Descriptor file path.

    Returns:
        SongMetadata: Complete metadata.

    Raises:
        DescriptorOpenError: If the file cannot be opened.
        DescriptorReadError: If reading fails part way.
        IncompleteMetadataError: If the file ends before all keys are found.
    """
    metadata = SongMetadata()

    try:
        handle = open(path, encoding="utf-8-sig", errors="surrogateescape")
    except OSError as exc:
        raise DescriptorOpenError(path, exc.strerror or str(exc)) from exc

    with handle:
        try:
            for line in handle:
                apply_line(metadata, line)
                if metadata.is_complete():
                    return metadata
        except OSError as exc:
            raise DescriptorReadError(path, exc.strerror or str(exc)) from exc

    missing = [
        prefix.rstrip(":")
        for prefix, attribute in FIELD_PREFIXES
        if not getattr(metadata, attribute)
    ]
    raise IncompleteMetadataError(path, missing)


__all__ = ["FIELD_PREFIXES", "apply_line", "extract_value", "parse_descriptor"]
