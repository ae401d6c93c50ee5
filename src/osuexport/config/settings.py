"""Where: src/osuexport/config/settings.py
What: Fixed constants for descriptor parsing, export naming and progress output.
Why: Give feature layers a single import location for tunable values.
"""

from __future__ import annotations

from typing import Final

# Descriptor discovery ---------------------------------------------------------

# Suffix of osu! beatmap descriptor files, matched case-sensitively.
DESCRIPTOR_SUFFIX: Final[str] = ".osu"

# Keys read from a descriptor, in match priority order.
AUDIO_FILENAME_KEY: Final[str] = "AudioFilename"
TITLE_KEY: Final[str] = "Title"
ARTIST_KEY: Final[str] = "Artist"


# Export ----------------------------------------------------------------------

DEFAULT_OUTPUT_DIR: Final[str] = "Songs"

# Characters replaced in exported file names.
INVALID_FILENAME_CHARS: Final[str] = '/\\?%*:|"<>'
FILENAME_REPLACEMENT: Final[str] = "_"


# Progress display ------------------------------------------------------------

PROGRESS_TITLE_WIDTH: Final[int] = 30
PROGRESS_ELLIPSIS: Final[str] = "..."


__all__ = [
    "ARTIST_KEY",
    "AUDIO_FILENAME_KEY",
    "DEFAULT_OUTPUT_DIR",
    "DESCRIPTOR_SUFFIX",
    "FILENAME_REPLACEMENT",
    "INVALID_FILENAME_CHARS",
    "PROGRESS_ELLIPSIS",
    "PROGRESS_TITLE_WIDTH",
    "TITLE_KEY",
]
