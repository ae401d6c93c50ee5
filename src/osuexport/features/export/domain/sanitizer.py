"""Summary: Build safe export file names from song metadata.
Why: Artist and title text may contain characters that are not valid in file names.
"""

import re
from typing import ClassVar, final

from osuexport.config.settings import FILENAME_REPLACEMENT, INVALID_FILENAME_CHARS


@final
class Sanitizer:
    """Sanitize exported file names."""

    # Any single character that is unsafe in a file name
    INVALID_CHARS: ClassVar[re.Pattern[str]] = re.compile(
        f"[{re.escape(INVALID_FILENAME_CHARS)}]"
    )

    @classmethod
    def sanitize_file_name(cls, name: str) -> str:
        """Replace every unsafe character in ``name`` with an underscore.

        No other normalization happens: no length limit, no Unicode
        normalization and no trimming of dots or spaces.

        Args:
            name: Candidate file name (not a path).

        Returns:
            str: Name with each of ``/ \\ ? % * : | " < >`` replaced.
        """
        return cls.INVALID_CHARS.sub(FILENAME_REPLACEMENT, name)

    @classmethod
    def build_file_name(cls, artist: str, title: str, extension: str) -> str:
        """Return ``"{artist} - {title}{extension}"`` with unsafe characters replaced.

        Args:
            artist: Song artist.
            title: Song title.
            extension: Audio suffix including the leading dot, e.g. ``.mp3``.

        Returns:
            str: Sanitized file name.
        """
        return cls.sanitize_file_name(f"{artist} - {title}{extension}")


__all__ = ["Sanitizer"]
