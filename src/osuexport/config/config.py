"""Run configuration for an export."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from osuexport.config.settings import DEFAULT_OUTPUT_DIR


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Immutable settings for a single export run.

    Attributes:
        songs_path: Root directory holding one subdirectory per song.
        output_path: Flat directory that receives the exported audio files.
    """

    songs_path: Path
    output_path: Path = Path(DEFAULT_OUTPUT_DIR)

    @classmethod
    def from_strings(cls, songs_path: str, output_path: str | None = None) -> "ExportConfig":
        """Build a configuration from raw command line values.

        Args:
            songs_path: Songs root as given by the user.
            output_path: Output directory, or None for the default.

        Returns:
            ExportConfig: Configuration with user paths expanded.
        """
        output = output_path or DEFAULT_OUTPUT_DIR
        return cls(
            songs_path=Path(songs_path).expanduser(),
            output_path=Path(output).expanduser(),
        )


__all__ = ["ExportConfig"]
