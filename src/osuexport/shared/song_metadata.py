# Where: osuexport.shared.song_metadata
# What: SongMetadata dataclass shared by the beatmap and export features.
# Why: Keep the descriptor fields in one place for parser, exporter and UI.

from dataclasses import dataclass


@dataclass
class SongMetadata:
    """Fields read from an osu! descriptor file."""

    audio_filename: str = ""
    title: str = ""
    artist: str = ""

    def is_complete(self) -> bool:
        """Return True once every field holds a non-empty value."""
        return bool(self.audio_filename and self.title and self.artist)


__all__ = ["SongMetadata"]
