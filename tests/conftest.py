"""Shared pytest fixtures for building osu! song libraries on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SongFactory = Callable[..., Path]


def descriptor_text(
    audio_filename: str = "audio.mp3",
    title: str = "Test Title",
    artist: str = "Test Artist",
) -> str:
    """Return a minimal but realistic ``.osu`` descriptor body."""

    return (
        "osu file format v14\n"
        "\n"
        "[General]\n"
        f"AudioFilename: {audio_filename}\n"
        "AudioLeadIn: 0\n"
        "PreviewTime: 51234\n"
        "Mode: 0\n"
        "\n"
        "[Metadata]\n"
        f"Title:{title}\n"
        f"TitleUnicode:{title}\n"
        f"Artist:{artist}\n"
        f"ArtistUnicode:{artist}\n"
        "Creator:mapper\n"
        "Version:Hard\n"
    )


@pytest.fixture
def songs_root(tmp_path: Path) -> Path:
    """Provide an empty songs root directory."""

    root = tmp_path / "Songs"
    root.mkdir()
    return root


@pytest.fixture
def make_song(songs_root: Path) -> SongFactory:
    """Return a factory that creates a song directory under ``songs_root``."""

    def _make_song(
        name: str,
        *,
        audio_filename: str = "audio.mp3",
        title: str = "Test Title",
        artist: str = "Test Artist",
        audio_bytes: bytes | None = b"ID3-audio-bytes",
        descriptor_name: str = "Test Artist - Test Title (mapper) [Hard].osu",
    ) -> Path:
        song_dir = songs_root / name
        song_dir.mkdir()
        _ = (song_dir / descriptor_name).write_text(
            descriptor_text(audio_filename, title, artist), encoding="utf-8"
        )
        if audio_bytes is not None:
            _ = (song_dir / audio_filename).write_bytes(audio_bytes)
        return song_dir

    return _make_song
