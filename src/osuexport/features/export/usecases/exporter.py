"""Summary: Copy one song's audio file into the output directory.
Why: Isolate per-song failures so a broken beatmap only skips itself.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from osuexport.features.beatmap import find_descriptor, parse_descriptor
from osuexport.features.export.domain.sanitizer import Sanitizer
from osuexport.platform.logging import logger
from osuexport.shared.errors import (
    AudioFileUnreadableError,
    AudioFileWriteError,
    SongExportError,
)
from osuexport.shared.song_metadata import SongMetadata

from .export_types import ExportEvent, SongResult


def log_export_event(
    level: int,
    event: ExportEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` tagged with a structured export event."""

    extra: dict[str, Any] = {"export_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


def resolve_audio_path(song_dir: Path, audio_filename: str) -> Path:
    """Join ``audio_filename`` under ``song_dir``.

    Leading separators are dropped so an absolute name still stays inside
    the song directory.
    """
    separators = os.sep + (os.altsep or "")
    return song_dir / audio_filename.lstrip(separators)


def file_extension(path: Path) -> str:
    """Return the final component's text from its last dot, or ``""``.

    ``.mp3`` yields ``.mp3`` and ``audio.`` yields ``.``.
    """
    name = path.name
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def export_song(descriptor_path: Path, metadata: SongMetadata, output_dir: Path) -> Path:
    """Write the audio file referenced by ``metadata`` into ``output_dir``.

    The audio path is resolved next to the descriptor. An existing file with
    the same sanitized name is overwritten.

    Args:
        descriptor_path: Descriptor the metadata was read from.
        metadata: Parsed song metadata.
        output_dir: Existing destination directory.

    Returns:
        Path: Path of the written file.

    Raises:
        AudioFileUnreadableError: If the audio file cannot be read.
        AudioFileWriteError: If the copy cannot be written.
    """
    audio_path = resolve_audio_path(descriptor_path.parent, metadata.audio_filename)
    try:
        data = audio_path.read_bytes()
    except OSError as exc:
        raise AudioFileUnreadableError(audio_path, exc.strerror or str(exc)) from exc

    file_name = Sanitizer.build_file_name(
        metadata.artist, metadata.title, file_extension(audio_path)
    )
    target_path = output_dir / file_name
    try:
        _ = target_path.write_bytes(data)
    except OSError as exc:
        raise AudioFileWriteError(target_path, exc.strerror or str(exc)) from exc

    return target_path


def export_song_directory(song_dir: Path, output_dir: Path) -> SongResult:
    """Run locate, parse and export for one song directory.

    Any ``SongExportError`` is converted into a failed result.
    """
    result = SongResult(source_path=song_dir)
    try:
        descriptor_path = find_descriptor(song_dir)
        result.metadata = parse_descriptor(descriptor_path)
        result.target_path = export_song(descriptor_path, result.metadata, output_dir)
    except SongExportError as exc:
        result.error_message = str(exc)
        log_export_event(
            logging.DEBUG,
            ExportEvent.SONG_SKIP,
            "Skipped %s: %s",
            song_dir.name,
            result.error_message,
            source_path=song_dir,
            error_message=result.error_message,
        )
        return result

    result.success = True
    log_export_event(
        logging.DEBUG,
        ExportEvent.SONG_SUCCESS,
        "Exported %s -> %s",
        song_dir.name,
        result.target_path,
        source_path=song_dir,
        target_path=result.target_path,
    )
    return result


__all__ = [
    "export_song",
    "export_song_directory",
    "file_extension",
    "log_export_event",
    "resolve_audio_path",
]
