"""src/osuexport/features/export/usecases/runner.py
What: Drive the export over every song directory of a library.
Why: Keep run-level failures fatal while per-song failures only count as skips.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from osuexport.config.config import ExportConfig
from osuexport.features.library import list_song_directories
from osuexport.platform.filesystem import ensure_directory
from osuexport.shared.errors import DestinationUncreatableError

from .export_types import ExportEvent, ExportSummary, SongResult
from .exporter import export_song_directory, log_export_event

ProgressCallback = Callable[[int, int, SongResult], None]


def run_export(
    config: ExportConfig,
    progress_callback: ProgressCallback | None = None,
) -> ExportSummary:
    """Export the audio of every song directory under ``config.songs_path``.

    Args:
        config: Source and destination paths.
        progress_callback: Called after each song with
            ``(index, total, result)``, index starting at 1.

    Returns:
        ExportSummary: Per-song results and counts.

    Raises:
        RootUnreadableError: If the songs root cannot be listed.
        DestinationUncreatableError: If the output directory cannot be created.
    """
    song_dirs = list_song_directories(config.songs_path)

    try:
        output_dir = ensure_directory(config.output_path)
    except OSError as exc:
        raise DestinationUncreatableError(config.output_path, exc.strerror or str(exc)) from exc

    summary = ExportSummary()
    total = len(song_dirs)

    if total == 0:
        log_export_event(
            logging.WARNING,
            ExportEvent.RUN_NO_SONGS,
            "No song directories found in %s",
            config.songs_path,
            songs_path=config.songs_path,
        )
        return summary

    log_export_event(
        logging.DEBUG,
        ExportEvent.RUN_START,
        "Exporting %d songs from %s to %s",
        total,
        config.songs_path,
        output_dir,
        songs_path=config.songs_path,
        output_path=output_dir,
        total=total,
    )

    for index, song_dir in enumerate(song_dirs, start=1):
        result = export_song_directory(song_dir, output_dir)
        summary.results.append(result)
        if progress_callback is not None:
            progress_callback(index, total, result)

    log_export_event(
        logging.DEBUG,
        ExportEvent.RUN_COMPLETE,
        "Export finished [exported=%d, skipped=%d]",
        summary.exported,
        summary.skipped,
        exported=summary.exported,
        skipped=summary.skipped,
    )
    return summary


__all__ = ["ProgressCallback", "run_export"]
