"""Summary: List song directories directly under a songs root.
Why: Give the export runner a stable, directory-only work list.
"""

from __future__ import annotations

import os
from pathlib import Path

from osuexport.platform.logging import logger
from osuexport.shared.errors import RootUnreadableError


def list_song_directories(root: Path) -> list[Path]:
    """Return the immediate subdirectories of ``root`` sorted by name.

    Plain files and symlinks (even ones pointing at directories) are ignored.

    Args:
        root: Songs root directory.

    Returns:
        list[Path]: Song directories in name order.

    Raises:
        RootUnreadableError: If ``root`` cannot be listed.
    """
    try:
        with os.scandir(root) as entries:
            song_dirs = [
                Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)
            ]
    except OSError as exc:
        raise RootUnreadableError(root, exc.strerror or str(exc)) from exc

    song_dirs.sort(key=lambda path: path.name)
    logger.debug("Found %d song directories in %s", len(song_dirs), root)
    return song_dirs


__all__ = ["list_song_directories"]
