"""Summary: Find the first osu! descriptor inside a song directory.
Why: Pick one descriptor per song using a deterministic depth-first order.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from osuexport.config.settings import DESCRIPTOR_SUFFIX
from osuexport.shared.errors import DescriptorNotFoundError, DescriptorWalkError


def _walk_preorder(directory: Path) -> Iterator[Path]:
    """Yield files below ``directory`` depth-first in lexical order.

    Subdirectories are descended into as soon as they are reached, so a file
    in ``a/`` is yielded before a sibling file ``b.osu``.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise DescriptorWalkError(directory, exc.strerror or str(exc)) from exc

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_preorder(Path(entry.path))
        else:
            yield Path(entry.path)


def find_descriptor(song_dir: Path) -> Path:
    """Return the first ``.osu`` file found under ``song_dir``.

    Which difficulty's descriptor wins is arbitrary; only the order is fixed.
    The walk stops at the first match.

    Args:
        song_dir: Song directory to search.

    Returns:
        Path: Path to the descriptor file.

    Raises:
        DescriptorNotFoundError: If no descriptor exists.
        DescriptorWalkError: If a directory cannot be listed before a match.
    """
    for candidate in _walk_preorder(song_dir):
        if candidate.suffix == DESCRIPTOR_SUFFIX:
            return candidate
    raise DescriptorNotFoundError(song_dir)


__all__ = ["find_descriptor"]
