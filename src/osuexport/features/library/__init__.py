"""Summary: Song library enumeration feature exports.
Why: Expose the directory scanner under a short import path.
"""

from .usecases.scanner import list_song_directories

__all__ = ["list_song_directories"]
