"""Progress line display for the CLI."""

from typing import final

from rich.console import Console

from osuexport.config.settings import PROGRESS_ELLIPSIS, PROGRESS_TITLE_WIDTH
from osuexport.features.export import SongResult


def truncate_title(title: str, width: int = PROGRESS_TITLE_WIDTH) -> str:
    """Shorten ``title`` to ``width`` code points plus an ellipsis.

    Titles of ``width`` code points or fewer are returned unchanged.
    """
    if width <= 0:
        return ""
    if len(title) <= width:
        return title
    return title[:width] + PROGRESS_ELLIPSIS


def printable_title(title: str) -> str:
    """Replace surrogate-escaped bytes in ``title`` with U+FFFD."""
    return title.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


@final
class ProgressDisplay:
    """Single carriage-return progress line, shown only on a terminal."""

    def __init__(self, console: Console | None = None, enabled: bool | None = None) -> None:
        """Initialize the display.

        Args:
            console: Console to write to. Defaults to stdout.
            enabled: Force the line on or off. Defaults to whether the
                console is an interactive terminal.
        """
        self.console = console or Console(highlight=False)
        self.enabled = self.console.is_terminal if enabled is None else enabled
        self._pad = 0
        self._line_length = 0

    def update(self, index: int, total: int, result: SongResult) -> None:
        """Show ``index/total`` and the song title after a song finishes.

        The signature matches the runner's progress callback.
        """
        if not self.enabled:
            return

        title = truncate_title(printable_title(result.display_title))
        self._pad = max(self._pad, len(title))
        line = f"{index}/{total} {title:<{self._pad}}\r"
        self._line_length = len(line)
        self._write(line)

    def clear(self) -> None:
        """Blank out the progress line if one was drawn."""
        if self._line_length == 0:
            return
        self._write(" " * self._line_length + "\r")
        self._line_length = 0

    def _write(self, text: str) -> None:
        stream = self.console.file
        _ = stream.write(text)
        stream.flush()


__all__ = ["ProgressDisplay", "printable_title", "truncate_title"]
