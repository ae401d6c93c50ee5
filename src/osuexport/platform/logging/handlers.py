"""Rich console handler with level icons and highlighted paths."""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar, override

from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ExportRichHandler(RichHandler):
    """Render log records as a single colored line with a level icon."""

    PATH_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"(?:/[^/\s]+)+/?|[A-Za-z]:\\[^\s/\\]+(?:\\[^\s/\\]+)*"
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render ``message`` with an icon and level color.

        Args:
            record: Log record to format.
            message: Already formatted message text.

        Returns:
            Text: Styled message.
        """
        text = Text()

        if record.levelno >= logging.ERROR:
            text.append("❌ ", style=Style(color="red", bold=True))
            text.append(message, style=Style(color="red"))
            return text
        if record.levelno >= logging.WARNING:
            text.append("⚠️  ", style=Style(color="yellow", bold=True))
            text.append(message, style=Style(color="yellow"))
            return text
        if record.levelno <= logging.DEBUG:
            text.append("· ", style=Style(color="bright_black"))
            text.append(message, style=Style(color="bright_black"))
            return text

        text.append("ℹ️  ", style=Style(color="blue", bold=True))
        self._append_with_paths(text, message)
        return text

    def _append_with_paths(self, text: Text, message: str) -> None:
        """Append ``message`` with path-like spans shown in white."""

        position = 0
        for match in self.PATH_PATTERN.finditer(message):
            if match.start() > position:
                text.append(message[position : match.start()], style=Style(color="blue"))
            text.append(match.group(0), style=Style(color="bright_white"))
            position = match.end()
        if position < len(message):
            text.append(message[position:], style=Style(color="blue"))


__all__ = ["ExportRichHandler"]
