"""Rich console handler for LineCounter diagnostics.

Where: platform/logging/handlers.py
What: Render log records with a level marker and highlighted file paths.
Why: Keep diagnostics readable on stderr without touching result output.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Final, override

from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:/[^/\s]+)+/?|[A-Za-z]:\\[^\s/\\]+(?:\\[^\s/\\]+)*"
)

_LEVEL_STYLES: Final[tuple[tuple[int, str, str], ...]] = (
    (logging.ERROR, "error: ", "red"),
    (logging.WARNING, "warning: ", "yellow"),
    (logging.INFO, "info: ", "blue"),
    (logging.NOTSET, "debug: ", "bright_black"),
)


class PathRichHandler(RichHandler):
    """Rich handler that prefixes a level marker and highlights file paths."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render message with a coloured level marker and bright paths.

        Args:
            record: Log record to format.
            message: Message to render.

        Returns:
            Rich Text object with formatted message.
        """
        label, colour = next(
            (label, colour) for level, label, colour in _LEVEL_STYLES if record.levelno >= level
        )

        text = Text()
        text.append(label, style=Style(color=colour, bold=True))

        cursor = 0
        for match in _PATH_PATTERN.finditer(message):
            if match.start() > cursor:
                text.append(message[cursor : match.start()], style=Style(color=colour))
            text.append(match.group(0), style=Style(color="bright_white"))
            cursor = match.end()
        if cursor < len(message):
            text.append(message[cursor:], style=Style(color=colour))

        return text


__all__ = ["PathRichHandler"]
