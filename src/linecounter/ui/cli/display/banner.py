"""Usage banner shown when no files are given."""

from __future__ import annotations

from typing import Final, final

from rich.console import Console

from linecounter import __version__

from .console import plain_console, write_line

COPYRIGHT: Final[str] = "LineCounter Copyright (C) 2025 Rob Teeple"
LICENSE_NOTICE: Final[str] = (
    "Released under GPL-3.0-only or GPL-3.0-or-later <https://www.gnu.org/licenses/gpl-3.0.html>"
)
SOURCE_URL: Final[str] = "https://github.com/triggnus/LineCounter"


def render_banner(program: str, version: str = __version__) -> list[str]:
    """Banner lines: version, usage, blank line, copyright, license, source."""
    return [
        f"Line Counter v: {version}",
        f"Usage: {program} [filename(s)]",
        "",
        COPYRIGHT,
        LICENSE_NOTICE,
        f"Source code: <{SOURCE_URL}>",
    ]


@final
class BannerDisplay:
    """Prints the version and usage banner to stdout."""

    console: Console

    def __init__(self) -> None:
        self.console = plain_console()

    def show_banner(self, program: str) -> None:
        for line in render_banner(program):
            write_line(self.console, line)
