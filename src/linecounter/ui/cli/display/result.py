"""src/linecounter/ui/cli/display/result.py
What: Render count rows to stdout and access failures to stderr.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from linecounter.features.counting import CountReport, FileAccessError

from .console import plain_console, write_line


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = plain_console()
        self.error_console = plain_console(stderr=True)

    def show_report(self, report: CountReport) -> None:
        """Print one row per file and, for several files, the total row.

        Args:
            report: Completed count report.
        """
        for row in report.rows():
            write_line(self.console, row)

    def show_error(self, error: FileAccessError) -> None:
        """Print the single-line access diagnostic to stderr.

        Args:
            error: The failure that ended the run.
        """
        write_line(self.error_console, str(error))
