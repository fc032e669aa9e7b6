"""
Summary: Count lines for each named file in argument order.
Why: Centralize the read, decode, count, and accumulate flow behind one service.
"""

from __future__ import annotations

from collections.abc import Sequence

from linecounter.features.counting.adapters.filesystem import LocalFileReader
from linecounter.features.counting.domain.errors import FileAccessError
from linecounter.features.counting.domain.lines import count_lines, decode_lossy
from linecounter.features.counting.domain.models import CountReport, LineCount
from linecounter.features.counting.usecases.ports import FileReader
from linecounter.platform.logging import logger


class LineCounterService:
    """Read files sequentially and produce a ``CountReport``."""

    reader: FileReader

    def __init__(self, reader: FileReader | None = None) -> None:
        """Initialize the service.

        Args:
            reader: Filesystem port; defaults to the local filesystem.
        """
        self.reader = reader or LocalFileReader()

    def count_file(self, name: str) -> LineCount:
        """Count the lines of a single file.

        Args:
            name: File name exactly as given on the command line.

        Returns:
            LineCount: The file's line count paired with its name.

        Raises:
            FileAccessError: If the file cannot be opened or read.
        """
        try:
            data = self.reader.read_bytes(name)
        except OSError as e:
            raise FileAccessError(name, e) from e

        entry = LineCount(count=count_lines(decode_lossy(data)), name=name)
        logger.debug("Counted %d lines in %s (%d bytes)", entry.count, name, len(data))
        return entry

    def count_files(self, names: Sequence[str]) -> CountReport:
        """Count every file in order, stopping at the first failure.

        Args:
            names: File names in argument order.

        Returns:
            CountReport: Entries for all files and their total.

        Raises:
            FileAccessError: For the first file that cannot be read; no
                report is produced in that case.
        """
        entries = [self.count_file(name) for name in names]
        report = CountReport.from_entries(entries)
        logger.debug("Counted %d lines across %d file(s)", report.total, len(entries))
        return report


__all__ = ["LineCounterService"]
