"""Value objects describing per-file counts and the aggregate report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .lines import column_width

TOTAL_LABEL: Final[str] = "Total"


@dataclass(slots=True, frozen=True)
class LineCount:
    """Line count of a single named file."""

    count: int
    name: str

    def format(self, width: int) -> str:
        """Render the row with the count right-justified to ``width``.

        Counts wider than ``width`` are printed in full.
        """
        return f"{self.count:>{width}} {self.name}"


@dataclass(slots=True, frozen=True)
class CountReport:
    """Ordered results for one invocation plus the running total."""

    entries: tuple[LineCount, ...]
    total: int
    show_total: bool

    @classmethod
    def from_entries(cls, entries: Sequence[LineCount]) -> "CountReport":
        """Build a report; the total row is shown for two or more files."""
        return cls(
            entries=tuple(entries),
            total=sum(entry.count for entry in entries),
            show_total=len(entries) > 1,
        )

    @property
    def width(self) -> int:
        """Column width derived from the total, not from individual counts."""
        return column_width(self.total)

    def rows(self) -> list[str]:
        """Printable rows in argument order, followed by the total row if shown."""
        width = self.width
        rows = [entry.format(width) for entry in self.entries]
        if self.show_total:
            rows.append(LineCount(self.total, TOTAL_LABEL).format(width))
        return rows


__all__ = ["CountReport", "LineCount", "TOTAL_LABEL"]
