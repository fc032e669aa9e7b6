"""Command line argument options."""

from dataclasses import dataclass
from typing import final


@final
@dataclass(slots=True, frozen=True)
class CountArgs:
    """Parsed invocation: program name and the file names to count."""

    program: str
    files: tuple[str, ...]

    @property
    def show_usage(self) -> bool:
        """Whether the invocation named no files at all."""
        return not self.files


__all__ = ["CountArgs"]
