"""Ports for the counting feature."""

from __future__ import annotations

from typing import Protocol


class FileReader(Protocol):
    """Abstract filesystem access needed by the counting use case."""

    def read_bytes(self, name: str) -> bytes:
        """Return the full contents of ``name``.

        Raises:
            OSError: If the file cannot be opened or read.
        """

        ...
