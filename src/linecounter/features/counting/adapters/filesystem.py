"""Local filesystem adapter for reading files to count."""

from __future__ import annotations

from typing import final


@final
class LocalFileReader:
    """Read whole files from the local filesystem."""

    def read_bytes(self, name: str) -> bytes:
        with open(name, "rb") as handle:
            return handle.read()


__all__ = ["LocalFileReader"]
