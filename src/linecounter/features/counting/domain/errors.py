"""Errors raised by the counting feature."""

from __future__ import annotations


class FileAccessError(RuntimeError):
    """Raised when a named file cannot be opened or read."""

    def __init__(self, name: str, error: OSError) -> None:
        self.name: str = name
        self.error: OSError = error
        super().__init__(f"Error reading file {name}: {self.detail}")

    @property
    def detail(self) -> str:
        """Operating system description of the failure."""
        return self.error.strerror or str(self.error)


__all__ = ["FileAccessError"]
