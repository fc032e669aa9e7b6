"""Use cases for the counting feature."""

from .line_counter import LineCounterService
from .ports import FileReader

__all__ = ["FileReader", "LineCounterService"]
