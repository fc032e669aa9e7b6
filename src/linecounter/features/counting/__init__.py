"""Public surface for the counting feature."""

from .adapters.filesystem import LocalFileReader
from .domain.errors import FileAccessError
from .domain.lines import column_width, count_lines, decode_lossy
from .domain.models import CountReport, LineCount
from .usecases.line_counter import LineCounterService

__all__ = [
    "CountReport",
    "FileAccessError",
    "LineCount",
    "LineCounterService",
    "LocalFileReader",
    "column_width",
    "count_lines",
    "decode_lossy",
]
