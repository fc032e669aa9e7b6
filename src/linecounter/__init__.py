"""LineCounter: count newline-delimited lines in one or more files."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Final

_FALLBACK_VERSION: Final[str] = "0.1.0"

try:
    __version__: str = version("linecounter")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution.
    __version__ = _FALLBACK_VERSION

__all__ = ["__version__"]
