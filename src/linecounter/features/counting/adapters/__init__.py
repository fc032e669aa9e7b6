"""Adapters for the counting feature."""

from .filesystem import LocalFileReader

__all__ = ["LocalFileReader"]
