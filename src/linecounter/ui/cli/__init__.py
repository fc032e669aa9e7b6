"""Command line interface for LineCounter."""

from linecounter.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
