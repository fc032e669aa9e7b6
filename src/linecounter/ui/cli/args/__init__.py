"""Command line argument handling package."""

from linecounter.ui.cli.args.parser import ArgumentParser
from linecounter.ui.cli.args.options import CountArgs

__all__ = ["ArgumentParser", "CountArgs"]
