"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from linecounter.platform.logging import logger, setup_logger
from linecounter.ui.cli.args.options import CountArgs

DEFAULT_PROGRAM_NAME: Final[str] = "lc"

# Everything after this sentinel is positional, so names like "-v" are files.
_POSITIONAL_SENTINEL: Final[str] = "--"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser(prog: str = DEFAULT_PROGRAM_NAME) -> argparse.ArgumentParser:
        """Create argument parser.

        The parser accepts only a list of file names; there are no options.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog=prog,
            description="Count newline-delimited lines in each FILE, with a total for several files.",
            add_help=False,
        )
        _ = parser.add_argument(
            "files",
            nargs="*",
            help="Files to count",
            metavar="FILE",
        )
        return parser

    @staticmethod
    def process_args(argv: Sequence[str]) -> CountArgs:
        """Process the full invocation argument list.

        Args:
            argv: Invocation arguments, the program path first.

        Returns:
            CountArgs: Program name and the file names in argument order.
        """
        _ = setup_logger()

        program = Path(argv[0]).name if argv else DEFAULT_PROGRAM_NAME
        parser = ArgumentParser.create_parser(program)
        parsed_args = parser.parse_args([_POSITIONAL_SENTINEL, *argv[1:]])

        files = tuple(parsed_args.files)
        logger.debug("Invoked as %s with %d file argument(s)", program, len(files))
        return CountArgs(program=program, files=files)
