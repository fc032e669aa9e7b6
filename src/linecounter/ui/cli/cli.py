"""Command line interface for LineCounter."""

import sys
from collections.abc import Sequence
from typing import final

from linecounter.platform.logging import logger
from linecounter.ui.cli.args import ArgumentParser
from linecounter.ui.cli.commands import CommandExecutor, CountCommand, UsageCommand

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(argv: Sequence[str]) -> int:
        """Process command line arguments.

        Args:
            argv: Full invocation argument list, program path first.

        Returns:
            int: Process exit status.
        """
        try:
            args = ArgumentParser.process_args(argv)
            command: CommandExecutor = (
                UsageCommand(args) if args.show_usage else CountCommand(args)
            )
            return command.execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Invocation arguments; defaults to ``sys.argv``.

    Returns:
        int: Process exit status (0 on success and on unreadable files).
    """
    return CommandProcessor.process_command(sys.argv if argv is None else argv)
