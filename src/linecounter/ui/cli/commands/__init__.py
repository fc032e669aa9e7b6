"""Command execution package for CLI."""

from linecounter.ui.cli.commands.executor import CommandExecutor
from linecounter.ui.cli.commands.count import CountCommand
from linecounter.ui.cli.commands.usage import UsageCommand

__all__ = [
    "CommandExecutor",
    "CountCommand",
    "UsageCommand",
]
