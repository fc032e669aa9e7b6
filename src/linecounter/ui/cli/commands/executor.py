"""src/linecounter/ui/cli/commands/executor.py
What: Provide the shared interface for CLI command executors.
Why: Let the processor dispatch usage and count runs uniformly.
"""

from abc import ABC, abstractmethod

from linecounter.ui.cli.args.options import CountArgs

EXIT_SUCCESS = 0


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CountArgs

    def __init__(self, args: CountArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit status.
        """
        pass
