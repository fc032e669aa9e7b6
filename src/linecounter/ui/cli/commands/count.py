"""src/linecounter/ui/cli/commands/count.py
What: Count lines for the named files and print the report.
Why: Apply the fail-soft policy: an unreadable file ends the run with status 0.
"""

from typing import override

from linecounter.features.counting import FileAccessError, LineCounterService
from linecounter.platform.logging import logger
from linecounter.ui.cli.args.options import CountArgs
from linecounter.ui.cli.commands.executor import EXIT_SUCCESS, CommandExecutor
from linecounter.ui.cli.display.result import ResultDisplay


class CountCommand(CommandExecutor):
    """Command for counting one or more files."""

    service: LineCounterService
    result_display: ResultDisplay

    def __init__(self, args: CountArgs) -> None:
        super().__init__(args)
        self.service = LineCounterService()
        self.result_display = ResultDisplay()

    @override
    def execute(self) -> int:
        """Execute the count.

        Nothing is printed to stdout when any file fails; the exit status
        stays 0 either way.

        Returns:
            Process exit status.
        """
        try:
            report = self.service.count_files(self.args.files)
        except FileAccessError as e:
            logger.debug("Aborting run: %s", e)
            self.result_display.show_error(e)
            return EXIT_SUCCESS

        self.result_display.show_report(report)
        return EXIT_SUCCESS
