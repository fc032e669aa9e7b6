"""Print the usage banner when no files were named."""

from typing import override

from linecounter.ui.cli.args.options import CountArgs
from linecounter.ui.cli.commands.executor import EXIT_SUCCESS, CommandExecutor
from linecounter.ui.cli.display.banner import BannerDisplay


class UsageCommand(CommandExecutor):
    """Command for an invocation without file arguments."""

    banner_display: BannerDisplay

    def __init__(self, args: CountArgs) -> None:
        super().__init__(args)
        self.banner_display = BannerDisplay()

    @override
    def execute(self) -> int:
        """Print the version and usage banner.

        Returns:
            Process exit status, always 0.
        """
        self.banner_display.show_banner(self.args.program)
        return EXIT_SUCCESS
