"""Display management for CLI interface."""

from linecounter.ui.cli.display.banner import BannerDisplay
from linecounter.ui.cli.display.result import ResultDisplay

__all__ = ["BannerDisplay", "ResultDisplay"]
