"""Smoke tests for unified entry points.

These tests assert that `python -m linecounter` and the console script
both resolve to the CLI's `main` function exposed under `linecounter.ui.cli`.
"""

from importlib import import_module

import linecounter


def test_module_entry_point_exposes_main() -> None:
    """`python -m linecounter` path exposes a `main` callable."""
    m = import_module("linecounter.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `linecounter.ui.cli:main` and is importable."""
    m = import_module("linecounter.ui.cli")
    assert hasattr(m, "main")


def test_version_is_available() -> None:
    """A version string is always exposed, installed or not."""
    assert isinstance(linecounter.__version__, str)
    assert linecounter.__version__
