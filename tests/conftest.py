"""Shared pytest fixtures for LineCounter tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from linecounter.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Restore the default logger handlers after each test."""

    try:
        yield None
    finally:
        _ = setup_logger()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from a temporary directory so file names stay relative."""

    monkeypatch.chdir(tmp_path)
    return tmp_path
