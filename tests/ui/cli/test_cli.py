"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

import linecounter
from linecounter.features.counting import LineCounterService
from linecounter.ui.cli import CommandProcessor, main


@pytest.fixture
def sample_files(workdir: Path) -> Path:
    """Create the two sample files used across scenarios."""
    _ = (workdir / "a.txt").write_bytes(b"x\ny\nz\n")
    _ = (workdir / "b.txt").write_bytes(b"p\nq\n")
    return workdir


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("linecounter.ui.cli.cli.logger")


def test_no_files_prints_banner(capsys: pytest.CaptureFixture[str]) -> None:
    """Without file names the banner goes to stdout and the run succeeds."""
    status = CommandProcessor.process_command(["/usr/local/bin/lc"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.err == ""
    lines = captured.out.splitlines()
    assert lines[0] == f"Line Counter v: {linecounter.__version__}"
    assert lines[1] == "Usage: lc [filename(s)]"
    assert "GPL-3.0" in captured.out
    assert "<https://github.com/triggnus/LineCounter>" in captured.out


def test_single_file(sample_files: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """One file prints one row and no total."""
    status = CommandProcessor.process_command(["lc", "a.txt"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "  3 a.txt\n"


def test_two_files_with_total(sample_files: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Rows follow argument order and end with the total row."""
    status = CommandProcessor.process_command(["lc", "a.txt", "b.txt"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "  3 a.txt\n  2 b.txt\n  5 Total\n"


def test_same_file_twice_counts_twice(sample_files: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = CommandProcessor.process_command(["lc", "b.txt", "b.txt"])

    assert capsys.readouterr().out == "  2 b.txt\n  2 b.txt\n  4 Total\n"


def test_missing_file_discards_results(
    sample_files: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A bad name prints a diagnostic, no rows, and still exits 0."""
    status = CommandProcessor.process_command(["lc", "a.txt", "missing.txt", "b.txt"])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == ""
    assert captured.err == "Error reading file missing.txt: No such file or directory\n"


def test_file_names_with_dashes_and_brackets(
    workdir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Every argument is a file name and is printed verbatim."""
    _ = (workdir / "-v").write_bytes(b"1\n")
    _ = (workdir / "[bold]x").write_bytes(b"1\n2")

    status = CommandProcessor.process_command(["lc", "-v", "[bold]x"])

    assert status == 0
    assert capsys.readouterr().out == "  1 -v\n  2 [bold]x\n  3 Total\n"


def test_output_is_repeatable(sample_files: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _ = CommandProcessor.process_command(["lc", "a.txt", "b.txt"])
    first = capsys.readouterr().out
    _ = CommandProcessor.process_command(["lc", "a.txt", "b.txt"])
    second = capsys.readouterr().out

    assert first == second


def test_main_uses_sys_argv(
    sample_files: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.argv", ["lc", "b.txt"])

    assert main() == 0
    assert capsys.readouterr().out == "  2 b.txt\n"


def test_unexpected_error(
    sample_files: Path, mock_logger: MagicMock, mocker: MockerFixture
) -> None:
    """Unexpected failures are logged and reported with status 1."""
    _ = mocker.patch.object(LineCounterService, "count_files", side_effect=Exception("Test error"))

    status = CommandProcessor.process_command(["lc", "a.txt"])

    assert status == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "Test error")


def test_keyboard_interrupt(
    sample_files: Path, mock_logger: MagicMock, mocker: MockerFixture
) -> None:
    """Interrupts exit with status 130."""
    _ = mocker.patch.object(LineCounterService, "count_files", side_effect=KeyboardInterrupt())

    status = CommandProcessor.process_command(["lc", "a.txt"])

    assert status == 130
    mock_logger.info.assert_called_once_with("Operation cancelled by user")


def test_file_names_print_verbatim(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Tabs and control characters in names are not expanded or stripped."""
    names = ["a\tb", "c\x1bd"]
    for name in names:
        _ = (workdir / name).write_bytes(b"x\n")

    status = CommandProcessor.process_command(["lc", *names])

    assert status == 0
    assert capsys.readouterr().out == "  1 a\tb\n  1 c\x1bd\n  2 Total\n"


def test_missing_tab_name_diagnostic_is_verbatim(
    workdir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = CommandProcessor.process_command(["lc", "no\tsuch"])

    assert capsys.readouterr().err == "Error reading file no\tsuch: No such file or directory\n"


def test_config_files_in_working_directory_are_ignored(
    sample_files: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Stray config files never change output or the exit status."""
    config_dir = sample_files / "config"
    config_dir.mkdir()
    _ = (config_dir / "config.toml").write_text('log_level = "verbose"\nname = "x"\n', encoding="utf-8")

    status = CommandProcessor.process_command(["lc", "a.txt"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "  3 a.txt\n"
    assert captured.err == ""

    status = CommandProcessor.process_command(["lc"])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out.startswith("Line Counter v: ")
    assert captured.err == ""
