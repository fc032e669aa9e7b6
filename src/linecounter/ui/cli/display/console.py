"""Console factories shared by the CLI displays."""

from __future__ import annotations

from rich.console import Console


def plain_console(*, stderr: bool = False) -> Console:
    """Console with markup, emoji, highlighting, and wrapping disabled."""
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def write_line(console: Console, line: str) -> None:
    """Write ``line`` to the console's stream exactly as given.

    Bypasses rich rendering, which would expand tabs and strip control
    characters from file names.
    """
    stream = console.file
    _ = stream.write(f"{line}\n")
    stream.flush()


__all__ = ["plain_console", "write_line"]
