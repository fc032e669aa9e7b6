"""
Summary: Pure helpers that decode file bytes and count text lines.
Why: Keep the counting rules free of filesystem and console concerns.
"""

from __future__ import annotations

from typing import Final

LINE_FEED: Final[str] = "\n"
COLUMN_PADDING: Final[int] = 2


def decode_lossy(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences with U+FFFD.

    Args:
        data: Raw file contents.

    Returns:
        str: Decoded text. Decoding never fails.
    """
    return data.decode("utf-8", errors="replace")


def count_lines(text: str) -> int:
    """Count lines the way a standard text-lines iterator yields them.

    Lines are split on line feed only; a carriage return before the line
    feed belongs to the terminator, and a lone carriage return is ordinary
    content. A trailing terminator does not add an empty line, and an
    unterminated final fragment counts as one line.

    Args:
        text: Decoded file contents.

    Returns:
        int: Number of lines, zero for empty text.
    """
    if not text:
        return 0
    breaks = text.count(LINE_FEED)
    return breaks if text.endswith(LINE_FEED) else breaks + 1


def column_width(total: int) -> int:
    """Width of the count column: digits of ``total`` plus padding.

    A total of zero has one digit, giving a width of 3.

    Raises:
        ValueError: If ``total`` is negative.
    """
    if total < 0:
        raise ValueError(f"Line total cannot be negative: {total}")
    return len(str(total)) + COLUMN_PADDING


__all__ = ["COLUMN_PADDING", "LINE_FEED", "column_width", "count_lines", "decode_lossy"]
