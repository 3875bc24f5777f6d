"""
Display-width measurement and padding.

Widths are terminal cells, not characters: wide East-Asian characters and
most emoji take two cells, combining marks take none, and ANSI style escapes
are ignored entirely.
"""

from __future__ import annotations

from typing import TypeVar

from rich.cells import cell_len
from rich.text import Text

TextLike = TypeVar("TextLike", str, Text)

ALIGNMENTS = ("left", "center", "right")


def strip_styles(text: str | Text) -> str:
    """Return the plain characters of ``text`` without any ANSI styling."""
    if isinstance(text, Text):
        return text.plain
    if "\x1b" not in text:
        return text
    return Text.from_ansi(text).plain


def measure_width(text: str | Text) -> int:
    """
    Number of terminal columns ``text`` occupies.

    Multi-line text measures as its widest line.
    """
    plain = strip_styles(text)
    if "\n" not in plain:
        return cell_len(plain)
    return max(cell_len(line) for line in plain.split("\n"))


def pad_to_width(text: TextLike, width: int, align: str = "left") -> TextLike:
    """
    Pad ``text`` with spaces up to ``width`` columns.

    Text that is already wider is returned unchanged; nothing is truncated.
    ``center`` puts the odd extra space on the right.
    """
    padding = max(0, width - measure_width(text))
    if not padding:
        return text

    if align == "center":
        left = padding // 2
    elif align == "right":
        left = padding
    else:
        left = 0
    right = padding - left

    if isinstance(text, Text):
        padded = text.copy()
        padded.pad_left(left)
        padded.pad_right(right)
        return padded
    return " " * left + text + " " * right


def to_text(value: str | Text) -> Text:
    """Coerce a plain or ANSI-styled string into a Rich ``Text``."""
    if isinstance(value, Text):
        return value
    if "\x1b" in value:
        return Text.from_ansi(value)
    return Text(value)
