"""
Box drawing, headers, tables and other visual building blocks.

Every renderer takes the theme explicitly and returns a Rich ``Text`` so the
same functions are safe to call from independent rendering paths.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from rich.text import Text

from .design_system import ICONS, Theme, get_border
from .layout import measure_width, pad_to_width, to_text

BoxContent = str | Text | Sequence[str | Text]


def _split_lines(content: BoxContent) -> list[Text]:
    if isinstance(content, (str, Text)):
        content = [content]
    lines: list[Text] = []
    for item in content:
        lines.extend(to_text(item).split("\n", allow_blank=True))
    return lines or [Text()]


def render_box(
    content: BoxContent,
    *,
    theme: Theme,
    title: str = "",
    border_style: str = "rounded",
    padding: int = 1,
    title_align: str = "left",
    width: int | None = None,
    border_color: str | None = None,
    title_color: str | None = None,
) -> Text:
    """
    Draw a border around content lines.

    Every row of the result has the same display width, ``box_width + 4``,
    whatever mix of wide and narrow characters the content holds.

    Args:
        content: A string (split on newlines), a Text, or a sequence of lines
        theme: Palette used for default border and title colors
        title: Optional title overlaid on the top border
        border_style: One of double, single, rounded, heavy
        padding: Horizontal padding and number of blank rows above and below
        title_align: ``left`` or ``center``
        width: Interior width; grown if content or title would not fit
        border_color: Border color override
        title_color: Title color override

    Returns:
        The box as multi-line Rich Text
    """
    border = get_border(border_style)
    border_style_str = border_color or theme.primary
    title_style = title_color or theme.accent
    padding = max(0, padding)

    lines = _split_lines(content)
    # the title sits on a single border row
    title = " ".join(title.splitlines())
    title_text = f" {title} " if title else ""
    title_width = measure_width(title_text)

    max_width = max([measure_width(line) for line in lines] + [measure_width(title)])
    box_width = width if width is not None else max_width + padding * 2
    box_width = max(box_width, max_width)
    if title:
        # keep at least one rule character on each side of the title
        box_width = max(box_width, title_width)
    span = box_width + 2

    rows: list[Text] = []

    top = Text(border.top_left, style=border_style_str)
    if title:
        if title_align == "center":
            left_len = (span - title_width) // 2
        else:
            left_len = 1
        right_len = span - title_width - left_len
        top.append(border.horizontal * left_len, style=border_style_str)
        top.append(title_text, style=title_style)
        top.append(border.horizontal * right_len, style=border_style_str)
    else:
        top.append(border.horizontal * span, style=border_style_str)
    top.append(border.top_right, style=border_style_str)
    rows.append(top)

    blank = Text.assemble(
        (border.vertical, border_style_str), " " * span, (border.vertical, border_style_str)
    )
    rows.extend(blank.copy() for _ in range(padding))

    for line in lines:
        rows.append(
            Text.assemble(
                (border.vertical, border_style_str),
                " ",
                pad_to_width(line, box_width),
                " ",
                (border.vertical, border_style_str),
            )
        )

    rows.extend(blank.copy() for _ in range(padding))
    rows.append(
        Text(
            border.bottom_left + border.horizontal * span + border.bottom_right,
            style=border_style_str,
        )
    )
    return Text("\n").join(rows)


def render_divider(
    theme: Theme, width: int = 60, style: str = "single", text: str = ""
) -> Text:
    """Horizontal rule, optionally with centered text."""
    char = get_border(style).horizontal
    if not text:
        return Text(char * width, style=theme.muted)

    text_width = measure_width(text)
    side = max(0, (width - text_width - 2) // 2)
    rest = max(0, width - side - text_width - 2)
    return Text.assemble(
        (char * side, theme.muted),
        (f" {text} ", theme.secondary),
        (char * rest, theme.muted),
    )


def render_header(text: str, theme: Theme, icon: str = "◆", width: int = 50) -> Text:
    """Section header: bold icon and title followed by a muted rule."""
    header = f"{icon} {text}"
    rule_width = max(0, width - measure_width(header) - 1)
    return Text.assemble((header, f"bold {theme.primary}"), (" " + "─" * rule_width, theme.muted))


def render_key_value_table(
    data: Mapping[str, object], theme: Theme, key_width: int = 20, style: str = "single"
) -> Text:
    vertical = get_border(style).vertical
    rows = [
        Text.assemble(
            "  ",
            (pad_to_width(str(key), key_width), theme.secondary),
            " ",
            (vertical, theme.muted),
            " ",
            (str(value), theme.text),
        )
        for key, value in data.items()
    ]
    return Text("\n").join(rows)


def render_bullet_list(
    items: Iterable[str], theme: Theme, bullet: str = ICONS["bullet"], indent: int = 2
) -> Text:
    rows = [
        Text.assemble(" " * indent, (bullet, theme.accent), " ", (item, theme.text))
        for item in items
    ]
    return Text("\n").join(rows)
