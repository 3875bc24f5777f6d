"""
Linear RGB gradients across text.
"""

from __future__ import annotations

import math
import re
from typing import Sequence

from rich.color_triplet import ColorTriplet
from rich.style import Style
from rich.text import Text

_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

ColorLike = str | ColorTriplet | tuple[int, int, int]


def parse_hex(color: str) -> ColorTriplet:
    """Parse ``#RRGGBB`` (hash optional). Unparseable input yields black."""
    match = _HEX_RE.match(color.strip())
    if not match:
        return ColorTriplet(0, 0, 0)
    red, green, blue = (int(part, 16) for part in match.groups())
    return ColorTriplet(red, green, blue)


def to_triplet(color: ColorLike) -> ColorTriplet:
    if isinstance(color, str):
        return parse_hex(color)
    return ColorTriplet(*color)


def _channel(value: float) -> int:
    # halves round up
    return max(0, min(255, math.floor(value + 0.5)))


def interpolate(color_a: ColorLike, color_b: ColorLike, t: float) -> ColorTriplet:
    """Blend two colors channel by channel; ``t`` is clamped to [0, 1]."""
    start = to_triplet(color_a)
    end = to_triplet(color_b)
    t = max(0.0, min(1.0, t))
    return ColorTriplet(
        _channel(start.red + (end.red - start.red) * t),
        _channel(start.green + (end.green - start.green) * t),
        _channel(start.blue + (end.blue - start.blue) * t),
    )


def apply_gradient(text: str, stops: Sequence[ColorLike]) -> list[tuple[str, ColorTriplet]]:
    """
    Assign a color to every character of ``text``.

    The text is split into ``len(stops) - 1`` equal segments, each blending
    between two neighbouring stops; the last segment takes any remainder.
    """
    colors = [to_triplet(stop) for stop in stops]
    if not colors:
        raise ValueError("apply_gradient needs at least one color stop")

    if len(colors) == 1 or not text:
        return [(char, colors[0]) for char in text]

    last_pair = len(colors) - 2
    segment = len(text) / (len(colors) - 1)
    result = []
    for i, char in enumerate(text):
        index = min(math.floor(i / segment), last_pair)
        progress = (i % segment) / segment
        result.append((char, interpolate(colors[index], colors[index + 1], progress)))
    return result


def render_gradient_text(text: str, stops: Sequence[ColorLike]) -> Text:
    """Render text with colors interpolated across the given stops."""
    result = Text()
    for char, color in apply_gradient(text, stops):
        result.append(char, style=Style(color=color.hex))
    return result

