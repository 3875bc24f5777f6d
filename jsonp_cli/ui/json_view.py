"""
Theme-aware JSON rendering.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from rich.console import RenderableType
from rich.syntax import Syntax
from rich.text import Text

from ..core.exceptions import ParseError
from .design_system import Theme

INDENT = "  "


class JsonKind(Enum):
    """Kind of a parsed JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def classify(value: Any) -> JsonKind:
    """Map a parsed JSON value onto its kind."""
    if value is None:
        return JsonKind.NULL
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_json(value: Any, theme: Theme, indent_level: int = 0) -> Text:
    """
    Render a parsed JSON value as indented, colorized text.

    Stripping the styles and parsing the result again yields the original
    value.
    """
    kind = classify(value)

    if kind is JsonKind.NULL:
        return Text("null", style=theme.muted)
    if kind is JsonKind.BOOLEAN:
        return Text("true" if value else "false", style=theme.warning)
    if kind is JsonKind.NUMBER:
        return Text(json.dumps(value), style=theme.accent)
    if kind is JsonKind.STRING:
        return Text(_quote(value), style=theme.success)

    if kind is JsonKind.ARRAY:
        if not value:
            return Text("[]", style=theme.primary)
        open_bracket, close_bracket = "[", "]"
        entries = [
            Text.assemble(INDENT * (indent_level + 1), render_json(item, theme, indent_level + 1))
            for item in value
        ]
    else:
        if not value:
            return Text("{}", style=theme.primary)
        open_bracket, close_bracket = "{", "}"
        entries = [
            Text.assemble(
                INDENT * (indent_level + 1),
                (_quote(str(key)), theme.secondary),
                ": ",
                render_json(item, theme, indent_level + 1),
            )
            for key, item in value.items()
        ]

    return Text.assemble(
        (open_bracket, theme.primary),
        "\n",
        Text(",\n").join(entries),
        "\n",
        INDENT * indent_level,
        (close_bracket, theme.primary),
    )


def parse_json(raw: str) -> Any:
    """
    Parse generated text.

    Raises:
        ParseError: If ``raw`` is not valid JSON
    """
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(str(e))


def render_json_text(raw: str, theme: Theme) -> RenderableType:
    """Render generated text, falling back to plain syntax highlighting when it is not JSON."""
    try:
        value = parse_json(raw)
    except ParseError:
        return Syntax(raw, "json", theme="monokai", background_color="default", word_wrap=True)
    return render_json(value, theme)
