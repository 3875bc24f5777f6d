"""
Centralized design system for JSONP-CLI.

All themes, icons, border characters and spinner frames live here so that
every renderer references a single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Theme:
    """A named set of semantic colors plus gradient stops."""

    name: str
    primary: str
    secondary: str
    accent: str
    success: str
    error: str
    warning: str
    info: str
    muted: str
    text: str
    gradient: tuple[str, ...]


THEMES: MappingProxyType[str, Theme] = MappingProxyType(
    {
        "cyberpunk": Theme(
            name="Cyberpunk",
            primary="#FF00FF",
            secondary="#00FFFF",
            accent="#FFFF00",
            success="#00FF00",
            error="#FF0000",
            warning="#FFA500",
            info="#00BFFF",
            muted="#808080",
            text="#FFFFFF",
            gradient=("#FF00FF", "#00FFFF", "#FF00FF"),
        ),
        "ocean": Theme(
            name="Ocean",
            primary="#0077B6",
            secondary="#00B4D8",
            accent="#90E0EF",
            success="#2E8B57",
            error="#CD5C5C",
            warning="#F4A460",
            info="#87CEEB",
            muted="#708090",
            text="#E0FFFF",
            gradient=("#0077B6", "#00B4D8", "#90E0EF"),
        ),
        "forest": Theme(
            name="Forest",
            primary="#228B22",
            secondary="#32CD32",
            accent="#9ACD32",
            success="#00FF7F",
            error="#DC143C",
            warning="#DAA520",
            info="#98FB98",
            muted="#6B8E23",
            text="#F0FFF0",
            gradient=("#228B22", "#32CD32", "#9ACD32"),
        ),
        "sunset": Theme(
            name="Sunset",
            primary="#FF6B6B",
            secondary="#FFE66D",
            accent="#FF8E53",
            success="#4CAF50",
            error="#F44336",
            warning="#FF9800",
            info="#FFC107",
            muted="#9E9E9E",
            text="#FFFAF0",
            gradient=("#FF6B6B", "#FF8E53", "#FFE66D"),
        ),
        "pastel": Theme(
            name="Pastel",
            primary="#A7B2E2",
            secondary="#D4B2E2",
            accent="#E2D4B2",
            success="#B2E2B2",
            error="#E2B2B2",
            warning="#E2D4B2",
            info="#A7D8E2",
            muted="#C0C0C0",
            text="#FFFFFF",
            gradient=("#A7B2E2", "#D4B2E2", "#E2B2D4"),
        ),
        "neon": Theme(
            name="Neon",
            primary="#39FF14",
            secondary="#FF1493",
            accent="#00FFFF",
            success="#39FF14",
            error="#FF073A",
            warning="#FFFF00",
            info="#1B03A3",
            muted="#4A4A4A",
            text="#FFFFFF",
            gradient=("#39FF14", "#00FFFF", "#FF1493"),
        ),
    }
)

DEFAULT_THEME = "pastel"


class ThemeStore:
    """
    Registry view with exactly one active theme.

    The active name always resolves in the registry: unknown names passed to
    the constructor fall back to the default, and ``set`` refuses them.
    """

    def __init__(self, active: str = DEFAULT_THEME, registry=THEMES):
        self._registry = registry
        active = active.lower() if isinstance(active, str) else DEFAULT_THEME
        self._active = active if active in registry else DEFAULT_THEME

    @property
    def name(self) -> str:
        return self._active

    @property
    def current(self) -> Theme:
        return self._registry[self._active]

    def names(self) -> list[str]:
        return list(self._registry)

    def set(self, name: str) -> bool:
        """Switch the active theme. Returns False and changes nothing for unknown names."""
        key = name.strip().lower()
        if key not in self._registry:
            return False
        self._active = key
        return True


# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------

ICONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "success": "✓",
        "error": "✗",
        "warning": "⚠",
        "info": "ℹ",
        "arrow": "➜",
        "arrow_right": "→",
        "arrow_down": "↓",
        "bullet": "•",
        "star": "★",
        "lightning": "⚡",
        "gear": "⚙",
        "folder": "📁",
        "file": "📄",
        "clock": "⏱",
        "check": "✔",
        "cross": "✘",
        "heart": "❤",
        "sparkle": "✨",
        "fire": "🔥",
        "rocket": "🚀",
        "pin": "📌",
        "link": "🔗",
        "lock": "🔒",
        "key": "🔑",
        "search": "🔍",
        "prompt": "❯",
        "dot": "●",
        "circle": "○",
        "square": "■",
        "diamond": "◆",
        "triangle_right": "▶",
        "triangle_down": "▼",
    }
)


# ---------------------------------------------------------------------------
# Border Characters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BorderChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    cross: str
    left_t: str
    right_t: str
    top_t: str
    bottom_t: str


BORDERS: MappingProxyType[str, BorderChars] = MappingProxyType(
    {
        "double": BorderChars("╔", "╗", "╚", "╝", "═", "║", "╬", "╠", "╣", "╦", "╩"),
        "single": BorderChars("┌", "┐", "└", "┘", "─", "│", "┼", "├", "┤", "┬", "┴"),
        "rounded": BorderChars("╭", "╮", "╰", "╯", "─", "│", "┼", "├", "┤", "┬", "┴"),
        "heavy": BorderChars("┏", "┓", "┗", "┛", "━", "┃", "╋", "┣", "┫", "┳", "┻"),
    }
)


def get_border(style: str) -> BorderChars:
    """Return border characters by style name, falling back to rounded."""
    return BORDERS.get(style, BORDERS["rounded"])


# ---------------------------------------------------------------------------
# Animation Frames
# ---------------------------------------------------------------------------

# Name of the Rich spinner used while waiting on the model (braille dots, 80ms)
SPINNER_NAME = "dots"

LOGO = r"""
     ╦╔═╗╔═╗╔╗╔╔═╗   ╔═╗╦  ╦
     ║╚═╗║ ║║║║╠═╝───║  ║  ║
    ╚╝╚═╝╚═╝╝╚╝╩     ╚═╝╩═╝╩
"""
