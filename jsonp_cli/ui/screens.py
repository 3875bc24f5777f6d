"""
Full-screen and section displays used by the interactive loop and the CLI.
"""

from __future__ import annotations

import platform
import time
from pathlib import Path

from rich.console import Console
from rich.text import Text

from .. import APP_NAME, __version__
from ..core.exceptions import PersistenceError
from ..core.output_store import OutputStore
from .components import (
    render_box,
    render_bullet_list,
    render_divider,
    render_header,
)
from .design_system import ICONS, LOGO, Theme
from .gradient import render_gradient_text
from .json_view import render_json_text
from .prompts import show_error_message, show_warning_message

HELP_COMMANDS = [
    ("/model", "Set AI model (short for /promptmodel)"),
    ("/theme", "Change color theme"),
    ("/output", "Set output directory"),
    ("/setting", "View current settings"),
    ("/history", "View prompt history"),
    ("/info", "System information"),
    ("/clear", "Clear screen"),
    ("/help", "Show this menu"),
    ("/exit", "Exit application"),
]

HELP_TIPS = [
    "Type any text to generate a JSON prompt template",
    "Use /model <name> to change AI model",
    "Use /theme <name> to change colors",
]


def display_welcome(
    console: Console, theme: Theme, theme_name: str, model: str, output_dir: Path
) -> None:
    """Logo, version box and a hint line."""
    console.clear()
    console.print()
    console.print(render_gradient_text(LOGO, theme.gradient))

    info_lines = [
        Text.assemble(
            (ICONS["lightning"], theme.accent),
            " ",
            ("JSON Prompt Generator", f"bold {theme.text}"),
            " ",
            (f"v{__version__}", theme.muted),
        ),
        Text(""),
        Text.assemble((ICONS["gear"], theme.muted), " Model: ", (model, theme.secondary)),
        Text.assemble((ICONS["folder"], theme.muted), " Output: ", (str(output_dir), theme.secondary)),
        Text.assemble((ICONS["star"], theme.muted), " Theme: ", (theme_name, theme.secondary)),
    ]
    console.print(
        render_box(
            info_lines,
            theme=theme,
            title=f"[ {APP_NAME} ]",
            border_style="double",
            title_align="center",
        )
    )
    console.print()
    console.print(
        Text.assemble(
            ("  Type ", theme.muted),
            ("/help", theme.accent),
            (" for commands or start typing your prompt", theme.muted),
        )
    )
    console.print()


def display_help(console: Console, theme: Theme) -> None:
    console.print()
    console.print(render_header("Available Commands", theme, icon=ICONS["pin"]))
    console.print()
    for name, description in HELP_COMMANDS:
        console.print(
            Text.assemble(
                "  ",
                (name.ljust(16), theme.primary),
                " ",
                (ICONS["arrow"], theme.muted),
                " ",
                (description, theme.text),
            )
        )
    console.print()
    console.print(render_divider(theme, width=50, text="Tips"))
    console.print()
    console.print(render_bullet_list(HELP_TIPS, theme))
    console.print()


def _labelled(label: str, value: str, theme: Theme, label_width: int) -> Text:
    return Text.assemble((label.ljust(label_width), theme.muted), " ", (value, theme.secondary))


def display_settings(
    console: Console, theme: Theme, theme_name: str, model: str, output_dir: Path
) -> None:
    rows = [
        ("Prompt Model:", model),
        ("Output Dir:", str(output_dir)),
        ("Theme:", theme_name),
        ("Version:", __version__),
    ]
    console.print()
    console.print(
        render_box(
            [_labelled(label, value, theme, 14) for label, value in rows],
            theme=theme,
            title=":: Settings",
        )
    )
    console.print()


def display_history(console: Console, theme: Theme, store: OutputStore, limit: int = 10) -> None:
    """Most recent saved prompts, newest first."""
    try:
        entries = store.list_recent(limit)
    except PersistenceError as e:
        show_error_message(console, theme, f"Failed to read history: {e}")
        return

    console.print()
    if not entries:
        show_warning_message(console, theme, "No prompt history found")
        console.print()
        return

    console.print(render_header("Recent Prompts", theme, icon=ICONS["clock"]))
    console.print()
    for entry in entries:
        console.print(Text.assemble("  ", (ICONS["file"], theme.muted), " ", (entry.name, theme.secondary)))
        console.print(Text(f"     {entry.modified:%Y-%m-%d %H:%M:%S}", style=theme.muted))
    console.print()
    console.print(Text(f"  {ICONS['folder']} Location: {store.directory}", style=theme.muted))
    console.print()


def display_info(
    console: Console, theme: Theme, output_dir: Path, config_path: Path, started_at: float
) -> None:
    info = {
        "Application": f"{APP_NAME} v{__version__}",
        "Python": platform.python_version(),
        "Platform": f"{platform.system().lower()} ({platform.machine()})",
        "Uptime": f"{round(time.monotonic() - started_at)} seconds",
        "Output Dir": str(output_dir),
        "Config File": str(config_path),
    }
    console.print()
    console.print(
        render_box(
            [_labelled(key, value, theme, 12) for key, value in info.items()],
            theme=theme,
            title=":: System Information",
        )
    )
    console.print()


def display_themes(console: Console, theme: Theme, names: list[str], current: str) -> None:
    console.print()
    console.print(render_header("Available Themes", theme, icon=ICONS["star"]))
    console.print()
    for name in names:
        if name == current:
            console.print(
                Text.assemble("  ", (f"{ICONS['check']} ", theme.success), (name, f"bold {theme.accent}"))
            )
        else:
            console.print(Text.assemble("    ", (name, theme.text)))
    console.print()
    console.print(Text("  Usage: /theme <name>", style=theme.muted))
    console.print()


def display_json(console: Console, theme: Theme, raw: str) -> None:
    console.print()
    console.print(render_header("Generated JSON Prompt", theme, icon=ICONS["file"]))
    console.print()
    console.print(render_json_text(raw, theme))
    console.print()


def display_saved(console: Console, theme: Theme, path: Path) -> None:
    console.print()
    console.print(
        render_box(
            [
                Text.assemble((ICONS["success"], theme.success), " Saved successfully!"),
                Text(""),
                _labelled("File:", path.name, theme, 5),
                _labelled("Path:", str(path), theme, 5),
            ],
            theme=theme,
        )
    )
    console.print()


def display_goodbye(console: Console, theme: Theme) -> None:
    console.print()
    console.print(Text(f"  {ICONS['sparkle']} Goodbye! Thanks for using {APP_NAME}", style=theme.muted))
    console.print()
