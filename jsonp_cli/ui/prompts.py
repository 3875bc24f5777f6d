"""
Input prompt and status messages for JSONP-CLI.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..core.exceptions import JsonpCLIError
from ..core.logging import get_logger
from .components import render_box
from .design_system import ICONS, Theme

logger = get_logger(__name__)

MAX_HISTORY = 1000

_readline_completer_initialized = False


def _setup_readline_slash_completion(readline, slash_commands: list[str]) -> None:
    """Configure readline completion for slash commands."""
    global _readline_completer_initialized
    if _readline_completer_initialized:
        return

    commands = sorted(set(slash_commands))

    def completer(text: str, state: int):
        buffer = readline.get_line_buffer()
        if not buffer.startswith("/"):
            return None
        matches = [cmd for cmd in commands if cmd.startswith(buffer)]
        if state < len(matches):
            return matches[state]
        return None

    readline.set_completer(completer)
    readline.parse_and_bind("tab: complete")
    _readline_completer_initialized = True


def get_user_input(
    console: Console,
    theme: Theme,
    slash_commands: list[str] | None = None,
    history_file: Path | None = None,
) -> str:
    """
    Read one line from the user behind the themed prompt glyph.

    Uses readline for arrow-key history and Tab completion of slash commands
    where available. ``KeyboardInterrupt`` and ``EOFError`` propagate to the
    caller.
    """
    prompt = Text(f"{ICONS['prompt']} ", style=f"bold {theme.accent}")

    try:
        import readline
    except ImportError:
        # Windows without pyreadline: plain input, no history
        console.print(prompt, end="")
        return input()

    if slash_commands:
        _setup_readline_slash_completion(readline, slash_commands)
    if history_file is not None and readline.get_current_history_length() == 0:
        try:
            readline.read_history_file(str(history_file))
        except OSError:
            pass
    readline.set_history_length(MAX_HISTORY)

    console.print(prompt, end="")
    user_input = input()

    if user_input.strip() and history_file is not None:
        try:
            history_file.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(str(history_file))
        except OSError as e:
            logger.debug(f"Could not write input history: {e}")
    return user_input


def _show(console: Console, icon: str, message: str, style: str) -> None:
    text = Text()
    text.append(f"{icon} ", style=f"bold {style}")
    text.append(message, style=style)
    console.print(text)


def show_success_message(console: Console, theme: Theme, message: str) -> None:
    """Show a success message."""
    _show(console, ICONS["success"], message, theme.success)


def show_info_message(console: Console, theme: Theme, message: str) -> None:
    """Show an info message."""
    _show(console, ICONS["info"], message, theme.info)


def show_warning_message(console: Console, theme: Theme, message: str) -> None:
    """Show a warning message."""
    _show(console, ICONS["warning"], message, theme.warning)


def show_error_message(console: Console, theme: Theme, message: str) -> None:
    """Show an error message."""
    _show(console, ICONS["error"], message, theme.error)


def show_error_box(
    console: Console, theme: Theme, title: str, message: str, error: Exception | None = None
) -> None:
    """Boxed error panel for failures the user has to act on."""
    lines = [Text(f"{ICONS['error']} {message}", style=theme.error)]
    if error is not None:
        lines.append(Text(""))
        lines.append(Text(f"Details: {error}", style=theme.muted))
        if isinstance(error, JsonpCLIError) and error.recovery_hint:
            lines.append(Text(f"Hint: {error.recovery_hint}", style=theme.muted))

    console.print()
    console.print(
        render_box(
            lines,
            theme=theme,
            title=f"{ICONS['warning']} {title}",
            border_style="double",
            border_color=theme.error,
            title_color=theme.error,
        )
    )
    console.print()


def show_success_box(console: Console, theme: Theme, title: str, message: str) -> None:
    console.print()
    console.print(
        render_box(
            [Text(f"{ICONS['success']} {message}", style=theme.success)],
            theme=theme,
            title=f"{ICONS['success']} {title}",
            border_color=theme.success,
            title_color=theme.success,
        )
    )
    console.print()

