"""
Slash command handlers for interactive mode.
"""

import difflib
import time
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..core.config import ConfigStore
from ..core.exceptions import InputError, format_error_message
from ..core.logging import get_logger
from ..core.output_store import OutputStore
from ..core.session import SessionState
from ..ui.prompts import (
    show_error_message,
    show_info_message,
    show_success_message,
)
from ..ui.screens import (
    display_goodbye,
    display_help,
    display_history,
    display_info,
    display_settings,
    display_themes,
    display_welcome,
)

logger = get_logger(__name__)


class SlashCommandHandler:
    """Handles slash commands in interactive mode."""

    def __init__(
        self,
        session: SessionState,
        config: ConfigStore,
        output_store: OutputStore,
        console: Console,
        config_path: Path | None = None,
        started_at: float | None = None,
    ):
        """
        Initialize the slash command handler.

        Args:
            session: Active model and theme selection
            config: Store receiving persisted settings
            output_store: Where generated prompts are written
            console: Console every command renders to
            config_path: Shown by /info
            started_at: ``time.monotonic()`` at startup, for /info uptime
        """
        self.session = session
        self.config = config
        self.output_store = output_store
        self.console = console
        self.config_path = config_path
        self.started_at = time.monotonic() if started_at is None else started_at
        self.should_exit = False

        self.commands = {
            "/promptmodel": self.cmd_model,
            "/model": self.cmd_model,
            "/theme": self.cmd_theme,
            "/output": self.cmd_output,
            "/history": self.cmd_history,
            "/info": self.cmd_info,
            "/setting": self.cmd_settings,
            "/settings": self.cmd_settings,
            "/help": self.cmd_help,
            "/clear": self.cmd_clear,
            "/exit": self.cmd_exit,
            "/quit": self.cmd_exit,
        }

    @property
    def theme(self):
        return self.session.theme

    def handle_command(self, command: str) -> bool:
        """
        Handle a slash command.

        Args:
            command: The command string (e.g., "/theme ocean")

        Returns:
            True if command was handled, False otherwise
        """
        if not command.startswith("/"):
            return False

        parts = command.split()
        cmd = parts[0].lower() if parts else "/"
        args = parts[1:]

        try:
            handler = self._lookup(cmd)
        except InputError as e:
            show_error_message(self.console, self.theme, format_error_message(e))
            suggestions = difflib.get_close_matches(cmd, self.commands.keys(), n=3, cutoff=0.45)
            if suggestions:
                show_info_message(
                    self.console, self.theme, f"Did you mean: {'  '.join(suggestions)}"
                )
            return True

        try:
            handler(args)
        except Exception as e:
            logger.error(f"Command {cmd} failed: {e}")
            show_error_message(self.console, self.theme, f"Command error: {e}")
        return True

    def _lookup(self, cmd: str):
        handler = self.commands.get(cmd)
        if handler is None:
            raise InputError(f"Unknown command: {cmd}")
        return handler

    def cmd_model(self, args: list):
        """Show or change the generation model."""
        if not args:
            self.console.print()
            show_info_message(self.console, self.theme, f"Current model: {self.session.active_model}")
            self.console.print(Text("  Usage: /model <model_name>", style=self.theme.muted))
            self.console.print()
            return

        new_model = args[0]
        self.config.set("prompt_model", new_model)
        self.session.active_model = new_model
        logger.info(f"Model updated to: {new_model}")
        self.console.print()
        show_success_message(self.console, self.theme, f"Model set to: {new_model}")
        self.console.print()

    def cmd_theme(self, args: list):
        """List themes, or switch to the named one."""
        themes = self.session.themes
        if not args:
            display_themes(self.console, self.theme, themes.names(), themes.name)
            return

        name = args[0].lower()
        if name not in themes.names():
            self.console.print()
            show_error_message(self.console, self.theme, f"Unknown theme: {name}")
            display_themes(self.console, self.theme, themes.names(), themes.name)
            return

        self.config.set("theme", name)
        themes.set(name)
        logger.info(f"Theme changed to: {name}")
        self.console.print()
        show_success_message(self.console, self.theme, f"Theme changed to: {name}")
        self.console.print()

    def cmd_output(self, args: list):
        """Show or change the directory generated prompts are saved to."""
        if not args:
            self.console.print()
            show_info_message(
                self.console, self.theme, f"Current output: {self.output_store.directory}"
            )
            self.console.print(Text("  Usage: /output <directory_path>", style=self.theme.muted))
            self.console.print()
            return

        new_dir = " ".join(args)
        self.config.set("output_dir", new_dir)
        self.output_store.directory = Path(new_dir).expanduser()
        logger.info(f"Output directory set to: {self.output_store.directory}")
        self.console.print()
        show_success_message(
            self.console, self.theme, f"Output directory set to: {self.output_store.directory}"
        )
        self.console.print()

    def cmd_history(self, args: list):
        display_history(self.console, self.theme, self.output_store)

    def cmd_info(self, args: list):
        display_info(
            self.console,
            self.theme,
            self.output_store.directory,
            self.config_path or Path("-"),
            self.started_at,
        )

    def cmd_settings(self, args: list):
        display_settings(
            self.console,
            self.theme,
            self.session.active_theme,
            self.session.active_model,
            self.output_store.directory,
        )

    def cmd_help(self, args: list):
        display_help(self.console, self.theme)

    def cmd_clear(self, args: list):
        """Redraw the welcome screen on a cleared terminal."""
        display_welcome(
            self.console,
            self.theme,
            self.session.active_theme,
            self.session.active_model,
            self.output_store.directory,
        )

    def cmd_exit(self, args: list):
        """Exit the interactive session."""
        display_goodbye(self.console, self.theme)
        self.should_exit = True

    def slash_command_names(self) -> list[str]:
        """Command names for Tab completion."""
        return sorted(self.commands)

