"""
Interactive prompt loop for JSONP-CLI.
"""

from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

from rich.console import Console

from ..core.exceptions import ExternalCallError, PersistenceError
from ..core.logging import get_logger
from ..core.output_store import OutputStore
from ..core.session import SessionState
from ..ui.animations import with_spinner
from ..ui.prompts import (
    get_user_input,
    show_error_box,
    show_error_message,
    show_warning_message,
)
from ..ui.screens import display_goodbye, display_json, display_saved, display_welcome
from .slash_commands import SlashCommandHandler

logger = get_logger(__name__)

EXIT_WORDS = ("exit", "quit")


class LoopState(Enum):
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    EXITING = "exiting"


class Generator(Protocol):
    def generate(self, prompt_text: str, model: str) -> str: ...


class InteractiveSession:
    """
    Reads lines and routes them to slash commands or prompt generation.

    ``EXITING`` is terminal: once reached, ``run`` returns and no further
    input is read.
    """

    def __init__(
        self,
        session: SessionState,
        handler: SlashCommandHandler,
        generator: Generator,
        output_store: OutputStore,
        console: Console,
        read_line: Callable[[], str] | None = None,
        history_file: Path | None = None,
    ):
        self.session = session
        self.handler = handler
        self.generator = generator
        self.output_store = output_store
        self.console = console
        self.history_file = history_file
        self._read_line = read_line or self._prompt_for_line
        self.state = LoopState.AWAITING_INPUT

    def _prompt_for_line(self) -> str:
        return get_user_input(
            self.console,
            self.session.theme,
            slash_commands=self.handler.slash_command_names(),
            history_file=self.history_file,
        )

    def handle_line(self, line: str) -> LoopState:
        """
        Process one line of input and return the state the loop moves to.

        Args:
            line: Raw input as typed

        Returns:
            ``AWAITING_INPUT`` to keep reading, ``EXITING`` to stop
        """
        text = line.strip()
        if not text:
            return LoopState.AWAITING_INPUT

        if text.lower() in EXIT_WORDS:
            display_goodbye(self.console, self.session.theme)
            self.state = LoopState.EXITING
            return self.state

        self.state = LoopState.DISPATCHING
        if text.startswith("/"):
            self.handler.handle_command(text)
            if self.handler.should_exit:
                self.state = LoopState.EXITING
                return self.state
        else:
            self._generate(text)

        self.state = LoopState.AWAITING_INPUT
        return self.state

    def _generate(self, prompt_text: str) -> None:
        theme = self.session.theme
        model = self.session.active_model
        logger.debug(f"Processing user prompt with model={model}")

        try:
            raw = with_spinner(
                self.console,
                theme,
                "Generating creative JSON prompt...",
                self.generator.generate,
                prompt_text,
                model,
                success_message="JSON prompt generated successfully!",
                failure_message="Generation failed",
            )
        except ExternalCallError as e:
            show_error_box(self.console, theme, "Connection Error", e.user_message, e)
            return
        except KeyboardInterrupt:
            show_warning_message(self.console, theme, "Generation cancelled")
            return

        if not raw.strip():
            show_warning_message(self.console, theme, "The model returned an empty response")
            return

        display_json(self.console, theme, raw)

        try:
            path = self.output_store.save(raw)
        except PersistenceError as e:
            logger.error(str(e))
            show_error_message(self.console, theme, str(e))
            return
        display_saved(self.console, theme, path)

    def run(self) -> int:
        """Show the welcome screen and read lines until exit. Returns the exit status."""
        display_welcome(
            self.console,
            self.session.theme,
            self.session.active_theme,
            self.session.active_model,
            self.output_store.directory,
        )

        while self.state is not LoopState.EXITING:
            try:
                line = self._read_line()
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                display_goodbye(self.console, self.session.theme)
                self.state = LoopState.EXITING
                break

            try:
                self.handle_line(line)
            except Exception as e:
                logger.exception("Interactive prompt error")
                show_error_message(self.console, self.session.theme, f"Error: {e}")
                self.state = LoopState.AWAITING_INPUT

        return 0
