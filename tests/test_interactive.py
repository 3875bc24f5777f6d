"""Tests for the interactive prompt loop."""

from pathlib import Path

import pytest

from jsonp_cli.commands.interactive import InteractiveSession, LoopState
from jsonp_cli.commands.slash_commands import SlashCommandHandler
from jsonp_cli.core.exceptions import ExternalCallError, PersistenceError
from jsonp_cli.core.session import SessionState


class _ConfigStore:
    def __init__(self):
        self.values = {}

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value


class _Generator:
    def __init__(self, result='{"task":"x"}', error=None):
        self.result = result
        self.error = error
        self.calls = []

    def generate(self, prompt_text, model):
        self.calls.append((prompt_text, model))
        if self.error is not None:
            raise self.error
        return self.result


class _OutputStore:
    def __init__(self, directory, error=None):
        self.directory = directory
        self.error = error
        self.saved = []

    def save(self, content):
        if self.error is not None:
            raise self.error
        self.saved.append(content)
        return self.directory / f"prompt-{len(self.saved)}.json"

    def list_recent(self, limit=10):
        return []


def _build_session(console, generator=None, store=None, lines=None):
    session = SessionState(active_model="llama3:latest")
    store = store or _OutputStore(Path("/tmp/jsonp-test-output"))
    handler = SlashCommandHandler(session, _ConfigStore(), store, console)
    read_line = None
    if lines is not None:
        pending = iter(lines)

        def read_line():
            try:
                return next(pending)
            except StopIteration:
                raise EOFError

    return InteractiveSession(
        session, handler, generator or _Generator(), store, console, read_line=read_line
    )


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_empty_input_does_nothing(console, line):
    interactive = _build_session(console)

    assert interactive.handle_line(line) is LoopState.AWAITING_INPUT
    assert interactive.generator.calls == []
    assert console.export_text() == ""


def test_generated_json_is_rendered_and_saved_once(console):
    interactive = _build_session(console)

    state = interactive.handle_line("make a prompt for code review")

    output = console.export_text()
    assert state is LoopState.AWAITING_INPUT
    assert interactive.generator.calls == [("make a prompt for code review", "llama3:latest")]
    assert interactive.output_store.saved == ['{"task":"x"}']
    assert '"task": "x"' in output
    assert "Saved successfully!" in output


def test_generation_error_shows_failure_panel(console):
    generator = _Generator(error=ExternalCallError("connection refused"))
    interactive = _build_session(console, generator=generator)

    state = interactive.handle_line("anything")

    output = console.export_text()
    assert state is LoopState.AWAITING_INPUT
    assert "Connection Error" in output
    assert "Failed to connect to Ollama." in output
    assert "Make sure Ollama is running" in output
    assert interactive.output_store.saved == []
    assert interactive.session.active_model == "llama3:latest"


def test_api_status_error_is_reported(console):
    generator = _Generator(error=ExternalCallError("API request failed (500)", status_code=500))
    interactive = _build_session(console, generator=generator)

    interactive.handle_line("anything")

    assert "API request failed (500)" in console.export_text()


def test_model_change_applies_to_later_generations(console):
    interactive = _build_session(console)

    interactive.handle_line("/model gemma")
    interactive.handle_line("hello")

    assert interactive.generator.calls == [("hello", "gemma")]


def test_non_json_output_is_still_saved(console):
    interactive = _build_session(console, generator=_Generator(result="Sure! {broken"))

    interactive.handle_line("hello")

    assert interactive.output_store.saved == ["Sure! {broken"]


def test_empty_generation_is_not_saved(console):
    interactive = _build_session(console, generator=_Generator(result="  "))

    interactive.handle_line("hello")

    assert interactive.output_store.saved == []
    assert "empty response" in console.export_text()


def test_save_failure_is_reported(console):
    store = _OutputStore(Path("/tmp/x"), error=PersistenceError("disk full"))
    interactive = _build_session(console, store=store)

    state = interactive.handle_line("hello")

    assert state is LoopState.AWAITING_INPUT
    assert "Failed to save output: disk full" in console.export_text()


@pytest.mark.parametrize("line", ["exit", "QUIT", "  Exit  "])
def test_exit_words_end_the_loop(console, line):
    interactive = _build_session(console)

    assert interactive.handle_line(line) is LoopState.EXITING
    assert "Goodbye!" in console.export_text()
    assert interactive.generator.calls == []


def test_exit_command_ends_the_loop(console):
    interactive = _build_session(console)
    assert interactive.handle_line("/exit") is LoopState.EXITING


def test_slash_commands_do_not_generate(console):
    interactive = _build_session(console)

    assert interactive.handle_line("/theme ocean") is LoopState.AWAITING_INPUT
    assert interactive.generator.calls == []
    assert interactive.session.active_theme == "ocean"


def test_run_stops_reading_after_exit(console):
    interactive = _build_session(console, lines=["hello", "exit", "never read"])

    assert interactive.run() == 0
    assert interactive.state is LoopState.EXITING
    assert interactive.generator.calls == [("hello", "llama3:latest")]


def test_run_treats_end_of_input_as_exit(console):
    interactive = _build_session(console, lines=[])

    assert interactive.run() == 0
    assert "Goodbye!" in console.export_text()


def test_run_treats_interrupt_as_exit(console):
    interactive = _build_session(console)

    def interrupted():
        raise KeyboardInterrupt

    interactive._read_line = interrupted
    assert interactive.run() == 0
    assert interactive.state is LoopState.EXITING


def test_run_continues_after_unexpected_error(console):
    generator = _Generator(error=RuntimeError("boom"))
    interactive = _build_session(console, generator=generator, lines=["one", "two"])

    assert interactive.run() == 0
    assert len(generator.calls) == 2
    assert "Error: boom" in console.export_text()
