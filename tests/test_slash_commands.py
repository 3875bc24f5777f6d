"""Tests for slash command behavior."""

import pytest

from jsonp_cli.commands.slash_commands import SlashCommandHandler
from jsonp_cli.core.exceptions import ConfigurationError, InputError
from jsonp_cli.core.output_store import OutputStore
from jsonp_cli.core.session import SessionState

THEME_NAMES = ["cyberpunk", "ocean", "forest", "sunset", "pastel", "neon"]


class _ConfigStore:
    def __init__(self, fail=False):
        self.values = {}
        self.fail = fail

    def get(self, key, default=None):
        return self.values.get(key, default)

    def set(self, key, value):
        if self.fail:
            raise ConfigurationError("config file is read-only")
        self.values[key] = value


@pytest.fixture
def handler(console, tmp_path):
    return SlashCommandHandler(
        SessionState(active_model="llama3:latest"),
        _ConfigStore(),
        OutputStore(tmp_path / "out"),
        console,
        config_path=tmp_path / "config.yaml",
    )


def test_non_slash_input_is_not_handled(handler):
    assert handler.handle_command("hello") is False


def test_theme_switches_and_persists(handler):
    assert handler.handle_command("/theme cyberpunk") is True

    assert handler.session.active_theme == "cyberpunk"
    assert handler.theme.name == "Cyberpunk"
    assert handler.config.values["theme"] == "cyberpunk"
    assert "Theme changed to: cyberpunk" in handler.console.export_text()


def test_theme_name_is_lowercased(handler):
    handler.handle_command("/theme OCEAN")
    assert handler.session.active_theme == "ocean"


def test_unknown_theme_leaves_theme_and_lists_all(handler):
    handler.handle_command("/theme bogus")

    output = handler.console.export_text()
    assert handler.session.active_theme == "pastel"
    assert "theme" not in handler.config.values
    assert "Unknown theme: bogus" in output
    for name in THEME_NAMES:
        assert name in output


def test_theme_without_args_marks_active(handler):
    handler.handle_command("/theme")
    assert "✔ pastel" in handler.console.export_text()


@pytest.mark.parametrize("command", ["/model gemma", "/promptmodel gemma"])
def test_model_updates_session_and_config(handler, command):
    handler.handle_command(command)

    assert handler.session.active_model == "gemma"
    assert handler.config.values["prompt_model"] == "gemma"
    assert "Model set to: gemma" in handler.console.export_text()


def test_model_without_args_shows_current(handler):
    handler.handle_command("/model")

    output = handler.console.export_text()
    assert "Current model: llama3:latest" in output
    assert "Usage: /model <model_name>" in output
    assert handler.config.values == {}


def test_output_retargets_store(handler, tmp_path):
    handler.handle_command(f"/output {tmp_path / 'my prompts'}")

    assert handler.output_store.directory == tmp_path / "my prompts"
    assert handler.config.values["output_dir"] == str(tmp_path / "my prompts")


def test_unknown_command_suggests_close_match(handler):
    assert handler.handle_command("/thme dark") is True

    output = handler.console.export_text()
    assert "Unknown command: /thme" in output
    assert "Did you mean: /theme" in output


def test_unknown_command_lookup_raises_input_error(handler):
    with pytest.raises(InputError) as exc_info:
        handler._lookup("/nope")
    assert exc_info.value.user_message == "Unknown command: /nope"


def test_unknown_command_without_match_points_to_help(handler):
    handler.handle_command("/zzzzzzzz")
    output = handler.console.export_text()
    assert "Unknown command: /zzzzzzzz" in output
    assert "Type /help for available commands." in output
    assert "Did you mean" not in output


def test_handler_errors_are_reported(console, tmp_path):
    handler = SlashCommandHandler(
        SessionState(active_model="llama3:latest"),
        _ConfigStore(fail=True),
        OutputStore(tmp_path),
        console,
    )

    assert handler.handle_command("/model gemma") is True
    assert handler.handle_command("/theme ocean") is True
    assert handler.handle_command(f"/output {tmp_path / 'elsewhere'}") is True

    assert console.export_text().count("Command error: config file is read-only") == 3
    # a failed save leaves the session as it was
    assert handler.session.active_model == "llama3:latest"
    assert handler.session.active_theme == "pastel"
    assert handler.output_store.directory == tmp_path


def test_exit_sets_flag(handler):
    handler.handle_command("/exit")

    assert handler.should_exit is True
    assert "Goodbye! Thanks for using JSONP-CLI" in handler.console.export_text()


def test_quit_is_an_alias(handler):
    handler.handle_command("/QUIT")
    assert handler.should_exit is True


def test_settings_show_session(handler):
    handler.handle_command("/model gemma")
    handler.handle_command("/settings")

    output = handler.console.export_text()
    assert "Settings" in output
    assert "gemma" in output


def test_history_empty(handler):
    handler.handle_command("/history")
    assert "No prompt history found" in handler.console.export_text()


def test_history_lists_saved_prompts(handler):
    path = handler.output_store.save("{}")
    handler.handle_command("/history")
    assert path.name in handler.console.export_text()


def test_help_lists_commands(handler):
    handler.handle_command("/help")

    output = handler.console.export_text()
    assert "Available Commands" in output
    assert "/model" in output
    assert "/exit" in output


def test_info_shows_system_information(handler, tmp_path):
    handler.handle_command("/info")

    output = handler.console.export_text()
    assert "System Information" in output
    assert "JSONP-CLI v2.0.0" in output


def test_slash_command_names(handler):
    names = handler.slash_command_names()
    assert "/theme" in names
    assert names == sorted(names)
