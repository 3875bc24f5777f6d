"""Tests for the command-line entry point."""

import pytest
import yaml

from jsonp_cli import __version__
from jsonp_cli.main import build_parser, main


def _read_config(config_dir):
    return yaml.safe_load((config_dir / "config.yaml").read_text())


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_config_set_persists(config_dir):
    assert main(["config", "prompt_model", "gemma"]) == 0
    assert _read_config(config_dir)["prompt_model"] == "gemma"


def test_config_get_prints_value(config_dir, capsys):
    main(["config", "theme", "ocean"])
    capsys.readouterr()

    assert main(["config", "theme"]) == 0
    assert capsys.readouterr().out.strip() == "ocean"


def test_config_lists_all_keys(config_dir, capsys):
    assert main(["config"]) == 0

    output = capsys.readouterr().out
    for key in ("prompt_model", "theme", "output_dir", "ollama_endpoint", "request_timeout"):
        assert key in output


def test_config_unknown_key_fails(config_dir):
    assert main(["config", "colour", "red"]) == 1


def test_config_unknown_theme_fails(config_dir):
    assert main(["config", "theme", "bogus"]) == 1
    assert not (config_dir / "config.yaml").exists()


def test_invalid_config_file_fails(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("theme: [unclosed\n")

    assert main(["info"]) == 1


def test_history_and_info(config_dir, tmp_path, capsys):
    main(["config", "output_dir", str(tmp_path / "out")])
    capsys.readouterr()

    assert main(["history"]) == 0
    assert "No prompt history found" in capsys.readouterr().out

    assert main(["info"]) == 0
    assert "System Information" in capsys.readouterr().out


def test_interactive_mode_is_seeded_from_config(config_dir, tmp_path, monkeypatch):
    main(["config", "output_dir", str(tmp_path / "out")])
    main(["config", "theme", "neon"])
    main(["config", "prompt_model", "gemma"])

    seen = {}

    def fake_run(self):
        seen["model"] = self.session.active_model
        seen["theme"] = self.session.active_theme
        seen["output"] = self.output_store.directory
        return 0

    monkeypatch.setattr("jsonp_cli.main.InteractiveSession.run", fake_run)

    assert main([]) == 0
    assert seen == {"model": "gemma", "theme": "neon", "output": tmp_path / "out"}
    assert (tmp_path / "out").is_dir()
