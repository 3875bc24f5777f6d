"""
Pytest configuration and fixtures for JSONP-CLI tests.
"""

import io
import os

import pytest
from hypothesis import Verbosity, settings
from rich.console import Console

from jsonp_cli.ui.design_system import THEMES

# Configure hypothesis settings for property-based testing
settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None,  # Disable deadline for slow operations
)

settings.register_profile(
    "ci",
    max_examples=200,
    verbosity=Verbosity.normal,
    deadline=None,
)

settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def console():
    """Console whose output can be read back with ``export_text()``."""
    return Console(file=io.StringIO(), record=True, width=120, force_terminal=False)


@pytest.fixture
def theme():
    return THEMES["pastel"]


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the config directory at a temporary path and clear env overrides."""
    directory = tmp_path / "config"
    monkeypatch.setenv("JSONP_CONFIG_DIR", str(directory))
    monkeypatch.delenv("OLLAMA_HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("JSONP_LOG_LEVEL", raising=False)
    return directory
