"""
Configuration management for JSONP-CLI.
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Protocol

import yaml

from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR_ENV = "JSONP_CONFIG_DIR"
DEFAULT_OUTPUT_DIRNAME = "jsonp-output"


class ConfigStore(Protocol):
    """Key-value store consumed by the command dispatcher."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


@dataclass
class AppConfig:
    """Persisted user settings."""

    prompt_model: str = "llama3:latest"
    theme: str = "pastel"
    output_dir: str | None = None
    ollama_endpoint: str = "http://localhost:11434"
    request_timeout: int = 120

    @classmethod
    def keys(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def load_from_file(cls, config_path: Path) -> "AppConfig":
        """Load configuration from file, ignoring unknown keys."""
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file is not a mapping: {config_path}")

        valid_fields = set(cls.keys())
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        config = cls(**filtered)

        # YAML may hand back numbers for model tags like "3"
        config.prompt_model = str(config.prompt_model)
        try:
            config.request_timeout = int(config.request_timeout)
        except (TypeError, ValueError):
            config.request_timeout = cls.request_timeout
        return config

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to file."""
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(asdict(self), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}")


def default_config_dir() -> Path:
    """Directory holding config.yaml."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "jsonp-cli"


def default_output_dir() -> Path:
    return Path.home() / DEFAULT_OUTPUT_DIRNAME


class ConfigManager:
    """Manages persisted configuration."""

    CONFIG_FILENAME = "config.yaml"

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or default_config_dir()
        self.path = self.config_dir / self.CONFIG_FILENAME
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self._config = AppConfig.load_from_file(self.path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Return a config value, or ``default`` when unset."""
        if key not in AppConfig.keys():
            raise ConfigurationError(f"Unknown configuration key: {key}")
        value = getattr(self.config, key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Update a config value and persist it immediately."""
        if key not in AppConfig.keys():
            raise ConfigurationError(f"Unknown configuration key: {key}")
        if key == "request_timeout":
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise ConfigurationError(f"request_timeout must be an integer, got {value!r}")
        setattr(self.config, key, value)
        self.config.save_to_file(self.path)
        logger.debug(f"Configuration updated: {key} = {value}")

    def output_dir(self) -> Path:
        """Resolved output directory for generated prompts."""
        configured = self.get("output_dir")
        return Path(configured).expanduser() if configured else default_output_dir()
