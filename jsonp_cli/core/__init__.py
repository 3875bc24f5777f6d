"""
Core functionality for JSONP-CLI.
"""

from .config import AppConfig, ConfigManager, ConfigStore
from .exceptions import (
    ConfigurationError,
    ExternalCallError,
    InputError,
    JsonpCLIError,
    ParseError,
    PersistenceError,
    format_error_message,
)
from .logging import get_logger, setup_logging
from .output_store import HistoryEntry, OutputStore
from .session import SessionState

__all__ = [
    "AppConfig",
    "ConfigManager",
    "ConfigStore",
    "ConfigurationError",
    "ExternalCallError",
    "HistoryEntry",
    "InputError",
    "JsonpCLIError",
    "OutputStore",
    "ParseError",
    "PersistenceError",
    "SessionState",
    "format_error_message",
    "get_logger",
    "setup_logging",
]
