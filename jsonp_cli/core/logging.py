"""
Logging setup for JSONP-CLI.
"""

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "jsonp_cli"
LOG_LEVEL_ENV = "JSONP_LOG_LEVEL"

_configured = False


def _resolve_level(verbose: bool) -> int:
    override = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if override:
        level = logging.getLevelName(override)
        if isinstance(level, int):
            return level
    return logging.INFO if verbose else logging.WARNING


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Console records go to stderr through Rich so they never interleave with
    rendered boxes on stdout.

    Args:
        verbose: Log INFO and above instead of WARNING and above
        log_file: Optional file that additionally receives DEBUG records

    Returns:
        The configured package logger
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        for existing in logger.handlers:
            if isinstance(existing, RichHandler):
                existing.setLevel(_resolve_level(verbose))
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", "%H:%M:%S")
        )
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG)
    handler.setLevel(_resolve_level(verbose))
    logger.propagate = False
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
