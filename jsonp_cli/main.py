"""
Command-line entry point for JSONP-CLI.
"""

import argparse
import sys
import time
from pathlib import Path

from rich.console import Console

from . import APP_NAME, __version__
from .commands.interactive import InteractiveSession
from .commands.slash_commands import SlashCommandHandler
from .core.config import AppConfig, ConfigManager
from .core.exceptions import ConfigurationError, PersistenceError, format_error_message
from .core.logging import get_logger, setup_logging
from .core.output_store import OutputStore
from .core.session import SessionState
from .models.prompt_generator import PromptGenerator
from .ui.components import render_header, render_key_value_table
from .ui.design_system import ICONS, ThemeStore
from .ui.prompts import show_error_message, show_success_box, show_warning_message
from .ui.screens import display_history, display_info

logger = get_logger(__name__)

HISTORY_FILENAME = "input_history"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonp",
        description=f"{APP_NAME}: turn plain requests into structured JSON prompt templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start interactive mode
  jsonp

  # Change the generation model
  jsonp config prompt_model mistral:latest

  # List recently saved prompts
  jsonp history
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log progress messages to stderr"
    )
    parser.add_argument("--log-file", type=Path, help="Also write debug logs to this file")

    subparsers = parser.add_subparsers(dest="command")

    config_parser = subparsers.add_parser("config", help="Show or change settings")
    config_parser.add_argument("key", nargs="?", help=f"One of: {', '.join(AppConfig.keys())}")
    config_parser.add_argument("value", nargs="?", help="New value to persist")

    subparsers.add_parser("history", help="List recently saved prompts")
    subparsers.add_parser("info", help="Show system information")
    return parser


def _run_config(args, config: ConfigManager, console: Console, themes: ThemeStore) -> int:
    theme = themes.current
    if args.key is None:
        console.print()
        console.print(render_header("Configuration", theme, icon=ICONS["gear"]))
        console.print()
        values = {key: config.get(key, "-") for key in AppConfig.keys()}
        console.print(render_key_value_table(values, theme, key_width=16))
        console.print()
        console.print(f"  {config.path}", style=theme.muted, markup=False, highlight=False)
        console.print()
        return 0

    if args.value is None:
        console.print(str(config.get(args.key, "")), markup=False, highlight=False)
        return 0

    if args.key == "theme" and not themes.set(args.value):
        raise ConfigurationError(
            f"Unknown theme: {args.value} (available: {', '.join(themes.names())})"
        )
    config.set(args.key, args.value)
    show_success_box(console, themes.current, "Configuration", f"{args.key} = {args.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        0 on a graceful exit, 1 when the configuration cannot be used
    """
    started_at = time.monotonic()
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    console = Console()
    themes = ThemeStore()
    config = ConfigManager()

    try:
        themes = ThemeStore(str(config.get("theme", themes.name)))
        output_store = OutputStore(config.output_dir())

        if args.command == "config":
            return _run_config(args, config, console, themes)
        if args.command == "history":
            display_history(console, themes.current, output_store)
            return 0
        if args.command == "info":
            display_info(console, themes.current, output_store.directory, config.path, started_at)
            return 0

        session = SessionState(active_model=str(config.get("prompt_model")), themes=themes)
        generator = PromptGenerator(
            endpoint=config.get("ollama_endpoint"), timeout=config.get("request_timeout")
        )
    except ConfigurationError as e:
        logger.debug(f"Configuration error: {e}")
        show_error_message(console, themes.current, format_error_message(e))
        return 1

    try:
        output_store.ensure_directory()
    except PersistenceError as e:
        show_warning_message(console, themes.current, str(e))

    handler = SlashCommandHandler(
        session,
        config,
        output_store,
        console,
        config_path=config.path,
        started_at=started_at,
    )
    interactive = InteractiveSession(
        session,
        handler,
        generator,
        output_store,
        console,
        history_file=config.config_dir / HISTORY_FILENAME,
    )
    return interactive.run()


if __name__ == "__main__":
    sys.exit(main())
