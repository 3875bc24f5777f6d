"""
Terminal animations for JSONP-CLI.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from rich.console import Console
from rich.text import Text

from .design_system import ICONS, SPINNER_NAME, Theme

T = TypeVar("T")


def with_spinner(
    console: Console,
    theme: Theme,
    message: str,
    func: Callable[..., T],
    *args,
    success_message: str | None = None,
    failure_message: str | None = None,
    **kwargs,
) -> T:
    """
    Run ``func`` while a spinner animates on the console.

    The spinner lives in a transient Rich status: leaving the block stops its
    refresh thread and erases the last frame, so the success or failure line
    printed afterwards always lands on a clean line. Exceptions from ``func``
    propagate after the failure line is printed.
    """
    status = Text()
    status.append(f"{ICONS['lightning']} ", style=theme.info)
    status.append(message, style=theme.info)

    try:
        with console.status(status, spinner=SPINNER_NAME, spinner_style=theme.primary):
            result = func(*args, **kwargs)
    except Exception:
        console.print(
            Text.assemble(
                (f"{ICONS['error']} ", theme.error), (failure_message or message, theme.error)
            )
        )
        raise

    console.print(
        Text.assemble(
            (f"{ICONS['success']} ", theme.success), (success_message or message, theme.success)
        )
    )
    return result

