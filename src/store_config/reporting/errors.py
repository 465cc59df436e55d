"""Render store-config errors for the host application.

Configuration problems are programmer or deployment errors, so the
message must say which setting is wrong and, when known, how to fix it.
"""

from __future__ import annotations

import sys

from store_config.exceptions import MissingDependencyError, StoreConfigError
from store_config.reporting.console import get_rich_console, new_text

ERROR_PREFIX: str = "Invalid store configuration:"


def format_error(exc: StoreConfigError) -> str:
    """Return a plain-text, multi-line description of *exc*."""
    lines = [f"{ERROR_PREFIX} {exc}"]
    if exc.hint:
        lines.append(f"Hint: {exc.hint}")
    return "\n".join(lines)


def report_error(exc: StoreConfigError) -> None:
    """Print *exc* to stderr, styled with Rich when it is installed."""
    try:
        rich_console = get_rich_console()
    except MissingDependencyError:
        print(format_error(exc), file=sys.stderr)
        return

    text = new_text()
    text.append(f"{ERROR_PREFIX} ", style="bold red")
    text.append(str(exc))
    if exc.hint:
        text.append("\nHint: ", style="yellow")
        text.append(exc.hint)
    rich_console.print(text)
