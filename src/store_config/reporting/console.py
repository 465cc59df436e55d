"""Lazy access to the Rich objects used for error reports.

Rich is imported on demand so that importing :mod:`store_config` never
requires it.  Callers catch :class:`MissingDependencyError` and fall
back to plain stderr output.
"""

from __future__ import annotations

import importlib
from typing import Any

from store_config.exceptions import MissingDependencyError


def _rich_attr(module: str, attr: str) -> Any:
    """Return ``rich.<module>.<attr>`` or raise ``MissingDependencyError``."""
    try:
        rich_module = importlib.import_module(f"rich.{module}")
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "Rich is required for styled store configuration reports.",
            hint="pip install rich",
        ) from exc
    return getattr(rich_module, attr)


def get_rich_console() -> Any:
    """Create a stderr console; highlighting off so values print as given."""
    return _rich_attr("console", "Console")(stderr=True, highlight=False)


def new_text() -> Any:
    """Return an empty ``rich.text.Text``; its content is never parsed as markup."""
    return _rich_attr("text", "Text")()
