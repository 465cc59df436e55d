"""Reporting layer — user-facing rendering of configuration errors.

May import from ``core`` and ``exceptions``; nothing in ``core``
imports from here.
"""

from store_config.reporting.errors import format_error, report_error

__all__: list[str] = ["format_error", "report_error"]
