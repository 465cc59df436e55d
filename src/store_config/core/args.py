"""Argument guards used while building a store configuration.

Each guard either returns silently or raises a typed
:class:`~store_config.exceptions.StoreValidationError` naming the
*field* that failed, so callers can tell the user which setting to fix.
"""

from __future__ import annotations

from collections.abc import Sequence

from store_config.exceptions import BlankValueError, InvalidStoreIdError


def require_non_negative(value: object, field: str) -> None:
    """Raise :class:`InvalidStoreIdError` unless *value* is an ``int >= 0``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if value is None:
        raise InvalidStoreIdError(f"{field} must not be null", field=field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStoreIdError(
            f"{field} must be an integer, got {type(value).__name__}",
            field=field,
            value=value,
        )
    if value < 0:
        raise InvalidStoreIdError(
            f"{field} must be positive or zero, got {value}",
            field=field,
            value=value,
        )


def require_not_blank(value: object, field: str) -> None:
    """Raise :class:`BlankValueError` unless *value* is a non-blank ``str``."""
    if value is not None and not isinstance(value, str):
        raise BlankValueError(
            f"{field} must be a string, got {type(value).__name__}",
            field=field,
            value=value,
        )
    if value is None or not value.strip():
        raise BlankValueError(
            f"{field} must not be blank",
            field=field,
            value=value,
        )


def require_no_blanks(values: Sequence[object], field: str) -> None:
    """Raise :class:`BlankValueError` on the first blank entry of *values*.

    An empty sequence is accepted.
    """
    for index, value in enumerate(values):
        if value is not None and not isinstance(value, str):
            raise BlankValueError(
                f"{field} entries must be strings, got "
                f"{type(value).__name__} (index {index})",
                field=field,
                value=value,
            )
        if value is None or not value.strip():
            raise BlankValueError(
                f"{field} must not contain blank entries (index {index})",
                field=field,
                value=value,
                hint="Remove empty entries from the domain list.",
            )
