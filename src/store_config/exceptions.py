"""Custom exception hierarchy for store-config.

Every failure raised by this package inherits from
:class:`StoreConfigError`.  Construction of a
:class:`~store_config.core.models.StoreConfig` either succeeds with a
fully valid value or raises a :class:`StoreValidationError` subclass;
there is no partially built state to recover.

Hierarchy
---------
StoreConfigError
├── StoreValidationError
│   ├── InvalidStoreIdError
│   ├── BlankValueError
│   ├── InvalidDomainError
│   ├── ReservedDomainError
│   └── NoLicenseServerError
└── MissingDependencyError
"""

from __future__ import annotations


class StoreConfigError(Exception):
    """Base exception for all store-config errors.

    Carries an optional *hint* so that the host application can render
    an actionable message next to the error text.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class StoreValidationError(StoreConfigError):
    """Raised when a store configuration violates one of its rules.

    Attributes
    ----------
    field:
        Human-readable label of the offending input
        (e.g. ``"Store name"``).
    value:
        The offending value, already normalized where normalization
        applies.  ``None`` when the value itself was missing.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: object = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.value: object = value


# --- Identity --------------------------------------------------------------

class InvalidStoreIdError(StoreValidationError):
    """Raised when the store ID is missing, not an integer, or negative."""


class BlankValueError(StoreValidationError):
    """Raised when a mandatory text value is missing or blank."""


# --- License server domains ------------------------------------------------

class InvalidDomainError(StoreValidationError):
    """Raised when a domain contains a character outside the allowed set."""


class ReservedDomainError(StoreValidationError):
    """Raised when a domain belongs to the reserved ``univocity.*`` family."""


class NoLicenseServerError(StoreValidationError):
    """Raised when no license server domain survives normalization."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(StoreConfigError):
    """Raised when an optional third-party package is not installed."""
