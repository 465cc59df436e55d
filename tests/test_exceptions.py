"""Tests for the exception hierarchy (exceptions.py)."""

from __future__ import annotations

import pytest

from store_config import __version__
from store_config.exceptions import (
    BlankValueError,
    InvalidDomainError,
    InvalidStoreIdError,
    MissingDependencyError,
    NoLicenseServerError,
    ReservedDomainError,
    StoreConfigError,
    StoreValidationError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidStoreIdError,
            BlankValueError,
            InvalidDomainError,
            ReservedDomainError,
            NoLicenseServerError,
        ],
    )
    def test_validation_errors_share_base(
        self, exc_class: type[StoreValidationError]
    ) -> None:
        assert issubclass(exc_class, StoreValidationError)
        assert issubclass(exc_class, StoreConfigError)

    def test_missing_dependency_is_not_validation(self) -> None:
        assert issubclass(MissingDependencyError, StoreConfigError)
        assert not issubclass(MissingDependencyError, StoreValidationError)

    def test_hint_defaults_to_none(self) -> None:
        err = StoreConfigError("boom")
        assert str(err) == "boom"
        assert err.hint is None

    def test_field_and_value_are_stored(self) -> None:
        err = BlankValueError("x", field="Store name", value="  ", hint="fix")
        assert err.field == "Store name"
        assert err.value == "  "
        assert err.hint == "fix"
