"""Shared pytest fixtures and configuration for the store-config test suite.

Guidelines
----------
* No network access in any test.
* Core tests must be pure — no side effects.
* Rich is hidden through ``sys.modules`` when testing the fallback path.
"""

from __future__ import annotations

import pytest

from store_config.core.factory import create_store
from store_config.core.models import StoreConfig


@pytest.fixture()
def acme_store() -> StoreConfig:
    """A valid store with two license servers."""
    return create_store(42, "Acme Store", "license.acme.com", "backup.acme.com")
