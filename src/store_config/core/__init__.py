"""Core layer — the store value object and its validation rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``reporting``.
* All functions must be fully typed and deterministic.
"""

from store_config.core.domains import (
    RESERVED_DOMAIN_MARKER,
    build_domain_list,
    normalize_domain,
)
from store_config.core.factory import create_store
from store_config.core.models import StoreConfig

__all__: list[str] = [
    "RESERVED_DOMAIN_MARKER",
    "StoreConfig",
    "build_domain_list",
    "create_store",
    "normalize_domain",
]
