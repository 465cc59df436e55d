"""Domain model for store-config.

:class:`StoreConfig` is a **frozen** dataclass — an immutable value
object with no I/O and no dependencies on external packages.  Every
instance is validated in ``__post_init__``, so an invalid store cannot
exist no matter how it was built.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from store_config.core.args import (
    require_no_blanks,
    require_non_negative,
    require_not_blank,
)
from store_config.core.domains import build_domain_list
from store_config.exceptions import NoLicenseServerError

VALIDATION_ENDPOINT_PATH: str = "/licenses/validate"
"""Path each license server exposes for HTTPS ``POST`` validation."""


@dataclass(frozen=True, slots=True, eq=False)
class StoreConfig:
    """Information a product store provides to enable license validation.

    Equality and hashing use ``(name, id)`` only: two stores with the
    same name and ID are the same store even when their server lists
    differ.

    Raises
    ------
    StoreValidationError
        From ``__post_init__`` when any field breaks its rule.
    """

    id: int
    """Non-negative store identifier."""

    name: str
    """Display name of the store, kept verbatim."""

    license_server_domains: tuple[str, ...]
    """Normalized, distinct license server domains in first-seen order.

    Any iterable of strings is accepted and stored as a new tuple.  The
    client software picks one of these at random whenever a license
    needs to be validated remotely.
    """

    def __post_init__(self) -> None:
        require_non_negative(self.id, "Store ID")
        require_not_blank(self.name, "Store name")

        raw: Iterable[str] = self.license_server_domains
        if isinstance(raw, str):
            raw = (raw,)
        raw = tuple(raw)
        require_no_blanks(raw, "License server domain list")

        domains = build_domain_list(raw)
        if not domains:
            raise NoLicenseServerError(
                "A license server domain is mandatory.",
                field="License server domain",
            )
        # frozen: bypass the generated __setattr__ to store the copy
        object.__setattr__(self, "license_server_domains", domains)

    @property
    def primary_domain(self) -> str:
        """The first (primary) license server domain."""
        return self.license_server_domains[0]

    def validation_urls(self) -> tuple[str, ...]:
        """Return the HTTPS validation endpoint of every domain, in order."""
        return tuple(
            f"https://{domain}{VALIDATION_ENDPOINT_PATH}"
            for domain in self.license_server_domains
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, StoreConfig):
            return NotImplemented
        return self.name == other.name and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.name, self.id))

    def __str__(self) -> str:
        return self.name
