"""Validating factory for :class:`~store_config.core.models.StoreConfig`.

Guarantees
----------
* Fail fast — the first violated rule raises, nothing is returned.
* Domain rules live in :class:`StoreConfig` itself; this factory adds
  the argument order and the blank checks on raw input.
* Only :class:`~store_config.exceptions.StoreValidationError`
  subclasses escape.
* No I/O and no global state; the same input always yields an equal
  result.
"""

from __future__ import annotations

import logging

from store_config.core.args import (
    require_no_blanks,
    require_non_negative,
    require_not_blank,
)
from store_config.core.models import StoreConfig

logger = logging.getLogger(__name__)


def create_store(
    id: int,
    name: str,
    primary_domain: str,
    *additional_domains: str,
) -> StoreConfig:
    """Validate the input and build a :class:`StoreConfig`.

    Parameters
    ----------
    id:
        The ID of the product store.  Must be ``>= 0``.
    name:
        The store name, used verbatim.  Must not be blank.
    primary_domain:
        Domain of the main license server.  Must not be blank.
    additional_domains:
        Further license server domains.  None of them may be blank;
        duplicates of earlier domains are dropped silently.

    Raises
    ------
    InvalidStoreIdError
        If *id* is missing, not an integer, or negative.
    BlankValueError
        If *name*, *primary_domain* or any additional domain is blank.
    InvalidDomainError
        If a domain contains a disallowed character.
    ReservedDomainError
        If a domain belongs to the ``univocity.*`` family.
    NoLicenseServerError
        If no domain survives normalization.
    """
    require_non_negative(id, "Store ID")
    require_not_blank(name, "Store name")
    require_not_blank(primary_domain, "License server domain")
    require_no_blanks(additional_domains, "License server domain list")

    store = StoreConfig(
        id=id,
        name=name,
        license_server_domains=(primary_domain, *additional_domains),
    )
    logger.debug(
        "Created store %r (id=%d) with %d license server(s)",
        store.name,
        store.id,
        len(store.license_server_domains),
    )
    return store
