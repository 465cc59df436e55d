"""Pure license-server domain normalization and filtering.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Pipeline order (enforced by :func:`build_domain_list`):

1. **Normalize** — trim, lower-case, check the character set.
2. **Deduplicate** — first occurrence wins, empty tokens dropped.
3. **Reserved check** — reject the ``univocity.*`` family.
"""

from __future__ import annotations

from collections.abc import Iterable

from store_config.exceptions import InvalidDomainError, ReservedDomainError

ALLOWED_DOMAIN_PUNCTUATION: frozenset[str] = frozenset("._-:")
"""Non-alphanumeric characters a domain token may contain."""

RESERVED_DOMAIN_MARKER: str = "univocity."
"""Substring identifying domains that cannot host a license server."""

_FIELD = "License server domain"


# ---------------------------------------------------------------------------
# 1. Normalize
# ---------------------------------------------------------------------------

def normalize_domain(raw: str | None) -> str:
    """Trim and lower-case *raw*, then validate its characters.

    ``None`` normalizes to ``""``, which :func:`unique_domains` later
    discards.  Letters are any Unicode letter (:meth:`str.isalpha`) and
    digits are decimal digits only (:meth:`str.isdecimal`), so
    internationalized names pass while superscripts, fractions and
    roman numerals do not.

    Raises
    ------
    InvalidDomainError
        On the first character that is neither a letter, a decimal digit
        nor one of ``. _ - :``.
    """
    if raw is None:
        return ""
    value = raw.strip().lower()

    for ch in value:
        if not (
            ch.isalpha() or ch.isdecimal() or ch in ALLOWED_DOMAIN_PUNCTUATION
        ):
            raise InvalidDomainError(
                f"'{value}' is not a valid domain name",
                field=_FIELD,
                value=value,
                hint=f"Character {ch!r} is not allowed. Use letters, "
                "digits, '.', '_', '-' or ':' only.",
            )
    return value


# ---------------------------------------------------------------------------
# 2. Deduplicate
# ---------------------------------------------------------------------------

def unique_domains(domains: Iterable[str]) -> tuple[str, ...]:
    """Remove duplicate and empty tokens, keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for domain in domains:
        if domain and domain not in seen:
            seen.add(domain)
            result.append(domain)
    return tuple(result)


# ---------------------------------------------------------------------------
# 3. Reserved check
# ---------------------------------------------------------------------------

def ensure_not_reserved(domains: Iterable[str]) -> None:
    """Raise :class:`ReservedDomainError` if any domain is reserved."""
    for domain in domains:
        if RESERVED_DOMAIN_MARKER in domain:
            raise ReservedDomainError(
                "Can't use univocity.* as a license server",
                field=_FIELD,
                value=domain,
                hint="Point the store at your own license server domain.",
            )


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def build_domain_list(raw_domains: Iterable[str | None]) -> tuple[str, ...]:
    """Run normalize → deduplicate → reserved check.

    Input order is kept, so the primary domain must come first.  May
    return an empty tuple; the caller decides whether that is an error.
    """
    domains = unique_domains(normalize_domain(raw) for raw in raw_domains)
    ensure_not_reserved(domains)
    return domains
