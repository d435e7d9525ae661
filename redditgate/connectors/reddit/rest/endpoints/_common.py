"""Helpers shared by the Reddit endpoint specs."""

from __future__ import annotations

from collections.abc import Collection

from redditgate.connectors.reddit.config import DEFAULT_LIMIT, MAX_PAGE_SIZE
from redditgate.core import UnsupportedOperationError, ValidationError, WorkItem
from redditgate.runtime.rest import LimitPolicy, PaginatedListing


def require_choice(item: WorkItem, name: str, choices: Collection[str]) -> str:
    """Return the sub-key ``name`` if it is one of ``choices``.

    Raises:
        MissingParameterError: If the parameter is absent
        UnsupportedOperationError: If the value has no route
    """
    value = item.param(name)
    if not isinstance(value, str) or value not in choices:
        raise UnsupportedOperationError(
            f"Unsupported {name} '{value}' for {item.resource} {item.operation}",
            resource=item.resource,
            operation=item.operation,
            sub_key=value,
        )
    return value


_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no", ""})


def flag(item: WorkItem, name: str) -> bool:
    """Read a boolean parameter; hosts may send it as a string.

    Raises:
        ValidationError: If the value is not a recognisable boolean
    """
    value = item.param(name, False)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValidationError(f"{name} must be a boolean, got {value!r}")


def limit_policy(item: WorkItem) -> LimitPolicy:
    """Build the listing limit from ``return_all`` / ``limit``."""
    if flag(item, "return_all"):
        return LimitPolicy(max_records=None, page_size=MAX_PAGE_SIZE)
    raw = item.param("limit", DEFAULT_LIMIT)
    try:
        limit = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"limit must be an integer, got {raw!r}") from exc
    return LimitPolicy(max_records=limit, page_size=MAX_PAGE_SIZE)


def listing_shape(item: WorkItem) -> PaginatedListing:
    return PaginatedListing(limit=limit_policy(item))
