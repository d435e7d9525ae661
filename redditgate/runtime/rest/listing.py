"""Cursor-based listing pagination.

The ListingFetcher drives repeated GETs against a listing endpoint,
following the opaque ``after`` cursor until the source is exhausted or the
caller's limit is met. Pages are consumed strictly one at a time: page N+1
is requested only after page N has been appended.

Termination (whichever comes first):
    - the requested number of records has been collected
    - the page carries no ``after`` cursor
    - the page has no children (guards against a cursor that never clears)

Records are passed through in page order and within-page order. No
deduplication is performed.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from ...core.exceptions import ValidationError
from .telemetry import log_listing_complete, log_page_fetched
from .transport import RequestTransport


@dataclass(frozen=True)
class LimitPolicy:
    """How many records to collect and how many to ask for per page.

    Attributes:
        max_records: Total records to return; None means return all
        page_size: Upper bound for the per-request ``limit`` parameter
    """

    max_records: int | None = None
    page_size: int = 100

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValidationError("page_size must be >= 1")
        if self.max_records is not None and self.max_records < 0:
            raise ValidationError("limit must be >= 0")

    @property
    def unbounded(self) -> bool:
        return self.max_records is None


@dataclass(frozen=True)
class ListingPage:
    """One parsed page: the inner child payloads and the continuation cursor."""

    children: list[Any] = field(default_factory=list)
    after: str | None = None


PageParser = Callable[[Any], ListingPage]


class ListingFetcher:
    """Collects a paginated listing into one ordered list."""

    def __init__(self, transport: RequestTransport, parse_page: PageParser) -> None:
        self._t = transport
        self._parse_page = parse_page

    async def fetch_listing(
        self,
        endpoint: str,
        base_params: Mapping[str, Any] | None = None,
        limit: LimitPolicy | None = None,
    ) -> list[Any]:
        """Fetch every page of ``endpoint`` up to the limit.

        Args:
            endpoint: Listing path (e.g. ``r/python/new.json``)
            base_params: Query parameters sent with every page
            limit: Record limit and page size (default: return all, 100 per page)

        Returns:
            Child records in arrival order, truncated to ``limit.max_records``

        Raises:
            ProviderError: If any page request fails; partial results are discarded
            MalformedResponseError: If a page is not a listing
        """
        policy = limit or LimitPolicy()
        accumulator: list[Any] = []
        cursor: str | None = None
        remaining = policy.max_records
        page_index = 0
        start = perf_counter()

        while remaining is None or remaining > 0:
            query: dict[str, Any] = dict(base_params or {})
            query["limit"] = policy.page_size if remaining is None else min(policy.page_size, remaining)
            if cursor is not None:
                query["after"] = cursor

            page_start = perf_counter()
            page = self._parse_page(await self._t.request("GET", endpoint, query))
            accumulator.extend(page.children)
            log_page_fetched(
                endpoint=endpoint,
                page_index=page_index,
                records=len(page.children),
                has_more=page.after is not None,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )
            page_index += 1

            if remaining is not None:
                remaining -= len(page.children)
            if not page.children or page.after is None:
                break
            cursor = page.after

        if policy.max_records is not None:
            del accumulator[policy.max_records :]

        log_listing_complete(
            endpoint=endpoint,
            pages=page_index,
            records=len(accumulator),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return accumulator
