"""Reddit REST connector.

Architecture:
    The connector wires the router, the runner and the listing fetcher to
    one transport. ``execute`` resolves a single work item and returns its
    shaped result; flattening and ordering across items belong to
    RedditGateway.
"""

from __future__ import annotations

from typing import Any

from redditgate.connectors.reddit.config import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    MAX_PAGE_SIZE,
    OAUTH_BASE_URL,
    PUBLIC_BASE_URL,
)
from redditgate.core import ValidationError, WorkItem
from redditgate.runtime import RequestRouter
from redditgate.runtime.rest import (
    LimitPolicy,
    ListingFetcher,
    PaginatedListing,
    RequestTransport,
    RestRunner,
    RESTTransport,
    RoutedRequest,
)

from .rest import parse_listing_page, ratelimit_hook


class RedditRESTConnector:
    """Resolves and runs one work item at a time against the Reddit API."""

    def __init__(
        self,
        *,
        access_token: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = MAX_PAGE_SIZE,
        transport: RequestTransport | None = None,
        router: RequestRouter | None = None,
    ) -> None:
        """Initialize the connector.

        Args:
            access_token: Pre-acquired OAuth bearer token (optional)
            user_agent: User-Agent header; Reddit throttles generic agents
            base_url: API host override; defaults to the OAuth host when a
                token is given and the public host otherwise
            timeout: Total per-request timeout in seconds
            page_size: Per-page ``limit`` for listings (1..100)
            transport: Injected transport; when given, the other transport
                options are ignored and the caller owns its lifecycle
            router: Injected router (defaults to the Reddit routing table)
        """
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        self._page_size = page_size
        self._owns_transport = transport is None
        if transport is None:
            rest = RESTTransport(
                base_url=base_url or (OAUTH_BASE_URL if access_token else PUBLIC_BASE_URL),
                access_token=access_token,
                user_agent=user_agent,
                timeout=timeout,
            )
            rest.add_response_hook(ratelimit_hook)
            transport = rest
        self._transport = transport
        self._router = router or RequestRouter()
        self._runner = RestRunner(transport, ListingFetcher(transport, parse_listing_page))

    @property
    def transport(self) -> RequestTransport:
        return self._transport

    @property
    def router(self) -> RequestRouter:
        return self._router

    def route(self, item: WorkItem) -> RoutedRequest:
        """Resolve an item without executing it."""
        routed = self._router.resolve(item)
        shape = routed.shape
        if isinstance(shape, PaginatedListing) and shape.limit.page_size != self._page_size:
            shape = PaginatedListing(
                limit=LimitPolicy(max_records=shape.limit.max_records, page_size=self._page_size)
            )
            routed = RoutedRequest(descriptor=routed.descriptor, shape=shape)
        return routed

    async def execute(self, item: WorkItem) -> Any:
        """Route and run one work item, returning its shaped result."""
        return await self._runner.run(self.route(item))

    async def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, RESTTransport):
            await self._transport.close()
