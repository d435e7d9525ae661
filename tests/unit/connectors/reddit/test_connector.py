"""Unit tests for RedditRESTConnector."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from redditgate.connectors.reddit import RedditRESTConnector
from redditgate.connectors.reddit.config import OAUTH_BASE_URL, PUBLIC_BASE_URL
from redditgate.core import ValidationError, WorkItem
from redditgate.runtime.rest import RESTTransport
from tests.helpers import listing_page


def _item(resource: str, operation: str, **params) -> WorkItem:
    return WorkItem(index=0, resource=resource, operation=operation, params=params)


class TestConnectorConstruction:
    def test_token_selects_oauth_host(self):
        connector = RedditRESTConnector(access_token="tok")
        assert isinstance(connector.transport, RESTTransport)
        assert connector.transport.base_url == OAUTH_BASE_URL
        assert connector.transport._http._response_hooks

    def test_anonymous_uses_public_host(self):
        connector = RedditRESTConnector()
        assert connector.transport.base_url == PUBLIC_BASE_URL

    def test_base_url_override(self):
        connector = RedditRESTConnector(access_token="tok", base_url="http://localhost:8080")
        assert connector.transport.base_url == "http://localhost:8080"

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValidationError):
            RedditRESTConnector(page_size=page_size)


class TestConnectorExecution:
    def test_route_applies_page_size(self, transport):
        connector = RedditRESTConnector(transport=transport, page_size=25)
        routed = connector.route(_item("post", "getAll", subreddit="python", content="hot", limit=60))
        assert routed.shape.limit.page_size == 25
        assert routed.shape.limit.max_records == 60

    @pytest.mark.asyncio
    async def test_execute_listing_pages_with_configured_size(self, transport):
        connector = RedditRESTConnector(transport=transport, page_size=2)
        transport.queue(
            listing_page([{"id": "a"}, {"id": "b"}], after="t3_b"),
            listing_page([{"id": "c"}], after=None),
        )

        result = await connector.execute(_item("post", "getAll", subreddit="python", content="new", limit=3))

        assert result == [{"id": "a"}, {"id": "b"}, {"id": "c"}]
        assert transport.calls == [
            ("GET", "r/python/new.json", {"limit": 2}),
            ("GET", "r/python/new.json", {"limit": 1, "after": "t3_b"}),
        ]

    @pytest.mark.asyncio
    async def test_execute_direct_call(self, transport):
        connector = RedditRESTConnector(transport=transport)
        transport.queue({"features": {"chat": True}, "name": "me"})

        result = await connector.execute(_item("profile", "get", details="identity"))

        assert result == {"chat": True}
        assert transport.calls == [("GET", "api/v1/me", {})]

    @pytest.mark.asyncio
    async def test_close_leaves_injected_transport_alone(self, transport):
        transport.close = AsyncMock()
        connector = RedditRESTConnector(transport=transport)
        await connector.close()
        transport.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_close_owned_transport(self):
        connector = RedditRESTConnector()
        connector.transport.close = AsyncMock()
        await connector.close()
        connector.transport.close.assert_awaited_once()
