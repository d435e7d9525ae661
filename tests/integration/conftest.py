"""Shared fixtures for integration tests."""

import pytest_asyncio

from redditgate import RedditGateway


@pytest_asyncio.fixture
async def public_gateway():
    """Gateway against the public (unauthenticated) host."""
    async with RedditGateway.from_env(access_token=None) as gateway:
        yield gateway
