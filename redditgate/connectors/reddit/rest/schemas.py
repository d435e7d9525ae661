"""Reddit REST API raw listing schemas.

This module defines Pydantic models for the raw listing envelopes Reddit
returns before they are flattened into child payloads.

Two page shapes are accepted:
    - the standard listing ``{"kind": "Listing", "data": {"children": [{"kind", "data"}], "after"}}``
    - the bare search result ``{"subreddits": [...], "after"?}`` returned by
      ``api/search_subreddits``
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from redditgate.core import MalformedResponseError
from redditgate.runtime.rest import ListingPage


class RedditThing(BaseModel):
    """One child envelope: ``{"kind": "t3", "data": {...}}``."""

    kind: str | None = None
    data: dict[str, Any]

    model_config = ConfigDict(extra="ignore")


class RedditListingData(BaseModel):
    children: list[RedditThing] = Field(default_factory=list)
    after: str | None = None
    before: str | None = None
    dist: int | None = None

    model_config = ConfigDict(extra="ignore")


class RedditListing(BaseModel):
    kind: str | None = None
    data: RedditListingData

    model_config = ConfigDict(extra="ignore")


class SubredditSearchResult(BaseModel):
    subreddits: list[dict[str, Any]] = Field(default_factory=list)
    after: str | None = None

    model_config = ConfigDict(extra="ignore")


def parse_listing_page(response: Any) -> ListingPage:
    """Parse a raw listing response into a ListingPage.

    Args:
        response: Decoded JSON from a listing endpoint

    Returns:
        ListingPage with the children's inner ``data`` payloads and the cursor

    Raises:
        MalformedResponseError: If the response is not a recognised listing
    """
    if not isinstance(response, dict):
        raise MalformedResponseError("Listing response is not an object", field="data")
    try:
        if "subreddits" in response and "data" not in response:
            result = SubredditSearchResult.model_validate(response)
            return ListingPage(children=list(result.subreddits), after=result.after or None)
        listing = RedditListing.model_validate(response)
    except PydanticValidationError as exc:
        raise MalformedResponseError(
            f"Invalid listing page: {exc.errors()[0]['msg']}", field="data.children"
        ) from exc
    return ListingPage(
        children=[child.data for child in listing.data.children],
        after=listing.data.after or None,
    )
