"""Reddit subreddit endpoint definitions.

``get`` reads one of the ``r/{subreddit}/about/{content}.json`` documents.
``getAll`` either returns the trending list (single request) or pages
through subreddit search results.
"""

from __future__ import annotations

from typing import Any

from redditgate.connectors.reddit.config import SUBREDDIT_CONTENT
from redditgate.core import HttpMethod, WorkItem
from redditgate.runtime.rest import (
    Identity,
    MapChildrenFirst,
    ResponseShape,
    RestEndpointSpec,
    UnwrapField,
)

from ._common import flag, listing_shape, require_choice

TRENDING_PATH = "api/trending_subreddits.json"
SEARCH_PATH = "api/search_subreddits.json"


def build_get_path(item: WorkItem) -> str:
    subreddit = item.param("subreddit")
    content = require_choice(item, "content", SUBREDDIT_CONTENT)
    return f"r/{subreddit}/about/{content}.json"


def _get_shape(item: WorkItem) -> ResponseShape:
    content = item.param("content")
    if content == "rules":
        return UnwrapField("rules")
    if content == "about":
        return UnwrapField("data")
    if content == "sticky":
        return MapChildrenFirst()
    return Identity()


def _is_trending(item: WorkItem) -> bool:
    return flag(item, "trending")


def build_get_all_path(item: WorkItem) -> str:
    return TRENDING_PATH if _is_trending(item) else SEARCH_PATH


def build_get_all_params(item: WorkItem) -> dict[str, Any]:
    if _is_trending(item) or not item.has_param("keyword"):
        return {}
    return {"query": item.param("keyword")}


def _get_all_shape(item: WorkItem) -> ResponseShape:
    if _is_trending(item):
        return Identity()
    return listing_shape(item)


GET_SPEC = RestEndpointSpec(
    id="subreddit.get",
    method=HttpMethod.GET,
    build_path=build_get_path,
    shape=_get_shape,
)

GET_ALL_SPEC = RestEndpointSpec(
    id="subreddit.getAll",
    method=HttpMethod.GET,
    build_path=build_get_all_path,
    build_params=build_get_all_params,
    shape=_get_all_shape,
)
