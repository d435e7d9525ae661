"""Reddit post endpoint definitions."""

from __future__ import annotations

from typing import Any

from redditgate.connectors.reddit.config import POST_LISTING_CONTENT, SELF_POST_KIND
from redditgate.core import HttpMethod, WorkItem
from redditgate.runtime.rest import Identity, RestEndpointSpec

from ._common import flag, listing_shape, require_choice


def build_create_params(item: WorkItem) -> dict[str, Any]:
    """Build the ``api/submit`` parameters.

    Self posts carry ``text``; every other kind carries ``url``. Reddit
    rejects a link submission without ``resubmit`` when the url was posted
    before, so the flag is attached whenever a url is present.
    """
    params: dict[str, Any] = {
        "title": item.param("title"),
        "sr": item.param("subreddit"),
        "kind": item.param("kind"),
    }
    if params["kind"] == SELF_POST_KIND:
        params["text"] = item.param("text")
    else:
        params["url"] = item.param("url")
    if params.get("url"):
        params["resubmit"] = flag(item, "resubmit")
    return params


def build_get_all_path(item: WorkItem) -> str:
    subreddit = item.param("subreddit")
    content = require_choice(item, "content", POST_LISTING_CONTENT)
    return f"r/{subreddit}/{content}.json"


CREATE_SPEC = RestEndpointSpec(
    id="post.create",
    method=HttpMethod.POST,
    build_path=lambda item: "api/submit",
    build_params=build_create_params,
    shape=Identity(),
)

GET_ALL_SPEC = RestEndpointSpec(
    id="post.getAll",
    method=HttpMethod.GET,
    build_path=build_get_all_path,
    shape=listing_shape,
)
