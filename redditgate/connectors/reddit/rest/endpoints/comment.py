"""Reddit comment endpoint definitions."""

from __future__ import annotations

from typing import Any

from redditgate.core import HttpMethod, WorkItem
from redditgate.runtime.rest import Identity, RestEndpointSpec


def build_params(item: WorkItem) -> dict[str, Any]:
    """Reply to a post or comment identified by its fullname (``t3_...``/``t1_...``)."""
    return {
        "thing_id": item.param("target_id"),
        "text": item.param("text"),
    }


CREATE_SPEC = RestEndpointSpec(
    id="comment.create",
    method=HttpMethod.POST,
    build_path=lambda item: "api/comment",
    build_params=build_params,
    shape=Identity(),
)
