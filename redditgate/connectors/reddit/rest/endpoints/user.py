"""Reddit user endpoint definitions."""

from __future__ import annotations

from redditgate.connectors.reddit.config import DIRECT_USER_DETAILS, USER_DETAILS
from redditgate.core import HttpMethod, WorkItem
from redditgate.runtime.rest import Identity, ResponseShape, RestEndpointSpec, UnwrapField

from ._common import listing_shape, require_choice


def build_path(item: WorkItem) -> str:
    username = item.param("username")
    details = require_choice(item, "details", USER_DETAILS)
    return f"user/{username}/{details}.json"


def _shape(item: WorkItem) -> ResponseShape:
    details = item.param("details")
    if details not in DIRECT_USER_DETAILS:
        return listing_shape(item)
    if details == "about":
        return UnwrapField("data")
    return Identity()


GET_SPEC = RestEndpointSpec(
    id="user.get",
    method=HttpMethod.GET,
    build_path=build_path,
    shape=_shape,
)
