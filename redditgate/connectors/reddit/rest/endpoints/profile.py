"""Reddit profile (authenticated user) endpoint definitions."""

from __future__ import annotations

from redditgate.connectors.reddit.config import PROFILE_ENDPOINTS
from redditgate.core import HttpMethod, WorkItem
from redditgate.runtime.rest import Identity, ResponseShape, RestEndpointSpec, UnwrapField

from ._common import require_choice


def build_path(item: WorkItem) -> str:
    details = require_choice(item, "details", PROFILE_ENDPOINTS)
    return f"api/v1/{PROFILE_ENDPOINTS[details]}"


def _shape(item: WorkItem) -> ResponseShape:
    # api/v1/me returns the full account; only the feature flags are emitted
    if item.param("details") == "identity":
        return UnwrapField("features")
    return Identity()


GET_SPEC = RestEndpointSpec(
    id="profile.get",
    method=HttpMethod.GET,
    build_path=build_path,
    shape=_shape,
)
