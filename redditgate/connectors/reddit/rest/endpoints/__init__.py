"""Reddit REST endpoint registry.

This module collects the endpoint specifications from the per-resource
modules into the routing table keyed by (resource, operation).
"""

from __future__ import annotations

from redditgate.core import Operation, Resource
from redditgate.runtime.rest import RestEndpointSpec

from .comment import CREATE_SPEC as CommentCreateSpec  # noqa: N811
from .post import CREATE_SPEC as PostCreateSpec  # noqa: N811
from .post import GET_ALL_SPEC as PostGetAllSpec  # noqa: N811
from .profile import GET_SPEC as ProfileGetSpec  # noqa: N811
from .subreddit import GET_ALL_SPEC as SubredditGetAllSpec  # noqa: N811
from .subreddit import GET_SPEC as SubredditGetSpec  # noqa: N811
from .user import GET_SPEC as UserGetSpec  # noqa: N811

# Registry mapping (resource, operation) to endpoint specs
_ENDPOINT_REGISTRY: dict[tuple[Resource, Operation], RestEndpointSpec] = {
    (Resource.COMMENT, Operation.CREATE): CommentCreateSpec,
    (Resource.PROFILE, Operation.GET): ProfileGetSpec,
    (Resource.SUBREDDIT, Operation.GET): SubredditGetSpec,
    (Resource.SUBREDDIT, Operation.GET_ALL): SubredditGetAllSpec,
    (Resource.POST, Operation.CREATE): PostCreateSpec,
    (Resource.POST, Operation.GET_ALL): PostGetAllSpec,
    (Resource.USER, Operation.GET): UserGetSpec,
}


def get_endpoint_registry() -> dict[tuple[Resource, Operation], RestEndpointSpec]:
    """Return a copy of the routing table."""
    return dict(_ENDPOINT_REGISTRY)


def get_endpoint_spec(resource: str, operation: str) -> RestEndpointSpec | None:
    """Get endpoint specification by resource and operation.

    Args:
        resource: Resource name (e.g., "post")
        operation: Operation name (e.g., "getAll")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    res = Resource.from_str(resource)
    op = Operation.from_str(operation)
    if res is None or op is None:
        return None
    return _ENDPOINT_REGISTRY.get((res, op))


def list_endpoints() -> list[str]:
    """List all registered endpoint IDs."""
    return [spec.id for spec in _ENDPOINT_REGISTRY.values()]


__all__ = [
    "get_endpoint_registry",
    "get_endpoint_spec",
    "list_endpoints",
    "CommentCreateSpec",
    "ProfileGetSpec",
    "SubredditGetSpec",
    "SubredditGetAllSpec",
    "PostCreateSpec",
    "PostGetAllSpec",
    "UserGetSpec",
]
