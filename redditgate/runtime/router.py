"""Request router resolving work items against the endpoint registry.

Architecture:
    The router is a pure function of a WorkItem: it looks up the endpoint
    spec registered for the item's (resource, operation) pair and lets the
    spec build the request descriptor and response shape from the item's
    parameters. Sub-key validation (profile ``details``, subreddit
    ``content`` and so on) happens inside the endpoint spec builders.

Design Decisions:
    - The routing table is data (a mapping of specs), so adding an
      operation means registering a spec, not adding a branch here
    - Unknown combinations raise UnsupportedOperationError; nothing is
      silently skipped
    - Registry is injectable for testing; defaults to the Reddit endpoints
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.enums import Operation, Resource
from ..core.exceptions import UnsupportedOperationError
from ..core.request import WorkItem
from .rest.runner import RestEndpointSpec, RoutedRequest
from .rest.telemetry import log_request_routed

logger = logging.getLogger(__name__)

EndpointRegistry = Mapping[tuple[Resource, Operation], RestEndpointSpec]


class RequestRouter:
    """Maps a WorkItem to exactly one RoutedRequest."""

    def __init__(self, registry: EndpointRegistry | None = None) -> None:
        if registry is None:
            from ..connectors.reddit.rest.endpoints import get_endpoint_registry

            registry = get_endpoint_registry()
        self._registry = registry

    def resolve(self, item: WorkItem) -> RoutedRequest:
        """Resolve a work item.

        Args:
            item: Work item carrying resource, operation and parameters

        Returns:
            RoutedRequest with the request descriptor and response shape

        Raises:
            UnsupportedOperationError: If the resource/operation pair or one
                of its sub-keys has no route
            MissingParameterError: If a required parameter is absent
        """
        spec = self.lookup(item.resource, item.operation)
        routed = spec.resolve(item)
        log_request_routed(
            item_index=item.index,
            resource=item.resource,
            operation=item.operation,
            method=routed.descriptor.method.value,
            endpoint=routed.descriptor.endpoint,
            shape=type(routed.shape).__name__,
        )
        return routed

    def lookup(self, resource: str, operation: str) -> RestEndpointSpec:
        res = Resource.from_str(resource)
        op = Operation.from_str(operation)
        spec = self._registry.get((res, op)) if res and op else None
        if spec is None:
            logger.debug(
                "No route found",
                extra={"resource": resource, "operation": operation},
            )
            raise UnsupportedOperationError(
                f"Unsupported operation '{operation}' for resource '{resource}'",
                resource=resource,
                operation=operation,
            )
        return spec

    def default_operation(self, resource: Any) -> str | None:
        """Return the operation to assume for ``resource`` when none is given.

        Only a resource with exactly one registered operation has a default.
        """
        res = Resource.from_str(resource)
        if res is None:
            return None
        operations = [op for r, op in self._registry if r is res]
        return operations[0].value if len(operations) == 1 else None

    def supported(self) -> list[tuple[str, str]]:
        """List the registered (resource, operation) pairs."""
        return [(res.value, op.value) for res, op in self._registry]
