"""REST request runner using endpoint specs and response shapes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ...core.enums import HttpMethod
from ...core.request import RequestDescriptor, WorkItem
from .listing import ListingFetcher
from .shapes import Identity, PaginatedListing, ResponseShape
from .transport import RequestTransport


@dataclass(frozen=True)
class RoutedRequest:
    """A work item's resolved request plus how to shape its response."""

    descriptor: RequestDescriptor
    shape: ResponseShape = field(default_factory=Identity)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HttpMethod
    build_path: Callable[[WorkItem], str]
    build_params: Callable[[WorkItem], dict[str, Any]] | None = None
    # Shape can be static or chosen from the item's parameters
    shape: ResponseShape | Callable[[WorkItem], ResponseShape] = field(default_factory=Identity)

    def resolve(self, item: WorkItem) -> RoutedRequest:
        path = self.build_path(item)
        params = self.build_params(item) if self.build_params else {}
        shape = self.shape if isinstance(self.shape, ResponseShape) else self.shape(item)
        return RoutedRequest(
            descriptor=RequestDescriptor(method=self.method, endpoint=path, params=params),
            shape=shape,
        )


class RestRunner:
    def __init__(self, transport: RequestTransport, listing: ListingFetcher) -> None:
        self._t = transport
        self._listing = listing

    async def run(self, request: RoutedRequest) -> Any:
        descriptor = request.descriptor
        shape = request.shape

        if isinstance(shape, PaginatedListing):
            return await self._listing.fetch_listing(
                descriptor.endpoint, dict(descriptor.params), shape.limit
            )

        data = await self._t.request(
            descriptor.method.value, descriptor.endpoint, dict(descriptor.params)
        )
        return shape.apply(data)
