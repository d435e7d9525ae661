"""Response shaping rules.

Reddit wraps payloads in a handful of envelope shapes. Each route names one
rule from this closed set instead of reaching into the response ad hoc:

    Identity          the raw JSON is the result
    UnwrapField(f)    the result is ``response[f]``
    MapChildrenFirst  ``[env["data"]["children"][0]["data"] for env in response]``
    PaginatedListing  the route is a cursor listing; the runner hands it to
                      the ListingFetcher instead of applying a transform
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import MalformedResponseError
from .listing import LimitPolicy


class ResponseShape:
    """Base shaping rule."""

    def apply(self, response: Any) -> Any:
        return response


@dataclass(frozen=True)
class Identity(ResponseShape):
    pass


@dataclass(frozen=True)
class UnwrapField(ResponseShape):
    field: str

    def apply(self, response: Any) -> Any:
        if not isinstance(response, dict) or self.field not in response:
            raise MalformedResponseError(
                f"Response has no '{self.field}' field", field=self.field
            )
        return response[self.field]


@dataclass(frozen=True)
class MapChildrenFirst(ResponseShape):
    """Pull the single pinned post out of each listing envelope."""

    def apply(self, response: Any) -> list[Any]:
        if not isinstance(response, list):
            raise MalformedResponseError("Expected an array of listing envelopes", field="data")
        out: list[Any] = []
        for envelope in response:
            try:
                out.append(envelope["data"]["children"][0]["data"])
            except (KeyError, IndexError, TypeError) as exc:
                raise MalformedResponseError(
                    "Listing envelope has no children[0].data", field="children[0].data"
                ) from exc
        return out


@dataclass(frozen=True)
class PaginatedListing(ResponseShape):
    limit: LimitPolicy = dataclasses.field(default_factory=LimitPolicy)

    def apply(self, response: Any) -> Any:
        raise TypeError("PaginatedListing is resolved by the ListingFetcher, not applied")
