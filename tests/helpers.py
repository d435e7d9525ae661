"""Test doubles and payload builders shared across test modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class ScriptedTransport:
    """Transport double that replays queued responses and records calls.

    Each queued entry is returned in order; an entry that is an exception
    instance is raised instead.
    """

    def __init__(self, responses: list[Any] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    async def request(
        self, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> Any:
        self.calls.append((method, path, dict(params or {})))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {path}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


def listing_page(children: list[dict[str, Any]], after: str | None = None) -> dict[str, Any]:
    """Build a Reddit listing envelope around raw child payloads."""
    return {
        "kind": "Listing",
        "data": {
            "children": [{"kind": "t3", "data": child} for child in children],
            "after": after,
        },
    }
