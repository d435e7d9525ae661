"""Unit tests for response shaping rules."""

from __future__ import annotations

import pytest

from redditgate.core import MalformedResponseError
from redditgate.runtime.rest import (
    Identity,
    LimitPolicy,
    MapChildrenFirst,
    PaginatedListing,
    UnwrapField,
)


def test_identity_returns_response_untouched():
    payload = {"json": {"errors": []}}
    assert Identity().apply(payload) is payload


def test_unwrap_field():
    assert UnwrapField("rules").apply({"rules": [{"short_name": "a"}], "site_rules": []}) == [
        {"short_name": "a"}
    ]


@pytest.mark.parametrize("response", [{"other": 1}, [], None, "text"])
def test_unwrap_field_missing_raises(response):
    with pytest.raises(MalformedResponseError) as exc_info:
        UnwrapField("features").apply(response)
    assert exc_info.value.field == "features"


def test_map_children_first_extracts_pinned_posts():
    response = [
        {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": {"id": "a"}}]}},
        {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": {"id": "b"}}, {}]}},
    ]
    assert MapChildrenFirst().apply(response) == [{"id": "a"}, {"id": "b"}]


def test_map_children_first_empty_children_raises():
    with pytest.raises(MalformedResponseError):
        MapChildrenFirst().apply([{"data": {"children": []}}])


def test_map_children_first_requires_array():
    with pytest.raises(MalformedResponseError):
        MapChildrenFirst().apply({"data": {"children": []}})


def test_paginated_listing_defaults_to_return_all():
    shape = PaginatedListing()
    assert shape.limit == LimitPolicy(max_records=None, page_size=100)
    with pytest.raises(TypeError):
        shape.apply({})
