"""Unit tests for the Reddit endpoint definitions."""

from __future__ import annotations

import pytest

from redditgate.connectors.reddit.rest import get_endpoint_registry, get_endpoint_spec, list_endpoints
from redditgate.connectors.reddit.rest.endpoints import post
from redditgate.core import Operation, Resource, ValidationError, WorkItem


def _post_item(**params) -> WorkItem:
    return WorkItem(index=0, resource="post", operation="create", params=params)


class TestRegistry:
    def test_registry_covers_the_routing_table(self):
        assert sorted(list_endpoints()) == [
            "comment.create",
            "post.create",
            "post.getAll",
            "profile.get",
            "subreddit.get",
            "subreddit.getAll",
            "user.get",
        ]

    def test_registry_is_a_copy(self):
        registry = get_endpoint_registry()
        registry.clear()
        assert get_endpoint_registry()

    def test_get_endpoint_spec(self):
        spec = get_endpoint_spec(Resource.COMMENT, Operation.CREATE)
        assert spec is not None
        assert spec.id == "comment.create"

    def test_get_endpoint_spec_unknown(self):
        assert get_endpoint_spec(Resource.COMMENT, Operation.GET) is None


class TestPostCreateParams:
    def test_self_post_carries_text(self):
        params = post.build_create_params(
            _post_item(title="Hello", subreddit="test", kind="self", text="body")
        )
        assert params == {"title": "Hello", "sr": "test", "kind": "self", "text": "body"}

    def test_link_post_carries_url_and_resubmit(self):
        params = post.build_create_params(
            _post_item(title="Hello", subreddit="test", kind="link", url="https://example.com")
        )
        assert params == {
            "title": "Hello",
            "sr": "test",
            "kind": "link",
            "url": "https://example.com",
            "resubmit": False,
        }

    def test_resubmit_flag_passed_through(self):
        params = post.build_create_params(
            _post_item(
                title="Hello",
                subreddit="test",
                kind="image",
                url="https://i.example.com/a.png",
                resubmit=True,
            )
        )
        assert params["resubmit"] is True

    def test_link_post_with_empty_url_has_no_resubmit(self):
        params = post.build_create_params(
            _post_item(title="Hello", subreddit="test", kind="link", url="")
        )
        assert params["url"] == ""
        assert "resubmit" not in params


class TestListingLimit:
    def test_default_limit(self):
        spec = get_endpoint_spec(Resource.POST, Operation.GET_ALL)
        item = WorkItem(
            index=0, resource="post", operation="getAll",
            params={"subreddit": "python", "content": "top"},
        )
        assert spec.resolve(item).shape.limit.max_records == 100

    def test_string_limit_coerced(self):
        spec = get_endpoint_spec(Resource.USER, Operation.GET)
        item = WorkItem(
            index=0, resource="user", operation="get",
            params={"username": "spez", "details": "overview", "limit": "25"},
        )
        assert spec.resolve(item).shape.limit.max_records == 25

    @pytest.mark.parametrize("limit", ["many", "1.5", -1])
    def test_invalid_limit(self, limit):
        spec = get_endpoint_spec(Resource.USER, Operation.GET)
        params = {"username": "spez", "details": "comments", "limit": limit}
        item = WorkItem(index=0, resource="user", operation="get", params=params)
        with pytest.raises(ValidationError):
            spec.resolve(item)

    def test_null_limit_counts_as_unset(self):
        spec = get_endpoint_spec(Resource.USER, Operation.GET)
        params = {"username": "spez", "details": "comments", "limit": None}
        item = WorkItem(index=0, resource="user", operation="get", params=params)
        assert spec.resolve(item).shape.limit.max_records == 100

    def test_camel_case_return_all(self):
        spec = get_endpoint_spec(Resource.POST, Operation.GET_ALL)
        item = WorkItem.from_mapping(
            0,
            {"resource": "post", "operation": "getAll", "subreddit": "python",
             "content": "new", "returnAll": True},
        )
        assert spec.resolve(item).shape.limit.unbounded


class TestFlags:
    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "", 0, False])
    def test_false_strings_keep_the_limit(self, value):
        spec = get_endpoint_spec(Resource.POST, Operation.GET_ALL)
        item = WorkItem(
            index=0, resource="post", operation="getAll",
            params={"subreddit": "python", "content": "new", "return_all": value, "limit": 5},
        )
        assert spec.resolve(item).shape.limit.max_records == 5

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", 1, True])
    def test_true_strings_remove_the_limit(self, value):
        spec = get_endpoint_spec(Resource.POST, Operation.GET_ALL)
        item = WorkItem(
            index=0, resource="post", operation="getAll",
            params={"subreddit": "python", "content": "new", "return_all": value, "limit": 5},
        )
        assert spec.resolve(item).shape.limit.unbounded

    @pytest.mark.parametrize("value", ["maybe", 2, ["true"]])
    def test_unrecognised_flag_rejected(self, value):
        spec = get_endpoint_spec(Resource.SUBREDDIT, Operation.GET_ALL)
        item = WorkItem(index=0, resource="subreddit", operation="getAll", params={"trending": value})
        with pytest.raises(ValidationError):
            spec.resolve(item)

    def test_trending_false_string_searches(self):
        spec = get_endpoint_spec(Resource.SUBREDDIT, Operation.GET_ALL)
        item = WorkItem(
            index=0, resource="subreddit", operation="getAll",
            params={"trending": "false", "keyword": "python"},
        )
        routed = spec.resolve(item)
        assert routed.descriptor.endpoint == "api/search_subreddits.json"
        assert dict(routed.descriptor.params) == {"query": "python"}

    def test_resubmit_string_flag(self):
        params = post.build_create_params(
            _post_item(title="t", subreddit="s", kind="link", url="https://x.example", resubmit="false")
        )
        assert params["resubmit"] is False
