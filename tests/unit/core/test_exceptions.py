"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from redditgate.core import (
    AuthenticationError,
    GatewayError,
    MalformedResponseError,
    MissingParameterError,
    ProviderError,
    RateLimitError,
    UnsupportedOperationError,
    ValidationError,
)


def test_rate_limit_error_with_retry_after():
    """Test RateLimitError with retry_after (meaningful behavior)."""
    error = RateLimitError("rate limit", retry_after=120)
    assert error.status_code == 429
    assert error.retry_after == 120
    assert isinstance(error, ProviderError)
    assert isinstance(error, GatewayError)


def test_provider_error_with_status_code():
    error = ProviderError("error", status_code=400)
    assert str(error) == "error"
    assert error.status_code == 400
    assert isinstance(error, GatewayError)


def test_authentication_error_is_provider_error():
    error = AuthenticationError("denied", status_code=401)
    assert isinstance(error, ProviderError)
    assert error.status_code == 401


def test_unsupported_operation_carries_route_context():
    error = UnsupportedOperationError(
        "nope", resource="profile", operation="get", sub_key="bogus"
    )
    assert error.resource == "profile"
    assert error.operation == "get"
    assert error.sub_key == "bogus"


def test_missing_parameter_is_validation_error():
    error = MissingParameterError("title")
    assert error.parameter == "title"
    assert "title" in str(error)
    assert isinstance(error, ValidationError)


def test_malformed_response_records_field():
    error = MalformedResponseError("no rules", field="rules")
    assert error.field == "rules"


def test_attach_item_context_updates_message():
    error = ProviderError("boom", status_code=500)
    returned = error.attach_item_context(item_index=3, resource="post", operation="getAll")

    assert returned is error
    assert error.item_index == 3
    assert "item 3" in str(error)
    assert "resource='post'" in str(error)
    assert error.message == "boom"


def test_attach_item_context_keeps_existing_route_when_none_given():
    error = UnsupportedOperationError("nope", resource="profile", operation="delete")
    error.attach_item_context(item_index=0)
    assert error.resource == "profile"
    assert error.operation == "delete"
