"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base exception for all library errors.

    Carries optional work item context (index, resource, operation) so a
    failure surfaced from ``RedditGateway.process`` points at the item that
    caused it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.item_index: int | None = None
        self.resource: str | None = None
        self.operation: str | None = None

    def attach_item_context(
        self,
        *,
        item_index: int,
        resource: str | None = None,
        operation: str | None = None,
    ) -> GatewayError:
        """Record which work item failed and return self for re-raising."""
        self.item_index = item_index
        if resource is not None:
            self.resource = resource
        if operation is not None:
            self.operation = operation
        return self

    def __str__(self) -> str:
        if self.item_index is None:
            return self.message
        return (
            f"{self.message} (item {self.item_index}, "
            f"resource={self.resource!r}, operation={self.operation!r})"
        )


class UnsupportedOperationError(GatewayError):
    """The (resource, operation, sub-key) combination has no route."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        operation: str | None = None,
        sub_key: Any = None,
    ) -> None:
        super().__init__(message)
        self.resource = resource
        self.operation = operation
        self.sub_key = sub_key


class ValidationError(GatewayError):
    """Input validation failure."""

    pass


class MissingParameterError(ValidationError):
    """A work item lacks a parameter its operation requires."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing required parameter: {parameter}")
        self.parameter = parameter


class ProviderError(GatewayError):
    """Error reported by the transport (HTTP status, network, non-JSON body)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class AuthenticationError(ProviderError):
    """Token missing, expired or lacking scope."""

    pass


class MalformedResponseError(GatewayError):
    """A response lacked a field the shaping rule expects."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
