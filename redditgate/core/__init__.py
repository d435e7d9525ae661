"""Core components."""

from .enums import HttpMethod, Operation, Resource
from .exceptions import (
    AuthenticationError,
    GatewayError,
    MalformedResponseError,
    MissingParameterError,
    ProviderError,
    RateLimitError,
    UnsupportedOperationError,
    ValidationError,
)
from .request import RequestDescriptor, WorkItem

__all__ = [
    "Resource",
    "Operation",
    "HttpMethod",
    "WorkItem",
    "RequestDescriptor",
    "GatewayError",
    "UnsupportedOperationError",
    "ValidationError",
    "MissingParameterError",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "MalformedResponseError",
]
