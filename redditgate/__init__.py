"""redditgate - map (resource, operation) work items onto the Reddit REST API."""

from .api import RedditGateway
from .connectors.reddit import RedditRESTConnector
from .core import (
    AuthenticationError,
    GatewayError,
    HttpMethod,
    MalformedResponseError,
    MissingParameterError,
    Operation,
    ProviderError,
    RateLimitError,
    RequestDescriptor,
    Resource,
    UnsupportedOperationError,
    ValidationError,
    WorkItem,
)
from .runtime import RequestRouter
from .runtime.rest import (
    HTTPClient,
    Identity,
    LimitPolicy,
    ListingFetcher,
    ListingPage,
    MapChildrenFirst,
    PaginatedListing,
    RequestTransport,
    ResponseShape,
    RESTTransport,
    RestRunner,
    RoutedRequest,
    UnwrapField,
)

__version__ = "0.1.0"

__all__ = [
    "RedditGateway",
    "RedditRESTConnector",
    "RequestRouter",
    "RestRunner",
    "RoutedRequest",
    "ListingFetcher",
    "ListingPage",
    "LimitPolicy",
    "ResponseShape",
    "Identity",
    "UnwrapField",
    "MapChildrenFirst",
    "PaginatedListing",
    "HTTPClient",
    "RESTTransport",
    "RequestTransport",
    "WorkItem",
    "RequestDescriptor",
    "Resource",
    "Operation",
    "HttpMethod",
    "GatewayError",
    "UnsupportedOperationError",
    "ValidationError",
    "MissingParameterError",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "MalformedResponseError",
]
