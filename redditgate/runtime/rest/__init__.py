"""REST runtime abstractions."""

from .http_client import HTTPClient
from .listing import LimitPolicy, ListingFetcher, ListingPage
from .runner import RestEndpointSpec, RestRunner, RoutedRequest
from .shapes import Identity, MapChildrenFirst, PaginatedListing, ResponseShape, UnwrapField
from .transport import RequestTransport, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RequestTransport",
    "RestRunner",
    "RestEndpointSpec",
    "RoutedRequest",
    "ResponseShape",
    "Identity",
    "UnwrapField",
    "MapChildrenFirst",
    "PaginatedListing",
    "LimitPolicy",
    "ListingFetcher",
    "ListingPage",
]
