"""Reddit REST endpoints, listing schemas and response hooks."""

from .endpoints import get_endpoint_registry, get_endpoint_spec, list_endpoints
from .hooks import ratelimit_hook
from .schemas import parse_listing_page

__all__ = [
    "get_endpoint_registry",
    "get_endpoint_spec",
    "list_endpoints",
    "parse_listing_page",
    "ratelimit_hook",
]
