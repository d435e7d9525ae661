"""Runtime orchestration components."""

from .router import EndpointRegistry, RequestRouter

__all__ = [
    "RequestRouter",
    "EndpointRegistry",
]
