"""Public gateway API."""

from .gateway import OutputRecord, RedditGateway, flatten_into

__all__ = ["RedditGateway", "OutputRecord", "flatten_into"]
