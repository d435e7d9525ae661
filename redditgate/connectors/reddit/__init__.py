"""Reddit connector."""

from .connector import RedditRESTConnector

__all__ = ["RedditRESTConnector"]
