"""Core enumerations for resources, operations and HTTP methods.

String enums let work items carry plain strings while the routing table
stays typed. Values are the exact strings accepted on the wire and in
work item parameters.
"""

from enum import Enum
from typing import Optional


class Resource(str, Enum):
    """Top-level Reddit resource a work item acts on."""

    COMMENT = "comment"
    PROFILE = "profile"
    SUBREDDIT = "subreddit"
    POST = "post"
    USER = "user"

    @classmethod
    def from_str(cls, value: str) -> Optional["Resource"]:
        """Get resource from string value. Returns None if no match."""
        try:
            return cls(value)
        except ValueError:
            return None


class Operation(str, Enum):
    """Operation applied to a resource."""

    CREATE = "create"
    GET = "get"
    GET_ALL = "getAll"

    @classmethod
    def from_str(cls, value: str) -> Optional["Operation"]:
        """Get operation from string value. Returns None if no match."""
        try:
            return cls(value)
        except ValueError:
            return None


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
