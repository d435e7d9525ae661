"""Response hooks for Reddit's rate limit headers."""

from __future__ import annotations

import logging
from typing import Any

from redditgate.connectors.reddit.config import (
    RATELIMIT_REMAINING_HEADER,
    RATELIMIT_RESET_HEADER,
)

logger = logging.getLogger(__name__)


def ratelimit_hook(response: Any) -> float | None:
    """Return the seconds until the window resets once the quota is spent.

    Reddit reports the remaining request budget and the seconds left in the
    current window on every OAuth response. The HTTP client turns the
    returned delay into a throttle so the next request waits for the reset
    instead of drawing a 429.
    """
    headers = getattr(response, "headers", None) or {}
    remaining = headers.get(RATELIMIT_REMAINING_HEADER)
    reset = headers.get(RATELIMIT_RESET_HEADER)
    if remaining is None or reset is None:
        return None
    try:
        if float(remaining) >= 1:
            return None
        delay = float(reset)
    except ValueError:
        return None
    logger.info("ratelimit_exhausted", extra={"reset_seconds": delay})
    return delay
