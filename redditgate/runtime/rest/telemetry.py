"""Structured logging for routing and listing operations.

Events are emitted under stable names with their context in ``extra`` so a
JSON log formatter can index them. Nothing here configures handlers.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_routed(
    *,
    item_index: int,
    resource: str,
    operation: str,
    method: str,
    endpoint: str,
    shape: str,
) -> None:
    """Log the request a work item resolved to."""
    logger.debug(
        "request_routed",
        extra={
            "item_index": item_index,
            "resource": resource,
            "operation": operation,
            "method": method,
            "endpoint": endpoint,
            "shape": shape,
        },
    )


def log_page_fetched(
    *,
    endpoint: str,
    page_index: int,
    records: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log one listing page.

    Args:
        endpoint: Listing path
        page_index: Zero-based page number within this listing
        records: Children on the page
        has_more: Whether the page carried an ``after`` cursor
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.debug(
        "listing_page_fetched",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "records": records,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_listing_complete(
    *,
    endpoint: str,
    pages: int,
    records: int,
    latency_ms: float | None = None,
) -> None:
    logger.info(
        "listing_complete",
        extra={
            "endpoint": endpoint,
            "pages": pages,
            "records": records,
            "latency_ms": latency_ms,
        },
    )


def log_item_failed(
    *,
    item_index: int,
    resource: str,
    operation: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a work item failure before it aborts the run."""
    logger.error(
        "item_failed",
        extra={
            "item_index": item_index,
            "resource": resource,
            "operation": operation,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
