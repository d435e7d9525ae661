"""High-level gateway: process a batch of work items into flat output records.

Architecture:
    RedditGateway is the single entry point a workflow host calls. For each
    work item (in input order) it asks the connector to route and run the
    item, then flattens the shaped result into the output sequence:

    - an array result contributes one record per element, in order
    - any other result contributes exactly one record

Error Policy:
    Processing is all-or-nothing. The first failing item aborts the run;
    the original exception (unchanged in type) is re-raised after the item
    index, resource and operation have been attached to it. Continue-on-error
    belongs to whatever wraps ``process``.

Concurrency:
    Items run one at a time by default. ``max_concurrency > 1`` runs up to
    that many items at once under a semaphore; output order still follows
    input order because results are flattened only after every item is done.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..connectors.reddit import RedditRESTConnector
from ..connectors.reddit.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, MAX_PAGE_SIZE
from ..core.exceptions import GatewayError, ValidationError
from ..core.request import WorkItem
from ..runtime.rest.telemetry import log_item_failed
from ..runtime.rest.transport import RequestTransport
from ..runtime.router import RequestRouter

logger = logging.getLogger(__name__)

OutputRecord = Any


class RedditGateway:
    """Maps work items onto Reddit API calls and flattens their results.

    Example:
        >>> async with RedditGateway(access_token=token) as gateway:
        ...     records = await gateway.process([
        ...         {"resource": "post", "operation": "getAll",
        ...          "subreddit": "python", "content": "new", "limit": 5},
        ...     ])
    """

    def __init__(
        self,
        *,
        access_token: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = MAX_PAGE_SIZE,
        max_concurrency: int = 1,
        transport: RequestTransport | None = None,
        router: RequestRouter | None = None,
        connector: RedditRESTConnector | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            access_token: Pre-acquired OAuth bearer token
            user_agent: User-Agent header sent with every request
            base_url: API host override
            timeout: Total per-request timeout in seconds
            page_size: Per-page ``limit`` for listings
            max_concurrency: Items processed at once (1 = strictly sequential)
            transport: Optional transport replacing the built-in aiohttp one
            router: Optional router (defaults to the Reddit routing table)
            connector: Optional pre-built connector; overrides the options above
        """
        if max_concurrency < 1:
            raise ValidationError("max_concurrency must be >= 1")
        self._max_concurrency = max_concurrency
        self._connector = connector or RedditRESTConnector(
            access_token=access_token,
            user_agent=user_agent,
            base_url=base_url,
            timeout=timeout,
            page_size=page_size,
            transport=transport,
            router=router,
        )
        self._closed = False

    @classmethod
    def from_env(cls, **overrides: Any) -> RedditGateway:
        """Build a gateway from ``REDDIT_*`` environment variables.

        Reads REDDIT_ACCESS_TOKEN, REDDIT_USER_AGENT, REDDIT_BASE_URL and
        REDDIT_TIMEOUT. Keyword arguments take precedence.
        """
        settings: dict[str, Any] = {}
        if token := os.environ.get("REDDIT_ACCESS_TOKEN"):
            settings["access_token"] = token
        if agent := os.environ.get("REDDIT_USER_AGENT"):
            settings["user_agent"] = agent
        if base_url := os.environ.get("REDDIT_BASE_URL"):
            settings["base_url"] = base_url
        if timeout := os.environ.get("REDDIT_TIMEOUT"):
            try:
                settings["timeout"] = float(timeout)
            except ValueError as exc:
                raise ValidationError(f"REDDIT_TIMEOUT must be a number, got {timeout!r}") from exc
        settings.update(overrides)
        return cls(**settings)

    async def process(
        self, items: Iterable[WorkItem | Mapping[str, Any]]
    ) -> list[OutputRecord]:
        """Process work items in order and return the flattened output.

        Args:
            items: WorkItems, or plain mappings whose list position becomes
                the item index

        Returns:
            Output records in item order, arrays expanded element by element

        Raises:
            GatewayError: The first failure, annotated with the failing item's
                index, resource and operation
        """
        work = [self._coerce(index, item) for index, item in enumerate(items)]
        if self._max_concurrency == 1:
            results = [await self._process_item(item) for item in work]
        else:
            semaphore = asyncio.Semaphore(self._max_concurrency)

            async def bounded(item: WorkItem) -> Any:
                async with semaphore:
                    return await self._process_item(item)

            tasks = [asyncio.ensure_future(bounded(item)) for item in work]
            try:
                results = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                raise

        output: list[OutputRecord] = []
        for result in results:
            flatten_into(output, result)
        logger.info("gateway_processed", extra={"items": len(work), "records": len(output)})
        return output

    async def _process_item(self, item: WorkItem) -> Any:
        try:
            return await self._connector.execute(item)
        except GatewayError as exc:
            exc.attach_item_context(
                item_index=item.index, resource=item.resource, operation=item.operation
            )
            log_item_failed(
                item_index=item.index,
                resource=item.resource,
                operation=item.operation,
                error_type=type(exc).__name__,
                error_message=exc.message,
            )
            raise
        except Exception as exc:
            # Foreign errors (e.g. from an injected transport) keep their type
            exc.add_note(
                f"item {item.index} (resource={item.resource!r}, operation={item.operation!r})"
            )
            log_item_failed(
                item_index=item.index,
                resource=item.resource,
                operation=item.operation,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            raise

    def _coerce(self, index: int, item: WorkItem | Mapping[str, Any]) -> WorkItem:
        if isinstance(item, WorkItem):
            return item
        # A resource with a single registered operation may omit it
        default_operation = self._connector.router.default_operation(item.get("resource"))
        try:
            return WorkItem.from_mapping(index, item, default_operation=default_operation)
        except GatewayError as exc:
            raise exc.attach_item_context(
                item_index=index,
                resource=item.get("resource"),
                operation=item.get("operation"),
            )
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid work item: {exc}").attach_item_context(
                item_index=index,
                resource=item.get("resource"),
                operation=item.get("operation"),
            ) from exc

    async def close(self) -> None:
        """Close the underlying connector (and its HTTP session)."""
        if self._closed:
            return
        self._closed = True
        await self._connector.close()

    async def __aenter__(self) -> RedditGateway:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def flatten_into(output: list[OutputRecord], result: Any) -> None:
    """Append one item's shaped result to the output sequence."""
    if isinstance(result, list):
        output.extend(result)
    else:
        output.append(result)
