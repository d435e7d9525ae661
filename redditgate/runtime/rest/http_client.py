"""Async HTTP client wrapper with throttling and response hooks."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.exceptions import AuthenticationError, ProviderError, RateLimitError

logger = logging.getLogger(__name__)

# A hook receives the raw response and may return a delay (seconds) to throttle
ResponseHook = Callable[[aiohttp.ClientResponse], float | None | Awaitable[float | None]]

_RETRY_AFTER_FALLBACK = 1.0
_RETRY_AFTER_CAP = 60.0


class HTTPClient:
    """Async HTTP client wrapper.

    Owns one lazily created ``aiohttp.ClientSession``. Maps non-success
    responses onto the ``ProviderError`` hierarchy and retries a 429 once
    after honouring ``Retry-After``.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._response_hooks.append(hook)

    def set_throttle(self, seconds: float) -> None:
        """Hold further requests for ``seconds``; never shortens an existing window."""
        if seconds <= 0:
            return
        until = time.monotonic() + seconds
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request."""
        return await self._request("POST", url, params=params, json=json, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"

        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if json is not None:
            kwargs["json"] = json

        send = self.session.get if method == "GET" else self.session.post
        for attempt in range(2):
            await self._wait_for_throttle()
            try:
                async with send(url, **kwargs) as response:
                    if response.status == 429:
                        retry_after = _parse_retry_after(response.headers)
                        if attempt == 0:
                            logger.warning(
                                "rate_limited",
                                extra={"url": url, "retry_after": retry_after},
                            )
                            self.set_throttle(retry_after)
                            continue
                        raise RateLimitError(
                            f"Rate limit exceeded for {method} {url}",
                            retry_after=int(retry_after),
                        )
                    await self._run_hooks(response)
                    return await self._decode(method, url, response)
            except aiohttp.ClientError as exc:
                raise ProviderError(f"{method} {url} failed: {exc}") from exc
            except asyncio.TimeoutError as exc:
                raise ProviderError(f"{method} {url} timed out") from exc

        raise RateLimitError(f"Rate limit exceeded for {method} {url}")  # pragma: no cover

    async def _decode(self, method: str, url: str, response: aiohttp.ClientResponse) -> Any:
        status = response.status
        if status in (401, 403):
            raise AuthenticationError(
                f"{method} {url} rejected credentials (HTTP {status})", status_code=status
            )
        if status >= 400:
            raise ProviderError(f"{method} {url} returned HTTP {status}", status_code=status)
        try:
            return await response.json(content_type=None)
        except ValueError as exc:
            raise ProviderError(
                f"{method} {url} returned a non-JSON body", status_code=status
            ) from exc

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception:
                logger.exception("response_hook_failed", extra={"hook": repr(hook)})
                continue
            if delay:
                self.set_throttle(float(delay))

    async def _wait_for_throttle(self) -> None:
        # The window stays set while waiting so concurrent requests also hold
        while self._throttle_until is not None:
            remaining = self._throttle_until - time.monotonic()
            if remaining <= 0:
                self._throttle_until = None
                return
            await asyncio.sleep(remaining)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _parse_retry_after(headers: Any) -> float:
    raw = headers.get("Retry-After") if headers else None
    try:
        value = float(raw) if raw is not None else _RETRY_AFTER_FALLBACK
    except (TypeError, ValueError):
        value = _RETRY_AFTER_FALLBACK
    return min(max(value, 0.0), _RETRY_AFTER_CAP)
