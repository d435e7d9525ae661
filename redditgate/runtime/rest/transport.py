"""REST transport: authenticated Reddit requests on top of HTTPClient."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ...core.enums import HttpMethod
from .http_client import HTTPClient, ResponseHook


@runtime_checkable
class RequestTransport(Protocol):
    """The one operation the gateway core needs from a transport."""

    async def request(
        self, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> Any: ...


class RESTTransport:
    """Adds auth, user agent and ``api_type=json`` to every request.

    Reddit expects write operations (``api/comment``, ``api/submit``) to carry
    their arguments in the query string as well, so both verbs send params
    there. Token acquisition is not handled here; pass an already valid
    bearer token.
    """

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        user_agent: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._headers: dict[str, str] = {}
        if user_agent:
            self._headers["User-Agent"] = user_agent
        if access_token:
            self._headers["Authorization"] = f"bearer {access_token}"

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(
            path, params=self._query(params), headers=self._merge_headers(headers)
        )

    async def post(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(
            path,
            params=self._query(params),
            json=json_body,
            headers=self._merge_headers(headers),
        )

    async def request(
        self, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> Any:
        if HttpMethod(method) == HttpMethod.GET:
            return await self.get(path, params=params)
        return await self.post(path, params=params)

    async def close(self) -> None:
        await self._http.close()

    def _merge_headers(self, headers: dict[str, str] | None) -> dict[str, str] | None:
        if not self._headers and not headers:
            return None
        return {**self._headers, **(headers or {})}

    @staticmethod
    def _query(params: Mapping[str, Any] | None) -> dict[str, str]:
        query: dict[str, str] = {"api_type": "json"}
        for key, value in (params or {}).items():
            if value is None:
                continue
            # aiohttp rejects bool query values
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = str(value)
        return query
