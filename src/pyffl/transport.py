"""HTTP transport that fetches provider JSON with httpx."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol

import httpx

from pyffl.exceptions import TransportError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestConfig:
    """Per-request overrides: extra headers and an alternate base URL."""

    headers: Mapping[str, str] = field(default_factory=dict)
    base_url: Optional[str] = None


class Transport(Protocol):
    async def fetch_json(
        self,
        route: str,
        params: Optional[Mapping[str, Any]] = None,
        config: Optional[RequestConfig] = None,
    ) -> Any:
        ...


def _clean_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    return {key: value for key, value in (params or {}).items() if value is not None}


class HttpTransport:
    """``Transport`` backed by a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    def build_url(self, route: str, base_url: Optional[str] = None) -> str:
        if route.startswith(("http://", "https://")):
            return route
        return str(httpx.URL(base_url or self.base_url).join(route))

    async def fetch_json(
        self,
        route: str,
        params: Optional[Mapping[str, Any]] = None,
        config: Optional[RequestConfig] = None,
    ) -> Any:
        config = config or RequestConfig()
        url = self.build_url(route, config.base_url)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._client.get(url, params=_clean_params(params), headers=dict(config.headers))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(f"GET {url} failed with status {status}", status_code=status, url=url) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc}", url=url) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"GET {url} returned a body that is not JSON",
                status_code=response.status_code,
                url=url,
            ) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
