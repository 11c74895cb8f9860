"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and logging for every SWAPI request.
- Maps httpx failures onto the Core error taxonomy (`core.errors`).
- Eases testing: an `httpx.AsyncClient` with a `MockTransport` can be injected.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from core.config import AppSettings
from core.errors import DecodeError, HttpStatusError, NetworkError
from core.interfaces.fetcher import JsonFetcher, ModelT
from core.observability import get_logger

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with sane defaults.

    Why a builder:
    - Centralizes timeouts/headers so every fetch behaves the same.
    - `transport` lets tests swap the network for an `httpx.MockTransport`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpJsonFetcher(JsonFetcher):
    """GET + JSON decode + validation into a pydantic model.

    Without an injected `client`, each fetch opens and closes its own
    short-lived client, so concurrent fetches share nothing.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch(self, url: str, model: type[ModelT]) -> ModelT:
        logger.debug("fetch_start", url=url, model=model.__name__)
        if self._client is not None:
            response = await self._get(self._client, url)
        else:
            async with build_async_client(self._settings) as client:
                response = await self._get(client, url)

        if response.is_error:
            logger.warning("fetch_http_error", url=url, status_code=response.status_code)
            raise HttpStatusError(url, response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("fetch_invalid_json", url=url)
            raise DecodeError(url, f"invalid JSON body: {exc}") from exc

        try:
            document = model.model_validate(data)
        except ValidationError as exc:
            logger.warning("fetch_unexpected_shape", url=url, model=model.__name__)
            raise DecodeError(url, f"unexpected {model.__name__} document: {exc}") from exc

        logger.debug("fetch_done", url=url, status_code=response.status_code)
        return document

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            return await client.get(url)
        except httpx.DecodingError as exc:
            logger.warning("fetch_bad_content_encoding", url=url, error=str(exc))
            raise DecodeError(url, f"undecodable body: {exc}") from exc
        except httpx.RequestError as exc:
            logger.warning("fetch_network_error", url=url, error=str(exc))
            raise NetworkError(url, str(exc) or exc.__class__.__name__) from exc
