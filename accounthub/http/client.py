"""
Shared outbound HTTP client.

Every call made through an ApiClient passes through two interceptors:
successful responses are unwrapped to their body, failures are logged once
and re-raised as the original httpx exception.
"""

import logging
from functools import lru_cache
from typing import Any, NoReturn

import httpx

from accounthub.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


# --- INTERCEPTORS ---


def unwrap_response(response: httpx.Response) -> Any:
    """
    Reduces a successful response to its payload: decoded JSON for JSON
    content types, None for an empty body, text otherwise. A JSON content type
    with an unparseable body falls back to the raw text.
    """
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


def log_api_error(error: httpx.HTTPError) -> NoReturn:
    """Logs a failed call and re-raises the same exception object."""
    logger.error("API error: %s", error)
    raise error


# --- CLIENT ---


class ApiClient:
    """
    Thin wrapper over one httpx.AsyncClient. Holds no per-request state, so a
    single instance can serve any number of concurrent requests.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def request(self, method: str, url: str, **kwargs: Any) -> Any:
        """
        Issues a request and returns the response body.

        Raises:
            httpx.HTTPError: Transport failures, timeouts and non-2xx statuses,
                unchanged, after one ERROR log record.
        """
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as error:
            log_api_error(error)
        return unwrap_response(response)

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_api_client(
    settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None
) -> ApiClient:
    """
    Builds a new ApiClient from settings. Tests pass an httpx.MockTransport.
    """
    settings = settings or get_settings()
    http = httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        follow_redirects=True,
        headers={"Accept": "application/json"},
        transport=transport,
    )
    return ApiClient(http)


@lru_cache
def get_api_client() -> ApiClient:
    """Process-wide shared instance, built on first use."""
    return create_api_client()
