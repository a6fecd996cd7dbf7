"""
Request Engine

Performs authenticated calls against the Keap REST API with a bounded
per-attempt timeout and a bounded retry budget. Every resource wrapper
goes through RequestEngine.request() for its I/O.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any

import httpx

from .models import (
    API_KEY_HEADER,
    APIError,
    ConfigurationError,
    EngineSettings,
    HTTPStatusFailure,
    InvalidResponseError,
    TransportFailure,
)

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class RequestEngine:
    """
    Owns credentials, base URL, timeout and retry budget.

    Features:
    - One HTTP call per attempt, each under its own timeout window
    - Immediate retries, or exponential backoff when configured
    - All failures normalized into the APIError hierarchy
    """

    def __init__(
        self,
        settings: EngineSettings,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the engine.

        Args:
            settings: Credentials, timeout, retry budget and base URL
            http_client: Optional httpx async client (created if None)
        """
        self.settings = settings

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        # The per-attempt window in _send is the only timer on a client we own
        if http_client is None:
            self.http_client = httpx.AsyncClient(timeout=None)
        else:
            self.http_client = http_client

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def configure_timeout(self, milliseconds: int) -> None:
        """
        Set the per-attempt timeout for all subsequent calls.

        Zero or negative values disable the per-attempt timer. An engine-owned
        client then waits indefinitely; an injected client keeps its own
        httpx timeouts.
        """
        self.settings = self.settings.with_timeout(milliseconds)
        logger.debug(f"Request timeout set to {self.settings.timeout_ms}ms")

    def configure_retries(self, count: int) -> None:
        """Set the number of retries after the first failed attempt."""
        self.settings = self.settings.with_retries(count)
        logger.debug(f"Retry budget set to {self.settings.retries}")

    def with_settings(self, **changes: Any) -> "RequestEngine":
        """
        Create a new engine with changed settings.

        The new engine shares this engine's HTTP client and never closes it.
        """
        return RequestEngine(replace(self.settings, **changes), http_client=self.http_client)

    async def aclose(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    def _build_url(self, path: str) -> str:
        return f"{self.settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _build_headers(self, settings: EngineSettings) -> dict[str, str]:
        return {
            API_KEY_HEADER: settings.api_key,
            "Content-Type": "application/json",
        }

    async def _send(
        self,
        settings: EngineSettings,
        method: str,
        url: str,
        headers: dict[str, str],
        body: Any,
    ) -> httpx.Response:
        call = self.http_client.request(
            method=method,
            url=url,
            headers=headers,
            json=body,
        )
        if settings.timeout_ms and settings.timeout_ms > 0:
            return await asyncio.wait_for(call, timeout=settings.timeout_ms / 1000)
        return await call

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """
        Make an authenticated HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Path relative to the base URL, query string already encoded
            body: JSON payload, ignored for GET

        Returns:
            Parsed JSON body (dict or list), or None for an empty body

        Raises:
            ConfigurationError: If no API key is configured
            TransportFailure: On network errors or timeouts after retries
            HTTPStatusFailure: On non-2xx responses after retries
            InvalidResponseError: If a successful response is not JSON
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        # Snapshot so a concurrent reconfiguration does not affect this call
        settings = self.settings
        if not settings.api_key:
            raise ConfigurationError("API key is not set")

        url = self._build_url(path)
        headers = self._build_headers(settings)
        payload = body if method != "GET" else None

        attempts = settings.retries + 1
        last_error: APIError | None = None

        for attempt in range(1, attempts + 1):
            logger.debug(f"{method} {url} (attempt {attempt}/{attempts})")
            try:
                response = await self._send(settings, method, url, headers, payload)
            except asyncio.TimeoutError as e:
                last_error = TransportFailure(
                    f"Request timed out after {settings.timeout_ms}ms"
                )
                last_error.__cause__ = e
            except httpx.HTTPError as e:
                last_error = TransportFailure(str(e) or e.__class__.__name__)
                last_error.__cause__ = e
            else:
                if 200 <= response.status_code < 300:
                    return self._parse(response, method, path)

                last_error = HTTPStatusFailure(
                    f"HTTP error! status: {response.status_code}",
                    status_code=response.status_code,
                )

            logger.warning(
                f"{method} {path} failed on attempt {attempt}/{attempts}: {last_error}"
            )

            # Wait before retry (exponential backoff)
            if attempt < attempts and settings.backoff_seconds > 0:
                await asyncio.sleep(settings.backoff_seconds * 2 ** (attempt - 1))

        # All retries exhausted
        raise type(last_error)(
            f"Error making {method} request to {path}: {last_error}",
            method=method,
            path=path,
            status_code=last_error.status_code,
            attempts=attempts,
        ) from last_error

    def _parse(self, response: httpx.Response, method: str, path: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Error making {method} request to {path}: response body is not valid JSON"
            ) from e

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body)

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self.request("PATCH", path, body)

    async def delete(self, path: str, body: Any = None) -> Any:
        return await self.request("DELETE", path, body)
