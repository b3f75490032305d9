"""
Async HTTP Transport for ghtrending.

Fetches trending pages with automatic retry logic and error handling
using the httpx async client. Parsing stays synchronous.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.document import Node, parse_document
from ghtrending.exceptions import ServerError, TrendingError
from ghtrending.logging import log_http_request, log_http_response
from ghtrending.query import parse_base_url
from ghtrending.transport import DEFAULT_HEADERS, RetryConfig, RetryPolicy


class AsyncHTTPTransport(RetryPolicy):
    """
    Async HTTP transport layer for fetching trending pages.

    Handles:
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response mapping into typed exceptions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Origin of the trending pages (e.g., "https://github.com")
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            headers: Extra request headers

        Raises:
            ConfigurationError: If base_url is not an absolute http(s) URL
        """
        super().__init__(retry_config)
        parse_base_url(base_url)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=self.headers,
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def fetch(self, url: httpx.URL | str) -> bytes:
        """
        Fetch a page with automatic retry.

        Raises:
            TrendingError: On HTTP errors or connection failures
        """
        async def make_request(attempt: int) -> httpx.Response:
            log_http_request("GET", str(url), self.headers, attempt)
            return await self._client.request("GET", url)

        return await self._execute_with_retry(make_request)

    async def fetch_document(self, url: httpx.URL | str) -> Node:
        """
        Fetch a page and parse it into a queryable document.

        Raises:
            TrendingError: On HTTP errors or connection failures
            DocumentParseError: If the page cannot be parsed
        """
        return parse_document(await self.fetch(url), url=str(url))

    async def _execute_with_retry(
        self, request_fn: Callable[[int], Coroutine[Any, Any, httpx.Response]]
    ) -> bytes:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Async function that makes the HTTP request for an attempt

        Returns:
            Response body

        Raises:
            TrendingError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = await request_fn(attempt)
                log_http_response(
                    response.status_code,
                    str(response.url),
                    len(response.content),
                    (time.monotonic() - started) * 1000,
                )

                if response.status_code < 400:
                    return response.content

                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                await asyncio.sleep(self._get_backoff_time(attempt, retry_after))

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                await asyncio.sleep(self._get_backoff_time(attempt, None))

        if last_error:
            if isinstance(last_error, TrendingError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
