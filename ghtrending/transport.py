"""
HTTP Transport for ghtrending.

Fetches trending pages with automatic retry logic and error handling,
and hands the HTML to the document parser.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.document import Node, parse_document
from ghtrending.exceptions import (
    NotFoundError,
    RateLimitedError,
    RequestError,
    ServerError,
    TrendingError,
)
from ghtrending.logging import log_http_request, log_http_response
from ghtrending.query import parse_base_url

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml",
    "User-Agent": "ghtrending (+https://github.com/trending)",
}


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class RetryPolicy:
    """Retry decisions shared by the sync and async transports."""

    def __init__(self, retry_config: RetryConfig | None = None) -> None:
        self.retry_config = retry_config or RetryConfig()

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> TrendingError:
        """
        Map an error response onto a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate TrendingError subclass
        """
        status_code = response.status_code
        try:
            url: str | None = str(response.request.url)
        except RuntimeError:
            url = None
        message = f"HTTP {status_code} {response.reason_phrase}".rstrip()

        if status_code == 404:
            return NotFoundError("NOT_FOUND", message, url)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError("RATE_LIMITED", message, retry_after, url)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, url)
        else:
            return RequestError("REQUEST_ERROR", message, url)


class HTTPTransport(RetryPolicy):
    """
    HTTP transport layer for fetching trending pages.

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
        Initialize HTTP transport.

        Args:
            base_url: Origin of the trending pages (e.g., "https://github.com")
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            headers: Extra request headers (e.g., a GitHub Enterprise cookie)

        Raises:
            ConfigurationError: If base_url is not an absolute http(s) URL
        """
        super().__init__(retry_config)
        parse_base_url(base_url)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

        self._client = httpx.Client(
            timeout=timeout,
            headers=self.headers,
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch(self, url: httpx.URL | str) -> bytes:
        """
        Fetch a page with automatic retry.

        Args:
            url: Absolute page URL

        Returns:
            Raw response body

        Raises:
            TrendingError: On HTTP errors or connection failures
        """
        def make_request(attempt: int) -> httpx.Response:
            log_http_request("GET", str(url), self.headers, attempt)
            return self._client.request("GET", url)

        return self._execute_with_retry(make_request)

    def fetch_document(self, url: httpx.URL | str) -> Node:
        """
        Fetch a page and parse it into a queryable document.

        Raises:
            TrendingError: On HTTP errors or connection failures
            DocumentParseError: If the page cannot be parsed
        """
        return parse_document(self.fetch(url), url=str(url))

    def _execute_with_retry(
        self, request_fn: Callable[[int], httpx.Response]
    ) -> bytes:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request for an attempt

        Returns:
            Response body

        Raises:
            TrendingError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = request_fn(attempt)
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
                time.sleep(self._get_backoff_time(attempt, retry_after))

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                time.sleep(self._get_backoff_time(attempt, None))

        if last_error:
            if isinstance(last_error, TrendingError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
