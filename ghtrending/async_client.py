"""
ghtrending async client.

Provides the async interface for reading GitHub's trending pages.
"""

from typing import Any

from ghtrending.async_clients import (
    AsyncDevelopersClient,
    AsyncLanguagesClient,
    AsyncProjectsClient,
)
from ghtrending.async_transport import AsyncHTTPTransport
from ghtrending.client import read_env_config
from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.selectors import DEFAULT_SELECTORS, Selectors
from ghtrending.transport import RetryConfig


class AsyncTrendingClient:
    """
    Async client for GitHub's trending repositories, developers and languages.

    Aggregates all async resource clients over one httpx async transport.

    Example:
        ```python
        import asyncio
        from ghtrending import TIME_WEEK, AsyncTrendingClient

        async def main():
            async with AsyncTrendingClient() as client:
                projects, developers = await asyncio.gather(
                    client.projects.get(TIME_WEEK),
                    client.developers.get(TIME_WEEK),
                )

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        selectors: Selectors = DEFAULT_SELECTORS,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the async trending client.

        Args:
            base_url: Origin of the trending pages (default: https://github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            selectors: Selector tables matching the page markup
            headers: Extra request headers (optional)

        Raises:
            ConfigurationError: If base_url is not an absolute http(s) URL
        """
        self.base_url = base_url
        self.timeout = timeout
        self.selectors = selectors

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            headers=headers,
        )

        self.projects = AsyncProjectsClient(self._transport, selectors.projects)
        self.developers = AsyncDevelopersClient(self._transport, selectors.developers)
        self.languages = AsyncLanguagesClient(self._transport, selectors.languages)

    @classmethod
    def from_env(
        cls,
        retry_config: RetryConfig | None = None,
        selectors: Selectors = DEFAULT_SELECTORS,
    ) -> "AsyncTrendingClient":
        """
        Create an async client from GHTRENDING_BASE_URL / GHTRENDING_TIMEOUT.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        base_url, timeout = read_env_config(cls.DEFAULT_BASE_URL, cls.DEFAULT_TIMEOUT)
        return cls(
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            selectors=selectors,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncTrendingClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
