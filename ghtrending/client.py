"""
ghtrending main client.

Provides the primary interface for reading GitHub's trending pages.
"""

import os
from typing import Any

from ghtrending.clients import DevelopersClient, LanguagesClient, ProjectsClient
from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.exceptions import ConfigurationError
from ghtrending.selectors import DEFAULT_SELECTORS, Selectors
from ghtrending.transport import HTTPTransport, RetryConfig


class TrendingClient:
    """
    Main client for GitHub's trending repositories, developers and languages.

    Aggregates all resource clients over one HTTP transport.

    Example:
        ```python
        from ghtrending import TIME_TODAY, TrendingClient

        with TrendingClient() as client:
            projects = client.projects.get(TIME_TODAY, "go")
            developers = client.developers.get(TIME_TODAY)
            languages = client.languages.catalog()

        # GitHub Enterprise
        client = TrendingClient(base_url="https://github.example.com")
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
        Initialize the trending client.

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

        self._transport = HTTPTransport(
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            headers=headers,
        )

        self.projects = ProjectsClient(self._transport, selectors.projects)
        self.developers = DevelopersClient(self._transport, selectors.developers)
        self.languages = LanguagesClient(self._transport, selectors.languages)

    @classmethod
    def from_env(
        cls,
        retry_config: RetryConfig | None = None,
        selectors: Selectors = DEFAULT_SELECTORS,
    ) -> "TrendingClient":
        """
        Create a client from environment variables.

        Environment variables:
            GHTRENDING_BASE_URL: Origin of the trending pages (optional, default: https://github.com)
            GHTRENDING_TIMEOUT: Request timeout in seconds (optional, default: 30.0)

        Returns:
            Configured TrendingClient instance

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
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "TrendingClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()


def read_env_config(default_base_url: str, default_timeout: float) -> tuple[str, float]:
    """
    Read base URL and timeout from the environment.

    Raises:
        ConfigurationError: If GHTRENDING_TIMEOUT is not a positive number
    """
    base_url = os.environ.get("GHTRENDING_BASE_URL") or default_base_url
    timeout_str = os.environ.get("GHTRENDING_TIMEOUT")

    if not timeout_str:
        return base_url, default_timeout

    try:
        timeout = float(timeout_str)
    except ValueError:
        raise ConfigurationError(
            f"Invalid GHTRENDING_TIMEOUT: {timeout_str}. Must be a number of seconds"
        ) from None

    if timeout <= 0:
        raise ConfigurationError(
            f"Invalid GHTRENDING_TIMEOUT: {timeout_str}. Must be greater than 0"
        )

    return base_url, timeout
