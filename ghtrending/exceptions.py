"""ghtrending exception classes."""


class TrendingError(Exception):
    """Base exception for all ghtrending errors."""

    def __init__(
        self, code: str, message: str, url: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.url = url
        super().__init__(f"[{code}] {message}")


class ConfigurationError(TrendingError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class DocumentParseError(TrendingError):
    """Raised when a fetched page cannot be turned into a document tree."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__("PARSE_ERROR", message, url)


class ItemExtractionError(TrendingError):
    """
    Raised for a single structurally broken list item.

    Extractors catch this themselves and skip the item, so it never
    reaches callers of the public API.
    """

    def __init__(self, message: str) -> None:
        super().__init__("MALFORMED_ITEM", message)


class NotFoundError(TrendingError):
    """Raised when the trending page is not found (404)."""

    pass


class RateLimitedError(TrendingError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        url: str | None = None,
    ) -> None:
        super().__init__(code, message, url)
        self.retry_after = retry_after


class RequestError(TrendingError):
    """Raised on other client errors (4xx)."""

    pass


class ServerError(TrendingError):
    """Raised on server errors (5xx) and connection failures."""

    pass
