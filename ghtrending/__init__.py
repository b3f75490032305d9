"""ghtrending - GitHub trending repositories, developers and languages."""

from ghtrending.async_client import AsyncTrendingClient
from ghtrending.client import TrendingClient
from ghtrending.constants import (
    DEFAULT_BASE_URL,
    TIME_MONTH,
    TIME_TODAY,
    TIME_WEEK,
    Mode,
)
from ghtrending.document import Node, SoupNode, parse_document
from ghtrending.exceptions import (
    ConfigurationError,
    DocumentParseError,
    ItemExtractionError,
    NotFoundError,
    RateLimitedError,
    RequestError,
    ServerError,
    TrendingError,
)
from ghtrending.extractors import (
    extract_developers,
    extract_language_catalog,
    extract_projects,
    extract_trending_languages,
)
from ghtrending.logging import configure_logging, get_logger
from ghtrending.query import build_trending_url
from ghtrending.selectors import (
    DEFAULT_SELECTORS,
    LEGACY_PROJECT_SELECTORS,
    DeveloperSelectors,
    LanguageSelectors,
    ProjectSelectors,
    Selectors,
)
from ghtrending.transport import HTTPTransport, RetryConfig
from ghtrending.types import Developer, Language, Project

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "TrendingClient",
    "AsyncTrendingClient",
    # Constants
    "DEFAULT_BASE_URL",
    "TIME_TODAY",
    "TIME_WEEK",
    "TIME_MONTH",
    "Mode",
    # Types
    "Project",
    "Developer",
    "Language",
    # Documents and extraction
    "Node",
    "SoupNode",
    "parse_document",
    "extract_projects",
    "extract_developers",
    "extract_language_catalog",
    "extract_trending_languages",
    "build_trending_url",
    # Selectors
    "Selectors",
    "ProjectSelectors",
    "DeveloperSelectors",
    "LanguageSelectors",
    "DEFAULT_SELECTORS",
    "LEGACY_PROJECT_SELECTORS",
    # Exceptions
    "TrendingError",
    "ConfigurationError",
    "DocumentParseError",
    "ItemExtractionError",
    "NotFoundError",
    "RateLimitedError",
    "RequestError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
