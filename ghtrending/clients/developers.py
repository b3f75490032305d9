"""Trending developers resource client."""

from typing import TYPE_CHECKING

from ghtrending.constants import Mode
from ghtrending.document import parse_document
from ghtrending.extractors.developers import extract_developers
from ghtrending.query import build_trending_url
from ghtrending.selectors import DeveloperSelectors
from ghtrending.types.developers import Developer

if TYPE_CHECKING:
    from ghtrending.transport import HTTPTransport


class DevelopersClient:
    """Client for trending developers."""

    def __init__(
        self,
        transport: "HTTPTransport",
        selectors: DeveloperSelectors | None = None,
    ) -> None:
        self.transport = transport
        self.selectors = selectors or DeveloperSelectors()

    def get(self, time: str = "", language: str = "") -> list[Developer]:
        """
        Get trending developers.

        Args:
            time: Time window token, or "" for GitHub's own default
            language: Language.url_name to filter by, or "" for all languages

        Returns:
            Developers in leaderboard order; empty if none are listed

        Raises:
            TrendingError: If the page cannot be fetched
            DocumentParseError: If the page cannot be parsed
        """
        url = build_trending_url(
            Mode.DEVELOPERS, time, language, self.transport.base_url
        )
        document = self.transport.fetch_document(url)
        return extract_developers(document, self.transport.base_url, self.selectors)

    def parse(self, markup: str | bytes) -> list[Developer]:
        """Extract developers from a leaderboard page the caller already holds."""
        return extract_developers(
            parse_document(markup), self.transport.base_url, self.selectors
        )
