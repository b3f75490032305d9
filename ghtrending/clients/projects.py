"""Trending repositories resource client."""

from typing import TYPE_CHECKING

from ghtrending.constants import Mode
from ghtrending.document import parse_document
from ghtrending.extractors.projects import extract_projects
from ghtrending.query import build_trending_url
from ghtrending.selectors import ProjectSelectors
from ghtrending.types.projects import Project

if TYPE_CHECKING:
    from ghtrending.transport import HTTPTransport


class ProjectsClient:
    """Client for trending repositories."""

    def __init__(
        self,
        transport: "HTTPTransport",
        selectors: ProjectSelectors | None = None,
    ) -> None:
        """
        Initialize the projects client.

        Args:
            transport: HTTP transport for fetching pages
            selectors: Selector table for the repository list
        """
        self.transport = transport
        self.selectors = selectors or ProjectSelectors()

    def get(self, time: str = "", language: str = "") -> list[Project]:
        """
        Get trending repositories.

        Args:
            time: Time window, one of TIME_TODAY / TIME_WEEK / TIME_MONTH.
                  An empty string sends no window at all and GitHub applies
                  its own default.
            language: Language.url_name to filter by (e.g. "go"), or "" for
                      all languages

        Returns:
            Projects in page order; empty if the page lists none

        Raises:
            TrendingError: If the page cannot be fetched
            DocumentParseError: If the page cannot be parsed
        """
        url = build_trending_url(
            Mode.REPOSITORIES, time, language, self.transport.base_url
        )
        document = self.transport.fetch_document(url)
        return extract_projects(document, self.transport.base_url, self.selectors)

    def parse(self, markup: str | bytes) -> list[Project]:
        """Extract projects from a trending page the caller already holds."""
        return extract_projects(
            parse_document(markup), self.transport.base_url, self.selectors
        )
