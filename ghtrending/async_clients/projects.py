"""Async trending repositories resource client."""

from typing import TYPE_CHECKING

from ghtrending.constants import Mode
from ghtrending.extractors.projects import extract_projects
from ghtrending.query import build_trending_url
from ghtrending.selectors import ProjectSelectors
from ghtrending.types.projects import Project

if TYPE_CHECKING:
    from ghtrending.async_transport import AsyncHTTPTransport


class AsyncProjectsClient:
    """Async client for trending repositories."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        selectors: ProjectSelectors | None = None,
    ) -> None:
        """
        Initialize the async projects client.

        Args:
            transport: Async HTTP transport for fetching pages
            selectors: Selector table for the repository list
        """
        self.transport = transport
        self.selectors = selectors or ProjectSelectors()

    async def get(self, time: str = "", language: str = "") -> list[Project]:
        """
        Get trending repositories.

        Args:
            time: Time window token, or "" for GitHub's own default
            language: Language.url_name to filter by, or "" for all languages

        Returns:
            Projects in page order; empty if the page lists none
        """
        url = build_trending_url(
            Mode.REPOSITORIES, time, language, self.transport.base_url
        )
        document = await self.transport.fetch_document(url)
        return extract_projects(document, self.transport.base_url, self.selectors)
