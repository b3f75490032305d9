"""Language filter resource client."""

from typing import TYPE_CHECKING

from ghtrending.constants import Mode
from ghtrending.document import parse_document
from ghtrending.extractors.languages import (
    extract_language_catalog,
    extract_trending_languages,
)
from ghtrending.query import build_trending_url
from ghtrending.selectors import LanguageSelectors
from ghtrending.types.languages import Language

if TYPE_CHECKING:
    from ghtrending.transport import HTTPTransport


class LanguagesClient:
    """
    Client for the languages GitHub offers as trending filters.

    Use Language.url_name as the language argument of
    ProjectsClient.get() and DevelopersClient.get().
    """

    def __init__(
        self,
        transport: "HTTPTransport",
        selectors: LanguageSelectors | None = None,
    ) -> None:
        self.transport = transport
        self.selectors = selectors or LanguageSelectors()

    def catalog(self) -> list[Language]:
        """
        Get every language of the filter dropdown, in menu order.

        Raises:
            TrendingError: If the page cannot be fetched
            DocumentParseError: If the page cannot be parsed
        """
        document = self.transport.fetch_document(self._url())
        return extract_language_catalog(
            document, self.transport.base_url, self.selectors
        )

    def trending(self) -> list[Language]:
        """
        Get the short list of currently trending languages, in menu order.

        Raises:
            TrendingError: If the page cannot be fetched
            DocumentParseError: If the page cannot be parsed
        """
        document = self.transport.fetch_document(self._url())
        return extract_trending_languages(
            document, self.transport.base_url, self.selectors
        )

    def parse(self, markup: str | bytes, trending: bool = False) -> list[Language]:
        """Extract one of the language menus from a page the caller already holds."""
        document = parse_document(markup)
        if trending:
            return extract_trending_languages(
                document, self.transport.base_url, self.selectors
            )
        return extract_language_catalog(
            document, self.transport.base_url, self.selectors
        )

    def _url(self) -> str:
        return str(build_trending_url(Mode.LANGUAGES, base_url=self.transport.base_url))
