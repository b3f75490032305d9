"""Async language filter resource client."""

from typing import TYPE_CHECKING

from ghtrending.constants import Mode
from ghtrending.extractors.languages import (
    extract_language_catalog,
    extract_trending_languages,
)
from ghtrending.query import build_trending_url
from ghtrending.selectors import LanguageSelectors
from ghtrending.types.languages import Language

if TYPE_CHECKING:
    from ghtrending.async_transport import AsyncHTTPTransport


class AsyncLanguagesClient:
    """Async client for the languages GitHub offers as trending filters."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        selectors: LanguageSelectors | None = None,
    ) -> None:
        self.transport = transport
        self.selectors = selectors or LanguageSelectors()

    async def catalog(self) -> list[Language]:
        """Get every language of the filter dropdown, in menu order."""
        document = await self.transport.fetch_document(self._url())
        return extract_language_catalog(
            document, self.transport.base_url, self.selectors
        )

    async def trending(self) -> list[Language]:
        """Get the short list of currently trending languages, in menu order."""
        document = await self.transport.fetch_document(self._url())
        return extract_trending_languages(
            document, self.transport.base_url, self.selectors
        )

    def _url(self) -> str:
        return str(build_trending_url(Mode.LANGUAGES, base_url=self.transport.base_url))
