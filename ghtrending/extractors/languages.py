"""Extraction of the language filter menus."""

import re
from urllib.parse import unquote

from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.document import Node
from ghtrending.selectors import LanguageSelectors
from ghtrending.types.languages import Language
from ghtrending.urls import resolve_url

_URL_NAME_PATTERN = re.compile(r"trending/([^/?]+)")


def language_url_name(href: str) -> str:
    """
    Return the filter token of a language menu link.

    "/trending/go?since=daily" gives "go"; links without a token, like the
    "All languages" entry, give "".
    """
    match = _URL_NAME_PATTERN.search(href)
    if match is None:
        return ""
    return unquote(match.group(1))


def extract_languages(
    document: Node,
    selector: str,
    base_url: str = DEFAULT_BASE_URL,
) -> list[Language]:
    """
    Extract the language entries of one filter menu.

    Menu order is kept. Language.url is always resolved to an absolute URL.

    Args:
        document: Parsed /trending page
        selector: Selector matching the menu's anchors
        base_url: Origin used to resolve relative links

    Returns:
        Languages in menu order; empty if the menu is missing
    """
    languages = []
    for anchor in document.select(selector):
        href = anchor.get("href")
        languages.append(
            Language(
                name=anchor.text().strip(),
                url_name=language_url_name(href or ""),
                url=resolve_url(href, base_url),
            )
        )
    return languages


def extract_language_catalog(
    document: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: LanguageSelectors = LanguageSelectors(),
) -> list[Language]:
    """Extract every language of the full filter dropdown."""
    return extract_languages(document, selectors.catalog, base_url)


def extract_trending_languages(
    document: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: LanguageSelectors = LanguageSelectors(),
) -> list[Language]:
    """Extract the short list of currently trending languages."""
    return extract_languages(document, selectors.trending, base_url)
