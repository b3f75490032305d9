"""Extraction of trending developers from the leaderboard page."""

from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.document import Node, attr_of, text_of
from ghtrending.selectors import DeveloperSelectors
from ghtrending.text import first_token, trim_enclosing_parens
from ghtrending.types.developers import Developer
from ghtrending.urls import remove_query_param, resolve_url, user_id_from_avatar


def new_developer(
    display_name: str,
    full_name: str,
    url: str | None,
    avatar: str | None,
) -> Developer:
    """Build a Developer, deriving its id from the avatar URL."""
    return Developer(
        id=user_id_from_avatar(avatar),
        display_name=display_name,
        full_name=full_name,
        url=url,
        avatar=avatar,
    )


def extract_developer(
    item: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: DeveloperSelectors = DeveloperSelectors(),
) -> Developer:
    """
    Extract a single leaderboard entry.

    The name anchor reads like "torvalds (Linus Torvalds)"; its first
    token is the handle and the nested full-name element holds the rest.
    """
    display_name = first_token(text_of(item, selectors.name).strip())
    full_name = trim_enclosing_parens(text_of(item, selectors.full_name))

    url = resolve_url(attr_of(item, selectors.name, "href"), base_url)

    avatar = resolve_url(attr_of(item, selectors.avatar, "src"), base_url)
    avatar = remove_query_param(avatar, selectors.avatar_size_param)

    return new_developer(display_name, full_name, url, avatar)


def extract_developers(
    document: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: DeveloperSelectors = DeveloperSelectors(),
) -> list[Developer]:
    """
    Extract every developer listed on a /trending/developers page.

    Args:
        document: Parsed page
        base_url: Origin used to resolve relative links
        selectors: Selector table for the leaderboard markup

    Returns:
        Developers in page order; empty if the page lists none
    """
    return [
        extract_developer(item, base_url, selectors)
        for item in document.select(selectors.item)
    ]
