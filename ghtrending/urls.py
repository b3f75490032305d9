"""
URL resolution for links scraped from the trending pages.

Relative hrefs are joined onto a configurable base origin so that the
same code works against github.com and GitHub Enterprise installations.
"""

import re

import httpx

from ghtrending.constants import DEFAULT_BASE_URL

_USER_ID_PATTERN = re.compile(r"u/([0-9]+)")


def resolve_url(
    address: str | None, base_url: str = DEFAULT_BASE_URL
) -> str | None:
    """
    Resolve a possibly relative address against the base origin.

    Args:
        address: Attribute value, or None when the attribute was absent
        base_url: Origin that relative addresses are resolved against

    Returns:
        Absolute URL string, or None when the attribute was absent or the
        value cannot be parsed as a URL reference
    """
    if address is None:
        return None

    try:
        return str(httpx.URL(base_url).join(address))
    except (httpx.InvalidURL, ValueError, TypeError):
        return None


def remove_query_param(url: str | None, name: str) -> str | None:
    """Return url without the query parameter name; None passes through."""
    if url is None:
        return None

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, ValueError, TypeError):
        return url

    if name not in parsed.params:
        return url
    return str(parsed.copy_remove_param(name))


def user_id_from_avatar(avatar_url: str | None) -> int:
    """
    Recover the numeric account id from an avatar URL.

    Avatar images are served from paths like "/u/94096", the digits being
    the account id.

    Args:
        avatar_url: Absolute avatar URL, or None

    Returns:
        The account id, or 0 if there is no avatar or no "u/<digits>" segment
    """
    if avatar_url is None:
        return 0

    try:
        path = httpx.URL(avatar_url).path
    except (httpx.InvalidURL, ValueError, TypeError):
        return 0

    match = _USER_ID_PATTERN.search(path)
    if match is None:
        return 0
    return int(match.group(1))
