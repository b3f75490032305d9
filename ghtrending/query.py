"""Builds the address of the trending page to fetch."""

import httpx

from ghtrending.constants import BASE_PATH, DEFAULT_BASE_URL, DEVELOPERS_PATH, Mode
from ghtrending.exceptions import ConfigurationError


def build_trending_url(
    mode: Mode | str,
    time: str = "",
    language: str = "",
    base_url: str = DEFAULT_BASE_URL,
) -> httpx.URL:
    """
    Compose the trending page URL for a resource, time window and language.

    An empty time sends no "since" parameter at all, leaving the choice of
    window to the site. It is not replaced by TIME_TODAY.

    Args:
        mode: Requested resource (repositories, developers or languages)
        time: Time window token such as "daily", or "" for the site default
        language: Language url_name such as "go", or "" for all languages
        base_url: Origin of the trending pages

    Returns:
        The page URL with only the non-empty filters attached

    Raises:
        ConfigurationError: If mode is unknown or base_url is not a valid URL
    """
    try:
        mode = Mode(mode)
    except ValueError:
        raise ConfigurationError(f"Unknown trending mode: {mode!r}") from None

    path = BASE_PATH
    if mode is Mode.DEVELOPERS:
        path += DEVELOPERS_PATH

    params: dict[str, str] = {}
    if time:
        params["since"] = time
    if language:
        params["l"] = language

    # Appended, not joined, so a path root such as "/github" is kept
    url = parse_base_url(base_url)
    return url.copy_with(path=url.path.rstrip("/") + path, params=params)


def parse_base_url(base_url: str) -> httpx.URL:
    """
    Validate a configured base origin.

    Raises:
        ConfigurationError: If base_url is not an absolute http(s) URL
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise ConfigurationError(f"Invalid base URL: {base_url!r}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Base URL must be an absolute http(s) URL, got {base_url!r}"
        )
    return url
