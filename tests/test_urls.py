"""
Tests for URL resolution and avatar handling.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ghtrending.urls import remove_query_param, resolve_url, user_id_from_avatar


# ============================================================================
# resolve_url
# ============================================================================


def test_resolve_relative_path() -> None:
    assert resolve_url("/cloudson") == "https://github.com/cloudson"
    assert resolve_url("/trending/go?since=daily") == "https://github.com/trending/go?since=daily"


def test_resolve_bare_handle() -> None:
    """Contributor handles are used as relative references."""
    assert resolve_url("campoy") == "https://github.com/campoy"


def test_resolve_absolute_url_unchanged() -> None:
    url = "https://avatars.githubusercontent.com/u/94096?v=3&s=96"
    assert resolve_url(url) == url


def test_resolve_against_custom_base() -> None:
    assert resolve_url("/zeit", "https://github.example.com") == "https://github.example.com/zeit"
    assert (
        resolve_url("/zeit", "http://localhost:8080/")
        == "http://localhost:8080/zeit"
    )


def test_resolve_absent_attribute() -> None:
    assert resolve_url(None) is None


def test_resolve_empty_address_gives_base() -> None:
    assert resolve_url("", "https://github.com/") == "https://github.com/"


def test_resolve_unparseable_address() -> None:
    assert resolve_url("https://github.com:port/zeit") is None


@given(handle=st.from_regex(r"[A-Za-z0-9][A-Za-z0-9-]{0,20}", fullmatch=True))
@settings(max_examples=100)
def test_resolve_profile_paths(handle: str) -> None:
    """Profile links always resolve below the configured origin."""
    resolved = resolve_url(f"/{handle}", "https://github.example.com")
    assert resolved == f"https://github.example.com/{handle}"


# ============================================================================
# remove_query_param
# ============================================================================


def test_remove_size_param() -> None:
    avatar = "https://avatars2.githubusercontent.com/u/94096?v=3&s=96"
    assert remove_query_param(avatar, "s") == "https://avatars2.githubusercontent.com/u/94096?v=3"


def test_remove_missing_param_keeps_url() -> None:
    avatar = "https://avatars2.githubusercontent.com/u/94096?v=3"
    assert remove_query_param(avatar, "s") == avatar


def test_remove_param_passes_none_through() -> None:
    assert remove_query_param(None, "s") is None


# ============================================================================
# user_id_from_avatar
# ============================================================================


@pytest.mark.parametrize(
    ("avatar", "expected"),
    [
        ("https://avatars2.githubusercontent.com/u/94096?v=3", 94096),
        ("https://avatars3.githubusercontent.com/u/14985020?v=3&s=96", 14985020),
        ("https://github.example.com/avatars/u/7", 7),
        ("https://github.com/identicons/octocat.png", 0),
        ("https://avatars.githubusercontent.com/u/abc", 0),
        (None, 0),
    ],
)
def test_user_id_from_avatar(avatar: str | None, expected: int) -> None:
    assert user_id_from_avatar(avatar) == expected


@given(user_id=st.integers(min_value=1, max_value=10**10))
@settings(max_examples=100)
def test_user_id_survives_size_removal(user_id: int) -> None:
    """Dropping the size parameter never changes the recovered id."""
    avatar = f"https://avatars.githubusercontent.com/u/{user_id}?v=4&s=40"
    assert user_id_from_avatar(remove_query_param(avatar, "s")) == user_id
