"""Shared fixtures for the ghtrending test suite."""

from pathlib import Path

import pytest

from ghtrending.document import SoupNode, parse_document

pytest_plugins = ["ghtrending.testing.conftest"]

TESTDATA = Path(__file__).parent / "testdata"


def load_testdata(name: str) -> bytes:
    """Read a captured page from tests/testdata."""
    return (TESTDATA / name).read_bytes()


@pytest.fixture
def trending_html() -> bytes:
    """Captured /trending page with repositories and both language menus."""
    return load_testdata("github.com_trending.html")


@pytest.fixture
def developers_html() -> bytes:
    """Captured /trending/developers leaderboard."""
    return load_testdata("github.com_trending_developers.html")


@pytest.fixture
def legacy_html() -> bytes:
    """Older /trending layout with a single bullet-separated meta line."""
    return load_testdata("github.com_trending_legacy.html")


@pytest.fixture
def trending_document(trending_html: bytes) -> SoupNode:
    return parse_document(trending_html)


@pytest.fixture
def developers_document(developers_html: bytes) -> SoupNode:
    return parse_document(developers_html)


@pytest.fixture
def legacy_document(legacy_html: bytes) -> SoupNode:
    return parse_document(legacy_html)
