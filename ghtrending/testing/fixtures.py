"""
Pytest fixtures for ghtrending testing.

Provides common fixtures for testing applications that use ghtrending.
"""

from typing import Any, Generator

import pytest

from ghtrending.testing.mock import MockTrendingClient
from ghtrending.types.developers import Developer
from ghtrending.types.languages import Language
from ghtrending.types.projects import Project


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockTrendingClient, None, None]:
    """
    Provide a MockTrendingClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.projects.configure_get(response=[my_project])
            result = my_function(mock_client)
            assert mock_client.was_called("projects.get")
        ```
    """
    client = MockTrendingClient()
    yield client
    client.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_developer() -> Developer:
    """Provide a sample Developer object."""
    return create_mock_developer()


@pytest.fixture
def sample_project() -> Project:
    """Provide a sample Project object with one contributor."""
    return create_mock_project()


@pytest.fixture
def sample_language() -> Language:
    """Provide a sample Language object."""
    return create_mock_language()


@pytest.fixture
def mock_client_with_projects(
    mock_client: MockTrendingClient,
    sample_project: Project,
) -> MockTrendingClient:
    """
    Provide a mock client whose projects.get() returns sample_project.

    Example:
        ```python
        def test_digest(mock_client_with_projects):
            projects = mock_client_with_projects.projects.get("daily")
            assert projects[0].name == "campoy/go-tooling-workshop"
        ```
    """
    mock_client.projects.configure_get(response=[sample_project])
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_developer(
    display_name: str = "campoy",
    id: int = 2237452,
    **kwargs: Any,
) -> Developer:
    """
    Create a Developer with customizable fields.

    Args:
        display_name: Account handle
        id: Account id, also used in the avatar URL
        **kwargs: Additional fields to override

    Returns:
        Developer object
    """
    defaults: dict[str, Any] = {
        "full_name": "",
        "url": f"https://github.com/{display_name}",
        "avatar": f"https://avatars.githubusercontent.com/u/{id}?v=4",
    }
    defaults.update(kwargs)
    return Developer(id=id, display_name=display_name, **defaults)


def create_mock_project(
    owner: str = "campoy",
    repository_name: str = "go-tooling-workshop",
    **kwargs: Any,
) -> Project:
    """
    Create a Project with customizable fields.

    Args:
        owner: Repository owner
        repository_name: Repository name
        **kwargs: Additional fields to override

    Returns:
        Project object
    """
    name = f"{owner}/{repository_name}"
    defaults: dict[str, Any] = {
        "description": "A talk and workshop on Go tooling",
        "language": "Go",
        "stars": 105,
        "url": f"https://github.com/{name}",
        "contributor_url": f"https://github.com/{name}/graphs/contributors",
        "contributors": (create_mock_developer(display_name=owner),),
    }
    defaults.update(kwargs)
    return Project(
        name=name,
        owner=owner,
        repository_name=repository_name,
        **defaults,
    )


def create_mock_language(
    name: str = "Go",
    url_name: str = "go",
    **kwargs: Any,
) -> Language:
    """
    Create a Language with customizable fields.

    Args:
        name: Human readable name
        url_name: Filter token
        **kwargs: Additional fields to override

    Returns:
        Language object
    """
    defaults: dict[str, Any] = {
        "url": f"https://github.com/trending/{url_name}?since=daily",
    }
    defaults.update(kwargs)
    return Language(name=name, url_name=url_name, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "mock_client_with_projects",
    "sample_developer",
    "sample_language",
    "sample_project",
    # Helper functions
    "create_mock_developer",
    "create_mock_language",
    "create_mock_project",
]
