"""
Pytest plugin for ghtrending testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghtrending.testing.conftest"]

Or import the fixtures directly:

    from ghtrending.testing.fixtures import mock_client, sample_project
"""

# Re-export all fixtures for pytest auto-discovery
from ghtrending.testing.fixtures import (
    mock_client,
    mock_client_with_projects,
    sample_developer,
    sample_language,
    sample_project,
)

__all__ = [
    "mock_client",
    "mock_client_with_projects",
    "sample_developer",
    "sample_language",
    "sample_project",
]
