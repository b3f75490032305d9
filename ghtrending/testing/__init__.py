"""ghtrending testing utilities.

Provides a mock client and fixtures for testing applications that use
ghtrending.
"""

from ghtrending.testing.fixtures import (
    create_mock_developer,
    create_mock_language,
    create_mock_project,
)
from ghtrending.testing.mock import MockCall, MockResponse, MockTrendingClient

__all__ = [
    # Mock client
    "MockTrendingClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_developer",
    "create_mock_language",
    "create_mock_project",
]
