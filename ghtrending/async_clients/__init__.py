"""ghtrending async resource clients."""

from ghtrending.async_clients.developers import AsyncDevelopersClient
from ghtrending.async_clients.languages import AsyncLanguagesClient
from ghtrending.async_clients.projects import AsyncProjectsClient

__all__ = [
    "AsyncDevelopersClient",
    "AsyncLanguagesClient",
    "AsyncProjectsClient",
]
