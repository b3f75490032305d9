"""ghtrending resource clients."""

from ghtrending.clients.developers import DevelopersClient
from ghtrending.clients.languages import LanguagesClient
from ghtrending.clients.projects import ProjectsClient

__all__ = [
    "DevelopersClient",
    "LanguagesClient",
    "ProjectsClient",
]
