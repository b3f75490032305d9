"""ghtrending type definitions.

This module exports all data model types used by the package.
"""

from ghtrending.types.developers import Developer
from ghtrending.types.languages import Language
from ghtrending.types.projects import Project

__all__ = [
    "Developer",
    "Language",
    "Project",
]
