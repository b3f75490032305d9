"""Extractors turning parsed trending pages into records."""

from ghtrending.extractors.developers import extract_developer, extract_developers
from ghtrending.extractors.languages import (
    extract_language_catalog,
    extract_languages,
    extract_trending_languages,
)
from ghtrending.extractors.projects import extract_project, extract_projects

__all__ = [
    "extract_developer",
    "extract_developers",
    "extract_language_catalog",
    "extract_languages",
    "extract_project",
    "extract_projects",
    "extract_trending_languages",
]
