"""Repository-related data models."""

from dataclasses import dataclass

from ghtrending.types.developers import Developer


@dataclass(frozen=True)
class Project:
    """
    A trending repository as printed on the trending page.

    stars counts the stars received within the requested time window,
    not the repository's total.
    """

    name: str  # "owner/repository"
    owner: str
    repository_name: str
    description: str
    language: str  # empty when GitHub could not determine it
    stars: int
    url: str | None
    contributor_url: str | None
    contributors: tuple[Developer, ...] = ()
