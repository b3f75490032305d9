"""Developer-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Developer:
    """
    A trending developer or organisation.

    Also used for the contributor avatars listed on a trending
    repository; those entries carry an empty full_name.
    """

    id: int  # 0 when the avatar does not reveal it
    display_name: str  # e.g. "torvalds"
    full_name: str  # e.g. "Linus Torvalds", may be empty
    url: str | None
    avatar: str | None  # without the "s" size parameter
