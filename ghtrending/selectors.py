"""
CSS selector tables for the trending pages.

GitHub reshapes the trending markup every so often. All selector strings
live here, one table per extractor, so following a layout change means
editing these values rather than the extraction code.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProjectSelectors:
    """Selectors for the repository list on /trending."""

    item: str = "ol.repo-list li"
    name: str = "h3 a"
    description: str = "div.py-1 p"
    language: str = "span[itemprop='programmingLanguage']"
    stars: str = "div.f6 span.float-sm-right"
    contributors: str = "div.f6 a[href$='/graphs/contributors']"
    avatar: str = "img"
    avatar_name_attribute: str = "title"
    avatar_size_param: str = "s"
    # Older layouts print language and stars on one bullet-separated line.
    # When set, language and stars are read from this element instead.
    meta: str | None = None


@dataclass(frozen=True)
class DeveloperSelectors:
    """Selectors for the leaderboard on /trending/developers."""

    item: str = ".user-leaderboard-list-item"
    name: str = ".user-leaderboard-list-name a"
    full_name: str = ".user-leaderboard-list-name .full-name"
    avatar: str = "img.leaderboard-gravatar"
    avatar_size_param: str = "s"


@dataclass(frozen=True)
class LanguageSelectors:
    """Selectors for the two language menus on /trending."""

    catalog: str = "#languages-menuitems a.select-menu-item"
    trending: str = "#select-menu-language .select-menu-list > a.select-menu-item"


@dataclass(frozen=True)
class Selectors:
    """All selector tables used by a client."""

    projects: ProjectSelectors = field(default_factory=ProjectSelectors)
    developers: DeveloperSelectors = field(default_factory=DeveloperSelectors)
    languages: LanguageSelectors = field(default_factory=LanguageSelectors)


DEFAULT_SELECTORS = Selectors()

# The original "repo-list" layout of the trending page.
LEGACY_PROJECT_SELECTORS = ProjectSelectors(
    item=".repo-list-item",
    name=".repo-list-name a",
    description=".repo-list-description",
    language="",
    stars="",
    contributors=".repo-list-meta a",
    meta=".repo-list-meta",
)
