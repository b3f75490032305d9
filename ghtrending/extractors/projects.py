"""
Extraction of trending repositories from the /trending page.

Each list item yields one Project. Missing fields fall back to "", 0 or
None; only an item whose name cannot be split into owner and repository
is dropped, and it never takes the rest of the page down with it.
"""

from ghtrending.constants import DEFAULT_BASE_URL
from ghtrending.document import Node, attr_of, text_of
from ghtrending.exceptions import ItemExtractionError
from ghtrending.extractors.developers import new_developer
from ghtrending.logging import log_skipped_item
from ghtrending.selectors import ProjectSelectors
from ghtrending.text import collapse_multiline, parse_locale_int, split_meta_line
from ghtrending.types.developers import Developer
from ghtrending.types.projects import Project
from ghtrending.urls import remove_query_param, resolve_url

NAME_SEPARATOR = "/"


def split_project_name(name: str) -> tuple[str, str]:
    """
    Split "owner/repository" on the first separator.

    Raises:
        ItemExtractionError: If there is no separator, or either part is empty
    """
    owner, separator, repository_name = name.partition(NAME_SEPARATOR)
    owner = owner.strip()
    repository_name = repository_name.strip()

    if not separator or not owner or not repository_name:
        raise ItemExtractionError(f"cannot split project name {name!r}")

    return owner, repository_name


def _extract_contributors(
    strip: Node | None, base_url: str, selectors: ProjectSelectors
) -> tuple[Developer, ...]:
    if strip is None:
        return ()

    contributors = []
    for image in strip.select(selectors.avatar):
        display_name = image.get(selectors.avatar_name_attribute)
        # The handle doubles as the profile path, e.g. "campoy" -> /campoy
        url = resolve_url(display_name, base_url)
        avatar = remove_query_param(
            resolve_url(image.get("src"), base_url), selectors.avatar_size_param
        )
        contributors.append(new_developer(display_name or "", "", url, avatar))

    return tuple(contributors)


def extract_project(
    item: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: ProjectSelectors = ProjectSelectors(),
) -> Project:
    """
    Extract a single repository list item.

    Raises:
        ItemExtractionError: If the item has no usable "owner/repo" name
    """
    owner, repository_name = split_project_name(
        collapse_multiline(text_of(item, selectors.name))
    )

    url = resolve_url(attr_of(item, selectors.name, "href"), base_url)
    description = text_of(item, selectors.description).strip()

    if selectors.meta:
        language, stars_text = split_meta_line(text_of(item, selectors.meta))
    else:
        language = text_of(item, selectors.language).strip()
        stars_text = text_of(item, selectors.stars).strip()

    strip = item.select_one(selectors.contributors) if selectors.contributors else None
    contributor_url = resolve_url(
        strip.get("href") if strip is not None else None, base_url
    )

    return Project(
        name=f"{owner}{NAME_SEPARATOR}{repository_name}",
        owner=owner,
        repository_name=repository_name,
        description=description,
        language=language,
        stars=parse_locale_int(stars_text),
        url=url,
        contributor_url=contributor_url,
        contributors=_extract_contributors(strip, base_url, selectors),
    )


def extract_projects(
    document: Node,
    base_url: str = DEFAULT_BASE_URL,
    selectors: ProjectSelectors = ProjectSelectors(),
) -> list[Project]:
    """
    Extract every repository listed on a /trending page.

    Args:
        document: Parsed page
        base_url: Origin used to resolve relative links
        selectors: Selector table for the repository list markup

    Returns:
        Projects in page order, malformed items left out; empty if the
        page lists none
    """
    projects = []
    for index, item in enumerate(document.select(selectors.item)):
        try:
            projects.append(extract_project(item, base_url, selectors))
        except ItemExtractionError as e:
            log_skipped_item("project", index, e.message)
    return projects
