"""Fixed tokens and paths of the trending pages."""

from enum import Enum

# Time windows accepted by the "since" query parameter.
TIME_TODAY = "daily"
TIME_WEEK = "weekly"
TIME_MONTH = "monthly"

DEFAULT_BASE_URL = "https://github.com"
BASE_PATH = "/trending"
DEVELOPERS_PATH = "/developers"


class Mode(str, Enum):
    """Resource requested from the trending pages."""

    REPOSITORIES = "repositories"
    DEVELOPERS = "developers"
    LANGUAGES = "languages"
