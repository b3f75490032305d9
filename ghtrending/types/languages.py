"""Language filter data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """A programming language offered as a trending filter."""

    name: str  # human readable, e.g. "Web Ontology Language"
    url_name: str  # filter token, e.g. "web-ontology-language"; "" for all
    url: str | None
