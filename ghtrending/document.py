"""
Queryable document abstraction.

Extractors only need four capabilities from an HTML tree: select all
matches, select the first match, read an attribute and read the text.
`Node` captures that surface so the extractors stay independent of the
parser; `SoupNode` implements it on top of BeautifulSoup.
"""

from typing import Protocol

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from ghtrending.exceptions import DocumentParseError

DEFAULT_PARSER = "html.parser"


class Node(Protocol):
    """A node of a parsed HTML tree that can be queried with CSS selectors."""

    def select(self, selector: str) -> list["Node"]:
        ...

    def select_one(self, selector: str) -> "Node | None":
        ...

    def get(self, attribute: str) -> str | None:
        ...

    def text(self) -> str:
        ...


class SoupNode:
    """`Node` implementation backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def select(self, selector: str) -> list["SoupNode"]:
        return [SoupNode(tag) for tag in self._tag.select(selector)]

    def select_one(self, selector: str) -> "SoupNode | None":
        tag = self._tag.select_one(selector)
        return SoupNode(tag) if tag is not None else None

    def get(self, attribute: str) -> str | None:
        value = self._tag.get(attribute)
        if value is None:
            return None
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self) -> str:
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name}>)"


def parse_document(
    markup: str | bytes,
    parser: str = DEFAULT_PARSER,
    url: str | None = None,
) -> SoupNode:
    """
    Parse raw HTML into a queryable document.

    Args:
        markup: HTML as text or raw bytes (encoding is sniffed for bytes)
        parser: BeautifulSoup tree builder name
        url: Address the markup came from, used in error messages

    Returns:
        Root node of the parsed document

    Raises:
        DocumentParseError: If the markup cannot be parsed
    """
    if not isinstance(markup, (str, bytes)):
        raise DocumentParseError(
            f"Expected HTML as str or bytes, got {type(markup).__name__}", url
        )

    try:
        soup = BeautifulSoup(markup, parser)
    except ParserRejectedMarkup as e:
        raise DocumentParseError(f"Parser rejected markup: {e}", url) from e

    return SoupNode(soup)


def text_of(node: Node, selector: str) -> str:
    """Text of the first match of selector, or "" when nothing matches."""
    if not selector:
        return ""
    match = node.select_one(selector)
    return match.text() if match is not None else ""


def attr_of(node: Node, selector: str, attribute: str) -> str | None:
    """Attribute of the first match of selector, or None when absent."""
    if not selector:
        return None
    match = node.select_one(selector)
    return match.get(attribute) if match is not None else None
