"""
Tests for the queryable document abstraction.
"""

import pytest

from ghtrending.document import Node, SoupNode, attr_of, parse_document, text_of
from ghtrending.exceptions import DocumentParseError

MARKUP = """
<div id="root" class="box wide">
  <a href="/cloudson" class="name">cloudson</a>
  <a class="name">no link</a>
  <p>  first  </p>
  <p>second</p>
</div>
"""


def test_parse_text_and_bytes() -> None:
    for markup in (MARKUP, MARKUP.encode("utf-8")):
        document = parse_document(markup)
        assert isinstance(document, SoupNode)
        assert len(document.select("a.name")) == 2


def test_parse_empty_document() -> None:
    document = parse_document("")
    assert document.select("li") == []
    assert document.select_one("li") is None


def test_parse_rejects_non_markup() -> None:
    with pytest.raises(DocumentParseError) as exc_info:
        parse_document(None, url="https://github.com/trending")  # type: ignore[arg-type]

    assert exc_info.value.code == "PARSE_ERROR"
    assert exc_info.value.url == "https://github.com/trending"


def test_soup_node_satisfies_protocol() -> None:
    def first_href(node: Node) -> str | None:
        match = node.select_one("a")
        return match.get("href") if match is not None else None

    assert first_href(parse_document(MARKUP)) == "/cloudson"


def test_get_attribute() -> None:
    root = parse_document(MARKUP).select_one("#root")
    assert root is not None
    assert root.get("id") == "root"
    # Multi-valued attributes are joined back into one string
    assert root.get("class") == "box wide"
    assert root.get("missing") is None


def test_text_and_attr_helpers() -> None:
    document = parse_document(MARKUP)

    assert text_of(document, "p") == "  first  "
    assert text_of(document, "span") == ""
    assert text_of(document, "") == ""

    assert attr_of(document, "a.name", "href") == "/cloudson"
    assert attr_of(document, "a.name", "title") is None
    assert attr_of(document, "span", "href") is None
    assert attr_of(document, "", "href") is None


def test_select_keeps_document_order() -> None:
    document = parse_document(MARKUP)
    assert [p.text() for p in document.select("p")] == ["  first  ", "second"]


def test_nested_select() -> None:
    root = parse_document(MARKUP).select_one("#root")
    assert root is not None
    anchors = root.select("a")
    assert anchors[1].get("href") is None
    assert anchors[1].text() == "no link"
