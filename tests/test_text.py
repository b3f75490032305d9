"""
Tests for text normalization of scraped labels.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ghtrending.text import (
    BULLET,
    collapse_multiline,
    first_token,
    parse_locale_int,
    split_meta_line,
    trim_enclosing_parens,
)


# ============================================================================
# collapse_multiline
# ============================================================================


def test_collapse_multiline_joins_project_name() -> None:
    assert collapse_multiline("campoy /\n  go-tooling-workshop") == "campoy /go-tooling-workshop"
    assert collapse_multiline("  campoy/\n  go-tooling-workshop  ") == "campoy/go-tooling-workshop"


def test_collapse_multiline_single_line() -> None:
    assert collapse_multiline("  google/deepdream ") == "google/deepdream"
    assert collapse_multiline("") == ""
    assert collapse_multiline("\n\n   \n") == ""


@given(lines=st.lists(st.text(alphabet="abc /-", max_size=10), max_size=6))
@settings(max_examples=100)
def test_collapse_multiline_has_no_newlines(lines: list[str]) -> None:
    """The collapsed label never spans more than one line."""
    collapsed = collapse_multiline("\n".join(lines))
    assert "\n" not in collapsed
    assert collapsed == collapsed.strip()


# ============================================================================
# trim_enclosing_parens
# ============================================================================


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("(Claudson Oliveira)", "Claudson Oliveira"),
        ("  (ZEIT)\n", "ZEIT"),
        ("(Unbalanced", "Unbalanced"),
        ("Unbalanced)", "Unbalanced"),
        ("No parens", "No parens"),
        ("((double))", "(double)"),
        ("", ""),
        ("()", ""),
    ],
)
def test_trim_enclosing_parens(raw: str, expected: str) -> None:
    assert trim_enclosing_parens(raw) == expected


# ============================================================================
# first_token / parse_locale_int
# ============================================================================


def test_first_token() -> None:
    assert first_token("cloudson\n   (Claudson Oliveira)") == "cloudson"
    assert first_token("   zeit") == "zeit"
    assert first_token("") == ""
    assert first_token(" \t\n") == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("105 stars today", 105),
        ("1,472 stars today", 1472),
        ("2.552 stars this week", 2552),
        ("1,234,567", 1234567),
        ("  42  ", 42),
        ("", 0),
        ("many stars today", 0),
        ("-5 stars", 0),
        ("12abc", 0),
    ],
)
def test_parse_locale_int(raw: str, expected: int) -> None:
    assert parse_locale_int(raw) == expected


@given(value=st.integers(min_value=0, max_value=10**12))
@settings(max_examples=100)
def test_parse_locale_int_reads_grouped_numbers(value: int) -> None:
    """Comma and dot grouped renderings of a count parse to the same number."""
    comma_grouped = f"{value:,}"
    dot_grouped = comma_grouped.replace(",", ".")

    assert parse_locale_int(f"{comma_grouped} stars today") == value
    assert parse_locale_int(dot_grouped) == value


@given(text=st.text(max_size=30))
@settings(max_examples=200)
def test_parse_locale_int_never_negative(text: str) -> None:
    """Arbitrary text degrades to zero, never raises or goes negative."""
    assert parse_locale_int(text) >= 0


# ============================================================================
# split_meta_line
# ============================================================================


def test_split_meta_line_with_language() -> None:
    line = f"\n  Go\n  {BULLET}\n  105 stars today\n  {BULLET}\n  Built by\n"
    assert split_meta_line(line) == ("Go", "105 stars today")


def test_split_meta_line_without_language() -> None:
    line = f"1,472 stars this week {BULLET} Built by"
    assert split_meta_line(line) == ("", "1,472 stars this week")


def test_split_meta_line_without_built_by() -> None:
    assert split_meta_line(f"Python {BULLET} 7 stars today") == ("Python", "7 stars today")
    assert split_meta_line("7 stars today") == ("", "7 stars today")


def test_split_meta_line_empty() -> None:
    assert split_meta_line("") == ("", "")
    assert split_meta_line(f"  {BULLET}  ") == ("", "")
    assert split_meta_line("Built by") == ("", "")
