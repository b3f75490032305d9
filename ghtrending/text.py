"""
Text normalization helpers for scraped labels.

Every function here is total: bad input degrades to an empty string or
zero instead of raising, because the page text is display-only.
"""

import re

BULLET = "•"

_DIGITS = re.compile(r"[0-9]+")
_BUILT_BY = "built by"


def collapse_multiline(text: str) -> str:
    """
    Join a label rendered across several lines into one string.

    Each line is stripped and the pieces are concatenated without a
    separator, so "campoy /\\n  go-tooling-workshop" becomes
    "campoy/go-tooling-workshop".
    """
    return "".join(line.strip() for line in text.split("\n"))


def trim_enclosing_parens(text: str) -> str:
    """Strip whitespace, then at most one leading "(" and one trailing ")"."""
    text = text.strip()
    if text.startswith("("):
        text = text[1:]
    if text.endswith(")"):
        text = text[:-1]
    return text


def first_token(text: str) -> str:
    """Return the first whitespace-delimited token of text, or ""."""
    parts = text.split(None, 1)
    return parts[0].strip() if parts else ""


def parse_locale_int(text: str) -> int:
    """
    Parse a locale-formatted count such as "1,472" or "2.552 stars today".

    Only the text up to the first whitespace run is considered. Both
    "," and "." are treated as thousand separators.

    Args:
        text: Count text as printed on the page

    Returns:
        The parsed integer, or 0 if the text holds no unsigned number
    """
    token = first_token(text).replace(",", "").replace(".", "")
    if not _DIGITS.fullmatch(token):
        return 0
    return int(token, 10)


def split_meta_line(text: str) -> tuple[str, str]:
    """
    Split a "language • stars • Built by" line into language and stars text.

    The language segment is missing for repositories GitHub could not
    classify, so its absence is inferred from the number of segments left
    once the trailing "Built by" segment is dropped.

    Args:
        text: The whole meta line

    Returns:
        Tuple of (language, stars_text); language is "" when absent
    """
    segments = [segment.strip() for segment in text.split(BULLET)]
    segments = [
        segment
        for segment in segments
        if segment and not segment.lower().startswith(_BUILT_BY)
    ]

    if not segments:
        return "", ""
    if len(segments) == 1:
        return "", segments[0]
    return segments[0], segments[1]
