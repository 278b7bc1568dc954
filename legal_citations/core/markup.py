"""
Helpers for rewriting text that may already contain HTML.

Rewrites only touch text nodes outside existing <a>...</a> elements. Tag
names and attribute values are never rewritten, and a citation that is
already linked is never wrapped a second time.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, NavigableString, Tag

if TYPE_CHECKING:
    from collections.abc import Callable
    from re import Match, Pattern

# Characters that carry meaning inside a regular expression
_REGEX_SPECIALS = re.compile(r"[.*+?^${}()|\[\]\\]")

# Characters that upstream text often carries in entity form
_ENTITY_FORMS = {
    "&": r"(?:&amp;|&#38;|&)",
    "§": r"(?:§|&sect;|&#167;)",
}

# Text inside these elements is left alone
_PROTECTED_TAGS = ["a", "script", "style"]

# Emphasis elements are rewritten as a whole so "<em>A v. B</em>" can be linked
_EMPHASIS_TAGS = ("em", "i")


def escape_citation(citation: str) -> str:
    """Escape regex metacharacters so a citation matches only itself."""
    return _REGEX_SPECIALS.sub(lambda m: "\\" + m.group(0), citation)


def citation_regex(citation: str, flags: int = re.IGNORECASE) -> Pattern[str]:
    """
    Compile a pattern matching one literal citation.

    "&" and "§" also match their entity forms. Word boundaries are added on
    edges that end in a word character so that "Chapter 573" does not match
    inside "Chapter 5730".
    """
    literal = html.unescape(citation)
    body = "".join(_ENTITY_FORMS.get(char) or escape_citation(char) for char in literal)
    if literal[:1].isalnum():
        body = r"(?<!\w)" + body
    if literal[-1:].isalnum():
        body = body + r"(?!\w)"
    return re.compile(body, flags)


def _is_emphasis_leaf(tag: Tag) -> bool:
    return (
        tag.name in _EMPHASIS_TAGS
        and len(tag.contents) == 1
        and type(tag.contents[0]) is NavigableString
    )


def _rewrite_units(soup: BeautifulSoup) -> list[NavigableString | Tag]:
    """Text nodes outside protected elements; emphasis leaves stand in for their text."""
    units: list[NavigableString | Tag] = []
    for node in soup.find_all(string=True):
        # Comments, CDATA and doctypes are NavigableString subclasses
        if type(node) is not NavigableString or node.find_parent(_PROTECTED_TAGS):
            continue
        parent = node.parent
        units.append(parent if isinstance(parent, Tag) and _is_emphasis_leaf(parent) else node)
    return units


def transform_outside_anchors(text: str, transform: Callable[[str], str]) -> str:
    """
    Apply `transform` to the text outside existing anchors.

    Plain text is transformed as a whole. Markup is parsed with BeautifulSoup
    and each text node is transformed in escaped form; the document is only
    re-serialized when some node changed, so unchanged input comes back
    byte for byte.
    """
    if not text:
        return text
    if "<" not in text:
        return transform(text)

    soup = BeautifulSoup(text, "html.parser")
    changed = False
    for unit in _rewrite_units(soup):
        if isinstance(unit, Tag):
            markup = str(unit)
        else:
            markup = html.escape(str(unit), quote=False)
        result = transform(markup)
        if result != markup:
            unit.replace_with(*BeautifulSoup(result, "html.parser").contents)
            changed = True

    return str(soup) if changed else text


def replace_outside_anchors(
    text: str,
    pattern: Pattern[str],
    replacement: Callable[[Match[str]], str],
) -> str:
    """Substitute every match of `pattern` that lies outside existing anchors."""
    return transform_outside_anchors(text, lambda segment: pattern.sub(replacement, segment))
