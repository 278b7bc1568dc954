"""
Context enrichment for statute citations.

Turns shorthand references such as "50", "17.46" or "Section 17.46(b)(1)" into
a canonical "§ <section> (<description>)" form using the statute tables.
"""

import logging
import re

from ..catalog.statutes import (
    DTPA_SECTIONS,
    DTPA_VIOLATIONS,
    SHORTHAND_DTPA_SECTIONS,
    STATUTE_DESCRIPTIONS,
    describe_section,
)
from .markup import transform_outside_anchors

logger = logging.getLogger(__name__)

_SECTION_MARK = r"(?:§{1,2}|&sect;|&#167;|section\.?|sec\.?)"
_SUBSECTIONS = r"(?:\([a-z0-9]{1,3}\))*"

_BARE_SECTION = re.compile(
    rf"^\s*{_SECTION_MARK}?\s*(?P<section>\d+\.\d+)(?P<sub>{_SUBSECTIONS})\s*$",
    re.IGNORECASE,
)
_CODE_SECTION = re.compile(
    rf"^\s*(?P<code>DTPA|.*?\bCode(?:\s+Ann\.)?,?)\s*{_SECTION_MARK}\s*"
    rf"(?P<section>\d+\.\d+)(?P<sub>{_SUBSECTIONS})\s*$",
    re.IGNORECASE,
)
_BUSINESS_CODE = re.compile(r"\bDTPA\b|\bBus(?:iness|\.)?\b", re.IGNORECASE)

# Bulk enhancement patterns. A reference already followed by a capitalised
# parenthetical is treated as described and left alone.
_DESCRIBED = r"(?!\s*\((?-i:[A-Z]))"
_MARK_GROUP = r"(?P<mark>§{1,2}|&sect;|&#167;|\bsection|\bsec\.?)"

_BARE_NUMBER = re.compile(r"(?<![\w.$§,/\-])(?P<num>\d{2,3})(?![\w%\-])(?![.,]\d)(?!\s*\()")
_REFERENCE_PREFIX = re.compile(
    r"(?:§{1,2}|&sect;|&#167;|\bsec(?:tion)?\.?|\bchapter|\btitle|\brule|\barticle|\bno\.)\s*$",
    re.IGNORECASE,
)
_VIOLATION_REFERENCE = re.compile(
    rf"{_MARK_GROUP}\s*17\.46\(b\)\((?P<item>\d+)\){_DESCRIBED}",
    re.IGNORECASE,
)
_SECTION_REFERENCE = re.compile(
    rf"{_MARK_GROUP}\s*(?P<section>\d+\.\d+)(?![\d(]){_DESCRIBED}",
    re.IGNORECASE,
)


def _expand_shorthand(number: str) -> str | None:
    """Expand a bare shorthand number ("50") to "§ 17.50 (Relief for Consumers)"."""
    if number not in SHORTHAND_DTPA_SECTIONS:
        return None
    section = f"17.{number}"
    description = DTPA_SECTIONS.get(section)
    if description is None:
        return None
    return f"§ {section} ({description})"


def format_citation_with_context(citation: str) -> str:
    """
    Format a citation with its full statutory description.

    Rules, first match wins:
    1. Bare shorthand numbers ("50", "505") become "§ 17.<n> (<description>)".
    2. Bare, "Section"- or "§"-prefixed section numbers found in the statute
       tables become "§ <section> (<description>)"; a Business & Commerce
       Code or DTPA prefix is kept in front of the section sign.
    3. Anything else is returned unchanged.

    Args:
        citation: Raw citation text

    Returns:
        Formatted citation
    """
    expanded = _expand_shorthand(citation.strip())
    if expanded:
        return expanded

    match = _BARE_SECTION.match(citation)
    if match:
        description = describe_section(match.group("section"), match.group("sub"))
        if description:
            return f"§ {match.group('section')}{match.group('sub')} ({description})"
        return citation

    match = _CODE_SECTION.match(citation)
    if match and _BUSINESS_CODE.search(match.group("code")):
        description = describe_section(match.group("section"), match.group("sub"))
        if description:
            code = match.group("code").rstrip(",")
            return f"{code} § {match.group('section')}{match.group('sub')} ({description})"

    return citation


def _enhance_segment(segment: str) -> str:
    def bare_number(match: re.Match) -> str:
        if _REFERENCE_PREFIX.search(segment, 0, match.start()):
            return match.group(0)
        return _expand_shorthand(match.group("num")) or match.group(0)

    def violation(match: re.Match) -> str:
        key = f"17.46(b)({match.group('item')})"
        description = DTPA_VIOLATIONS.get(key)
        if description is None:
            return match.group(0)
        return f"{match.group('mark')} {key} ({description})"

    def section(match: re.Match) -> str:
        description = STATUTE_DESCRIPTIONS.get(match.group("section"))
        if description is None:
            return match.group(0)
        return f"{match.group('mark')} {match.group('section')} ({description})"

    segment = _BARE_NUMBER.sub(bare_number, segment)
    segment = _VIOLATION_REFERENCE.sub(violation, segment)
    return _SECTION_REFERENCE.sub(section, segment)


def enhance_consumer_protection_analysis(content: str) -> str:
    """
    Annotate every consumer-protection reference in a document.

    Bare shorthand numbers, laundry-list violations ("§ 17.46(b)(1)") and
    known sections ("Section 17.50") are rewritten in place with their
    descriptions. References that already carry a description, and text
    inside existing links, are left untouched, so running this twice gives
    the same result as running it once.

    Args:
        content: Analysis text (plain, Markdown or HTML)

    Returns:
        Enhanced text
    """
    if not content:
        return content
    enhanced = transform_outside_anchors(content, _enhance_segment)
    if enhanced != content:
        logger.debug("Enhanced consumer protection references")
    return enhanced
