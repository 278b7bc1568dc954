"""
Law reference processing.

Rewrites analysis text so that every recognized citation becomes a link.
Both variants only rewrite text outside existing anchors, so running either
of them over its own output changes nothing.
"""

from __future__ import annotations

import asyncio
import html
import logging
import os
from typing import TYPE_CHECKING

from ..catalog.patterns import CITATION_PATTERNS
from ..catalog.urls import HARDCODED_URLS
from .enricher import format_citation_with_context
from .extractor import extract_citations
from .links import create_law_link, split_delimiters
from .markup import citation_regex, replace_outside_anchors, transform_outside_anchors
from .resolver import get_direct_url_for_citation

if TYPE_CHECKING:
    from ..adapters.base import BaseDocumentSearch

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_TIMEOUT = 5.0

_HARDCODED_BY_LOWER = {key.lower(): url for key, url in HARDCODED_URLS.items()}


def render_citation(citation: str, url: str | None = None) -> str:
    """
    Build the replacement markup for one citation occurrence.

    Delimiters such as the parentheses of "(§ 17.46)" or the asterisks of
    "*A v. B*" stay outside the anchor; the anchor text is the enriched
    inner citation.
    """
    opening, inner, closing = split_delimiters(citation)
    display = format_citation_with_context(inner)
    return f"{opening}{create_law_link(inner, url, display)}{closing}"


def resolve_url(citation: str) -> str | None:
    """
    Direct URL for a citation, trying the undelimited form second.

    Entities are decoded first, and hardcoded keys also match in any case,
    the same way the sync injector finds them in text.
    """
    citation = html.unescape(citation)
    _, inner, _ = split_delimiters(citation)
    for candidate in dict.fromkeys((citation, inner)):
        url = get_direct_url_for_citation(candidate) or _HARDCODED_BY_LOWER.get(candidate.lower())
        if url:
            return url
    return None


def _covered_by_hardcoded(citation: str) -> bool:
    lowered = html.unescape(citation).lower()
    return any(lowered in key for key in _HARDCODED_BY_LOWER)


def _link_pattern_match(match) -> str:
    citation = match.group(0)
    if _covered_by_hardcoded(citation):
        return citation
    return render_citation(citation, resolve_url(citation))


def _link_hardcoded_key(segment: str, key: str, url: str) -> str:
    """Link one hardcoded key, leaving occurrences inside a longer catalog citation."""
    spans = [m.span() for pattern in CITATION_PATTERNS for m in pattern.finditer(segment)]

    def replace(match) -> str:
        if any(start <= match.start() and match.end() <= end for start, end in spans):
            return match.group(0)
        return render_citation(match.group(0), url)

    return citation_regex(key).sub(replace, segment)


def process_law_references_sync(text: str) -> str:
    """
    Convert law references to links without any document search.

    Every hardcoded citation is linked first, except where it is part of a
    longer catalog citation such as "(DTPA § 17.50)"; remaining catalog
    matches are then linked to their direct URL when one is known, otherwise
    to the knowledge search.

    Args:
        text: The text to process

    Returns:
        The text with law references converted to links
    """
    if not text:
        return text

    processed = text
    for key, url in HARDCODED_URLS.items():
        processed = transform_outside_anchors(
            processed,
            lambda segment, key=key, url=url: _link_hardcoded_key(segment, key, url),
        )

    for pattern in CITATION_PATTERNS:
        processed = replace_outside_anchors(processed, pattern.regex, _link_pattern_match)

    return processed


def search_timeout() -> float:
    """Per-citation search timeout from CITATION_SEARCH_TIMEOUT."""
    value = os.environ.get("CITATION_SEARCH_TIMEOUT")
    if value is None:
        return DEFAULT_SEARCH_TIMEOUT
    try:
        return float(value)
    except ValueError:
        logger.warning(
            f"Invalid CITATION_SEARCH_TIMEOUT {value!r}, using {DEFAULT_SEARCH_TIMEOUT}s"
        )
        return DEFAULT_SEARCH_TIMEOUT


async def _search_url(search: BaseDocumentSearch, citation: str, timeout: float | None) -> str | None:
    _, inner, _ = split_delimiters(citation)
    lookup = search.search(html.unescape(inner))
    if timeout and timeout > 0:
        results = await asyncio.wait_for(lookup, timeout=timeout)
    else:
        results = await lookup

    if results and results[0].url:
        return results[0].url
    return None


async def process_law_references(
    text: str,
    search: BaseDocumentSearch | None = None,
    timeout: float | None = None,
) -> str:
    """
    Convert law references to links, looking up documents for unknown citations.

    Citations are handled one at a time in extraction order. A citation with
    no known URL is searched for; a search miss, timeout or error degrades to
    a knowledge-search link for that citation only.

    Args:
        text: The text to process
        search: Document search collaborator (None skips searching)
        timeout: Seconds allowed per search (default: CITATION_SEARCH_TIMEOUT or 5)

    Returns:
        The text with law references converted to links
    """
    if not text:
        return text

    if timeout is None:
        timeout = search_timeout()

    processed = text
    citations = extract_citations(text)
    logger.info(f"Found {len(citations)} citations")

    for citation in citations:
        try:
            url = resolve_url(citation)
            if url is None and search is not None:
                url = await _search_url(search, citation, timeout)
                if url is None:
                    logger.debug(f"No document found for {citation!r}")
        except asyncio.TimeoutError:
            logger.warning(f"Search timed out after {timeout}s for citation: {citation}")
            url = None
        except Exception as e:
            logger.error(f"Error processing citation {citation}: {e}")
            url = None

        processed = replace_outside_anchors(
            processed,
            citation_regex(citation),
            lambda match, url=url: render_citation(match.group(0), url),
        )

    return processed
