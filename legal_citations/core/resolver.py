"""
Direct URL resolution for citations.
"""

import logging
import re

from ..catalog.urls import (
    BC_CHAPTER_2_URL,
    BC_CHAPTER_541_URL,
    CPRC_CHAPTER_101_URL,
    HARDCODED_URLS,
    WAL_MART_V_GONZALEZ_URL,
    WAL_MART_V_WRIGHT_URL,
)

logger = logging.getLogger(__name__)

_CHAPTER_541 = re.compile(r"(?<![\d.])541\.001(?!\d)|\bChapter\s+541(?!\d)", re.IGNORECASE)
_WARRANTY_CHAPTER = re.compile(r"(?<![\d.])2\.313(?!\d)|\bChapter\s+2(?![\d.])", re.IGNORECASE)


def get_direct_url_for_citation(citation: str) -> str | None:
    """
    Find a direct URL for a citation if one is known.

    Resolution order: exact hardcoded key, the Civil Practice & Remedies Code
    § 101.021 fragment, Business & Commerce Code chapters 541 and 2, then the
    Wal-Mart premises-liability cases by party name.

    Args:
        citation: The citation text

    Returns:
        URL if found, None otherwise (callers fall back to a search)
    """
    url = HARDCODED_URLS.get(citation)
    if url:
        logger.debug(f"Hardcoded URL for {citation!r}")
        return url

    if "101.021" in citation:
        return CPRC_CHAPTER_101_URL

    if _CHAPTER_541.search(citation):
        return BC_CHAPTER_541_URL

    if _WARRANTY_CHAPTER.search(citation):
        return BC_CHAPTER_2_URL

    lowered = citation.lower()
    if "wal-mart" in lowered and "wright" in lowered:
        return WAL_MART_V_WRIGHT_URL
    if "wal-mart" in lowered and "gonzalez" in lowered:
        return WAL_MART_V_GONZALEZ_URL

    logger.debug(f"No direct URL for {citation!r}")
    return None
