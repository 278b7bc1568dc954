"""
Citation extraction from legal texts.

Scans narrative text against the pattern catalog and returns the raw citation
strings exactly as they appear.
"""

import logging
from collections import Counter
from dataclasses import dataclass

from ..catalog.patterns import CITATION_PATTERNS, CitationPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CitationMatch:
    """One occurrence of a citation in a text."""

    text: str
    start: int
    end: int
    pattern: str


class CitationExtractor:
    """
    Extract legal citations from text.

    Supports:
    - Parenthetical statute citations (e.g., "(Tex. Bus. & Com. Code § 17.46)")
    - Parenthetical act names (e.g., "(DTPA)")
    - Italicized case names (e.g., "*Wal-Mart Stores, Inc. v. Wright*")

    Usage:
        extractor = CitationExtractor()
        citations = extractor.extract(analysis_text)
    """

    def __init__(self, patterns: tuple[CitationPattern, ...] | None = None):
        """
        Initialize extractor.

        Args:
            patterns: Ordered patterns to use instead of the default catalog
        """
        self.patterns = tuple(patterns) if patterns is not None else CITATION_PATTERNS

    def finditer(self, text: str) -> list[CitationMatch]:
        """
        Find every citation occurrence.

        Args:
            text: Legal document text

        Returns:
            Matches sorted by position; ties go to the higher-priority pattern
        """
        if not text:
            return []

        found: list[tuple[int, int, CitationMatch]] = []
        for priority, pattern in enumerate(self.patterns):
            for match in pattern.finditer(text):
                found.append(
                    (
                        match.start(),
                        priority,
                        CitationMatch(match.group(0), match.start(), match.end(), pattern.name),
                    )
                )

        found.sort(key=lambda item: (item[0], item[1]))
        return [item[2] for item in found]

    def extract(self, text: str) -> list[str]:
        """
        Extract distinct citations in first-occurrence order.

        Deduplication is by exact string, so "§ 17.46" and "Section 17.46"
        stay separate entries.
        """
        seen: set[str] = set()
        citations: list[str] = []
        for match in self.finditer(text):
            if match.text not in seen:
                seen.add(match.text)
                citations.append(match.text)

        logger.debug(f"Extracted {len(citations)} citations")
        return citations

    def count(self, text: str) -> Counter:
        """Count occurrences of each citation."""
        return Counter(match.text for match in self.finditer(text))


_default_extractor = CitationExtractor()


def extract_citations(text: str) -> list[str]:
    """
    Convenience function to extract citations with the default catalog.

    Args:
        text: Legal document text

    Returns:
        List of distinct citations found (empty when there are none)
    """
    return _default_extractor.extract(text)
