"""Static citation tables."""

from .knowledge_base import KNOWLEDGE_BASE_BY_ID, KNOWLEDGE_BASE_DOCUMENTS, KnowledgeBaseDocument
from .patterns import CITATION_PATTERNS, CitationPattern
from .statutes import (
    DTPA_CASE_LAW,
    DTPA_SECTIONS,
    DTPA_VIOLATIONS,
    HOME_SOLICITATION_PROVISIONS,
    SHORTHAND_DTPA_SECTIONS,
    STATUTE_DESCRIPTIONS,
    describe_section,
)
from .urls import HARDCODED_URLS

__all__ = [
    "CITATION_PATTERNS",
    "CitationPattern",
    "DTPA_CASE_LAW",
    "DTPA_SECTIONS",
    "DTPA_VIOLATIONS",
    "HARDCODED_URLS",
    "HOME_SOLICITATION_PROVISIONS",
    "KNOWLEDGE_BASE_BY_ID",
    "KNOWLEDGE_BASE_DOCUMENTS",
    "KnowledgeBaseDocument",
    "SHORTHAND_DTPA_SECTIONS",
    "STATUTE_DESCRIPTIONS",
    "describe_section",
]
