"""Analytics tools for legal citations."""

from .citations import analyze_citations, count_citations
from .consumer_protection import (
    extract_dtpa_references,
    format_consumer_statute,
    is_consumer_protection_statute,
)
from .knowledge_base import (
    KnowledgeBaseDocumentRef,
    build_law_references,
    extract_legal_citations,
    map_citations_to_knowledge_base,
)
from .topics import extract_case_names, extract_legal_topics, extract_statute_references

__all__ = [
    "KnowledgeBaseDocumentRef",
    "analyze_citations",
    "build_law_references",
    "count_citations",
    "extract_case_names",
    "extract_dtpa_references",
    "extract_legal_citations",
    "extract_legal_topics",
    "extract_statute_references",
    "format_consumer_statute",
    "is_consumer_protection_statute",
    "map_citations_to_knowledge_base",
]
