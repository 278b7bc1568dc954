"""Core citation processing."""

from .enricher import enhance_consumer_protection_analysis, format_citation_with_context
from .extractor import CitationExtractor, CitationMatch, extract_citations
from .links import create_law_link, law_reference_link_props
from .markup import escape_citation
from .processor import process_law_references, process_law_references_sync
from .resolver import get_direct_url_for_citation

__all__ = [
    "CitationExtractor",
    "CitationMatch",
    "create_law_link",
    "enhance_consumer_protection_analysis",
    "escape_citation",
    "extract_citations",
    "format_citation_with_context",
    "get_direct_url_for_citation",
    "law_reference_link_props",
    "process_law_references",
    "process_law_references_sync",
]
