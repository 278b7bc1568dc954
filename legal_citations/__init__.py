"""
Legal Citations - Extraction, enrichment and linking of legal citations.
"""

from .analytics.knowledge_base import map_citations_to_knowledge_base
from .core.enricher import enhance_consumer_protection_analysis, format_citation_with_context
from .core.extractor import CitationExtractor, extract_citations
from .core.processor import process_law_references, process_law_references_sync
from .core.resolver import get_direct_url_for_citation

__version__ = "0.1.0"
__all__ = [
    "CitationExtractor",
    "enhance_consumer_protection_analysis",
    "extract_citations",
    "format_citation_with_context",
    "get_direct_url_for_citation",
    "map_citations_to_knowledge_base",
    "process_law_references",
    "process_law_references_sync",
]
