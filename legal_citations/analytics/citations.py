"""
Citation statistics across documents.
"""

from collections import Counter

from ..core.extractor import CitationExtractor
from .knowledge_base import extract_legal_citations, map_citations_to_knowledge_base


def count_citations(text: str) -> Counter:
    """Count occurrences of each linkable citation in a text."""
    return CitationExtractor().count(text)


def analyze_citations(documents: list[dict], text_field: str = "text") -> dict:
    """
    Analyze citations across multiple documents.

    Args:
        documents: List of document dicts (analyses, briefs, cases)
        text_field: Key containing the document text

    Returns:
        Analysis results including most cited, totals, and the knowledge-base
        documents referenced
    """
    extractor = CitationExtractor()
    all_citations = Counter()
    legal_citations: list[str] = []
    documents_with_citations = 0

    for document in documents:
        text = document.get(text_field, "")
        if text:
            citations = extractor.count(text)
            if citations:
                documents_with_citations += 1
                all_citations.update(citations)
            legal_citations.extend(extract_legal_citations(text))

    referenced = map_citations_to_knowledge_base(legal_citations)

    return {
        "total_citations": sum(all_citations.values()),
        "unique_citations": len(all_citations),
        "documents_analyzed": len(documents),
        "documents_with_citations": documents_with_citations,
        "most_cited": all_citations.most_common(20),
        "avg_per_document": sum(all_citations.values()) / max(len(documents), 1),
        "law_documents": [ref.title for ref in referenced],
    }
