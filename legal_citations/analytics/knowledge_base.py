"""
Mapping of legal citations to knowledge-base documents.

Builds the "related law documents" list attached to an analysis: each
citation found in the analysis is matched against a small catalog of whole
statutory codes.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from urllib.parse import quote

from ..catalog.knowledge_base import KNOWLEDGE_BASE_DOCUMENTS, KnowledgeBaseDocument
from ..core.links import knowledge_search_url

logger = logging.getLogger(__name__)

DEFAULT_DOCS_BASE_URL = "/documents"

_DTPA_MARKERS = ("dtpa", "deceptive trade")
_BUSINESS_SECTION = re.compile(r"(?:section|§)\s+17\.\d+", re.IGNORECASE)
_PENAL_SECTION = re.compile(r"(?:section|§)\s+42\.\d+", re.IGNORECASE)

# Analysis-side citation patterns; group 1 is the citation
_LEGAL_CITATION_PATTERNS = (
    re.compile(r"(Texas\s+[A-Za-z]+(?:\s+[&]?\s*[A-Za-z]+)*\s+Code\s+§\s+\d+\.\d+(?:\([a-z0-9]+\))?)", re.I),
    re.compile(r"(Section\s+\d+\.\d+(?:\([a-z0-9]+\))?(?:\([a-z0-9]+\))?)", re.I),
    re.compile(r"(§\s+\d+\.\d+(?:\([a-z0-9]+\))?(?:\([a-z0-9]+\))?)", re.I),
    re.compile(r"(Chapter\s+\d+)", re.I),
    re.compile(
        r"(Texas\s+Deceptive\s+Trade\s+Practices\s+Act|DTPA|Texas\s+Penal\s+Code|Penal\s+Code"
        r"|Business\s+&\s+Commerce\s+Code)",
        re.I,
    ),
    re.compile(r"(Deceptive\s+Trade\s+Practices-Consumer\s+Protection\s+Act)", re.I),
    re.compile(r"(Texas\s+Home\s+Solicitation\s+Act)", re.I),
    re.compile(r"(Texas\s+Debt\s+Collection\s+Act)", re.I),
    re.compile(r"(Section\s+17\.\d+(?:\([a-z0-9]+\))*)", re.I),
    re.compile(r"(§\s+17\.\d+(?:\([a-z0-9]+\))*)", re.I),
    re.compile(r"(Section\s+42\.\d+(?:\([a-z0-9]+\))*)", re.I),
    re.compile(r"(§\s+42\.\d+(?:\([a-z0-9]+\))*)", re.I),
    re.compile(r"(Texas\s+[A-Za-z\s&]+Code(?:\s+§\s+\d+\.\d+)?)", re.I),
)


@dataclass(frozen=True)
class KnowledgeBaseDocumentRef:
    """A law reference attached to an analysis."""

    id: str
    title: str
    url: str
    content: str

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "url": self.url, "content": self.content}


def document_url(filename: str) -> str:
    """Direct URL of a stored knowledge-base document."""
    base = os.environ.get("LAW_DOCS_BASE_URL", DEFAULT_DOCS_BASE_URL).rstrip("/")
    return f"{base}/{quote(filename)}"


def knowledge_base_url(filename: str) -> str:
    """Internal knowledge-search URL for a document."""
    return knowledge_search_url(filename)


def citation_matches_document(citation: str, doc: KnowledgeBaseDocument) -> bool:
    """
    Check whether a citation refers to a knowledge-base document.

    Any of these is a match:
    - case-insensitive equality with one of the document's citation aliases
    - the citation contains an alias, or an alias contains the citation
      (the latter only for citations longer than 5 characters)
    - a DTPA / "deceptive trade" citation and a document with such an alias
    - a "Section 17.x" / "§ 17.x" citation and the Business & Commerce Code
    - a "Section 42.x" / "§ 42.x" citation and the Penal Code
    """
    lowered = citation.lower().strip()
    if not lowered:
        return False

    for alias in doc.citations:
        alias_lower = alias.lower()
        if lowered == alias_lower or alias_lower in lowered:
            return True
        if len(lowered) > 5 and lowered in alias_lower:
            return True
        if any(m in lowered for m in _DTPA_MARKERS) and any(m in alias_lower for m in _DTPA_MARKERS):
            return True

    if doc.id == "texas-business-commerce-code" and _BUSINESS_SECTION.search(citation):
        return True
    if doc.id == "texas-penal-code" and _PENAL_SECTION.search(citation):
        return True
    return False


def map_citations_to_knowledge_base(
    citations: list[str],
    documents: tuple[KnowledgeBaseDocument, ...] = KNOWLEDGE_BASE_DOCUMENTS,
) -> list[KnowledgeBaseDocumentRef]:
    """
    Map citations to knowledge-base documents.

    Args:
        citations: Extracted citations
        documents: Catalog to match against

    Returns:
        Matched documents, each id at most once, in the order first matched
    """
    matched: dict[str, KnowledgeBaseDocumentRef] = {}

    for citation in citations:
        for doc in documents:
            if doc.id in matched or not citation_matches_document(citation, doc):
                continue
            logger.debug(f"Matched citation {citation!r} to {doc.title}")
            matched[doc.id] = KnowledgeBaseDocumentRef(
                id=doc.id,
                title=doc.title,
                url=document_url(doc.filename),
                content=f"Click to view the full {doc.title} document.",
            )

    return list(matched.values())


def extract_legal_citations(content: str) -> list[str]:
    """
    Extract citations from analysis content for knowledge-base mapping.

    Unlike the link extractor this also picks up unparenthesised references
    ("Section 17.46(b)", "Chapter 17", "DTPA").

    Returns:
        Distinct trimmed citations in first-seen order
    """
    seen: set[str] = set()
    citations: list[str] = []
    for pattern in _LEGAL_CITATION_PATTERNS:
        for match in pattern.finditer(content or ""):
            citation = match.group(1).strip()
            if citation and citation not in seen:
                seen.add(citation)
                citations.append(citation)
    return citations


def build_law_references(content: str) -> list[dict]:
    """
    Law references for an analysis: mapped documents as plain dicts.

    Returns:
        List of {id, title, url, content}
    """
    citations = extract_legal_citations(content)
    references = map_citations_to_knowledge_base(citations)
    logger.info(f"Mapped {len(citations)} citations to {len(references)} law documents")
    return [ref.to_dict() for ref in references]
