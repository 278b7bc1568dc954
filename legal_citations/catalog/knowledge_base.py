"""
Whole-code source documents available in the knowledge base.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class KnowledgeBaseDocument:
    """A statutory code stored as a single document."""

    id: str
    title: str
    filename: str
    citations: tuple[str, ...]
    search_terms: tuple[str, ...] = ()


KNOWLEDGE_BASE_DOCUMENTS: tuple[KnowledgeBaseDocument, ...] = (
    KnowledgeBaseDocument(
        id="texas-penal-code",
        title="Texas Penal Code",
        filename="PENALCODE.pdf",
        citations=(
            "Texas Penal Code",
            "Penal Code",
            "§ 42.092",
            "§ 42.091",
            "§ 42.09",
            "Chapter 42",
            "Section 42.092",
            "Section 42.091",
        ),
        search_terms=(
            "animal cruelty",
            "cruelty to animals",
            "attack on assistance animal",
            "disorderly conduct",
        ),
    ),
    KnowledgeBaseDocument(
        id="texas-business-commerce-code",
        title="Texas Business & Commerce Code",
        filename="BUSINESSANDCOMMERCECODE.pdf",
        citations=(
            "Texas Business & Commerce Code",
            "Business & Commerce Code",
            "DTPA",
            "Texas Deceptive Trade Practices Act",
            "Deceptive Trade Practices-Consumer Protection Act",
            "§ 17.41",
            "§ 17.46",
            "§ 17.50",
            "§ 17.505",
            "§ 17.63",
            "Section 17.41",
            "Section 17.46",
            "Section 17.50",
            "Section 17.505",
            "Section 17.63",
            "Section 17.46(a)",
            "Section 17.46(b)",
            "Section 17.46(b)(24)",
            "Section 17.50(a)",
            "Section 17.50(a)(2)",
            "Section 17.50(a)(3)",
            "Section 17.50(b)",
            "Section 17.50(b)(1)",
            "Section 17.50(d)",
            "Chapter 17",
            "Chapter 601",
            "§ 601.001",
        ),
        search_terms=(
            "consumer protection",
            "deceptive trade practices",
            "false advertising",
            "misleading practices",
        ),
    ),
    KnowledgeBaseDocument(
        id="texas-civil-practice-remedies-code",
        title="Texas Civil Practice & Remedies Code",
        filename="CIVILPRACTICEANDREMEDIESCODE.pdf",
        citations=(
            "Texas Civil Practice & Remedies Code",
            "Civil Practice & Remedies Code",
            "§ 16.003",
            "§ 33.001",
            "§ 41.001",
            "Section 16.003",
            "Section 33.001",
            "Section 41.001",
            "Chapter 16",
            "Chapter 33",
            "Chapter 41",
        ),
        search_terms=(
            "statute of limitations",
            "proportionate responsibility",
            "damages",
            "personal injury",
        ),
    ),
    KnowledgeBaseDocument(
        id="texas-government-code",
        title="Texas Government Code",
        filename="GOVERNMENTCODE.pdf",
        citations=(
            "Texas Government Code",
            "Government Code",
            "§ 311.005",
            "Chapter 311",
        ),
        search_terms=("statutory construction", "general definitions"),
    ),
)

KNOWLEDGE_BASE_BY_ID = MappingProxyType({doc.id: doc for doc in KNOWLEDGE_BASE_DOCUMENTS})

if len(KNOWLEDGE_BASE_BY_ID) != len(KNOWLEDGE_BASE_DOCUMENTS):
    raise RuntimeError("Knowledge base document ids must be unique")
