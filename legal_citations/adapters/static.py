"""
In-memory document search.

Searches a fixed list of documents, by default the knowledge-base codes.
Useful offline and as a template for new adapters.
"""

import os

from ..analytics.knowledge_base import document_url
from ..catalog.knowledge_base import KNOWLEDGE_BASE_DOCUMENTS
from .base import BaseDocumentSearch, SearchResult


def _default_documents() -> list[dict]:
    return [
        {
            "id": doc.id,
            "title": doc.title,
            "url": document_url(doc.filename),
            "description": " ".join(doc.citations + doc.search_terms),
        }
        for doc in KNOWLEDGE_BASE_DOCUMENTS
    ]


class StaticDocumentSearch(BaseDocumentSearch):
    """
    Case-insensitive substring search over a list of document dicts.

    Each document needs an 'id'; 'title', 'url', 'description' and
    'content' are optional and searched when present.
    """

    NAME = "static"

    def __init__(self, documents: list[dict] | None = None, limit: int | None = None):
        super().__init__()
        self.documents = list(documents) if documents is not None else _default_documents()
        self.limit = limit or int(os.environ.get("DOCUMENT_SEARCH_LIMIT", 5))

    async def search(self, term: str) -> list[SearchResult]:
        needle = term.strip().lower()
        if not needle:
            return []

        results = []
        for doc in self.documents:
            haystack = " ".join(
                str(doc.get(key) or "") for key in ("title", "description", "content")
            ).lower()
            if needle in haystack:
                results.append(
                    SearchResult(
                        id=str(doc["id"]),
                        title=doc.get("title"),
                        url=doc.get("url"),
                        content=doc.get("content"),
                    )
                )
            if len(results) >= self.limit:
                break
        return results
