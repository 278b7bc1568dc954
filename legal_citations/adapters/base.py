"""
Base adapter for document search backends.

All adapters must inherit from BaseDocumentSearch and implement `search`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests


@dataclass
class SearchResult:
    """A document that may hold the text of a cited law."""

    id: str
    title: str | None = None
    url: str | None = None
    content: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "url": self.url, "content": self.content}


class BaseDocumentSearch(ABC):
    """Abstract base class for document search adapters."""

    # Override in subclass
    NAME = "base"

    def __init__(self):
        self.session = requests.Session()

    @abstractmethod
    async def search(self, term: str) -> list[SearchResult]:
        """
        Search for documents matching a citation or phrase.

        Args:
            term: Search term, usually a citation without its delimiters

        Returns:
            Zero or more results, best match first.
        """
        pass

    def close(self):
        """Clean up resources."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
