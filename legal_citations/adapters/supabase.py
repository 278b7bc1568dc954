"""
Document search against a Supabase (PostgREST) database.

Looks up `document_metadata` rows whose title or description mention the
term first, since those carry direct document URLs, then falls back to a
full-text search of the `documents` table.
"""

import asyncio
import logging
import os

import requests

from .base import BaseDocumentSearch, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Texas Law Document"
SNIPPET_LENGTH = 300


def _postgrest_quote(value: str) -> str:
    """Quote a value for use inside a PostgREST logical filter."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class SupabaseDocumentSearch(BaseDocumentSearch):
    """Search documents stored in Supabase tables over the REST API."""

    NAME = "supabase"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        limit: int | None = None,
        timeout: float = 10,
    ):
        """
        Args:
            base_url: Project URL (default: SUPABASE_URL)
            api_key: Anon or service key (default: SUPABASE_ANON_KEY)
            limit: Maximum results per query (default: DOCUMENT_SEARCH_LIMIT or 5)
            timeout: HTTP timeout in seconds
        """
        super().__init__()
        self.base_url = (base_url or os.environ.get("SUPABASE_URL", "")).rstrip("/")
        if not self.base_url:
            raise ValueError("Supabase URL is required (pass base_url or set SUPABASE_URL)")
        self.api_key = api_key or os.environ.get("SUPABASE_ANON_KEY", "")
        self.limit = limit or int(os.environ.get("DOCUMENT_SEARCH_LIMIT", 5))
        self.timeout = timeout

        if self.api_key:
            self.session.headers.update(
                {"apikey": self.api_key, "Authorization": f"Bearer {self.api_key}"}
            )

    def _select(self, table: str, params: dict) -> list[dict]:
        response = self.session.get(
            f"{self.base_url}/rest/v1/{table}",
            params={**params, "limit": self.limit},
            timeout=self.timeout,
        )
        response.raise_for_status()
        rows = response.json()
        return rows if isinstance(rows, list) else []

    def search_metadata(self, term: str) -> list[SearchResult]:
        """Documents whose metadata title or description mention the term."""
        pattern = _postgrest_quote(f"*{term}*")
        rows = self._select(
            "document_metadata",
            {
                "select": "id,title,url",
                "or": f"(title.ilike.{pattern},description.ilike.{pattern})",
            },
        )
        return [
            SearchResult(id=str(row.get("id")), title=row.get("title") or DEFAULT_TITLE, url=row.get("url"))
            for row in rows
        ]

    def search_content(self, term: str) -> list[SearchResult]:
        """Full-text search over stored document content."""
        rows = self._select(
            "documents",
            {"select": "id,content,metadata", "content": f"plfts.{term}"},
        )
        results = []
        for row in rows:
            metadata = row.get("metadata") or {}
            content = row.get("content") or None
            if content and len(content) > SNIPPET_LENGTH:
                content = content[:SNIPPET_LENGTH] + "..."
            results.append(
                SearchResult(
                    id=str(metadata.get("file_id") or row.get("id")),
                    title=metadata.get("title") or metadata.get("file_title") or DEFAULT_TITLE,
                    url=metadata.get("file_path"),
                    content=content,
                )
            )
        return results

    def search_sync(self, term: str) -> list[SearchResult]:
        """
        Blocking search. HTTP and decoding failures give an empty list.

        Args:
            term: Search term

        Returns:
            Metadata matches if any, otherwise content matches
        """
        logger.debug(f"Searching for document: {term!r}")
        try:
            results = self.search_metadata(term)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error searching document metadata: {e}")
            results = []

        if results:
            logger.info(f"Found {len(results)} metadata results for {term!r}")
            return results

        try:
            results = self.search_content(term)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error in text search: {e}")
            return []

        logger.info(f"Found {len(results)} documents in content search for {term!r}")
        return results

    async def search(self, term: str) -> list[SearchResult]:
        return await asyncio.to_thread(self.search_sync, term)
