"""
Shared test fixtures for legal_citations tests.

Provides sample analysis texts and mock document-search collaborators.
"""

import asyncio

import pytest

from legal_citations.adapters.base import BaseDocumentSearch, SearchResult

# ---------------------------------------------------------------------------
# Sample analysis text
# ---------------------------------------------------------------------------

SAMPLE_ANALYSIS = (
    "The seller's failure to mention the prior flood damage violates the DTPA "
    "laundry list (§ 17.46(b)(24)). See (Tex. Bus. & Com. Code § 17.46) for details. "
    "Economic damages are recoverable (Section 17.50). Premises cases such as "
    "*Wal-Mart Stores, Inc. v. Wright* and *Riverside National Bank v. Lewis* "
    "are distinguishable."
)

SAMPLE_CODE_CITATION = "(Tex. Bus. & Com. Code § 17.46)"


# ---------------------------------------------------------------------------
# Mock search collaborators
# ---------------------------------------------------------------------------


class MockSearch(BaseDocumentSearch):
    """Returns canned results per term and records every term searched."""

    NAME = "mock"

    def __init__(self, results: dict | None = None, errors: set | None = None):
        super().__init__()
        self.results = results or {}
        self.errors = errors or set()
        self.calls: list[str] = []

    async def search(self, term: str) -> list[SearchResult]:
        self.calls.append(term)
        if term in self.errors:
            raise ConnectionError(f"Mock search failure for {term}")
        return self.results.get(term, [])


class FailingSearch(BaseDocumentSearch):
    """A search backend that is always down."""

    NAME = "failing"

    async def search(self, term: str) -> list[SearchResult]:
        raise ConnectionError("Mock connection error")


class SlowSearch(BaseDocumentSearch):
    """A search backend that never answers in time."""

    NAME = "slow"

    async def search(self, term: str) -> list[SearchResult]:
        await asyncio.sleep(10)
        return [SearchResult(id="late", title="Late", url="https://docs.test/late.pdf")]


@pytest.fixture
def mock_search():
    return MockSearch()


@pytest.fixture
def failing_search():
    return FailingSearch()


@pytest.fixture
def slow_search():
    return SlowSearch()


@pytest.fixture
def sample_analysis():
    return SAMPLE_ANALYSIS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Ensure environment variables don't leak between tests."""
    env_keys = [
        "CITATION_SEARCH_TIMEOUT",
        "KNOWLEDGE_SEARCH_ROUTE",
        "LAW_DOCS_BASE_URL",
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "DOCUMENT_SEARCH_LIMIT",
    ]
    for key in env_keys:
        monkeypatch.delenv(key, raising=False)
