"""Document search adapters."""

from .base import BaseDocumentSearch, SearchResult
from .static import StaticDocumentSearch
from .supabase import SupabaseDocumentSearch

# Registry of available adapters
ADAPTERS = {
    "static": StaticDocumentSearch,
    "supabase": SupabaseDocumentSearch,
}


def get_adapter(name: str, **kwargs) -> BaseDocumentSearch:
    """
    Instantiate a search adapter by name.

    Raises:
        ValueError: If the name is not registered
    """
    if name not in ADAPTERS:
        raise ValueError(f"Unknown adapter: {name}. Available: {list(ADAPTERS.keys())}")
    return ADAPTERS[name](**kwargs)


__all__ = [
    "ADAPTERS",
    "BaseDocumentSearch",
    "SearchResult",
    "StaticDocumentSearch",
    "SupabaseDocumentSearch",
    "get_adapter",
]
