"""
HTML anchors for law references.
"""

import html
import os
import re
from urllib.parse import quote

DEFAULT_SEARCH_ROUTE = "/knowledge"

_LINK_CLASS = "text-blue-600 hover:underline hover:text-blue-800 inline-flex items-center"

# Document icon for direct links, external-link icon for knowledge searches
_DOCUMENT_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="12" height="12" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round"><path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 '
    '2-2V8z"></path><polyline points="14 2 14 8 20 8"></polyline></svg>'
)
_SEARCH_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="12" height="12" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round"><path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 '
    '2-2h6"></path><polyline points="15 3 21 3 21 9"></polyline>'
    '<line x1="10" y1="14" x2="21" y2="3"></line></svg>'
)

_DELIMITED = (
    re.compile(r"^(?P<open>\()(?P<inner>.+)(?P<close>\))$", re.DOTALL),
    re.compile(r"^(?P<open>\*{1,2})(?P<inner>.+?)(?P<close>(?P=open))$", re.DOTALL),
    re.compile(r"^(?P<open><(?P<tag>em|i)>)(?P<inner>.+)(?P<close></(?P=tag)>)$", re.DOTALL | re.IGNORECASE),
)


def search_route() -> str:
    return os.environ.get("KNOWLEDGE_SEARCH_ROUTE", DEFAULT_SEARCH_ROUTE)


def knowledge_search_url(term: str) -> str:
    """Internal knowledge-search URL for a citation or filename."""
    return f"{search_route()}?search={quote(html.unescape(term), safe='')}"


def split_delimiters(citation: str) -> tuple[str, str, str]:
    """
    Split a citation into (opening, inner, closing) delimiters.

    "(§ 17.46)" -> ("(", "§ 17.46", ")"), "*A v. B*" -> ("*", "A v. B", "*").
    Undelimited citations come back as ("", citation, "").
    """
    for pattern in _DELIMITED:
        match = pattern.match(citation)
        if match:
            return match.group("open"), match.group("inner"), match.group("close")
    return "", citation, ""


def create_law_link(citation: str, url: str | None = None, display_text: str | None = None) -> str:
    """
    Create a clickable link for a law reference.

    Args:
        citation: The full citation text
        url: Optional direct URL to the document
        display_text: Optional text to display instead of the citation

    Returns:
        HTML anchor. Direct URLs open in a new tab; without a URL the anchor
        points at the knowledge search with the citation as query.
    """
    display = display_text or citation

    if url:
        href = html.escape(url, quote=True)
        return (
            f'<a href="{href}" class="{_LINK_CLASS}" target="_blank" rel="noopener noreferrer">'
            f'{display}<span class="ml-1 inline-block" aria-hidden="true">{_DOCUMENT_ICON}</span></a>'
        )

    href = html.escape(knowledge_search_url(citation), quote=True)
    return (
        f'<a href="{href}" class="{_LINK_CLASS}" target="_blank">'
        f'{display}<span class="ml-1 inline-block" aria-hidden="true">{_SEARCH_ICON}</span></a>'
    )


def law_reference_link_props(citation: str, url: str | None = None) -> dict:
    """Properties for rendering a law reference link component."""
    return {"citation": citation, "url": url}
