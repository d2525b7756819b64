"""
Mode selection: semantic retrieval for free text, filter-only browsing otherwise
"""
from typing import Optional

from provider_search.models.responses import SearchMode


def select_mode(query: Optional[str]) -> SearchMode:
    """Blank or absent query text browses by filters alone; no embedding is generated"""
    if query is None or not query.strip():
        return SearchMode.STRUCTURED
    return SearchMode.SEMANTIC
