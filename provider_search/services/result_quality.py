"""
Result-quality evaluation
"""
from provider_search.models.requests import SearchFilters

RELAX_THRESHOLD = 5


def should_suggest_relax(
    result_count: int,
    filters: SearchFilters,
    threshold: int = RELAX_THRESHOLD
) -> bool:
    """
    Flag an over-constrained query

    True when fewer than ``threshold`` results came back while a use case,
    business function or industry filter was set. Region and country are
    broad dimensions and never trigger the suggestion on their own.
    """
    return result_count < threshold and filters.has_taxonomy_filter
