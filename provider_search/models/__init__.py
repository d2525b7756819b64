"""
Data models for the provider search service
"""
from .taxonomy import (
    USE_CASES,
    BUSINESS_FUNCTIONS,
    INDUSTRIES,
    REGIONS,
    DEFAULT_REGION,
    FILTER_TAXONOMIES,
)
from .requests import SearchRequest, SearchFilters
from .responses import SearchResponse, ErrorResponse, ProviderRecord, SearchMode

__all__ = [
    # Request/Response
    "SearchRequest",
    "SearchFilters",
    "SearchResponse",
    "ErrorResponse",
    "ProviderRecord",
    "SearchMode",
    # Taxonomy
    "USE_CASES",
    "BUSINESS_FUNCTIONS",
    "INDUSTRIES",
    "REGIONS",
    "DEFAULT_REGION",
    "FILTER_TAXONOMIES",
]
