"""
Response assembly for success and failure payloads
"""
from typing import List

from fastapi.responses import JSONResponse

from provider_search.exceptions import ProviderSearchException
from provider_search.models.requests import SearchFilters
from provider_search.models.responses import ProviderRecord, SearchMode, SearchResponse


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def assemble_response(
    records: List[ProviderRecord],
    query: str,
    filters: SearchFilters,
    applied_limit: int,
    mode: SearchMode,
    suggest_relax: bool
) -> SearchResponse:
    """Wrap executor output as-is; results are neither reordered nor filtered here"""
    return SearchResponse(
        results=records,
        count=len(records),
        query=query,
        filters=filters.echo(applied_limit),
        mode=mode,
        suggest_relax_filters=suggest_relax,
    )


def error_response(exc: ProviderSearchException) -> JSONResponse:
    """Explicit error payload, distinguishable from a zero-match success"""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload(),
        headers=CORS_HEADERS,
    )
