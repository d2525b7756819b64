"""
Search API Router
Handles provider search and taxonomy endpoints
"""
from fastapi import APIRouter, Depends, Response, status
import uuid
import logging

from provider_search.config import Settings, get_settings
from provider_search.exceptions import ProviderSearchException
from provider_search.models import taxonomy
from provider_search.models.requests import SearchRequest
from provider_search.models.responses import SearchResponse, ErrorResponse
from provider_search.services import run_search
from provider_search.services.response_assembler import CORS_HEADERS
from provider_search.utils.supabase_client import ProviderCorpus, get_provider_corpus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])

ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post("/search", response_model=SearchResponse, responses=ERROR_RESPONSES)
@router.post("/v1/search", response_model=SearchResponse, responses=ERROR_RESPONSES)
async def search(
    request: SearchRequest,
    corpus: ProviderCorpus = Depends(get_provider_corpus),
    settings: Settings = Depends(get_settings)
):
    """
    Provider search endpoint

    Blank query text browses the directory by filters alone. Non-blank text
    is embedded and matched by similarity, narrowed by whichever filters are
    set. The response flags when taxonomy filters left too few results.
    """
    query_id = str(uuid.uuid4())

    try:
        return await run_search(
            request=request,
            corpus=corpus,
            settings=settings,
            query_id=query_id
        )
    except ProviderSearchException as e:
        logger.error(f"[{query_id}] Search failed ({e.error_code}): {e.message}")
        raise


@router.options("/search")
@router.options("/v1/search")
async def search_preflight():
    """CORS preflight"""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.get("/v1/taxonomy")
async def get_taxonomy():
    """
    Closed label sets accepted by the search filters

    Useful for building filter dropdowns on the client.
    """
    return taxonomy.as_dict()
