"""
Search pipeline

Processes a search request through:
1. Filter validation (strict taxonomy mode only)
2. Mode selection
3. Semantic or structured retrieval
4. Result-quality evaluation
5. Response assembly
"""
from typing import Optional
import time
import uuid
import logging

from provider_search.config import Settings, get_settings
from provider_search.exceptions import MalformedRequest
from provider_search.models.requests import SearchFilters, SearchRequest
from provider_search.models.responses import SearchMode, SearchResponse
from provider_search.models.taxonomy import FILTER_TAXONOMIES
from provider_search.services.mode_selector import select_mode
from provider_search.services.query_executor import Embedder, execute_semantic, execute_structured
from provider_search.services.response_assembler import assemble_response
from provider_search.services.result_quality import should_suggest_relax
from provider_search.utils.supabase_client import ProviderCorpus

logger = logging.getLogger(__name__)


def validate_filter_taxonomy(filters: SearchFilters) -> None:
    """
    Reject filter values outside their closed taxonomy

    Every field is checked so the caller sees all offending values at once.

    Raises:
        MalformedRequest: If any filter value is not a known label
    """
    wire = filters.model_dump(by_alias=True)
    invalid = {
        key: wire[key]
        for key, labels in FILTER_TAXONOMIES.items()
        if wire.get(key) is not None and wire[key] not in labels
    }
    if invalid:
        raise MalformedRequest(
            f"Unknown filter value(s) for: {', '.join(sorted(invalid))}",
            details={"invalid": invalid}
        )


async def run_search(
    request: SearchRequest,
    corpus: ProviderCorpus,
    settings: Optional[Settings] = None,
    embedder: Optional[Embedder] = None,
    query_id: Optional[str] = None
) -> SearchResponse:
    """
    Execute one search request end to end

    Args:
        request: Parsed search request
        corpus: Provider corpus gateway
        settings: Service settings (process settings by default)
        embedder: Override for the embedding call
        query_id: Correlation ID for logs

    Returns:
        Assembled search response

    Raises:
        ProviderSearchException: Any core-detected failure; never swallowed
    """
    settings = settings or get_settings()
    query_id = query_id or str(uuid.uuid4())
    start_time = time.time()

    filters = request.filters
    query = request.query or ""

    if settings.strict_taxonomy:
        validate_filter_taxonomy(filters)

    mode = select_mode(query)
    logger.info(f"[{query_id}] Search mode={mode.value} query={query!r}")

    if mode is SearchMode.SEMANTIC:
        applied_limit = filters.effective_limit(settings.semantic_default_limit, settings.max_result_limit)
        ranked = await execute_semantic(
            query=query,
            filters=filters,
            corpus=corpus,
            settings=settings,
            embedder=embedder
        )
        records = [record for record, _ in ranked]
    else:
        applied_limit = filters.effective_limit(settings.structured_default_limit, settings.max_result_limit)
        records = await execute_structured(filters=filters, corpus=corpus, settings=settings)

    suggest_relax = should_suggest_relax(len(records), filters, threshold=settings.relax_threshold)

    response = assemble_response(
        records=records,
        query=query,
        filters=filters,
        applied_limit=applied_limit,
        mode=mode,
        suggest_relax=suggest_relax
    )

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(
        f"[{query_id}] Search completed in {latency_ms}ms: "
        f"{response.count} results, "
        f"suggest_relax={suggest_relax}"
    )

    return response
