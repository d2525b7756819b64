"""
Query Executor
Runs semantic (embedding-ranked) or structured (filter-only) retrieval
against the provider corpus
"""
import asyncio
from typing import Awaitable, Callable, List, Dict, Optional, Any, Tuple
import logging

from pydantic import ValidationError

from provider_search.config import Settings, get_settings
from provider_search.exceptions import RetrievalFailure
from provider_search.models.requests import SearchFilters
from provider_search.models.responses import ProviderRecord
from provider_search.utils.embeddings import get_embedding
from provider_search.utils.supabase_client import ProviderCorpus

logger = logging.getLogger(__name__)

Embedder = Callable[[str], Awaitable[List[float]]]


async def execute_semantic(
    query: str,
    filters: SearchFilters,
    corpus: ProviderCorpus,
    settings: Optional[Settings] = None,
    embedder: Optional[Embedder] = None
) -> List[Tuple[ProviderRecord, float]]:
    """
    Embed the query and retrieve providers ranked by similarity

    Args:
        query: Free-text query, embedded verbatim
        filters: Active filters; unset ones apply no constraint
        corpus: Provider corpus gateway
        settings: Service settings (process settings by default)
        embedder: Coroutine producing the query vector (OpenAI by default)

    Returns:
        (record, similarity) pairs, similarity non-increasing

    Raises:
        EmbeddingUnavailable: If the query vector cannot be produced
        RetrievalFailure: If the ranking RPC fails or times out
    """
    settings = settings or get_settings()
    embed = embedder or get_embedding
    match_count = filters.effective_limit(settings.semantic_default_limit, settings.max_result_limit)

    # Retrieval input depends on the vector, so these run strictly in sequence
    query_embedding = await embed(query)

    rows = await _run_bounded(
        corpus.match_providers,
        settings.retrieval_timeout_seconds,
        query_embedding=query_embedding,
        match_count=match_count,
        use_case=filters.use_case,
        business_function=filters.business_function,
        industry=filters.industry,
        region=filters.region,
        country=filters.country,
    )

    ranked = []
    for row in rows:
        if row.get("similarity") is None:
            raise RetrievalFailure("ranked row is missing a similarity score")
        score = min(1.0, max(0.0, float(row["similarity"])))
        record = _to_record({**row, "similarity": score})
        ranked.append((record, score))

    # Stable: equal scores keep the order the store returned them in
    ranked.sort(key=lambda pair: pair[1], reverse=True)

    return ranked[:match_count]


async def execute_structured(
    filters: SearchFilters,
    corpus: ProviderCorpus,
    settings: Optional[Settings] = None
) -> List[ProviderRecord]:
    """
    Retrieve providers matching the filters, without ranking

    Raises:
        RetrievalFailure: If the query fails or times out
    """
    settings = settings or get_settings()
    limit = filters.effective_limit(settings.structured_default_limit, settings.max_result_limit)

    rows = await _run_bounded(
        corpus.browse_providers,
        settings.retrieval_timeout_seconds,
        limit=limit,
        use_case=filters.use_case,
        business_function=filters.business_function,
        industry=filters.industry,
        region=filters.region,
        country=filters.country,
    )

    records = [_to_record(row) for row in rows]
    return records[:limit]


async def _run_bounded(func: Callable[..., List[Dict[str, Any]]], timeout: float, **kwargs) -> List[Dict[str, Any]]:
    # supabase-py is blocking; keep it off the event loop and bound the wait
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, **kwargs), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error(f"Corpus call {getattr(func, '__name__', func)} timed out after {timeout}s")
        raise RetrievalFailure(f"corpus call timed out after {timeout}s") from e


def _to_record(row: Dict[str, Any]) -> ProviderRecord:
    try:
        return ProviderRecord.model_validate(row)
    except ValidationError as e:
        logger.error(f"Corpus returned a malformed provider row: {e}")
        raise RetrievalFailure("corpus returned a malformed provider row") from e
