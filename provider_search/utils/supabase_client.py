"""
Supabase access to the provider corpus

Both retrieval paths push filtering (and, for semantic search, ranking) to
Postgres; rows are never scanned client-side.
"""
from typing import List, Dict, Any, Optional
from functools import lru_cache
import logging

import httpx
from supabase import create_client, Client, ClientOptions
from postgrest.exceptions import APIError

from provider_search.config import get_settings
from provider_search.exceptions import RetrievalFailure

logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get Supabase client instance (cached, service role)

    The PostgREST timeout bounds every corpus call.
    """
    settings = get_settings()
    options = ClientOptions(postgrest_client_timeout=settings.retrieval_timeout_seconds)
    client = create_client(settings.supabase_url, settings.supabase_service_role_key, options=options)
    logger.info("Supabase client created")
    return client


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so value matches as a literal substring"""
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


def array_literal(value: str) -> str:
    """Single-element Postgres array literal, quoted so commas and braces stay literal"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return '{"' + escaped + '"}'


class ProviderCorpus:
    """Read-only gateway to the canonical provider table and its ranking RPC"""

    def __init__(
        self,
        client: Client,
        table: str = "providers",
        match_function: str = "search_providers"
    ):
        self.client = client
        self.table = table
        self.match_function = match_function

    def match_providers(
        self,
        query_embedding: List[float],
        match_count: int,
        use_case: Optional[str] = None,
        business_function: Optional[str] = None,
        industry: Optional[str] = None,
        region: Optional[str] = None,
        country: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Similarity-ranked retrieval via the search RPC

        A None filter is passed as SQL NULL, which the RPC treats as
        "no constraint on this dimension". Country is LIKE-escaped the same
        way browse_providers escapes it.

        Returns:
            Rows ordered by descending similarity, each with a "similarity" key

        Raises:
            RetrievalFailure: If the RPC errors or times out
        """
        params = {
            "query_embedding": query_embedding,
            "match_count": match_count,
            "filter_use_case": use_case,
            "filter_business_function": business_function,
            "filter_industry": industry,
            "filter_region": region,
            "filter_country": escape_like(country) if country else None,
        }

        try:
            response = self.client.rpc(self.match_function, params).execute()
        except APIError as e:
            logger.error(f"{self.match_function} RPC failed: {e}")
            raise RetrievalFailure(e.message or str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"{self.match_function} RPC transport error: {e}")
            raise RetrievalFailure(f"corpus unreachable ({e.__class__.__name__})") from e

        return response.data or []

    def browse_providers(
        self,
        limit: int,
        use_case: Optional[str] = None,
        business_function: Optional[str] = None,
        industry: Optional[str] = None,
        region: Optional[str] = None,
        country: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Filter-only retrieval, no ranking

        Tag filters are array containment, region is equality and country is
        a case-insensitive substring match. Rows come back in id order.

        Raises:
            RetrievalFailure: If the query errors or times out
        """
        query = self.client.table(self.table).select("*")

        if use_case:
            query = query.contains("use_cases", array_literal(use_case))
        if business_function:
            query = query.contains("business_functions", array_literal(business_function))
        if industry:
            query = query.contains("industries_served", array_literal(industry))
        if region:
            query = query.eq("region", region)
        if country:
            query = query.ilike("country", f"%{escape_like(country)}%")

        query = query.order("id").limit(limit)

        try:
            response = query.execute()
        except APIError as e:
            logger.error(f"Provider browse query failed: {e}")
            raise RetrievalFailure(e.message or str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"Provider browse transport error: {e}")
            raise RetrievalFailure(f"corpus unreachable ({e.__class__.__name__})") from e

        return response.data or []


def get_provider_corpus() -> ProviderCorpus:
    """FastAPI dependency: corpus bound to the configured table and RPC"""
    settings = get_settings()
    return ProviderCorpus(
        client=get_supabase_client(),
        table=settings.providers_table,
        match_function=settings.match_function
    )
