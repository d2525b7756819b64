"""
PyTest configuration and fixtures for the provider search tests

Provides:
- Test settings (no .env lookup)
- Mock Supabase client whose query builder records the filter chain
- ProviderCorpus bound to the mock client
- Provider row factory
- In-memory async HTTP client against the FastAPI app
"""
import os

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from provider_search.config import Settings, get_settings
from provider_search.utils.supabase_client import ProviderCorpus, get_provider_corpus


BUILDER_METHODS = ("select", "contains", "eq", "ilike", "order", "limit")


def make_row(provider_id: str, similarity: Optional[float] = None, **overrides: Any) -> Dict[str, Any]:
    """Provider row as PostgREST returns it"""
    row = {
        "id": provider_id,
        "name": f"Provider {provider_id}",
        "city": "Austin",
        "country": "USA",
        "region": "North America",
        "website": f"{provider_id}.example.com",
        "email": f"hello@{provider_id}.example.com",
        "semantic_summary": "Builds voice agents for inbound sales calls.",
        "use_cases": ["Voice AI"],
        "business_functions": ["Sales"],
        "industries_served": ["Real Estate"],
    }
    if similarity is not None:
        row["similarity"] = similarity
    row.update(overrides)
    return row


def build_supabase_mock(
    rpc_rows: Optional[List[Dict[str, Any]]] = None,
    table_rows: Optional[List[Dict[str, Any]]] = None
) -> MagicMock:
    """Mock Supabase client; every builder method returns the same builder"""
    client = MagicMock()

    client.rpc.return_value.execute.return_value = MagicMock(data=rpc_rows or [])

    builder = MagicMock()
    for method in BUILDER_METHODS:
        getattr(builder, method).return_value = builder
    builder.execute.return_value = MagicMock(data=table_rows or [])
    client.table.return_value = builder

    return client


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, isolated from any local .env"""
    return Settings(
        _env_file=None,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-service-role-key",
        openai_api_key="test-openai-key",
    )


@pytest.fixture
def supabase_mock() -> MagicMock:
    return build_supabase_mock()


@pytest.fixture
def corpus(supabase_mock) -> ProviderCorpus:
    return ProviderCorpus(client=supabase_mock, table="providers", match_function="search_providers")


@pytest_asyncio.fixture
async def api_client(corpus, settings):
    """In-memory client; lifespan is not run, dependencies are overridden"""
    from provider_search.main import app

    app.dependency_overrides[get_provider_corpus] = lambda: corpus
    app.dependency_overrides[get_settings] = lambda: settings

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
