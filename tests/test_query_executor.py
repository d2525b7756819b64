"""
Tests for semantic and structured query execution
"""
import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from provider_search.exceptions import EmbeddingUnavailable, RetrievalFailure
from provider_search.models.requests import SearchFilters
from provider_search.services.query_executor import execute_semantic, execute_structured
from provider_search.utils.supabase_client import ProviderCorpus

from conftest import make_row


@pytest.fixture
def embedder():
    return AsyncMock(return_value=[0.01] * 1536)


class TestExecuteSemantic:
    """Embedding + ranked retrieval"""

    async def test_embeds_literal_query(self, corpus, settings, embedder):
        await execute_semantic("  voice AI for real estate ", SearchFilters(), corpus, settings, embedder)

        embedder.assert_awaited_once_with("  voice AI for real estate ")

    async def test_default_match_count(self, corpus, supabase_mock, settings, embedder):
        await execute_semantic("CRM automation", SearchFilters(), corpus, settings, embedder)

        params = supabase_mock.rpc.call_args[0][1]
        assert params["match_count"] == 100

    async def test_match_count_clamped(self, corpus, supabase_mock, settings, embedder):
        await execute_semantic("CRM automation", SearchFilters(limit=500), corpus, settings, embedder)

        params = supabase_mock.rpc.call_args[0][1]
        assert params["match_count"] == 100

    async def test_only_set_filters_constrain(self, corpus, supabase_mock, settings, embedder):
        filters = SearchFilters(industry="Real Estate", country="")

        await execute_semantic("voice AI", filters, corpus, settings, embedder)

        params = supabase_mock.rpc.call_args[0][1]
        assert params["filter_industry"] == "Real Estate"
        assert params["filter_use_case"] is None
        assert params["filter_business_function"] is None
        assert params["filter_region"] is None
        assert params["filter_country"] is None

    async def test_similarity_non_increasing(self, corpus, supabase_mock, settings, embedder):
        supabase_mock.rpc.return_value.execute.return_value.data = [
            make_row("a", similarity=0.91),
            make_row("b", similarity=0.72),
            make_row("c", similarity=0.72),
            make_row("d", similarity=0.40),
        ]

        ranked = await execute_semantic("voice AI", SearchFilters(), corpus, settings, embedder)

        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)
        assert [record.id for record, _ in ranked] == ["a", "b", "c", "d"]
        assert all(record.similarity == score for record, score in ranked)

    async def test_ties_keep_store_order(self, corpus, supabase_mock, settings, embedder):
        supabase_mock.rpc.return_value.execute.return_value.data = [
            make_row("z", similarity=0.5),
            make_row("y", similarity=0.8),
            make_row("x", similarity=0.5),
        ]

        ranked = await execute_semantic("voice AI", SearchFilters(), corpus, settings, embedder)

        assert [record.id for record, _ in ranked] == ["y", "z", "x"]

    async def test_scores_clamped_to_unit_interval(self, corpus, supabase_mock, settings, embedder):
        supabase_mock.rpc.return_value.execute.return_value.data = [
            make_row("a", similarity=1.0000002),
            make_row("b", similarity=-0.1),
        ]

        ranked = await execute_semantic("voice AI", SearchFilters(), corpus, settings, embedder)

        assert [score for _, score in ranked] == [1.0, 0.0]

    async def test_truncated_to_match_count(self, corpus, supabase_mock, settings, embedder):
        supabase_mock.rpc.return_value.execute.return_value.data = [
            make_row(f"p{i}", similarity=1.0 - i / 100) for i in range(10)
        ]

        ranked = await execute_semantic("voice AI", SearchFilters(limit=3), corpus, settings, embedder)

        assert len(ranked) == 3

    async def test_missing_similarity_is_retrieval_failure(self, corpus, supabase_mock, settings, embedder):
        supabase_mock.rpc.return_value.execute.return_value.data = [make_row("a")]

        with pytest.raises(RetrievalFailure):
            await execute_semantic("voice AI", SearchFilters(), corpus, settings, embedder)

    async def test_embedding_failure_skips_retrieval(self, corpus, supabase_mock, settings):
        embedder = AsyncMock(side_effect=EmbeddingUnavailable("embedding provider returned status 500"))

        with pytest.raises(EmbeddingUnavailable):
            await execute_semantic("voice AI", SearchFilters(), corpus, settings, embedder)

        supabase_mock.rpc.assert_not_called()

    async def test_retrieval_timeout(self, settings, embedder):
        settings.retrieval_timeout_seconds = 0.05
        slow_corpus = MagicMock(spec=ProviderCorpus)
        slow_corpus.match_providers.side_effect = lambda **kwargs: time.sleep(0.5) or []

        with pytest.raises(RetrievalFailure) as exc_info:
            await execute_semantic("voice AI", SearchFilters(), slow_corpus, settings, embedder)

        assert "timed out" in exc_info.value.message


class TestExecuteStructured:
    """Filter-only retrieval"""

    async def test_empty_filters_no_narrowing(self, corpus, supabase_mock, settings):
        rows = [make_row(f"p{i}") for i in range(7)]
        supabase_mock.table.return_value.execute.return_value.data = rows

        records = await execute_structured(SearchFilters(), corpus, settings)

        builder = supabase_mock.table.return_value
        builder.contains.assert_not_called()
        builder.eq.assert_not_called()
        builder.ilike.assert_not_called()
        builder.limit.assert_called_once_with(50)
        assert [record.id for record in records] == [row["id"] for row in rows]

    async def test_no_embedding_or_rpc(self, corpus, supabase_mock, settings):
        await execute_structured(SearchFilters(useCase="Voice AI"), corpus, settings)

        supabase_mock.rpc.assert_not_called()

    async def test_limit_clamped(self, corpus, supabase_mock, settings):
        await execute_structured(SearchFilters(limit=1000), corpus, settings)

        supabase_mock.table.return_value.limit.assert_called_once_with(100)

    async def test_records_have_no_similarity(self, corpus, supabase_mock, settings):
        supabase_mock.table.return_value.execute.return_value.data = [make_row("p1")]

        records = await execute_structured(SearchFilters(), corpus, settings)

        assert records[0].similarity is None

    async def test_malformed_row_is_retrieval_failure(self, corpus, supabase_mock, settings):
        supabase_mock.table.return_value.execute.return_value.data = [{"name": "no id"}]

        with pytest.raises(RetrievalFailure):
            await execute_structured(SearchFilters(), corpus, settings)
