"""
Tests for the relax-filters suggestion
"""
import pytest

from provider_search.models.requests import SearchFilters
from provider_search.services.result_quality import should_suggest_relax


class TestShouldSuggestRelax:
    """Truth table for should_suggest_relax"""

    @pytest.mark.parametrize("filters", [
        {"useCase": "Voice AI"},
        {"businessFunction": "Sales"},
        {"industry": "Real Estate"},
        {"industry": "Real Estate", "region": "Europe"},
    ])
    def test_few_results_with_taxonomy_filter(self, filters):
        assert should_suggest_relax(3, SearchFilters(**filters)) is True

    @pytest.mark.parametrize("filters", [
        {},
        {"region": "Europe"},
        {"country": "Germany"},
        {"region": "Europe", "country": "Germany", "limit": 10},
    ])
    def test_few_results_without_taxonomy_filter(self, filters):
        """Region and country are broad dimensions and never trigger the flag"""
        assert should_suggest_relax(0, SearchFilters(**filters)) is False

    def test_threshold_is_exclusive(self):
        filters = SearchFilters(useCase="Voice AI")

        assert should_suggest_relax(4, filters) is True
        assert should_suggest_relax(5, filters) is False
        assert should_suggest_relax(50, filters) is False

    def test_blank_filter_values_do_not_count(self):
        filters = SearchFilters(useCase="", industry="   ")

        assert should_suggest_relax(0, filters) is False

    def test_custom_threshold(self):
        filters = SearchFilters(industry="Cybersecurity")

        assert should_suggest_relax(9, filters, threshold=10) is True
        assert should_suggest_relax(10, filters, threshold=10) is False
