"""
Core service modules for the provider search service
"""
from .mode_selector import select_mode
from .query_executor import execute_semantic, execute_structured
from .result_quality import should_suggest_relax
from .response_assembler import assemble_response, error_response
from .search_pipeline import run_search, validate_filter_taxonomy

__all__ = [
    "select_mode",
    "execute_semantic",
    "execute_structured",
    "should_suggest_relax",
    "assemble_response",
    "error_response",
    "run_search",
    "validate_filter_taxonomy",
]
