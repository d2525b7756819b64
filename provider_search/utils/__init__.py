"""
Utility modules for the provider search service
"""
from .supabase_client import get_supabase_client, get_provider_corpus, ProviderCorpus
from .embeddings import get_embedding
from .region_classifier import infer_region

__all__ = [
    "get_supabase_client",
    "get_provider_corpus",
    "ProviderCorpus",
    "get_embedding",
    "infer_region",
]
