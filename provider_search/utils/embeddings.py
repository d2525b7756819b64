"""
Embedding generation utilities
"""
import httpx
from typing import List, Optional
import logging

from provider_search.config import get_settings
from provider_search.exceptions import EmbeddingUnavailable

logger = logging.getLogger(__name__)


async def get_embedding(
    text: str,
    client: Optional[httpx.AsyncClient] = None
) -> List[float]:
    """
    Generate embedding for text using the OpenAI embeddings API

    Args:
        text: Text to embed, sent verbatim
        client: Optional pre-built HTTP client (a fresh one is opened otherwise)

    Returns:
        Embedding vector as list of floats

    Raises:
        EmbeddingUnavailable: On transport errors, timeouts, non-2xx status
            or a payload without data[0].embedding
    """
    settings = get_settings()

    if client is None:
        async with httpx.AsyncClient() as owned_client:
            return await _request_embedding(owned_client, text, settings)
    return await _request_embedding(client, text, settings)


async def _request_embedding(client: httpx.AsyncClient, text: str, settings) -> List[float]:
    try:
        response = await client.post(
            f"{settings.openai_base_url.rstrip('/')}/embeddings",
            headers={
                "Authorization": f"Bearer {settings.openai_api_key}",
                "Content-Type": "application/json"
            },
            json={
                "model": settings.embedding_model,
                "input": text
            },
            timeout=settings.embedding_timeout_seconds
        )
    except httpx.TimeoutException as e:
        logger.error(f"Embedding request timed out after {settings.embedding_timeout_seconds}s: {e}")
        raise EmbeddingUnavailable("embedding provider timed out") from e
    except httpx.HTTPError as e:
        logger.error(f"HTTP error generating embedding: {e}")
        raise EmbeddingUnavailable(f"embedding provider unreachable ({e.__class__.__name__})") from e

    if response.is_error:
        logger.error(f"Embedding provider returned {response.status_code}: {response.text[:500]}")
        raise EmbeddingUnavailable(f"embedding provider returned status {response.status_code}")

    try:
        embedding = response.json()["data"][0]["embedding"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"Malformed embedding payload: {e}")
        raise EmbeddingUnavailable("embedding payload missing data[0].embedding") from e

    if not isinstance(embedding, list) or not embedding:
        raise EmbeddingUnavailable("embedding payload missing data[0].embedding")

    # Validate dimensions
    if len(embedding) != settings.embedding_dimensions:
        logger.warning(
            f"Embedding dimension mismatch: got {len(embedding)}, "
            f"expected {settings.embedding_dimensions}"
        )

    return embedding
