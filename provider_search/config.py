"""
Provider Search Service Configuration
"""
from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from provider_search.exceptions import ConfigurationMissing


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase
    supabase_url: str
    supabase_service_role_key: str
    providers_table: str = "providers"
    match_function: str = "search_providers"

    # OpenAI
    openai_api_key: str
    openai_base_url: str = "https://api.openai.com/v1"
    embedding_model: str = "text-embedding-3-small"
    embedding_dimensions: int = 1536

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"

    # Search
    semantic_default_limit: int = 100
    structured_default_limit: int = 50
    max_result_limit: int = 100
    relax_threshold: int = 5
    strict_taxonomy: bool = False

    # Timeouts (seconds)
    embedding_timeout_seconds: float = 30.0
    retrieval_timeout_seconds: float = 15.0


@lru_cache()
def get_settings() -> Settings:
    """
    Load settings once per process

    Raises:
        ConfigurationMissing: If a required setting is absent
    """
    try:
        return Settings()
    except ValidationError as e:
        missing = [
            ".".join(str(part) for part in error["loc"])
            for error in e.errors()
        ]
        raise ConfigurationMissing(missing) from e
