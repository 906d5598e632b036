"""
Library configuration using Pydantic Settings.

Supports loading from environment variables (prefixed AI_CONNECTIFY_) and .env files.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROVIDER_MODULES = [
    "ai_connectify.providers.chatgpt",
    "ai_connectify.providers.claude",
    "ai_connectify.providers.cohere",
    "ai_connectify.providers.dalle",
    "ai_connectify.providers.mistral",
    "ai_connectify.providers.stability",
    "ai_connectify.providers.tensorflow",
]


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AI_CONNECTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============ HTTP ============
    request_timeout: float = 10.0  # seconds, JSON endpoints
    media_timeout: float = 120.0  # seconds, image/audio/video endpoints

    # ============ Logging ============
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ============ Discovery ============
    providers: List[str] = DEFAULT_PROVIDER_MODULES

    # ============ Provider endpoints ============
    openai_base_url: str = "https://api.openai.com/v1"
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    anthropic_version: str = "2023-06-01"
    cohere_base_url: str = "https://api.cohere.com"
    mistral_base_url: str = "https://api.mistral.ai/v1"
    stability_base_url: str = "https://api.stability.ai/v2beta"

    # ============ Optional default headers ============
    openai_organization: Optional[str] = None
    openai_project: Optional[str] = None
    cohere_client_name: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
