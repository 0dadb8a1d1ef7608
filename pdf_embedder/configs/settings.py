"""
Unified application settings.

Aggregates server settings and the document pipeline settings into a single
Settings class.

Dependencies: pydantic_settings, document_processing.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from pdf_embedder.configs.base import BaseSettings
from pdf_embedder.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings."""

    api_host: str = Field(
        default="127.0.0.1",
        description="Host interface the HTTP API binds to",
    )
    api_port: int = Field(
        default=8000,
        gt=0,
        lt=65536,
        description="Port the HTTP API listens on",
    )

    # Aggregated settings
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once and cached.

    Returns:
        Settings: Application settings instance

    Usage:
        from pdf_embedder.configs import get_settings
        settings = get_settings()
    """
    return Settings()
