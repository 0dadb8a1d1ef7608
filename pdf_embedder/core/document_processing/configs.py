"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for extraction, chunking, embedding, and saving.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    break_window: int | None = Field(
        default=100,
        ge=0,
        description="How far back from the target end a break point may be searched (None = unbounded)",
    )
    chunk_strategy: str = Field(
        default="semantic",
        description="Break-point strategy: 'semantic' (paragraph, sentence, word) or 'word'",
    )
    preserve_paragraphs: bool = Field(
        default=True,
        description="Keep blank lines as paragraph markers when normalizing text",
    )

    # Embedding service settings
    embedding_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the Ollama-compatible embedding service",
    )
    embedding_endpoint: str = Field(
        default="/api/embeddings",
        description="Embedding endpoint path on the service",
    )
    embedding_model: str = Field(
        default="snowflake-arctic-embed2",
        description="Default embedding model name",
    )
    embedding_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
    embedding_concurrency: int = Field(
        default=1,
        ge=1,
        description="Maximum in-flight embedding requests (1 = sequential)",
    )

    # Extraction settings
    enable_fallback_extractor: bool = Field(
        default=True,
        description="Try pdftotext when the primary extractor fails",
    )
    max_file_size: int = Field(
        default=25 * 1024 * 1024,
        gt=0,
        description="Maximum accepted PDF size in bytes",
    )

    # Output settings
    output_directory: str = Field(
        default="./data/processed",
        description="Directory for persisted JSON document records",
    )


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
