"""
Document processing pipeline for ingestion.

Self-contained module for extracting, chunking, embedding, and saving PDF documents.

Dependencies: langchain_community, pypdf, httpx, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .embeddings_client import Embedder, OllamaEmbedder
from .entrypoint import DocumentPipeline
from .models import (
    DocumentRecord,
    DocumentSummary,
    EmbeddedChunk,
    ExtractedText,
    PipelineResult,
    TextChunk,
)

__all__ = [
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "Embedder",
    "OllamaEmbedder",
    "TextChunk",
    "EmbeddedChunk",
    "ExtractedText",
    "DocumentRecord",
    "DocumentSummary",
    "PipelineResult",
]
