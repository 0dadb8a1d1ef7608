"""
Core business logic module.

Contains the exception hierarchy and the document processing pipeline.
All chunking, extraction and embedding rules reside here.
"""

from pdf_embedder.core.exceptions import (
    DocumentProcessingError,
    EmbeddingError,
    ExtractionError,
    PdfEmbedderException,
    RecordNotFoundError,
    ValidationError,
)

__all__ = [
    "PdfEmbedderException",
    "ValidationError",
    "DocumentProcessingError",
    "ExtractionError",
    "EmbeddingError",
    "RecordNotFoundError",
]
