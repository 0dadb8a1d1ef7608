"""Dependency injection for API routes."""

from pdf_embedder.api.deps.dependencies import (
    get_document_pipeline,
    get_service_cache,
)

__all__ = ["get_document_pipeline", "get_service_cache"]
