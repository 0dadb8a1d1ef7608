"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: pdf_embedder.configs, pdf_embedder.core.document_processing
System role: DI container for service injection
"""

import logging

from pdf_embedder.configs import get_settings
from pdf_embedder.core.document_processing import DocumentPipeline

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._document_pipeline: DocumentPipeline | None = None

    @property
    def document_pipeline(self) -> DocumentPipeline:
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            self._document_pipeline = DocumentPipeline(settings=get_settings().pipeline)
            logger.info("Document pipeline initialized")
        return self._document_pipeline

    async def aclose(self) -> None:
        """Release pipeline resources and clear cached instances."""
        if self._document_pipeline is not None:
            await self._document_pipeline.aclose()
        self._document_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_document_pipeline() -> DocumentPipeline:
    """
    Get document pipeline instance.

    Returns:
        DocumentPipeline: Shared pipeline (override in tests via dependency_overrides)
    """
    return get_service_cache().document_pipeline
