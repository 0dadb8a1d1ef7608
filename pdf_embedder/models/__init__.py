"""
API request/response schemas.

Exports: BatchProcessResponse, HealthResponse
"""

from pdf_embedder.models.document import BatchProcessResponse
from pdf_embedder.models.health import HealthResponse

__all__ = ["BatchProcessResponse", "HealthResponse"]
