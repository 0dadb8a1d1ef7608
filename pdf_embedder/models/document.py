"""
Document API schemas.

Response schemas for batch document processing.

Dependencies: pydantic
System role: Document API contracts
"""

from pydantic import BaseModel, Field

from pdf_embedder.core.document_processing.models import DocumentSummary


class BatchProcessResponse(BaseModel):
    """Per-file outcomes of a batch upload, in upload order."""

    results: list[DocumentSummary] = Field(default_factory=list)
