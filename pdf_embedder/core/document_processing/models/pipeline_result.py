"""
Pipeline result models for document processing.

PipelineResult is the outcome of processing one document. DocumentSummary is
the per-document entry reported by batch processing.

Dependencies: pydantic
System role: Return types for DocumentPipeline.process() and process_batch()
"""

from pydantic import BaseModel, ConfigDict, Field


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    document_id: str = Field(description="Unique document identifier")
    file_name: str = Field(description="Original file name")
    num_pages: int = Field(description="Pages reported by the extractor")
    chunk_count: int = Field(description="Number of chunks generated")
    embedded_count: int = Field(description="Number of chunks with an embedding")
    output_path: str = Field(description="Path to saved JSON output")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")


class DocumentSummary(BaseModel):
    """Per-document outcome of a batch run."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    success: bool
    file_id: str | None = Field(default=None, alias="fileId")
    num_pages: int | None = Field(default=None, alias="numPages")
    num_chunks: int | None = Field(default=None, alias="numChunks")
    num_embeddings: int | None = Field(default=None, alias="numEmbeddings")
    error: str | None = None

    @classmethod
    def from_result(cls, result: PipelineResult) -> "DocumentSummary":
        """Build a success entry from a pipeline result."""
        return cls(
            file_name=result.file_name,
            success=True,
            file_id=result.document_id,
            num_pages=result.num_pages,
            num_chunks=result.chunk_count,
            num_embeddings=result.embedded_count,
        )

    @classmethod
    def failed(cls, file_name: str, error: str) -> "DocumentSummary":
        """Build a failure entry."""
        return cls(file_name=file_name, success=False, error=error)
