"""
Persisted document record model.

Mirrors the JSON written for every processed document:
{"metadata": {...}, "chunks": [...]} with camelCase metadata keys.

Dependencies: pydantic
System role: Persistence contract for processed documents
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .chunk import EmbeddedChunk


class RecordMetadata(BaseModel):
    """Document-level metadata stored alongside the chunks."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    total_pages: int = Field(alias="totalPages", ge=0)
    processed_at: datetime = Field(
        alias="processedAt",
        default_factory=lambda: datetime.now(timezone.utc),
    )
    model: str
    chunk_size: int = Field(alias="chunkSize")
    chunk_overlap: int = Field(alias="chunkOverlap")


class DocumentRecord(BaseModel):
    """Full record of one processed document."""

    metadata: RecordMetadata
    chunks: list[EmbeddedChunk] = Field(default_factory=list)

    @property
    def embedded_count(self) -> int:
        """Number of chunks that received a vector."""
        return sum(1 for chunk in self.chunks if chunk.embedding is not None)

    def to_json_dict(self) -> dict:
        """
        Convert record to its JSON-serializable form.

        `embedding` is always present (null on failure); `error` only when set.

        Returns:
            dict: Serializable record data
        """
        metadata = self.metadata.model_dump(by_alias=True)
        metadata["processedAt"] = self.metadata.processed_at.isoformat()
        return {
            "metadata": metadata,
            "chunks": [self._serialize_chunk(chunk) for chunk in self.chunks],
        }

    @staticmethod
    def _serialize_chunk(chunk: EmbeddedChunk) -> dict:
        data = {
            "text": chunk.text,
            "index": chunk.index,
            "start": chunk.start,
            "end": chunk.end,
            "embedding": chunk.embedding,
        }
        if chunk.error is not None:
            data["error"] = chunk.error
        return data
