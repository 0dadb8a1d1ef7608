"""
Chunk domain models for document processing pipeline.

TextChunk is the immutable span produced by the chunker. EmbeddedChunk is a
copy of it decorated with either an embedding vector or an error message.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

_SPAN_FIELDS = {"text", "index", "start", "end"}


class TextChunk(BaseModel):
    """Overlapping span of normalized document text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="Trimmed chunk text")
    index: int = Field(ge=0, description="Position in the emitted chunk sequence")
    start: int = Field(ge=0, description="Offset where the span begins (inclusive)")
    end: int = Field(ge=0, description="Offset where the span was cut (exclusive, pre-trim)")

    @model_validator(mode="after")
    def _check_bounds(self) -> "TextChunk":
        if self.end <= self.start:
            raise ValueError(f"end ({self.end}) must be greater than start ({self.start})")
        return self


class EmbeddedChunk(TextChunk):
    """Chunk decorated with the outcome of its embedding request."""

    embedding: list[float] | None = Field(default=None, description="Embedding vector")
    error: str | None = Field(default=None, description="Failure message when embedding failed")

    @classmethod
    def with_embedding(cls, chunk: TextChunk, embedding: list[float]) -> "EmbeddedChunk":
        """Copy a chunk and attach its vector."""
        return cls(**chunk.model_dump(include=_SPAN_FIELDS), embedding=embedding)

    @classmethod
    def with_error(cls, chunk: TextChunk, error: str) -> "EmbeddedChunk":
        """Copy a chunk and attach the failure message."""
        return cls(**chunk.model_dump(include=_SPAN_FIELDS), error=error or "Unknown embedding error")
