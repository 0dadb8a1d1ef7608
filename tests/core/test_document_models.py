"""Tests for document processing models, settings, and exceptions.

Tests:
- Pydantic models (TextChunk, EmbeddedChunk, DocumentRecord, DocumentSummary)
- Configuration settings
- Exception hierarchy
"""

import os
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from pdf_embedder.configs import Settings
from pdf_embedder.core.document_processing.configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from pdf_embedder.core.document_processing.models import (
    DocumentRecord,
    DocumentSummary,
    EmbeddedChunk,
    PipelineResult,
    RecordMetadata,
    TextChunk,
)
from pdf_embedder.core.exceptions import (
    DocumentProcessingError,
    EmbeddingError,
    ExtractionError,
    PdfEmbedderException,
    RecordNotFoundError,
    ValidationError,
)


# ============================================================================
# Pydantic Model Tests
# ============================================================================


class TestTextChunkModel:
    """Test TextChunk validation."""

    def test_chunk_creation(self) -> None:
        """Should create chunk with all fields."""
        chunk = TextChunk(text="hello", index=0, start=0, end=5)

        assert (chunk.text, chunk.index, chunk.start, chunk.end) == ("hello", 0, 0, 5)

    def test_chunk_is_immutable(self) -> None:
        """Should reject attribute assignment."""
        chunk = TextChunk(text="hello", index=0, start=0, end=5)

        with pytest.raises(PydanticValidationError):
            chunk.text = "changed"

    def test_chunk_rejects_empty_text(self) -> None:
        """Should require non-empty text."""
        with pytest.raises(PydanticValidationError):
            TextChunk(text="", index=0, start=0, end=1)

    def test_chunk_rejects_inverted_bounds(self) -> None:
        """Should require end > start."""
        with pytest.raises(PydanticValidationError):
            TextChunk(text="x", index=0, start=5, end=5)

    def test_chunk_rejects_negative_index(self) -> None:
        """Should require non-negative index."""
        with pytest.raises(PydanticValidationError):
            TextChunk(text="x", index=-1, start=0, end=1)


class TestEmbeddedChunkModel:
    """Test EmbeddedChunk construction helpers."""

    def test_with_embedding_copies_span(self) -> None:
        """Should keep span fields and attach the vector."""
        chunk = TextChunk(text="hello", index=2, start=10, end=15)

        embedded = EmbeddedChunk.with_embedding(chunk, [0.1, 0.2])

        assert (embedded.text, embedded.index, embedded.start, embedded.end) == ("hello", 2, 10, 15)
        assert embedded.embedding == [0.1, 0.2]
        assert embedded.error is None

    def test_with_error_leaves_embedding_empty(self) -> None:
        """Should attach error and leave embedding None."""
        chunk = TextChunk(text="hello", index=0, start=0, end=5)

        failed = EmbeddedChunk.with_error(chunk, "HTTP error! Status: 500")

        assert failed.embedding is None
        assert failed.error == "HTTP error! Status: 500"

    def test_with_error_never_stores_empty_message(self) -> None:
        """Should substitute a message for an empty error string."""
        chunk = TextChunk(text="hello", index=0, start=0, end=5)

        assert EmbeddedChunk.with_error(chunk, "").error

    def test_with_embedding_from_embedded_chunk(self) -> None:
        """Should re-decorate an already embedded chunk without conflicts."""
        chunk = EmbeddedChunk(text="x", index=0, start=0, end=1, error="old")

        embedded = EmbeddedChunk.with_embedding(chunk, [1.0])

        assert embedded.embedding == [1.0]
        assert embedded.error is None


class TestDocumentRecordModel:
    """Test DocumentRecord serialization."""

    @pytest.fixture
    def record(self) -> DocumentRecord:
        chunk_a = TextChunk(text="first", index=0, start=0, end=5)
        chunk_b = TextChunk(text="second", index=1, start=4, end=11)
        return DocumentRecord(
            metadata=RecordMetadata(
                file_name="doc.pdf",
                total_pages=3,
                processed_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                model="test-model",
                chunk_size=1000,
                chunk_overlap=200,
            ),
            chunks=[
                EmbeddedChunk.with_embedding(chunk_a, [0.5, 0.25]),
                EmbeddedChunk.with_error(chunk_b, "boom"),
            ],
        )

    def test_metadata_uses_camel_case(self, record: DocumentRecord) -> None:
        """Should serialize metadata with camelCase keys and ISO timestamp."""
        metadata = record.to_json_dict()["metadata"]

        assert metadata == {
            "fileName": "doc.pdf",
            "totalPages": 3,
            "processedAt": "2026-01-02T03:04:05+00:00",
            "model": "test-model",
            "chunkSize": 1000,
            "chunkOverlap": 200,
        }

    def test_chunk_serialization(self, record: DocumentRecord) -> None:
        """Should always include embedding and include error only on failure."""
        chunks = record.to_json_dict()["chunks"]

        assert chunks[0] == {"text": "first", "index": 0, "start": 0, "end": 5, "embedding": [0.5, 0.25]}
        assert chunks[1] == {
            "text": "second",
            "index": 1,
            "start": 4,
            "end": 11,
            "embedding": None,
            "error": "boom",
        }

    def test_embedded_count(self, record: DocumentRecord) -> None:
        """Should count only chunks with a vector."""
        assert record.embedded_count == 1

    def test_round_trip_from_json_dict(self, record: DocumentRecord) -> None:
        """Should validate the serialized form back into an equal record."""
        restored = DocumentRecord.model_validate(record.to_json_dict())

        assert restored == record


class TestDocumentSummaryModel:
    """Test DocumentSummary construction."""

    def test_from_result(self) -> None:
        """Should build a success entry with camelCase aliases."""
        result = PipelineResult(
            document_id="abc",
            file_name="doc.pdf",
            num_pages=2,
            chunk_count=4,
            embedded_count=3,
            output_path="/tmp/abc.json",
            processing_time_ms=12.5,
        )

        data = DocumentSummary.from_result(result).model_dump(by_alias=True)

        assert data == {
            "fileName": "doc.pdf",
            "success": True,
            "fileId": "abc",
            "numPages": 2,
            "numChunks": 4,
            "numEmbeddings": 3,
            "error": None,
        }

    def test_failed(self) -> None:
        """Should build a failure entry carrying the message."""
        summary = DocumentSummary.failed("bad.pdf", "PDF text extraction failed")

        assert summary.success is False
        assert summary.file_id is None
        assert summary.error == "PDF text extraction failed"


# ============================================================================
# Configuration Tests
# ============================================================================


class TestDocumentPipelineSettings:
    """Test DocumentPipelineSettings configuration."""

    def test_settings_with_defaults(self) -> None:
        """Should use default values."""
        settings = DocumentPipelineSettings(_env_file=None)

        assert settings.chunk_size == 1000
        assert settings.chunk_overlap == 200
        assert settings.break_window == 100
        assert settings.embedding_base_url == "http://localhost:11434"
        assert settings.embedding_endpoint == "/api/embeddings"
        assert settings.embedding_concurrency == 1
        assert settings.output_directory == "./data/processed"

    def test_settings_from_env_vars(self) -> None:
        """Should load settings from environment variables."""
        os.environ["DOC_PIPELINE_CHUNK_SIZE"] = "2000"
        os.environ["DOC_PIPELINE_CHUNK_OVERLAP"] = "300"
        os.environ["DOC_PIPELINE_EMBEDDING_MODEL"] = "nomic-embed-text"

        try:
            settings = DocumentPipelineSettings(_env_file=None)

            assert settings.chunk_size == 2000
            assert settings.chunk_overlap == 300
            assert settings.embedding_model == "nomic-embed-text"
        finally:
            for key in ["DOC_PIPELINE_CHUNK_SIZE", "DOC_PIPELINE_CHUNK_OVERLAP", "DOC_PIPELINE_EMBEDDING_MODEL"]:
                os.environ.pop(key, None)

    def test_settings_reject_invalid_values(self) -> None:
        """Should reject non-positive chunk size and zero concurrency."""
        with pytest.raises(PydanticValidationError):
            DocumentPipelineSettings(_env_file=None, chunk_size=0)
        with pytest.raises(PydanticValidationError):
            DocumentPipelineSettings(_env_file=None, embedding_concurrency=0)

    def test_get_pipeline_settings_caching(self) -> None:
        """Should cache settings with lru_cache."""
        assert get_pipeline_settings() is get_pipeline_settings()

    def test_application_settings_nest_pipeline(self) -> None:
        """Should expose pipeline settings on the application settings."""
        settings = Settings(_env_file=None)

        assert isinstance(settings.pipeline, DocumentPipelineSettings)
        assert settings.api_port == 8000
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_application_settings_from_env_vars(self) -> None:
        """Should load log level and debug flag from environment variables."""
        os.environ["LOG_LEVEL"] = "DEBUG"
        os.environ["DEBUG"] = "true"

        try:
            settings = Settings(_env_file=None)

            assert settings.log_level == "DEBUG"
            assert settings.debug is True
        finally:
            for key in ["LOG_LEVEL", "DEBUG"]:
                os.environ.pop(key, None)


# ============================================================================
# Exception Tests
# ============================================================================


class TestExceptions:
    """Test exception hierarchy and context."""

    def test_str_includes_details(self) -> None:
        """Should append details to the message."""
        error = PdfEmbedderException("failed", details={"key": "value"})

        assert str(error) == "failed | Details: {'key': 'value'}"

    def test_validation_error_records_field(self) -> None:
        """Should expose the offending field."""
        error = ValidationError("bad overlap", field="overlap")

        assert error.field == "overlap"
        assert error.details == {"field": "overlap"}

    def test_extraction_error_hierarchy(self) -> None:
        """Should be a document processing error with backend context."""
        error = ExtractionError("unreadable", document_id="doc-1", backend="pypdf")

        assert isinstance(error, DocumentProcessingError)
        assert error.backend == "pypdf"
        assert error.details == {"backend": "pypdf", "document_id": "doc-1"}

    def test_embedding_error_hierarchy(self) -> None:
        """Should be a document processing error."""
        assert isinstance(EmbeddingError("HTTP error! Status: 500"), DocumentProcessingError)

    def test_record_not_found_message(self) -> None:
        """Should name the missing identifier."""
        error = RecordNotFoundError("abc")

        assert error.message == "Document record not found: abc"
        assert error.document_id == "abc"
