"""
Shared test fixtures and configuration for entire test suite.

Provides: fake embedders and extractors, pipeline settings, temp file cleanup
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from pdf_embedder.core.document_processing.configs import DocumentPipelineSettings
from pdf_embedder.core.document_processing.models import ExtractedText
from pdf_embedder.core.exceptions import EmbeddingError, ExtractionError

MINIMAL_PDF = b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n"


class FakeEmbedder:
    """Embedder returning a deterministic vector; records every request."""

    def __init__(self, fail_on: set[int] | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self._fail_on = fail_on or set()

    async def embed(self, text: str, model: str) -> list[float]:
        call_number = len(self.calls)
        self.calls.append((text, model))
        if call_number in self._fail_on:
            raise EmbeddingError("HTTP error! Status: 500")
        return [float(len(text)), float(call_number), 0.5]


class FakeExtractor:
    """Extractor returning fixed text, or failing with ExtractionError."""

    def __init__(self, name: str = "fake", text: str | None = None, num_pages: int = 1) -> None:
        self.name = name
        self._text = text
        self._num_pages = num_pages
        self.calls: list[bytes] = []

    def extract(self, data: bytes) -> ExtractedText:
        self.calls.append(data)
        if self._text is None:
            raise ExtractionError(f"{self.name} cannot read this document", backend=self.name)
        return ExtractedText(text=self._text, num_pages=self._num_pages, backend=self.name)


@pytest.fixture
def pdf_bytes() -> bytes:
    """Bytes that pass upload validation (PDF header only)."""
    return MINIMAL_PDF


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="pdf_embedder_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_pdf_file(temp_dir):
    """
    Create a temporary PDF-like file for testing.

    Returns:
        Path: Path to temporary PDF file
    """
    path = temp_dir / "sample.pdf"
    path.write_bytes(MINIMAL_PDF)
    return path


@pytest.fixture
def pipeline_settings(temp_dir) -> DocumentPipelineSettings:
    """Pipeline settings writing into the temp directory."""
    return DocumentPipelineSettings(
        output_directory=str(temp_dir / "processed"),
        enable_fallback_extractor=False,
        embedding_model="test-model",
    )


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def make_embedder():
    """Factory for FakeEmbedder instances (fail_on = zero-based call numbers)."""
    return FakeEmbedder


@pytest.fixture
def make_extractor():
    """Factory for FakeExtractor instances (text=None makes it fail)."""
    return FakeExtractor
