"""
Document pipeline orchestrator.

Coordinates extraction, chunking, embedding, and saving tasks for a single
document or a batch of documents.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
import uuid
from typing import Iterable

from pdf_embedder.core.exceptions import DocumentProcessingError, PdfEmbedderException

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .embeddings_client import Embedder, OllamaEmbedder
from .models import (
    DocumentRecord,
    DocumentSummary,
    EmbeddedChunk,
    ExtractedText,
    PipelineResult,
    RecordMetadata,
)
from .tasks import (
    ChunkingTask,
    EmbeddingTask,
    ParsingTask,
    PdftotextExtractor,
    PyPDFExtractor,
    SavingTask,
)
from .validation import validate_chunk_parameters, validate_pdf_upload

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: extract -> chunk -> embed -> save."""

    def __init__(
        self,
        settings: DocumentPipelineSettings | None = None,
        parsing_task: ParsingTask | None = None,
        embedder: Embedder | None = None,
        saving_task: SavingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            settings: Pipeline settings (uses defaults if None)
            parsing_task: Text extraction task (PyPDF with optional pdftotext fallback if None)
            embedder: Embedding client (OllamaEmbedder from settings if None)
            saving_task: Record store (JSON files in settings.output_directory if None)
        """
        self._settings = settings or get_pipeline_settings()

        if parsing_task is None:
            fallback = PdftotextExtractor() if self._settings.enable_fallback_extractor else None
            parsing_task = ParsingTask(primary=PyPDFExtractor(), fallback=fallback)
        self._parsing_task = parsing_task

        self._owns_embedder = embedder is None
        self._embedder = embedder or OllamaEmbedder(
            base_url=self._settings.embedding_base_url,
            endpoint=self._settings.embedding_endpoint,
            timeout=self._settings.embedding_timeout,
        )
        self._saving_task = saving_task or SavingTask(self._settings.output_directory)

    @property
    def settings(self) -> DocumentPipelineSettings:
        return self._settings

    @property
    def saving_task(self) -> SavingTask:
        return self._saving_task

    async def process(
        self,
        data: bytes,
        file_name: str,
        chunk_size: int | None = None,
        overlap: int | None = None,
        model: str | None = None,
        document_id: str | None = None,
        output_path: str | None = None,
    ) -> PipelineResult:
        """
        Process one PDF through the full pipeline.

        Args:
            data: Raw PDF bytes
            file_name: Original file name
            chunk_size: Chunk size override (settings default if None)
            overlap: Chunk overlap override (settings default if None)
            model: Embedding model override (settings default if None)
            document_id: Optional document ID (generated if None)
            output_path: Explicit JSON destination (output directory if None)

        Returns:
            PipelineResult: Processing result with counts and output path

        Raises:
            ValidationError: Invalid parameters or upload
            ExtractionError: No extractor could read the document
            DocumentProcessingError: Record could not be written
        """
        chunk_size = self._settings.chunk_size if chunk_size is None else chunk_size
        overlap = self._settings.chunk_overlap if overlap is None else overlap
        model = model or self._settings.embedding_model

        validate_chunk_parameters(chunk_size, overlap)
        validate_pdf_upload(file_name, data, self._settings.max_file_size)

        start_time = time.perf_counter()
        doc_id = document_id or str(uuid.uuid4())

        # Extraction is blocking (file I/O, subprocess); keep it off the event loop
        extracted = await asyncio.to_thread(self._parsing_task.parse, data, file_name)
        extracted_at = time.perf_counter()

        chunking_task = ChunkingTask(
            chunk_size=chunk_size,
            chunk_overlap=overlap,
            break_window=self._settings.break_window,
            strategy=self._settings.chunk_strategy,
            preserve_paragraphs=self._settings.preserve_paragraphs,
        )
        chunks = chunking_task.chunk(extracted.text)
        chunked_at = time.perf_counter()

        embedding_task = EmbeddingTask(
            embedder=self._embedder,
            model=model,
            max_concurrency=self._settings.embedding_concurrency,
        )
        embedded_chunks = await embedding_task.embed(chunks)
        embedded_at = time.perf_counter()

        record = self.build_record(
            file_name=file_name,
            extracted=extracted,
            chunks=embedded_chunks,
            model=model,
            chunk_size=chunk_size,
            overlap=overlap,
        )
        try:
            if output_path is None:
                output_path = self._saving_task.save(record, doc_id)
            else:
                output_path = self._saving_task.save_to_path(record, output_path)
        except OSError as e:
            raise DocumentProcessingError(
                f"Failed to save document record: {e}",
                document_id=doc_id,
                details={"output_path": output_path, "error_type": type(e).__name__},
            ) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Processed {file_name}",
            extra={
                "document_id": doc_id,
                "backend": extracted.backend,
                "num_pages": extracted.num_pages,
                "chunk_count": len(embedded_chunks),
                "embedded_count": record.embedded_count,
                "extract_ms": round((extracted_at - start_time) * 1000, 2),
                "chunk_ms": round((chunked_at - extracted_at) * 1000, 2),
                "embed_ms": round((embedded_at - chunked_at) * 1000, 2),
                "total_ms": round(elapsed_ms, 2),
            },
        )

        return PipelineResult(
            document_id=doc_id,
            file_name=file_name,
            num_pages=extracted.num_pages,
            chunk_count=len(embedded_chunks),
            embedded_count=record.embedded_count,
            output_path=output_path,
            processing_time_ms=elapsed_ms,
        )

    async def process_batch(
        self,
        documents: Iterable[tuple[str, bytes]],
        chunk_size: int | None = None,
        overlap: int | None = None,
        model: str | None = None,
    ) -> list[DocumentSummary]:
        """
        Process multiple documents one after another.

        A failure in one document is reported in its summary and does not stop
        the others.

        Args:
            documents: (file_name, data) pairs
            chunk_size: Chunk size override for every document
            overlap: Chunk overlap override for every document
            model: Embedding model override for every document

        Returns:
            list[DocumentSummary]: One entry per document, in input order

        Raises:
            ValidationError: When the shared chunk parameters are invalid
        """
        validate_chunk_parameters(
            self._settings.chunk_size if chunk_size is None else chunk_size,
            self._settings.chunk_overlap if overlap is None else overlap,
        )

        summaries: list[DocumentSummary] = []
        for file_name, data in documents:
            try:
                result = await self.process(
                    data,
                    file_name,
                    chunk_size=chunk_size,
                    overlap=overlap,
                    model=model,
                )
            except PdfEmbedderException as e:
                logger.warning(
                    f"Failed to process {file_name}",
                    extra={"file_name": file_name, "error_type": type(e).__name__, "error": e.message},
                )
                summaries.append(DocumentSummary.failed(file_name, e.message))
                continue
            summaries.append(DocumentSummary.from_result(result))

        return summaries

    def build_record(
        self,
        file_name: str,
        extracted: ExtractedText,
        chunks: list[EmbeddedChunk],
        model: str,
        chunk_size: int,
        overlap: int,
    ) -> DocumentRecord:
        """
        Assemble the persisted record for one document.

        Returns:
            DocumentRecord: Metadata plus embedded chunks
        """
        metadata = RecordMetadata(
            file_name=file_name,
            total_pages=extracted.num_pages,
            model=model,
            chunk_size=chunk_size,
            chunk_overlap=overlap,
        )
        return DocumentRecord(metadata=metadata, chunks=chunks)

    def load_record(self, document_id: str) -> DocumentRecord:
        """
        Load a persisted record.

        Raises:
            RecordNotFoundError: When no record exists for document_id
        """
        return self._saving_task.load(document_id)

    async def aclose(self) -> None:
        """Release the embedding client if the pipeline created it."""
        if self._owns_embedder and isinstance(self._embedder, OllamaEmbedder):
            await self._embedder.aclose()
