"""
Document API endpoints.

Routes:
- POST /documents - Process one or more uploaded PDFs
- GET /documents/{file_id} - Fetch a processed document record

Dependencies: pdf_embedder.core.document_processing, pdf_embedder.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from pdf_embedder.api.deps import get_document_pipeline
from pdf_embedder.core.document_processing import DocumentPipeline
from pdf_embedder.core.document_processing.validation import validate_chunk_parameters
from pdf_embedder.models import BatchProcessResponse

from .document_error_handling import handle_document_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=BatchProcessResponse, response_model_by_alias=True)
@handle_document_errors
async def process_documents(
    files: list[UploadFile] | None = File(default=None),
    chunk_size: int = Form(default=1000, alias="chunkSize"),
    overlap: int = Form(default=200),
    model_name: str | None = Form(default=None, alias="modelName"),
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> BatchProcessResponse:
    """
    Extract, chunk, and embed every uploaded PDF.

    Files are processed one after another; a failed file is reported in its
    own entry and does not stop the rest.

    Args:
        files: Uploaded PDF files
        chunk_size: Target chunk size in characters
        overlap: Overlap between consecutive chunks
        model_name: Embedding model (pipeline default if omitted)
        pipeline: Injected document pipeline

    Returns:
        BatchProcessResponse: One result per uploaded file

    Raises:
        HTTPException(400): No files or invalid chunk parameters
        HTTPException(500): Unexpected failure
    """
    if not files:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded")

    validate_chunk_parameters(chunk_size, overlap)

    documents = []
    for upload in files:
        try:
            documents.append((upload.filename or "", await upload.read()))
        finally:
            await upload.close()

    logger.info(
        "Batch processing requested",
        extra={"file_count": len(documents), "chunk_size": chunk_size, "overlap": overlap},
    )

    results = await pipeline.process_batch(
        documents,
        chunk_size=chunk_size,
        overlap=overlap,
        model=model_name or None,
    )
    return BatchProcessResponse(results=results)


@router.get("/{file_id}")
@handle_document_errors
async def get_document(
    file_id: str,
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> dict:
    """
    Fetch the persisted record for a processed document.

    Args:
        file_id: Identifier returned as fileId by POST /documents
        pipeline: Injected document pipeline

    Returns:
        dict: {"metadata": {...}, "chunks": [...]}

    Raises:
        HTTPException(404): Unknown identifier
    """
    return pipeline.load_record(file_id).to_json_dict()
