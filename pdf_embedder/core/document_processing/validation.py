"""
Input validation for document processing.

Checks chunking parameters and uploaded PDF payloads before any work is done.

Dependencies: pathlib
System role: Guard clauses shared by pipeline, API, and CLI
"""

from pathlib import Path

from pdf_embedder.core.exceptions import ValidationError

PDF_MAGIC = b"%PDF-"
ALLOWED_EXTENSIONS = {".pdf"}


def validate_chunk_parameters(chunk_size: int, overlap: int) -> None:
    """
    Validate chunking parameters.

    Args:
        chunk_size: Target chunk size in characters
        overlap: Overlap between consecutive chunks

    Raises:
        ValidationError: When chunk_size is not positive or overlap is negative
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValidationError(
            f"chunk_size must be a positive integer, got {chunk_size!r}",
            field="chunk_size",
        )
    if isinstance(overlap, bool) or not isinstance(overlap, int) or overlap < 0:
        raise ValidationError(
            f"overlap must be a non-negative integer, got {overlap!r}",
            field="overlap",
        )


def validate_pdf_upload(file_name: str | None, data: bytes, max_size: int) -> None:
    """
    Validate an uploaded PDF before extraction.

    Args:
        file_name: Original file name
        data: Raw file content
        max_size: Maximum accepted size in bytes

    Raises:
        ValidationError: When the name, extension, content, or size is unacceptable
    """
    if not file_name:
        raise ValidationError("File name is required", field="file_name")

    extension = Path(file_name).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"File type {extension or '(none)'} not allowed. Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            field="file_name",
        )

    if not data:
        raise ValidationError("File is empty", field="file")

    if len(data) > max_size:
        raise ValidationError(
            f"File size exceeds maximum of {max_size // (1024 * 1024)}MB",
            field="file",
            details={"size": len(data), "max_size": max_size},
        )

    if not data.startswith(PDF_MAGIC):
        raise ValidationError("File content is not a PDF document", field="file")
