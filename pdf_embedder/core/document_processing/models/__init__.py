"""
Models for document processing pipeline.

Exports: TextChunk, EmbeddedChunk, ExtractedText, DocumentRecord, RecordMetadata,
PipelineResult, DocumentSummary
"""

from .chunk import EmbeddedChunk, TextChunk
from .document_record import DocumentRecord, RecordMetadata
from .extraction import ExtractedText
from .pipeline_result import DocumentSummary, PipelineResult

__all__ = [
    "TextChunk",
    "EmbeddedChunk",
    "ExtractedText",
    "DocumentRecord",
    "RecordMetadata",
    "PipelineResult",
    "DocumentSummary",
]
