"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, EmbeddingTask, SavingTask and the extractors
"""

from .chunking_task import BreakStrategy, ChunkingTask, chunk_text, normalize_text
from .embedding_task import EmbeddingTask
from .parsing_task import ParsingTask, PdftotextExtractor, PyPDFExtractor, TextExtractor
from .saving_task import SavingTask

__all__ = [
    "ParsingTask",
    "TextExtractor",
    "PyPDFExtractor",
    "PdftotextExtractor",
    "ChunkingTask",
    "BreakStrategy",
    "chunk_text",
    "normalize_text",
    "EmbeddingTask",
    "SavingTask",
]
