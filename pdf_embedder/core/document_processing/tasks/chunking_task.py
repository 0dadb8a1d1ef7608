"""
Text chunking task with overlap and boundary-seeking break points.

Normalizes extracted text and splits it into overlapping chunks, preferring to
cut at paragraph breaks, then sentence ends, then word boundaries.

Dependencies: re, pydantic models
System role: Second stage of document ingestion pipeline
"""

import logging
import re
from enum import Enum

from ..models import TextChunk

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_BREAK_WINDOW = 100

PARAGRAPH_BREAK = "\n\n"
SENTENCE_TERMINATORS = (". ", "! ", "? ")

_WHITESPACE_RUN = re.compile(r"\s+")
_BLANK_LINE = re.compile(r"\n\s*\n")


class BreakStrategy(str, Enum):
    """Which break points the chunker may cut at."""

    SEMANTIC = "semantic"  # paragraph, then sentence, then word
    WORD = "word"


def normalize_text(text: str, preserve_paragraphs: bool = False) -> str:
    """
    Collapse whitespace into a canonical form.

    Args:
        text: Raw extracted text
        preserve_paragraphs: Keep blank lines as a "\\n\\n" paragraph marker

    Returns:
        str: Text with single spaces (and paragraph markers), stripped at both ends
    """
    if not preserve_paragraphs:
        return _WHITESPACE_RUN.sub(" ", text).strip()

    paragraphs = (_WHITESPACE_RUN.sub(" ", part).strip() for part in _BLANK_LINE.split(text))
    return PARAGRAPH_BREAK.join(p for p in paragraphs if p)


def _find_break_point(
    text: str,
    start: int,
    end: int,
    strategy: BreakStrategy,
    break_window: int | None,
) -> int | None:
    """
    Find the best cut position in (start, end].

    Returns:
        int | None: Cut position, or None when no break point qualifies
    """
    low = start + 1
    if break_window is not None:
        low = max(low, end - break_window)
    # A separator starting at `end` still counts, hence end + 1.
    high = end + 1

    if strategy is BreakStrategy.SEMANTIC:
        paragraph = text.rfind(PARAGRAPH_BREAK, low, high)
        if paragraph > start:
            return paragraph

        sentence = max(text.rfind(t, low, high) for t in SENTENCE_TERMINATORS)
        if sentence >= low:
            # Keep the punctuation with its sentence.
            return sentence + 1

    space = text.rfind(" ", low, high)
    if space > start:
        return space
    return None


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
    *,
    strategy: BreakStrategy | str = BreakStrategy.SEMANTIC,
    break_window: int | None = DEFAULT_BREAK_WINDOW,
) -> list[TextChunk]:
    """
    Split text into overlapping chunks.

    Offsets in the returned chunks refer to `text` exactly as given, so callers
    normally pass text that has already been through normalize_text().

    Args:
        text: Text to split
        chunk_size: Target maximum span length in characters
        overlap: Characters of one span repeated at the head of the next
        strategy: Break points the chunker may use
        break_window: How far back from the target end to search for a break point.
            Applies to both strategies; pass None for the unbounded look-back
            of a plain word splitter, which may then cut far before the target end.

    Returns:
        list[TextChunk]: Chunks in source order with contiguous indices

    Raises:
        ValueError: When a size parameter is out of range or strategy is unknown
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise ValueError(f"overlap must be non-negative, got {overlap}")
    if break_window is not None and break_window < 0:
        raise ValueError(f"break_window must be non-negative, got {break_window}")
    strategy = BreakStrategy(strategy)

    chunks: list[TextChunk] = []
    length = len(text)
    start = 0

    while start < length:
        end = start + chunk_size
        if end < length:
            cut = _find_break_point(text, start, end, strategy, break_window)
            if cut is not None:
                end = cut
        else:
            end = length

        content = text[start:end].strip()
        if content:
            chunks.append(TextChunk(text=content, index=len(chunks), start=start, end=end))

        if end >= length:
            break

        next_start = end - overlap
        if next_start <= start:
            # Overlap would stall or rewind; continue from the cut instead.
            next_start = end
        start = next_start

    return chunks


class ChunkingTask:
    """Normalize document text and split it into overlapping chunks."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        break_window: int | None = DEFAULT_BREAK_WINDOW,
        strategy: BreakStrategy | str = BreakStrategy.SEMANTIC,
        preserve_paragraphs: bool = True,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            break_window: Break-point search window (None = unbounded)
            strategy: "semantic" or "word"
            preserve_paragraphs: Keep paragraph markers during normalization

        Raises:
            ValueError: When parameters are out of range or strategy is unknown
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must be non-negative, got {chunk_overlap}")

        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._break_window = break_window
        self._strategy = BreakStrategy(strategy)
        self._preserve_paragraphs = preserve_paragraphs

        if chunk_overlap >= chunk_size:
            logger.warning(
                "Chunk overlap is not smaller than chunk size; chunks will not overlap",
                extra={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
            )

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    def normalize(self, text: str) -> str:
        """Normalize text the same way chunk() does before splitting."""
        return normalize_text(text, preserve_paragraphs=self._preserve_paragraphs)

    def chunk(self, text: str) -> list[TextChunk]:
        """
        Normalize and split text into chunks.

        Args:
            text: Raw extracted text

        Returns:
            list[TextChunk]: Chunks with offsets into the normalized text
        """
        normalized = self.normalize(text)
        chunks = chunk_text(
            normalized,
            self._chunk_size,
            self._chunk_overlap,
            strategy=self._strategy,
            break_window=self._break_window,
        )
        logger.debug(
            "Chunked text",
            extra={
                "normalized_length": len(normalized),
                "chunk_count": len(chunks),
                "strategy": self._strategy.value,
            },
        )
        return chunks
