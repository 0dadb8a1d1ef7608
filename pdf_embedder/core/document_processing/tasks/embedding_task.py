"""
Embedding generation task.

Requests one embedding per chunk, in index order, and records either the
vector or the failure message on a copy of the chunk. A failed chunk never
aborts the rest of the batch; there is no retry.

Dependencies: asyncio, embeddings_client
System role: Third stage of document ingestion pipeline
"""

import asyncio
import logging

from ..embeddings_client import Embedder
from ..models import EmbeddedChunk, TextChunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings for chunks, tolerating per-chunk failure."""

    def __init__(self, embedder: Embedder, model: str, max_concurrency: int = 1) -> None:
        """
        Initialize embedding task.

        Args:
            embedder: Embedding service client
            model: Model name sent with every request
            max_concurrency: Maximum in-flight requests (1 = strictly sequential)

        Raises:
            ValueError: When model is empty or max_concurrency < 1
        """
        if not model:
            raise ValueError("model cannot be empty")
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

        self._embedder = embedder
        self._model = model
        self._max_concurrency = max_concurrency

    @property
    def model(self) -> str:
        return self._model

    async def embed(self, chunks: list[TextChunk]) -> list[EmbeddedChunk]:
        """
        Embed every chunk.

        Args:
            chunks: Chunks in index order

        Returns:
            list[EmbeddedChunk]: One entry per input chunk, same order
        """
        if not chunks:
            return []

        if self._max_concurrency == 1:
            results = [await self._embed_one(chunk, len(chunks)) for chunk in chunks]
        else:
            semaphore = asyncio.Semaphore(self._max_concurrency)

            async def bounded(chunk: TextChunk) -> EmbeddedChunk:
                async with semaphore:
                    return await self._embed_one(chunk, len(chunks))

            # gather preserves input order regardless of completion order
            results = list(await asyncio.gather(*(bounded(chunk) for chunk in chunks)))

        failed = sum(1 for result in results if result.error is not None)
        logger.info(
            "Embedding batch finished",
            extra={"model": self._model, "chunk_count": len(results), "failed_count": failed},
        )
        return results

    async def _embed_one(self, chunk: TextChunk, total: int) -> EmbeddedChunk:
        logger.debug(f"Generating embedding for chunk {chunk.index + 1}/{total}")
        try:
            vector = await self._embedder.embed(chunk.text, self._model)
        except Exception as e:
            logger.warning(
                f"Error generating embedding for chunk {chunk.index + 1}",
                extra={"chunk_index": chunk.index, "error_type": type(e).__name__, "error": str(e)},
            )
            return EmbeddedChunk.with_error(chunk, str(e) or type(e).__name__)
        return EmbeddedChunk.with_embedding(chunk, vector)
