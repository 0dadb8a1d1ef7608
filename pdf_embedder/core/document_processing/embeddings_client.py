"""
Ollama embeddings client.

Sends one text per request to an Ollama-compatible endpoint and returns the
vector. Every failure mode surfaces as EmbeddingError so callers can record it
against the chunk.

Dependencies: httpx
System role: Embedding service boundary
"""

import logging
from numbers import Real
from typing import Any, Protocol, runtime_checkable

import httpx

from pdf_embedder.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


@runtime_checkable
class Embedder(Protocol):
    """Turns a text into a fixed-length vector."""

    async def embed(self, text: str, model: str) -> list[float]:
        """
        Embed a single text.

        Raises:
            EmbeddingError: When the vector cannot be obtained
        """
        ...


class OllamaEmbedder:
    """HTTP client for Ollama's embeddings API."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        endpoint: str = "/api/embeddings",
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize embeddings client.

        Args:
            base_url: Service root, e.g. http://localhost:11434
            endpoint: Embedding path on the service
            timeout: Per-request timeout in seconds
            client: Preconfigured client (tests inject a MockTransport here)
        """
        self._endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        logger.info(
            f"{__name__}:__init__ - Initialized with base_url={base_url}, endpoint={endpoint}"
        )

    async def embed(self, text: str, model: str) -> list[float]:
        """
        Request the embedding of one text.

        Args:
            text: Chunk text
            model: Embedding model name

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: On transport failure, non-2xx status, or malformed body
        """
        try:
            response = await self._client.post(
                self._endpoint,
                json={"model": model, "prompt": text},
            )
        except httpx.HTTPError as e:
            raise EmbeddingError(
                f"Embedding request failed: {e}",
                details={"model": model, "error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            raise EmbeddingError(
                f"HTTP error! Status: {response.status_code}",
                details={"model": model, "status_code": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise EmbeddingError("Embedding response is not valid JSON", details={"model": model}) from e

        return self._parse_vector(payload, model)

    @staticmethod
    def _parse_vector(payload: Any, model: str) -> list[float]:
        """
        Pull the vector out of either response shape.

        /api/embeddings answers {"embedding": [...]}, /api/embed answers
        {"embeddings": [[...]]}.
        """
        vector = None
        if isinstance(payload, dict):
            vector = payload.get("embedding")
            if vector is None:
                batch = payload.get("embeddings")
                if isinstance(batch, list) and batch:
                    vector = batch[0]

        if (
            not isinstance(vector, list)
            or not vector
            or not all(isinstance(v, Real) and not isinstance(v, bool) for v in vector)
        ):
            raise EmbeddingError(
                "Embedding response does not contain a numeric vector",
                details={"model": model},
            )
        return [float(v) for v in vector]

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "OllamaEmbedder":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
