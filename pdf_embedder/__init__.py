"""
PDF Embedder.

Extracts text from PDF documents, splits it into overlapping chunks and
embeds every chunk through a local Ollama-compatible endpoint.
"""

__version__ = "0.1.0"
