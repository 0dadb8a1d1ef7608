"""
Observability module.

Logging configuration, correlation IDs, and request middleware.
"""

from pdf_embedder.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from pdf_embedder.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
