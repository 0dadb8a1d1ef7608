"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, pdf_embedder.api.routers, pdf_embedder.observability
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdf_embedder import __version__
from pdf_embedder.api.deps import get_service_cache
from pdf_embedder.api.routers import documents_router, health_router
from pdf_embedder.configs import get_settings
from pdf_embedder.observability.logger import configure_logging
from pdf_embedder.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and releases the embedding client on shutdown.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    await get_service_cache().aclose()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="PDF Embedder API",
        description="Extract, chunk, and embed PDF documents with a local embedding service",
        version=__version__,
        debug=get_settings().debug,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation ID must be bound before request logging runs
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")

    return app


app = create_app()
