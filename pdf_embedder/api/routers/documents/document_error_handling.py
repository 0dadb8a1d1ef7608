"""
Document error handling utilities.

Provides a decorator for consistent error handling across document endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from pdf_embedder.core.exceptions import RecordNotFoundError, ValidationError
from pdf_embedder.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_document_errors(func: F) -> F:
    """
    Decorator to transform document errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (document_id, field)
    - Mapping domain exceptions to HTTP status codes
    - Hiding internal failures behind a generic 500 detail
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except RecordNotFoundError as e:
            logger.warning(
                "Document record not found",
                extra={"document_id": e.document_id, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning(
                "Invalid document request",
                extra={"field": e.field, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in document operation",
                e,
                endpoint=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during document processing",
            )

    return wrapper  # type: ignore
