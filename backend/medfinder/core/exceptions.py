"""
Store errors and safe HTTP error responses.

Internal failures are logged in detail and returned to clients with a
generic message. Store read failures never reach the client at all: the
reading service logs them and falls back to an empty collection.
"""
from typing import Any, Optional

from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for persistence failures."""
    pass


class StoreWriteError(StoreError):
    """
    Backing store rejected a write.

    `view` holds what the failed call computed (the new pharmacy, the
    upserted records, ...). It is the current process's source of truth even
    though it was not persisted.
    """

    def __init__(self, message: str, view: Optional[Any] = None):
        super().__init__(message)
        self.view = view

class PriceSlipParseError(Exception):
    """Image-to-text output could not be turned into inventory items."""
    pass

class BusinessError:
    """HTTP exceptions with safe (non-leaky) messages."""

    @staticmethod
    def not_found(resource: str = "Resource", reason: str = "") -> HTTPException:
        if reason:
            logger.info(f"Not found: {resource} - {reason}")

        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )

    @staticmethod
    def bad_request(detail: str) -> HTTPException:
        """
        400 for input the caller can fix.

        OK to include specific details here since the caller caused the issue.
        Example: "Could not parse the price slip. The format was unexpected."
        """
        logger.info(f"Bad request: {detail}")
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

    @staticmethod
    def server_error(original_error: Exception = None) -> HTTPException:
        """
        Generic 500. Logs the actual error internally, hides it from the client.
        """
        if original_error:
            logger.error(
                f"Internal server error: {type(original_error).__name__}: {str(original_error)}",
                exc_info=original_error,
            )
        else:
            logger.error("Internal server error occurred")

        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred. Please try again later.",
        )

    @staticmethod
    def rate_limit_exceeded(detail: str, retry_after: int, limit: int) -> HTTPException:
        logger.warning(f"Rate limit exceeded: {detail}")
        return HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=detail,
            headers={
                "Retry-After": str(retry_after),
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": "0",
            },
        )
