"""Translate supabase-py failures into the application error taxonomy."""

import logging
from typing import Optional

import httpx
from postgrest.exceptions import APIError
from storage3.exceptions import StorageApiError

from app.core.exceptions import (
    AppException, ConflictError, UnavailableError, UnknownError
)

logger = logging.getLogger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"
# Postgres invalid_text_representation, e.g. a malformed uuid
INVALID_TEXT_REPRESENTATION = "22P02"
# PostgREST JWT rejected: the configured key is wrong or expired
REJECTED_KEY_CODES = {"PGRST301", "PGRST302"}


def _is_storage_duplicate(exc: StorageApiError) -> bool:
    status = str(getattr(exc, "status", "") or "")
    code = str(getattr(exc, "code", "") or "").lower()
    message = str(getattr(exc, "message", exc)).lower()
    return status == "409" or code == "duplicate" or "already exists" in message


def translate_store_error(
    exc: Exception,
    operation: str,
    target: str,
    conflict_message: Optional[str] = None,
    conflict_reason: str = "conflict",
) -> AppException:
    """Map a raw client exception to an AppException and log it with its context.

    `target` is the table or bucket the operation was addressed to.
    """
    if isinstance(exc, AppException):
        return exc

    if isinstance(exc, APIError):
        if exc.code in REJECTED_KEY_CODES:
            logger.error(f"{operation} on {target}: store rejected the configured key ({exc.message})")
            return UnavailableError(
                f"Backend store rejected the configured key during {operation}",
                details={"operation": operation, "target": target},
            )
        if exc.code == UNIQUE_VIOLATION:
            logger.warning(f"{operation} on {target}: unique constraint violated ({exc.message})")
            return ConflictError(
                conflict_message or f"{target} already contains this record",
                reason=conflict_reason,
                target=target,
            )
        logger.error(f"{operation} on {target} failed: [{exc.code}] {exc.message}")
        return UnknownError(operation, target, exc.message or str(exc))

    if isinstance(exc, StorageApiError):
        if _is_storage_duplicate(exc):
            logger.warning(f"{operation} on {target}: object already exists")
            return ConflictError(
                conflict_message or f"Object already exists in {target}",
                reason=conflict_reason,
                target=target,
            )
        logger.error(f"{operation} on {target} failed: {exc}")
        return UnknownError(operation, target, str(exc))

    if isinstance(exc, httpx.TransportError):
        logger.error(f"{operation} on {target}: store unreachable ({exc})")
        return UnavailableError(
            f"Backend store is unavailable during {operation}",
            details={"operation": operation, "target": target},
        )

    logger.exception(f"{operation} on {target} failed with unexpected error: {exc}")
    return UnknownError(operation, target, str(exc))
