"""Error taxonomy shared by the profile, message and storage services."""

from enum import Enum
from typing import Any, List, Optional


class ErrorCode(str, Enum):
    """Standardized error codes returned to callers."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAVAILABLE = "UNAVAILABLE"
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    CONFIGURATION_INVALID = "CONFIGURATION_INVALID"
    UNKNOWN = "UNKNOWN"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[Any] = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """Requested row does not exist."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_FOUND,
            message=f"{entity} not found: {key}",
            status_code=404,
            details={"entity": entity, "key": key},
        )


class ConflictError(AppException):
    """Unique constraint violated, or an object already exists and overwrite is off."""

    def __init__(self, message: str, reason: str = "conflict", target: Optional[str] = None) -> None:
        details = {"reason": reason}
        if target:
            details["target"] = target
        super().__init__(
            error_code=ErrorCode.CONFLICT,
            message=message,
            status_code=409,
            details=details,
        )


class FileTooLargeError(AppException):
    def __init__(self, bucket: str, max_size: int, size: int) -> None:
        super().__init__(
            error_code=ErrorCode.FILE_TOO_LARGE,
            message=f"File size exceeds limit of {max_size // (1024 * 1024)}MB",
            status_code=413,
            details={"bucket": bucket, "max_size": max_size, "size": size},
        )


class UnsupportedFileTypeError(AppException):
    def __init__(self, bucket: str, content_type: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNSUPPORTED_FILE_TYPE,
            message=f"File type {content_type} is not allowed for {bucket}",
            status_code=415,
            details={"bucket": bucket, "content_type": content_type},
        )


class EmptyMessageError(AppException):
    """Message text is blank after trimming; nothing was sent."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Message text must not be empty",
            status_code=400,
        )


class UnavailableError(AppException):
    """Store unreachable or not configured."""

    def __init__(self, message: str = "Backend store is unavailable", details: Optional[Any] = None) -> None:
        super().__init__(
            error_code=ErrorCode.UNAVAILABLE,
            message=message,
            status_code=503,
            details=details,
        )


class ConfigurationMissingError(UnavailableError):
    def __init__(self, missing: List[str]) -> None:
        super().__init__(
            message="Supabase configuration missing. Please set up your environment variables.",
            details={"missing": list(missing)},
        )
        self.error_code = ErrorCode.CONFIGURATION_MISSING


class ConfigurationInvalidError(UnavailableError):
    """Connection parameters are set but rejected by the client."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Supabase configuration is invalid: {reason}",
            details={"invalid": reason},
        )
        self.error_code = ErrorCode.CONFIGURATION_INVALID


class UnknownError(AppException):
    def __init__(self, operation: str, target: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNKNOWN,
            message=f"{operation} on {target} failed: {message}",
            status_code=500,
            details={"operation": operation, "target": target},
        )
