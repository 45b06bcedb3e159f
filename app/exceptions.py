# =============================================================================
# app/exceptions.py - Error Taxonomy
# =============================================================================
# Every failure an operation can report has a class here. Services and the
# gateways in lib/ raise these; the operation boundary (lib/operation.py)
# turns them into failure envelopes, so none of them reaches an HTTP caller
# as an exception.
#
# The `message` attribute is what the caller sees. It never carries the
# error code, a stack trace, or internal identifiers.
# =============================================================================

from typing import Any


class StudioException(Exception):
    """
    Base exception for the Avatar Studio API.

    Attributes:
        message: Human-readable message, safe to show to the user
        code: Machine-readable error category
        stage: Name of the step that failed (e.g. "delete photo_avatars")
        details: Additional context for logs only
    """

    def __init__(
        self,
        message: str,
        code: str = "STUDIO_ERROR",
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.stage = stage
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for structured logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.stage:
            result["stage"] = self.stage
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(StudioException):
    """Raised when a required input is missing or blank."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field} if field else None,
        )


class ConfigurationError(StudioException):
    """Raised when a required environment value is absent."""

    def __init__(self, key: str):
        super().__init__(
            message=f"{key} is not configured",
            code="CONFIGURATION_ERROR",
            details={"key": key},
        )
        self.key = key


class VendorError(StudioException):
    """Raised when the avatar/voice vendor cannot be reached or rejects a call."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            message=message,
            code="VENDOR_ERROR",
            stage=stage,
            details={"status_code": status_code} if status_code else None,
        )
        self.status_code = status_code


class StorageError(StudioException):
    """Raised when an object-storage call fails."""

    def __init__(self, message: str, stage: str | None = None, key: str | None = None):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            stage=stage,
            details={"key": key} if key else None,
        )


class DatabaseError(StudioException):
    """Raised when the data store reports an error or returns no expected data."""

    def __init__(self, message: str, stage: str | None = None, table: str | None = None):
        super().__init__(
            message=message,
            code="DATABASE_ERROR",
            stage=stage,
            details={"table": table} if table else None,
        )


class UnknownError(StudioException):
    """Wraps any exception that doesn't belong to the categories above."""

    DEFAULT_MESSAGE = "Unknown server error"

    def __init__(self, message: str | None = None):
        super().__init__(
            message=message or self.DEFAULT_MESSAGE,
            code="UNKNOWN_ERROR",
        )
