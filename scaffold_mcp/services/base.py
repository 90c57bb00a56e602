"""
Service Layer Base - result types shared by every service.

This module provides:
- ServiceResult: success-or-failure wrapper returned by services
- ServiceError: structured error information
- ErrorCode: standard error codes, plus mapping from OS errors

Core code raises; services convert those exceptions into failed results
so handlers and the CLI never need try/except around a service call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

# Generic type for result data
T = TypeVar("T")


class ErrorCode(str, Enum):
    """Standard error codes for service operations (string enum for serialization)."""
    # Input validation
    MISSING_INPUT = "missing_input"

    # File operations
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_EXTENSION = "invalid_extension"
    IO_ERROR = "io_error"

    # Version control
    NOT_A_REPOSITORY = "not_a_repository"
    GIT_ERROR = "git_error"

    # General
    INTERNAL_ERROR = "internal_error"

    @classmethod
    def for_exception(cls, exc: BaseException) -> ErrorCode:
        """Pick the code that best describes a raised exception."""
        if isinstance(exc, FileNotFoundError):
            return cls.FILE_NOT_FOUND
        if isinstance(exc, PermissionError):
            return cls.PERMISSION_DENIED
        if isinstance(exc, (OSError, UnicodeDecodeError)):
            return cls.IO_ERROR
        return cls.INTERNAL_ERROR


@dataclass(frozen=True)
class ServiceError:
    """
    Structured error information.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable error message
        details: Optional additional context
    """
    code: ErrorCode
    message: str
    details: dict | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Generic result wrapper for service operations.

    Either success with data, or failure with error. `data` may be None
    on success when None is a meaningful answer (e.g. a skipped module).

    Usage:
        result = service.generate("src/Button.tsx")
        if result.success:
            print(result.data)
        else:
            print(result.error.message)
    """
    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T | None) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ) -> ServiceResult[T]:
        """Create a failed result."""
        return cls(
            success=False,
            data=None,
            error=ServiceError(code=code, message=message, details=details)
        )

    @classmethod
    def from_exception(cls, exc: BaseException, context: str = "") -> ServiceResult[T]:
        """Create a failed result from a raised exception."""
        message = f"{context}: {exc}" if context else str(exc)
        return cls.fail(ErrorCode.for_exception(exc), message)

    def map(self, func) -> ServiceResult:
        """Transform the data if successful."""
        if self.success:
            return ServiceResult.ok(func(self.data))
        return self
