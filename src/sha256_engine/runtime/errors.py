"""
SHA-256 Engine Error Model

Structured errors raised when the engine or its helpers are misused. The
hashing algorithm itself is total over byte input; these errors only guard
wrong input types, use of a finalized engine and failed self tests.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for the SHA-256 engine."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Input errors (100-199)
    INVALID_INPUT = 100
    INVALID_BLOCK = 101

    # Engine lifecycle errors (200-299)
    ENGINE_FINALIZED = 200

    # Conformance errors (300-399)
    SELF_TEST_FAILED = 300


class Sha256Error(Exception):
    """
    Base class for all SHA-256 engine errors.

    Carries a machine-readable code and optional details alongside the message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an engine error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Sha256Error':
        """
        Create error from dictionary representation.

        Subclasses fix their own code in __init__, so the instance is built
        through the base initializer to keep code and details in place.
        """
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        error = cls.__new__(cls)
        Sha256Error.__init__(error, message, code, details)
        return error


class InvalidInputError(Sha256Error, TypeError):
    """Input is not a bytes-like object."""

    def __init__(self, message: str = "Input must be bytes-like",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_INPUT, details, cause)


class InvalidBlockError(Sha256Error, ValueError):
    """Block passed to the compression function is not 64 bytes."""

    def __init__(self, message: str = "Block must be 64 bytes",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_BLOCK, details, cause)


class EngineFinalizedError(Sha256Error, RuntimeError):
    """Engine was used after finish()."""

    def __init__(self, message: str = "Engine already finalized",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENGINE_FINALIZED, details, cause)


class SelfTestError(Sha256Error):
    """A known-answer vector produced the wrong digest."""

    def __init__(self, message: str = "Self test failed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SELF_TEST_FAILED, details, cause)


__all__ = [
    "ErrorCode",
    "Sha256Error",
    "InvalidInputError",
    "InvalidBlockError",
    "EngineFinalizedError",
    "SelfTestError",
]
