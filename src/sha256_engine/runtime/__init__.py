"""Runtime helpers for the SHA-256 engine"""

from .errors import (
    ErrorCode,
    Sha256Error,
    InvalidInputError,
    InvalidBlockError,
    EngineFinalizedError,
    SelfTestError,
)

__all__ = [
    "ErrorCode",
    "Sha256Error",
    "InvalidInputError",
    "InvalidBlockError",
    "EngineFinalizedError",
    "SelfTestError",
]
