"""
Option classes for the SHA-256 engine.

The engine has no configuration of its own; these typed options configure
the known-answer self test.
"""

from __future__ import annotations
from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator


DEFAULT_CHUNK_SIZES = [1, 3, 63, 64, 65]


class SelfTestOptions(BaseModel):
    """
    Options for self_test().

    Each vector is hashed in one shot and once more for every chunk size,
    feeding the message in pieces of that many bytes.
    """
    include_slow: bool = Field(
        default=False,
        description="Also run vectors marked slow (one million 'a')"
    )
    chunk_sizes: List[int] = Field(
        default_factory=lambda: list(DEFAULT_CHUNK_SIZES),
        description="Chunk sizes used to re-feed every vector"
    )

    @field_validator("chunk_sizes")
    @classmethod
    def validate_chunk_sizes(cls, v: List[int]) -> List[int]:
        for size in v:
            if size < 1:
                raise ValueError(f"chunk size must be positive, got {size}")
        return sorted(set(v))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "include_slow": self.include_slow,
            "chunk_sizes": list(self.chunk_sizes),
        }


__all__ = [
    "DEFAULT_CHUNK_SIZES",
    "SelfTestOptions",
]
