from .parity import assert_hex_equal, reference_sha256

__all__ = [
    "assert_hex_equal",
    "reference_sha256",
]
