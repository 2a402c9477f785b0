"""
Test bootstrap:
- Load golden SHA-256 vectors once per session
- Provide fresh engines and deterministic random messages
"""
import json
import pathlib
import random

import pytest

GOLDEN = pathlib.Path(__file__).parent / "golden"


@pytest.fixture(scope="session")
def golden_vectors():
    """Known-answer vectors from tests/golden/sha256_vectors.json."""
    with open(GOLDEN / "sha256_vectors.json", "r", encoding="utf-8") as f:
        data = json.load(f)
    return data["vectors"]


@pytest.fixture
def engine():
    """Provide a fresh SHA-256 engine."""
    from sha256_engine import Sha256
    return Sha256.new()


@pytest.fixture
def rng():
    """Deterministic random source so failures are reproducible."""
    return random.Random(0x5A256)


@pytest.fixture
def random_message(rng):
    """A 1000-byte pseudo-random message spanning several blocks."""
    return bytes(rng.getrandbits(8) for _ in range(1000))
