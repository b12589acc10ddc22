"""Known key vectors and deterministic randomness for near_keys tests."""

from .vectors import (
    CANONICAL_SECRET,
    PUBLIC_A,
    PUBLIC_B,
    SECRET_A,
    SECRET_B,
    SIGNATURE_A_SHA256_MESSAGE,
    counting_source,
)

__all__ = [
    "CANONICAL_SECRET",
    "PUBLIC_A",
    "PUBLIC_B",
    "SECRET_A",
    "SECRET_B",
    "SIGNATURE_A_SHA256_MESSAGE",
    "counting_source",
]
