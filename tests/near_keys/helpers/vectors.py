"""
Known key vectors.

The vectors were produced by an independent client and pin down the
encoding, key derivation and signing behaviour across implementations.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable

SECRET_A = (
    "26x56YPzPDro5t2smQfGcYAPy3j7R2jB2NUb7xKbAGK23B6x4WNQPh3twb6oDksFov5X8ts5CtntUNbpQpAKFdbR"
)
PUBLIC_A = "ed25519:AYWv9RAN1hpSQA4p1DLhCNnpnNXwxhfH9qeHN8B4nJ59"
SIGNATURE_A_SHA256_MESSAGE = (
    "26gFr4xth7W9K7HPWAxq3BLsua8oTy378mC1MYFiEXHBBpeBjP8WmJEJo8XTBowetvqbRshcQEtBUdwQcAqDyP8T"
)
"""Signature by SECRET_A over sha256(b"message")."""

SECRET_B = (
    "5JueXZhEEVqGVT5powZ5twyPP8wrap2K7RdAYGGdjBwiBdd7Hh6aQxMP1u3Ma9Yanq1nEv32EW7u8kUJsZ6f315C"
)
PUBLIC_B = "ed25519:EWrekY1deMND7N3Q7Dixxj12wD7AVjFRt2H9q21QHUSW"

CANONICAL_SECRET = (
    "ed25519:2wyRcSwSuHtRVmkMCGjPwnzZmQLeXLzLLyED1NDMt4BjnKgQL6tF85yBx6Jr26D2dUNeC716RBoTxntVHsegogYw"
)


def counting_source(start: int = 0) -> Callable[[int], bytes]:
    """Byte source that returns a predictable stream: start, start+1, ... (mod 256)."""
    counter = itertools.count(start)

    def source(length: int) -> bytes:
        return bytes(next(counter) % 256 for _ in range(length))

    return source
