"""Shared pytest fixtures for near_keys tests."""

from __future__ import annotations

import pytest

from near_keys import KeyPairEd25519, Rand
from tests.near_keys.helpers import SECRET_A, SECRET_B, counting_source


@pytest.fixture
def key_pair_a() -> KeyPairEd25519:
    """Key pair for SECRET_A (receiver in the encryption tests)."""
    return KeyPairEd25519(SECRET_A)


@pytest.fixture
def key_pair_b() -> KeyPairEd25519:
    """Key pair for SECRET_B (sender in the encryption tests)."""
    return KeyPairEd25519(SECRET_B)


@pytest.fixture
def fixed_rand() -> Rand:
    """Deterministic randomness, fresh for each test."""
    return Rand(source=counting_source())
