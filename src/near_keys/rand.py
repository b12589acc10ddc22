"""Random data generator for key generation and message encryption."""

import secrets
from typing import Callable

from nacl.public import Box
from pydantic import Field

from .types import Bytes24, Bytes32, StrictBaseModel


class Rand(StrictBaseModel):
    """
    The single source of randomness used by this package.

    Every random value (key pair seeds, ephemeral encryption keys, nonces)
    is drawn through an instance of this class. Production code uses
    `SYSTEM_RAND`; tests that need reproducible ciphertexts pass an instance
    built around a deterministic `source`.
    """

    source: Callable[[int], bytes] = Field(default=secrets.token_bytes)
    """Returns the requested number of random bytes."""

    def random_bytes(self, length: int) -> bytes:
        """Draw `length` bytes from the source, rejecting short reads."""
        data = bytes(self.source(length))
        if len(data) != length:
            raise ValueError(f"Random source returned {len(data)} bytes, expected {length}")
        return data

    def seed(self) -> Bytes32:
        """Generates a 32-byte Ed25519 seed."""
        return Bytes32(self.random_bytes(Bytes32.LENGTH))

    def ephemeral_secret(self) -> Bytes32:
        """Generates a 32-byte Curve25519 secret scalar for a single message."""
        return Bytes32(self.random_bytes(Bytes32.LENGTH))

    def nonce(self) -> Bytes24:
        """Generates a fresh box nonce."""
        return Bytes24(self.random_bytes(Box.NONCE_SIZE))


SYSTEM_RAND = Rand()
"""An instance backed by the operating system's secure random source."""
