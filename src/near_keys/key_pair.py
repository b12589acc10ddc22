"""
Key pair contract and curve dispatch.

`KeyPair` is the capability every curve-specific key pair provides:
signing, verifying, exporting and exposing its public key. The static
factories pick the implementation from a curve name or from the prefix
of an encoded secret key.

Encoded secret keys use the same layout as public keys:

    ed25519:<base58 secret>     canonical
    <base58 secret>             legacy, read as Ed25519
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from . import config
from .key_type import KeyType
from .public_key import PublicKey, split_encoded_key
from .rand import SYSTEM_RAND, Rand
from .signature import Signature
from .types import UnknownCurveError

__all__ = [
    "KeyPair",
]


class KeyPair(ABC):
    """Abstract key pair: one concrete subclass per supported curve."""

    @abstractmethod
    def sign(self, message: bytes) -> Signature:
        """Produce a detached signature over the exact bytes of `message`."""

    @abstractmethod
    def verify(self, message: bytes, signature: bytes) -> bool:
        """Check a detached signature against this key pair's public key."""

    @abstractmethod
    def to_string(self) -> str:
        """Export the secret key as `"<curve>:<base58 secret>"`."""

    @abstractmethod
    def get_public_key(self) -> PublicKey:
        """Return the public half of the pair."""

    def __str__(self) -> str:
        return self.to_string()

    @staticmethod
    def from_random(curve: str = config.DEFAULT_CURVE, rand: Rand = SYSTEM_RAND) -> KeyPair:
        """
        Generate a fresh key pair.

        Args:
            curve: Name of the elliptic curve, case-insensitive.
            rand: Source of randomness.

        Raises:
            UnknownCurveError: If no implementation exists for the curve.
        """
        match KeyType.from_curve(curve):
            case KeyType.ED25519:
                from .ed25519 import KeyPairEd25519

                return KeyPairEd25519.from_random(rand)
            case _:
                raise UnknownCurveError(curve)

    @staticmethod
    def from_string(encoded_key: str) -> KeyPair:
        """
        Restore a key pair from its encoded secret key.

        Raises:
            InvalidKeyFormatError: More than one colon.
            UnknownCurveError: Unrecognized curve prefix.
            InvalidEncodingError: Secret is not Base58.
        """
        tag, secret_key = split_encoded_key(encoded_key)
        key_type = KeyType.ED25519 if tag is None else KeyType.from_curve(tag)

        match key_type:
            case KeyType.ED25519:
                from .ed25519 import KeyPairEd25519

                return KeyPairEd25519(secret_key)
            case _:
                raise UnknownCurveError(tag)
