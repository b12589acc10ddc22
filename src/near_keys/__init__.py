"""
Identity key pairs for a blockchain client.

Typed public and secret keys with a canonical `"<curve>:<base58>"`
encoding, Ed25519 signatures, and anonymous-sender encryption to an
Ed25519 public key.
"""

from .ed25519 import KeyPairEd25519
from .key_pair import KeyPair
from .key_type import KeyType
from .public_key import PublicKey
from .rand import SYSTEM_RAND, Rand
from .serialize import base_decode, base_encode
from .signature import Signature
from .types import (
    InvalidEncodingError,
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    InvalidPublicKeyError,
    KeyPairError,
    UnknownCurveError,
    UnknownKeyTypeError,
)

__all__ = [
    "KeyType",
    "PublicKey",
    "KeyPair",
    "KeyPairEd25519",
    "Signature",
    "Rand",
    "SYSTEM_RAND",
    "base_encode",
    "base_decode",
    # Exceptions
    "KeyPairError",
    "InvalidEncodingError",
    "InvalidKeyFormatError",
    "InvalidKeyLengthError",
    "InvalidPublicKeyError",
    "UnknownKeyTypeError",
    "UnknownCurveError",
]
