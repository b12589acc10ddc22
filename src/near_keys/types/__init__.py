"""Reusable type definitions for key values."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes24, Bytes32, Bytes64
from .exceptions import (
    InvalidEncodingError,
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    InvalidPublicKeyError,
    KeyPairError,
    UnknownCurveError,
    UnknownKeyTypeError,
)

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes24",
    "Bytes32",
    "Bytes64",
    "StrictBaseModel",
    # Exceptions
    "KeyPairError",
    "InvalidEncodingError",
    "InvalidKeyFormatError",
    "InvalidKeyLengthError",
    "InvalidPublicKeyError",
    "UnknownKeyTypeError",
    "UnknownCurveError",
]
