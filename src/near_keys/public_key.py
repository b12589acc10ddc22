"""
Public keys and their canonical string encoding.

A public key is a curve tag plus raw key bytes. Its string form is
`"<curve>:<base58 bytes>"`, e.g.:

    ed25519:AYWv9RAN1hpSQA4p1DLhCNnpnNXwxhfH9qeHN8B4nJ59

Older clients wrote bare `"<base58 bytes>"` strings, which are still
accepted on input and read as Ed25519. Output is always the prefixed form.
"""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from pydantic import field_serializer, field_validator, model_validator

from .key_type import KEY_LENGTHS, KeyType, key_type_to_str, str_to_key_type
from .serialize import base_decode, base_encode
from .types import (
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    StrictBaseModel,
    UnknownKeyTypeError,
)

__all__ = [
    "PublicKey",
    "split_encoded_key",
]


def split_encoded_key(encoded_key: str) -> tuple[str | None, str]:
    """
    Split an encoded key into its curve tag and Base58 payload.

    Args:
        encoded_key: `"<curve>:<payload>"` or a bare `"<payload>"`.

    Returns:
        Tuple of (curve tag or None for the bare form, payload).

    Raises:
        InvalidKeyFormatError: If the string has more than one colon.
    """
    parts = encoded_key.split(":")
    if len(parts) == 1:
        return None, parts[0]
    if len(parts) == 2:
        return parts[0], parts[1]
    raise InvalidKeyFormatError(segments=len(parts))


def _require_length(key_type: KeyType, data: bytes) -> None:
    expected = KEY_LENGTHS[key_type]
    if len(data) != expected:
        raise InvalidKeyLengthError(
            f"{key_type.tag} public key", expected=expected, actual=len(data)
        )


class PublicKey(StrictBaseModel):
    """
    PublicKey representation that has type and bytes of the key.

    Instances are immutable and compare by value. Constructing one directly
    from bytes of the wrong size raises `pydantic.ValidationError`; use
    `from_string` to get the package's own error types.
    """

    key_type: KeyType
    """Curve the key belongs to."""

    data: bytes
    """Raw public key bytes (32 bytes for Ed25519)."""

    @field_validator("data", mode="before")
    @classmethod
    def _copy_data(cls, v: Any) -> Any:
        """
        Store key bytes as plain `bytes`.

        Mutable buffers are copied, and fixed-length subclasses such as
        `Bytes32` are unwrapped so that equal keys also hash equally.
        """
        if isinstance(v, (bytes, bytearray, memoryview)):
            return bytes(v)
        return v

    @field_serializer("data", when_used="json")
    def _serialize_data(self, data: bytes) -> str:
        """Emit key bytes as Base58 in JSON, matching the string encoding."""
        return base_encode(data)

    @model_validator(mode="after")
    def _check_length(self) -> PublicKey:
        _require_length(self.key_type, self.data)
        return self

    @classmethod
    def from_value(cls, value: str | PublicKey) -> PublicKey:
        """
        Accept either a public key or its encoded string.

        Lets callers pass whichever representation they hold.
        """
        if isinstance(value, PublicKey):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(f"Expected PublicKey or str, got {type(value).__name__}")

    @classmethod
    def from_string(cls, encoded_key: str) -> PublicKey:
        """
        Parse an encoded public key.

        Raises:
            InvalidKeyFormatError: More than one colon.
            UnknownKeyTypeError: Unrecognized curve tag.
            InvalidEncodingError: Payload is not Base58.
            InvalidKeyLengthError: Payload has the wrong size for the curve.
        """
        tag, payload = split_encoded_key(encoded_key)
        key_type = KeyType.ED25519 if tag is None else str_to_key_type(tag)
        data = base_decode(payload)
        _require_length(key_type, data)
        return cls(key_type=key_type, data=data)

    def to_string(self) -> str:
        """Return the canonical `"<curve>:<base58>"` form."""
        return f"{key_type_to_str(self.key_type)}:{base_encode(self.data)}"

    def __str__(self) -> str:
        return self.to_string()

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Check a detached signature over `message`.

        Returns:
            True if the signature is valid, False otherwise. A signature of
            the wrong size is simply invalid.

        Raises:
            UnknownKeyTypeError: If the key type has no verifier.
        """
        match self.key_type:
            case KeyType.ED25519:
                public_key = Ed25519PublicKey.from_public_bytes(self.data)
                try:
                    public_key.verify(bytes(signature), bytes(message))
                    return True
                except InvalidSignature:
                    return False
            case _:
                raise UnknownKeyTypeError(self.key_type)
