"""
Key-type registry.

Every key carries the curve it belongs to. The set of curves is closed:
each has exactly one lowercase tag used in encoded key strings, and a
tag or value outside the set is an error rather than a silent default.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from .types import UnknownCurveError, UnknownKeyTypeError

__all__ = [
    "KeyType",
    "KEY_LENGTHS",
    "key_type_to_str",
    "str_to_key_type",
]


class KeyType(IntEnum):
    """All supported key types."""

    ED25519 = 0
    """Ed25519 signature keys (32-byte public keys)."""

    @property
    def tag(self) -> str:
        """Canonical lowercase tag, e.g. `"ed25519"`."""
        return key_type_to_str(self)

    @classmethod
    def from_tag(cls, tag: str) -> KeyType:
        """Look up a key type by tag, ignoring case."""
        return str_to_key_type(tag)

    @classmethod
    def from_curve(cls, curve: str) -> KeyType:
        """
        Look up the key type for a curve name, ignoring case.

        Raises:
            UnknownCurveError: If no key pair implementation exists for the curve.
        """
        try:
            return str_to_key_type(curve)
        except UnknownKeyTypeError:
            raise UnknownCurveError(curve) from None


_TAGS: Final[dict[KeyType, str]] = {
    KeyType.ED25519: "ed25519",
}

_BY_TAG: Final[dict[str, KeyType]] = {tag: key_type for key_type, tag in _TAGS.items()}

KEY_LENGTHS: Final[dict[KeyType, int]] = {
    KeyType.ED25519: 32,
}
"""Public key length in bytes, per key type."""


def key_type_to_str(key_type: KeyType | int) -> str:
    """
    Return the canonical tag for a key type.

    Args:
        key_type: A `KeyType` member or its numeric value.

    Raises:
        UnknownKeyTypeError: If the value is not a supported key type.
    """
    try:
        return _TAGS[KeyType(key_type)]
    except (ValueError, KeyError):
        raise UnknownKeyTypeError(key_type) from None


def str_to_key_type(tag: str) -> KeyType:
    """
    Return the key type for a tag.

    Lookup is case-insensitive, while `key_type_to_str` always emits
    lowercase. Existing encoded keys rely on this asymmetry.

    Raises:
        UnknownKeyTypeError: If the tag is not registered.
    """
    key_type = _BY_TAG.get(tag.lower())
    if key_type is None:
        raise UnknownKeyTypeError(tag)
    return key_type
