"""
Base58 encoding of raw key bytes.

Keys, secrets and signatures are written as Base58 strings using the
Bitcoin alphabet, which excludes the visually ambiguous characters
0, O, I and l:

    123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz

Leading zero bytes are preserved as leading '1' characters, so the
encoding is a bijection between byte strings and valid Base58 strings.
"""

from __future__ import annotations

from typing import Final

from .types import InvalidEncodingError

__all__ = [
    "ALPHABET",
    "base_encode",
    "base_decode",
]

ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
"""Base58 alphabet (Bitcoin style)."""

_INDEX: Final[dict[str, int]] = {char: index for index, char in enumerate(ALPHABET)}


def base_encode(data: bytes | bytearray | memoryview) -> str:
    """
    Encode bytes as a Base58 string.

    Args:
        data: Bytes to encode.

    Returns:
        Base58-encoded string.
    """
    data = bytes(data)

    # Leading zero bytes carry no numeric value; they become leading '1's.
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    num = int.from_bytes(data, "big")
    result: list[str] = []
    while num > 0:
        num, remainder = divmod(num, 58)
        result.append(ALPHABET[remainder])

    result.extend([ALPHABET[0]] * leading_zeros)
    return "".join(reversed(result))


def base_decode(value: str) -> bytes:
    """
    Decode a Base58 string to bytes.

    Args:
        value: Base58-encoded string.

    Returns:
        Decoded bytes.

    Raises:
        InvalidEncodingError: If the value is not a string or contains a
            character outside the alphabet.
    """
    if not isinstance(value, str):
        raise InvalidEncodingError(repr(value), f"expected str, got {type(value).__name__}")

    leading_ones = len(value) - len(value.lstrip(ALPHABET[0]))

    num = 0
    for position, char in enumerate(value):
        index = _INDEX.get(char)
        if index is None:
            raise InvalidEncodingError(value, f"invalid character {char!r} at position {position}")
        num = num * 58 + index

    result = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * leading_ones + result
