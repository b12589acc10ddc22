"""
Fixed-length byte types.

Each subclass of `BaseBytes` is an immutable `bytes` with an exact length
checked at construction. They are used for raw key material, nonces and
signatures so that a wrong-sized buffer is rejected where it enters the
package instead of deep inside a primitive.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Copy a bytes-like value into immutable `bytes`.

    Raises:
      TypeError if the value is not `bytes`, `bytearray` or `memoryview`.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected bytes-like value, got {type(value).__name__}")


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any) -> Self:
        """
        Create and validate a new Bytes instance.

        Args:
            value: A `bytes`, `bytearray` or `memoryview` of exactly `LENGTH` bytes.

        Raises:
            ValueError: If the resulting byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, validate the input as bytes of exactly LENGTH and
           instantiate the class.
        """
        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ]
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({bytes(self).hex()})"


class Bytes24(BaseBytes):
    """Fixed-size byte array of exactly 24 bytes (box nonce)."""

    LENGTH = 24


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes (seeds, public keys)."""

    LENGTH = 32


class Bytes64(BaseBytes):
    """Fixed-size byte array of exactly 64 bytes (NaCl secret keys, signatures)."""

    LENGTH = 64
