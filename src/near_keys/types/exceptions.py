"""Exception hierarchy for key parsing and key type lookup."""

from __future__ import annotations


class KeyPairError(Exception):
    """
    Base exception for all key-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidEncodingError(KeyPairError, ValueError):
    """
    Raised when a string is not valid Base58.

    Attributes:
        value: The offending input (truncated for display).
        detail: What the codec rejected.
    """

    def __init__(self, value: str, detail: str) -> None:
        self.value = value
        self.detail = detail

        shown = value if len(value) <= 50 else value[:47] + "..."
        super().__init__(f"Invalid Base58 encoding {shown!r}: {detail}")


class InvalidKeyFormatError(KeyPairError, ValueError):
    """
    Raised when an encoded key does not have the `<curve>:<encoded key>` shape.

    Attributes:
        segments: Number of colon-separated segments found, if known.
    """

    def __init__(self, message: str | None = None, *, segments: int | None = None) -> None:
        self.segments = segments
        super().__init__(message or "Invalid encoded key format, must be <curve>:<encoded key>")


class InvalidKeyLengthError(InvalidKeyFormatError):
    """
    Raised when decoded key material has the wrong size for its curve.

    Attributes:
        key_name: What was being decoded (e.g. "ed25519 public key").
        expected: The required number of bytes.
        actual: The number of bytes received.
    """

    def __init__(self, key_name: str, *, expected: int, actual: int) -> None:
        self.key_name = key_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{key_name} requires exactly {expected} bytes, got {actual}")


class InvalidPublicKeyError(KeyPairError, ValueError):
    """Raised when public key bytes are not a usable point on the curve."""


class UnknownKeyTypeError(KeyPairError, ValueError):
    """
    Raised when a key type tag or numeric value is outside the supported set.

    Attributes:
        key_type: The unrecognized tag or value, as given.
    """

    def __init__(self, key_type: object, message: str | None = None) -> None:
        self.key_type = key_type
        super().__init__(message or f"Unknown key type {key_type}")


class UnknownCurveError(UnknownKeyTypeError):
    """Raised when a key pair is requested for a curve that is not wired up."""

    def __init__(self, curve: object) -> None:
        super().__init__(curve, f"Unknown curve {curve}")
