"""Result of a signing operation."""

from pydantic import field_serializer

from .public_key import PublicKey
from .serialize import base_encode
from .types import Bytes64, StrictBaseModel


class Signature(StrictBaseModel):
    """A detached signature together with the public key that verifies it."""

    signature: Bytes64
    """Raw 64-byte signature."""

    public_key: PublicKey
    """Key of the signer."""

    @field_serializer("signature", when_used="json")
    def _serialize_signature(self, signature: Bytes64) -> str:
        """Emit Base58 in JSON, like the public key bytes."""
        return base_encode(signature)
