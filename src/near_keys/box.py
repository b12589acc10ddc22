"""
Authenticated encryption between Ed25519 identities.

Ed25519 keys are signature keys and cannot be used for Diffie-Hellman
directly. Both sides therefore map their Ed25519 keys onto the
birationally equivalent Curve25519 keys and use the NaCl box
construction:

    - X25519 key agreement between the two Curve25519 keys
    - XSalsa20-Poly1305 authenticated encryption with a 24-byte nonce

Wire format of an encrypted message:

    offset 0..32   : ephemeral sender Curve25519 public key
    offset 32..56  : nonce
    offset 56..end : ciphertext (plaintext length + 16-byte MAC)

References:
    - https://nacl.cr.yp.to/box.html
    - https://doc.libsodium.org/advanced/ed25519-curve25519
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from nacl import bindings
from nacl.exceptions import CryptoError
from nacl.public import Box
from nacl.public import PrivateKey as CurvePrivateKey
from nacl.public import PublicKey as CurvePublicKey

from .types import Bytes24, Bytes32, InvalidPublicKeyError

__all__ = [
    "EPHEMERAL_KEY_LENGTH",
    "NONCE_LENGTH",
    "MAC_LENGTH",
    "HEADER_LENGTH",
    "EncryptedEnvelope",
    "ed25519_public_to_curve25519",
    "ed25519_secret_to_curve25519",
    "curve25519_public_key",
    "box_seal",
    "box_open",
]

EPHEMERAL_KEY_LENGTH: Final[int] = CurvePublicKey.SIZE
"""Curve25519 public key size (32 bytes)."""

NONCE_LENGTH: Final[int] = Box.NONCE_SIZE
"""XSalsa20 nonce size (24 bytes)."""

MAC_LENGTH: Final[int] = 16
"""Poly1305 tag size (16 bytes)."""

HEADER_LENGTH: Final[int] = EPHEMERAL_KEY_LENGTH + NONCE_LENGTH
"""Offset of the ciphertext within an encrypted message (56 bytes)."""


@dataclass(frozen=True, slots=True)
class EncryptedEnvelope:
    """
    An encrypted message split into its three regions.

    Attributes:
        ephemeral_public_key: Single-use sender Curve25519 public key.
        nonce: Box nonce.
        ciphertext: Box output, MAC included.
    """

    ephemeral_public_key: Bytes32
    nonce: Bytes24
    ciphertext: bytes

    def encode(self) -> bytes:
        """Concatenate the regions in wire order."""
        return self.ephemeral_public_key + self.nonce + self.ciphertext

    @classmethod
    def decode(cls, data: bytes) -> EncryptedEnvelope:
        """
        Slice an encrypted message at its fixed offsets.

        Raises:
            ValueError: If the buffer is too short to hold a header and a MAC.
        """
        data = bytes(data)
        if len(data) < HEADER_LENGTH + MAC_LENGTH:
            raise ValueError(
                f"Encrypted message needs at least {HEADER_LENGTH + MAC_LENGTH} bytes, "
                f"got {len(data)}"
            )
        return cls(
            ephemeral_public_key=Bytes32(data[:EPHEMERAL_KEY_LENGTH]),
            nonce=Bytes24(data[EPHEMERAL_KEY_LENGTH:HEADER_LENGTH]),
            ciphertext=data[HEADER_LENGTH:],
        )


def ed25519_public_to_curve25519(public_key: bytes) -> Bytes32:
    """
    Convert an Ed25519 public key to its Curve25519 equivalent.

    Args:
        public_key: 32-byte Ed25519 public key.

    Returns:
        32-byte Curve25519 public key.

    Raises:
        InvalidPublicKeyError: If the bytes are not a valid Ed25519 point.
    """
    try:
        return Bytes32(bindings.crypto_sign_ed25519_pk_to_curve25519(bytes(public_key)))
    except CryptoError as exc:
        raise InvalidPublicKeyError(
            f"Ed25519 public key cannot be converted to Curve25519: {exc}"
        ) from exc


def ed25519_secret_to_curve25519(secret_key: bytes) -> Bytes32:
    """
    Convert a 64-byte NaCl Ed25519 secret key to a Curve25519 secret scalar.

    The scalar is derived from the SHA-512 hash of the 32-byte seed, the
    same way Ed25519 derives its signing scalar.
    """
    return Bytes32(bindings.crypto_sign_ed25519_sk_to_curve25519(bytes(secret_key)))


def curve25519_public_key(secret_key: Bytes32) -> Bytes32:
    """Return the Curve25519 public key for a secret scalar."""
    return Bytes32(bytes(CurvePrivateKey(bytes(secret_key)).public_key))


def box_seal(
    message: bytes, nonce: Bytes24, receiver_public_key: Bytes32, sender_secret_key: Bytes32
) -> bytes:
    """
    Encrypt and authenticate `message` for the receiver.

    Returns:
        Ciphertext with the 16-byte MAC, without the nonce.
    """
    box = Box(CurvePrivateKey(bytes(sender_secret_key)), CurvePublicKey(bytes(receiver_public_key)))
    return box.encrypt(bytes(message), bytes(nonce)).ciphertext


def box_open(
    ciphertext: bytes, nonce: Bytes24, sender_public_key: Bytes32, receiver_secret_key: Bytes32
) -> bytes | None:
    """
    Verify and decrypt a box ciphertext.

    Returns:
        The plaintext, or None if authentication fails. A wrong key, a
        different nonce and a tampered ciphertext are indistinguishable.
    """
    try:
        box = Box(
            CurvePrivateKey(bytes(receiver_secret_key)), CurvePublicKey(bytes(sender_public_key))
        )
        return box.decrypt(bytes(ciphertext), bytes(nonce))
    except CryptoError:
        return None
