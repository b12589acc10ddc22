"""
Ed25519 key pairs.

Secret keys use the 64-byte NaCl layout `seed (32) || public key (32)`.
Both halves must agree; a secret whose public half was not derived from
its seed is rejected. Secrets are kept in their Base58 string form
exactly as supplied, so that exporting a key pair returns the caller's
own encoding.

Besides signing, an Ed25519 key pair can receive encrypted messages: its
keys are converted to Curve25519 and used with the NaCl box (see `box`).
Encryption is anonymous-sender: each message is sealed with a fresh
ephemeral key, so a ciphertext proves nothing about who produced it.
Anyone who knows the receiver's public key can send to it. Callers that
need sender authentication must sign the plaintext as well.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .box import (
    EncryptedEnvelope,
    box_open,
    box_seal,
    curve25519_public_key,
    ed25519_public_to_curve25519,
    ed25519_secret_to_curve25519,
)
from .key_pair import KeyPair
from .key_type import KeyType
from .public_key import PublicKey
from .rand import SYSTEM_RAND, Rand
from .serialize import base_decode, base_encode
from .signature import Signature
from .types import (
    Bytes32,
    Bytes64,
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    InvalidPublicKeyError,
)

__all__ = [
    "SECRET_KEY_LENGTH",
    "KeyPairEd25519",
]

logger = logging.getLogger(__name__)

SECRET_KEY_LENGTH: Final[int] = Bytes64.LENGTH
"""NaCl Ed25519 secret key size: 32-byte seed followed by the 32-byte public key."""


def _raw_public_bytes(private_key: Ed25519PrivateKey) -> Bytes32:
    return Bytes32(
        private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    )


@dataclass(frozen=True, slots=True)
class KeyPairEd25519(KeyPair):
    """
    Key pair for the Ed25519 curve.

    Attributes:
        secret_key: Base58 secret key, as given to the constructor.
        public_key: Public key derived from the secret's seed.
    """

    secret_key: str = field(repr=False)
    public_key: PublicKey = field(init=False)
    _private_key: Ed25519PrivateKey = field(init=False, repr=False, compare=False)
    _secret_bytes: Bytes64 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """
        Decode the secret and derive the public key.

        Raises:
            InvalidEncodingError: If the secret is not Base58.
            InvalidKeyLengthError: If the secret does not decode to 64 bytes.
            InvalidKeyFormatError: If the trailing 32 bytes are not the public
                key of the leading seed.
        """
        secret = base_decode(self.secret_key)
        if len(secret) != SECRET_KEY_LENGTH:
            raise InvalidKeyLengthError(
                "ed25519 secret key", expected=SECRET_KEY_LENGTH, actual=len(secret)
            )

        private_key = Ed25519PrivateKey.from_private_bytes(secret[:32])
        derived = _raw_public_bytes(private_key)
        if secret[32:] != derived:
            raise InvalidKeyFormatError(
                "ed25519 secret key does not match its embedded public key"
            )
        public_key = PublicKey(key_type=KeyType.ED25519, data=derived)

        object.__setattr__(self, "public_key", public_key)
        object.__setattr__(self, "_private_key", private_key)
        object.__setattr__(self, "_secret_bytes", Bytes64(secret))

    @classmethod
    def from_random(cls, rand: Rand = SYSTEM_RAND) -> KeyPairEd25519:
        """
        Generate a new random key pair.

        The secret goes through the regular constructor, so generated keys
        are held to the same checks as keys supplied by callers.
        """
        seed = rand.seed()
        public_key = _raw_public_bytes(Ed25519PrivateKey.from_private_bytes(seed))
        key_pair = cls(base_encode(seed + public_key))
        logger.debug("Generated ed25519 key pair %s", key_pair.public_key)
        return key_pair

    def sign(self, message: bytes) -> Signature:
        """
        Sign `message` as is, without hashing or framing.

        Ed25519 signatures are deterministic: the same key and message
        always produce the same signature.
        """
        signature = self._private_key.sign(bytes(message))
        return Signature(signature=Bytes64(signature), public_key=self.public_key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        return self.public_key.verify(message, signature)

    def to_string(self) -> str:
        return f"ed25519:{self.secret_key}"

    def get_public_key(self) -> PublicKey:
        return self.public_key

    def encrypt_message(
        self,
        message: bytes,
        receiver_public_key: PublicKey | str,
        rand: Rand = SYSTEM_RAND,
    ) -> bytes:
        """
        Encrypt `message` so that only the receiver can read it.

        The sender's own keys are not used: a fresh ephemeral Curve25519
        key is generated per message and its public half travels in the
        output.

        Args:
            message: Plaintext bytes.
            receiver_public_key: Receiver's Ed25519 public key or its encoded string.
            rand: Source for the ephemeral key and nonce.

        Returns:
            `ephemeral public key (32) || nonce (24) || ciphertext`.

        Raises:
            InvalidPublicKeyError: If the receiver key is not a usable Ed25519 key.
        """
        receiver = PublicKey.from_value(receiver_public_key)
        if receiver.key_type != KeyType.ED25519:
            raise InvalidPublicKeyError(f"Cannot encrypt to a {receiver.key_type.tag} key")

        ephemeral_secret = rand.ephemeral_secret()
        nonce = rand.nonce()
        receiver_curve_key = ed25519_public_to_curve25519(receiver.data)

        ciphertext = box_seal(bytes(message), nonce, receiver_curve_key, ephemeral_secret)
        envelope = EncryptedEnvelope(
            ephemeral_public_key=curve25519_public_key(ephemeral_secret),
            nonce=nonce,
            ciphertext=ciphertext,
        )
        return envelope.encode()

    def decrypt_message(self, full_cipher: bytes) -> bytes | None:
        """
        Decrypt a message produced by `encrypt_message` for this key pair.

        Returns:
            The plaintext, or None when the message was not sealed for this
            key, was altered, or is too short to be a message at all.
        """
        try:
            envelope = EncryptedEnvelope.decode(full_cipher)
        except ValueError as e:
            logger.debug("Rejected encrypted message: %s", e)
            return None

        secret = ed25519_secret_to_curve25519(self._secret_bytes)
        plaintext = box_open(
            envelope.ciphertext, envelope.nonce, envelope.ephemeral_public_key, secret
        )
        if plaintext is None:
            logger.debug("Encrypted message failed authentication")
        return plaintext
