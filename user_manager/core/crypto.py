# File: user_manager/core/crypto.py

"""
Reversible password cipher.

Passwords are encrypted with AES-256-GCM before they are stored. The key is
read from ``CIPHER_KEY`` (urlsafe base64, 32 bytes). Stored values are the
urlsafe base64 encoding of ``nonce (12) + ciphertext + tag (16)``.
"""

import base64
import binascii
import logging
import os
from functools import lru_cache
from typing import Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from user_manager.core.config import settings

logger = logging.getLogger(__name__)

NONCE_SIZE = 12


class PasswordCipher:
    def __init__(self, key: bytes):
        if len(key) != 32:
            raise ValueError("Cipher key must be 32 bytes (AES-256)")
        self._aesgcm = AESGCM(key)

    @classmethod
    def from_b64(cls, key_b64: Optional[str]) -> "PasswordCipher":
        """
        Build a cipher from a urlsafe base64 key.

        When no key is configured a temporary one is generated, which means
        stored passwords can't be decrypted after a restart.
        """
        if not key_b64:
            logger.warning("CIPHER_KEY not set. Generating a temporary key; set it explicitly in production.")
            return cls(AESGCM.generate_key(bit_length=256))
        try:
            key = base64.urlsafe_b64decode(key_b64)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid CIPHER_KEY format: {e}") from e
        return cls(key)

    def encrypt(self, plaintext: str) -> str:
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = self._aesgcm.encrypt(nonce, plaintext.encode("utf-8"), None)
        return base64.urlsafe_b64encode(nonce + ciphertext).decode("ascii")

    def decrypt(self, token: str) -> str:
        payload = base64.urlsafe_b64decode(token.encode("ascii"))
        nonce, ciphertext = payload[:NONCE_SIZE], payload[NONCE_SIZE:]
        return self._aesgcm.decrypt(nonce, ciphertext, None).decode("utf-8")


def generate_key() -> str:
    """Return a fresh key suitable for ``CIPHER_KEY``."""
    return base64.urlsafe_b64encode(AESGCM.generate_key(bit_length=256)).decode("ascii")


@lru_cache
def get_cipher() -> PasswordCipher:
    return PasswordCipher.from_b64(settings.cipher_key)
