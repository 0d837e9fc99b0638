"""AES/HMAC helpers compatible with the crypto-js conventions used by web clients.

Key and IV are derived as ``MD5(f"{raw}_{suffix}")``, which yields 16 raw
bytes each (AES-128 in CBC mode with PKCS7 padding). Ciphertext is exchanged
as base64 text.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .exceptions import CryptoError

_BLOCK_BITS = algorithms.AES.block_size


def _derive(raw: str | int, suffix: str | int) -> bytes:
    return hashlib.md5(f"{raw}_{suffix}".encode("utf-8")).digest()


def _to_bytes(message: str | bytes) -> bytes:
    return message.encode("utf-8") if isinstance(message, str) else message


class CryptoManager:
    """Symmetric encryption and keyed hashing with suffix-salted key material."""

    def __init__(self, key: str | int, iv: str | int, suffix: str | int = "0") -> None:
        self.raw_key = key
        self.raw_iv = iv
        self.raw_suffix = suffix
        self.key = _derive(key, suffix)
        self.iv = _derive(iv, suffix)

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self.key), modes.CBC(self.iv))

    def encrypt_aes(self, message: str | bytes) -> str:
        padder = padding.PKCS7(_BLOCK_BITS).padder()
        padded = padder.update(_to_bytes(message)) + padder.finalize()
        encryptor = self._cipher().encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return base64.b64encode(ciphertext).decode("ascii")

    def decrypt_aes(self, ciphertext: str | bytes) -> str:
        try:
            raw = base64.b64decode(ciphertext, validate=True)
            decryptor = self._cipher().decryptor()
            padded = decryptor.update(raw) + decryptor.finalize()
            unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return plaintext.decode("utf-8")
        except (binascii.Error, ValueError) as exc:
            raise CryptoError("Unable to decrypt ciphertext") from exc

    def hmac_sha1(self, message: str | bytes) -> str:
        return hmac.new(self.key, _to_bytes(message), hashlib.sha1).hexdigest()

    def hmac_md5(self, message: str | bytes) -> str:
        return hmac.new(self.key, _to_bytes(message), hashlib.md5).hexdigest()

    @staticmethod
    def random_hex(n_bytes: int) -> str:
        return secrets.token_bytes(n_bytes).hex()


__all__ = ["CryptoManager"]
