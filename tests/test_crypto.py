import base64
import hashlib
import hmac

import pytest

from browserkit.crypto import CryptoManager
from browserkit.exceptions import CryptoError


@pytest.fixture()
def manager():
    return CryptoManager(key="secret", iv="vector", suffix="1")


def test_key_material_is_suffixed_md5(manager):
    assert manager.key == hashlib.md5(b"secret_1").digest()
    assert manager.iv == hashlib.md5(b"vector_1").digest()
    assert CryptoManager(key=7, iv=8).key == hashlib.md5(b"7_0").digest()


def test_encrypt_produces_padded_base64(manager):
    ciphertext = manager.encrypt_aes("hello")
    raw = base64.b64decode(ciphertext)
    assert len(raw) == 16
    assert len(base64.b64decode(manager.encrypt_aes("x" * 16))) == 32


def test_decrypt_restores_unicode_message(manager):
    message = "支付金额: 12.50"
    assert manager.decrypt_aes(manager.encrypt_aes(message)) == message


def test_encryption_is_deterministic_per_key(manager):
    assert manager.encrypt_aes("same") == manager.encrypt_aes("same")
    assert CryptoManager("secret", "vector", "2").encrypt_aes("same") != manager.encrypt_aes("same")


def test_decrypt_with_wrong_key_or_garbage_raises(manager):
    ciphertext = manager.encrypt_aes("payload")
    with pytest.raises(CryptoError):
        manager.decrypt_aes("not base64!!")
    with pytest.raises(CryptoError):
        manager.decrypt_aes(base64.b64encode(b"short").decode())
    other = CryptoManager("other", "vector", "1")
    try:
        result = other.decrypt_aes(ciphertext)
    except CryptoError:
        return
    assert result != "payload"


def test_hmac_digests_use_derived_key(manager):
    assert manager.hmac_sha1("msg") == hmac.new(manager.key, b"msg", hashlib.sha1).hexdigest()
    assert manager.hmac_md5(b"msg") == hmac.new(manager.key, b"msg", hashlib.md5).hexdigest()


def test_random_hex_length():
    value = CryptoManager.random_hex(8)
    assert len(value) == 16
    int(value, 16)


def test_aes_cbc_matches_published_vector(manager):
    # NIST SP 800-38A, F.2.1 CBC-AES128.Encrypt
    manager.key = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
    manager.iv = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    plaintext = bytes.fromhex(
        "6bc1bee22e409f96e93d7e117393172a"
        "ae2d8a571e03ac9c9eb76fac45af8e51"
    )

    raw = base64.b64decode(manager.encrypt_aes(plaintext))

    assert raw[:32] == bytes.fromhex(
        "7649abac8119b246cee98e9b12e9197d"
        "5086cb9b507219ee95db113a917678b2"
    )
    assert len(raw) == 48


def test_hmac_matches_published_vectors(manager):
    # RFC 2202 test case 2 / RFC 2104 appendix
    manager.key = b"Jefe"
    message = "what do ya want for nothing?"
    assert manager.hmac_sha1(message) == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"
    assert manager.hmac_md5(message) == "750c783e6ab0b503eaa86e310a5db738"
