"""Binding between keysmith and the library that actually does RSA.

Everything keysmith needs from a crypto backend is described by
:class:`CryptoProvider`; :class:`CryptographyProvider` implements it on top of
``cryptography``. Tests and embedders can swap the process-wide provider with
:func:`set_provider`.

Provider exceptions are never translated: whatever ``cryptography`` raises
reaches the caller unchanged.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .algorithms import normalize_hash


@runtime_checkable
class CryptoProvider(Protocol):
    def generate_private_key(self, modulus_bits: int, public_exponent: int) -> Any: ...

    def public_key(self, key: Any) -> Any: ...

    def export_private_der(self, key: Any) -> bytes: ...

    def export_public_der(self, key: Any) -> bytes: ...

    def load_private_der(self, data: bytes) -> Any: ...

    def load_public_der(self, data: bytes) -> Any: ...

    def sign(self, key: Any, data: bytes, hash_name: str) -> bytes: ...

    def verify(self, key: Any, signature: bytes, data: bytes, hash_name: str) -> bool: ...

    def encrypt(self, key: Any, plaintext: bytes, hash_name: str) -> bytes: ...

    def decrypt(self, key: Any, ciphertext: bytes, hash_name: str) -> bytes: ...


def _hash_alg(name: str) -> hashes.HashAlgorithm:
    n = normalize_hash(name)
    if n == "SHA-1":
        return hashes.SHA1()
    if n == "SHA-256":
        return hashes.SHA256()
    if n == "SHA-384":
        return hashes.SHA384()
    return hashes.SHA512()


def _oaep(name: str) -> padding.OAEP:
    h = _hash_alg(name)
    return padding.OAEP(mgf=padding.MGF1(algorithm=h), algorithm=h, label=None)


class CryptographyProvider:
    """RSA operations backed by ``cryptography.hazmat``"""

    def generate_private_key(self, modulus_bits: int, public_exponent: int) -> rsa.RSAPrivateKey:
        return rsa.generate_private_key(public_exponent=public_exponent, key_size=modulus_bits)

    def public_key(self, key: rsa.RSAPrivateKey) -> rsa.RSAPublicKey:
        return key.public_key()

    def export_private_der(self, key: rsa.RSAPrivateKey) -> bytes:
        return key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def export_public_der(self, key: rsa.RSAPublicKey) -> bytes:
        return key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def load_private_der(self, data: bytes) -> rsa.RSAPrivateKey:
        key = serialization.load_der_private_key(data, password=None)
        if not isinstance(key, rsa.RSAPrivateKey):
            raise TypeError(f"Expected an RSA private key, got {type(key).__name__}")
        return key

    def load_public_der(self, data: bytes) -> rsa.RSAPublicKey:
        key = serialization.load_der_public_key(data)
        if not isinstance(key, rsa.RSAPublicKey):
            raise TypeError(f"Expected an RSA public key, got {type(key).__name__}")
        return key

    def sign(self, key: rsa.RSAPrivateKey, data: bytes, hash_name: str) -> bytes:
        return key.sign(data, padding.PKCS1v15(), _hash_alg(hash_name))

    def verify(self, key: rsa.RSAPublicKey, signature: bytes, data: bytes, hash_name: str) -> bool:
        try:
            key.verify(signature, data, padding.PKCS1v15(), _hash_alg(hash_name))
        except InvalidSignature:
            return False
        return True

    def encrypt(self, key: rsa.RSAPublicKey, plaintext: bytes, hash_name: str) -> bytes:
        return key.encrypt(plaintext, _oaep(hash_name))

    def decrypt(self, key: rsa.RSAPrivateKey, ciphertext: bytes, hash_name: str) -> bytes:
        return key.decrypt(ciphertext, _oaep(hash_name))


_provider: CryptoProvider = CryptographyProvider()


def get_provider() -> CryptoProvider:
    return _provider


def set_provider(provider: CryptoProvider) -> CryptoProvider:
    """Install ``provider`` as the default and return the previous one."""
    global _provider
    previous = _provider
    _provider = provider
    return previous


__all__ = ["CryptoProvider", "CryptographyProvider", "get_provider", "set_provider"]
