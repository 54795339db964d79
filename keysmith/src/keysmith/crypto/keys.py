"""RSA key-pair facade.

Keys carry the algorithm, hash and usages they were generated for, the same
way a WebCrypto ``CryptoKey`` does. Operations check those bindings and then
hand the work to the active :class:`~keysmith.crypto.provider.CryptoProvider`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet

from ..exceptions import KeyUsageError
from .algorithms import (
    PUBLIC_EXPONENT,
    RSA_OAEP,
    RSASSA_PKCS1_V1_5,
    KeyType,
    normalize_algorithm,
    normalize_hash,
    usages_for,
)
from .pem import decode_pem, encode_pem
from .provider import CryptoProvider, get_provider
from .signature import Signature

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RsaKey:
    """One half of an RSA key pair plus what it may be used for"""
    key: Any
    type: KeyType
    algorithm: str
    hash: str
    usages: FrozenSet[str]

    @property
    def modulus_bits(self) -> int:
        return self.key.key_size

    @property
    def public_exponent(self) -> int:
        pub = self.key.public_key() if self.type == "private" else self.key
        return pub.public_numbers().e


@dataclass(frozen=True, slots=True)
class KeyPair:
    private_key: RsaKey
    public_key: RsaKey


@dataclass(frozen=True, slots=True)
class PemKeyPair:
    private_key: str
    public_key: str


def _generate_pair(
    algorithm: str,
    modulus_bits: int,
    hash_algorithm: str,
    provider: CryptoProvider | None,
) -> KeyPair:
    provider = provider or get_provider()
    hash_name = normalize_hash(hash_algorithm)
    priv = provider.generate_private_key(modulus_bits, PUBLIC_EXPONENT)
    log.debug("keypair.generated", extra={"algorithm": algorithm, "hash": hash_name, "modulus_bits": modulus_bits})
    return KeyPair(
        private_key=RsaKey(priv, "private", algorithm, hash_name, usages_for(algorithm, "private")),
        public_key=RsaKey(provider.public_key(priv), "public", algorithm, hash_name, usages_for(algorithm, "public")),
    )


def generate_encryption_key_pair(
    modulus_bits: int = 2048,
    hash_algorithm: str = "SHA-256",
    *,
    provider: CryptoProvider | None = None,
) -> KeyPair:
    """Generate an RSA-OAEP pair (public exponent 65537) for encrypt/decrypt."""
    return _generate_pair(RSA_OAEP, modulus_bits, hash_algorithm, provider)


def generate_signing_key_pair(
    modulus_bits: int = 2048,
    hash_algorithm: str = "SHA-256",
    *,
    provider: CryptoProvider | None = None,
) -> KeyPair:
    """Generate an RSASSA-PKCS1-v1_5 pair (public exponent 65537) for sign/verify."""
    return _generate_pair(RSASSA_PKCS1_V1_5, modulus_bits, hash_algorithm, provider)


def export_pem(key: RsaKey, *, provider: CryptoProvider | None = None) -> str:
    provider = provider or get_provider()
    if key.type == "private":
        return encode_pem(provider.export_private_der(key.key), "PRIVATE")
    return encode_pem(provider.export_public_der(key.key), "PUBLIC")


def to_pem(key_pair: KeyPair, *, provider: CryptoProvider | None = None) -> PemKeyPair:
    """Export both halves of ``key_pair`` as PEM text.

    The private key is PKCS#8, the public key SubjectPublicKeyInfo.
    """
    return PemKeyPair(
        private_key=export_pem(key_pair.private_key, provider=provider),
        public_key=export_pem(key_pair.public_key, provider=provider),
    )


def _require(key: RsaKey, key_type: KeyType, usage: str, algorithm: str | None = None) -> None:
    if key.type != key_type:
        raise KeyUsageError(f"Operation '{usage}' requires a {key_type} key, got a {key.type} key")
    if usage not in key.usages:
        raise KeyUsageError(f"Key usages {sorted(key.usages)} do not include '{usage}'")
    if algorithm is not None and normalize_algorithm(algorithm) != key.algorithm:
        raise KeyUsageError(f"Key was generated for {key.algorithm}, not {algorithm}")


def sign(
    private_key: RsaKey,
    data: bytes,
    algorithm: str = RSASSA_PKCS1_V1_5,
    *,
    provider: CryptoProvider | None = None,
) -> Signature:
    _require(private_key, "private", "sign", algorithm)
    provider = provider or get_provider()
    raw = provider.sign(private_key.key, bytes(data), private_key.hash)
    log.debug("data.signed", extra={"algorithm": private_key.algorithm, "hash": private_key.hash, "size": len(data)})
    return Signature(raw)


def verify(
    public_key: RsaKey,
    signature: Signature | bytes,
    data: bytes,
    algorithm: str = RSASSA_PKCS1_V1_5,
    *,
    provider: CryptoProvider | None = None,
) -> bool:
    """Return True when ``signature`` over ``data`` checks out."""
    _require(public_key, "public", "verify", algorithm)
    provider = provider or get_provider()
    ok = provider.verify(public_key.key, bytes(signature), bytes(data), public_key.hash)
    log.debug("signature.verified", extra={"algorithm": public_key.algorithm, "hash": public_key.hash, "ok": ok})
    return ok


def encrypt(public_key: RsaKey, plaintext: bytes, *, provider: CryptoProvider | None = None) -> bytes:
    _require(public_key, "public", "encrypt", RSA_OAEP)
    provider = provider or get_provider()
    return provider.encrypt(public_key.key, bytes(plaintext), public_key.hash)


def decrypt(private_key: RsaKey, ciphertext: bytes, *, provider: CryptoProvider | None = None) -> bytes:
    _require(private_key, "private", "decrypt", RSA_OAEP)
    provider = provider or get_provider()
    return provider.decrypt(private_key.key, bytes(ciphertext), private_key.hash)


def load_private_key_pem(
    text: str | bytes,
    algorithm: str = RSASSA_PKCS1_V1_5,
    hash_algorithm: str = "SHA-256",
    *,
    provider: CryptoProvider | None = None,
) -> RsaKey:
    provider = provider or get_provider()
    algorithm = normalize_algorithm(algorithm)
    key = provider.load_private_der(decode_pem(text, "PRIVATE"))
    return RsaKey(key, "private", algorithm, normalize_hash(hash_algorithm), usages_for(algorithm, "private"))


def load_public_key_pem(
    text: str | bytes,
    algorithm: str = RSASSA_PKCS1_V1_5,
    hash_algorithm: str = "SHA-256",
    *,
    provider: CryptoProvider | None = None,
) -> RsaKey:
    provider = provider or get_provider()
    algorithm = normalize_algorithm(algorithm)
    key = provider.load_public_der(decode_pem(text, "PUBLIC"))
    return RsaKey(key, "public", algorithm, normalize_hash(hash_algorithm), usages_for(algorithm, "public"))


__all__ = [
    "RsaKey",
    "KeyPair",
    "PemKeyPair",
    "generate_encryption_key_pair",
    "generate_signing_key_pair",
    "export_pem",
    "to_pem",
    "sign",
    "verify",
    "encrypt",
    "decrypt",
    "load_private_key_pem",
    "load_public_key_pem",
]
