"""Algorithm and hash names understood by keysmith."""
from __future__ import annotations

from typing import FrozenSet, Literal

from ..exceptions import UnsupportedAlgorithmError

RSA_OAEP = "RSA-OAEP"
RSASSA_PKCS1_V1_5 = "RSASSA-PKCS1-v1_5"

PUBLIC_EXPONENT = 65537

KeyType = Literal["private", "public"]

_HASHES = {
    "SHA1": "SHA-1",
    "SHA256": "SHA-256",
    "SHA384": "SHA-384",
    "SHA512": "SHA-512",
}

# Usages granted to each half of a pair, keyed by algorithm.
_USAGES = {
    RSA_OAEP: {"private": frozenset({"decrypt"}), "public": frozenset({"encrypt"})},
    RSASSA_PKCS1_V1_5: {"private": frozenset({"sign"}), "public": frozenset({"verify"})},
}


def normalize_hash(name: str) -> str:
    """Return the canonical ``SHA-NNN`` spelling of ``name``.

    ``sha256``, ``SHA256`` and ``SHA-256`` all map to ``SHA-256``.
    """
    key = name.strip().upper().replace("-", "").replace("_", "")
    try:
        return _HASHES[key]
    except KeyError:
        raise UnsupportedAlgorithmError(f"Unsupported hash: {name}") from None


def normalize_algorithm(name: str) -> str:
    for known in _USAGES:
        if name.strip().upper() == known.upper():
            return known
    raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name}")


def usages_for(algorithm: str, key_type: KeyType) -> FrozenSet[str]:
    return _USAGES[normalize_algorithm(algorithm)][key_type]


__all__ = [
    "RSA_OAEP",
    "RSASSA_PKCS1_V1_5",
    "PUBLIC_EXPONENT",
    "KeyType",
    "normalize_hash",
    "normalize_algorithm",
    "usages_for",
]
