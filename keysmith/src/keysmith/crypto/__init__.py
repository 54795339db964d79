"""Cryptographic helpers: PEM armouring, signatures and the RSA key facade."""

from .keys import (
    KeyPair,
    PemKeyPair,
    RsaKey,
    decrypt,
    encrypt,
    export_pem,
    generate_encryption_key_pair,
    generate_signing_key_pair,
    load_private_key_pem,
    load_public_key_pem,
    sign,
    to_pem,
    verify,
)
from .pem import decode_pem, encode_pem, pem_label
from .provider import CryptographyProvider, CryptoProvider, get_provider, set_provider
from .signature import Signature, SignatureJSONEncoder, from_text, to_text

__all__ = [
    "KeyPair",
    "PemKeyPair",
    "RsaKey",
    "decrypt",
    "encrypt",
    "export_pem",
    "generate_encryption_key_pair",
    "generate_signing_key_pair",
    "load_private_key_pem",
    "load_public_key_pem",
    "sign",
    "to_pem",
    "verify",
    "decode_pem",
    "encode_pem",
    "pem_label",
    "CryptographyProvider",
    "CryptoProvider",
    "get_provider",
    "set_provider",
    "Signature",
    "SignatureJSONEncoder",
    "from_text",
    "to_text",
]
