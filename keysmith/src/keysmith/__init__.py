"""keysmith: RSA key pairs as PEM text and base64 signatures."""

from .crypto import (
    KeyPair,
    PemKeyPair,
    Signature,
    decode_pem,
    encode_pem,
    generate_encryption_key_pair,
    generate_signing_key_pair,
    sign,
    to_pem,
    verify,
)
from .exceptions import FormatError, KeysmithError, KeyUsageError, UnsupportedAlgorithmError
from .version import __version__

__all__ = [
    "KeyPair",
    "PemKeyPair",
    "Signature",
    "decode_pem",
    "encode_pem",
    "generate_encryption_key_pair",
    "generate_signing_key_pair",
    "sign",
    "to_pem",
    "verify",
    "FormatError",
    "KeysmithError",
    "KeyUsageError",
    "UnsupportedAlgorithmError",
    "__version__",
]
