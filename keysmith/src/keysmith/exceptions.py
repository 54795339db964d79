"""Central exception hierarchy"""
from __future__ import annotations


class KeysmithError(Exception):
    """Base exception for all failures"""


class FormatError(KeysmithError, ValueError):
    """Raised when PEM or base64 text cannot be decoded"""


class KeyUsageError(KeysmithError):
    """Raised when a key is used for an operation it was not generated for"""


class UnsupportedAlgorithmError(KeysmithError, ValueError):
    """Raised for unknown algorithm or hash names"""


class ConfigError(KeysmithError):
    """Raised when a configuration file is invalid"""


__all__ = [
    "KeysmithError",
    "FormatError",
    "KeyUsageError",
    "UnsupportedAlgorithmError",
    "ConfigError",
]
