"""PEM armouring for DER key material.

Blocks look exactly like OpenSSL's output minus the final newline::

    -----BEGIN PUBLIC KEY-----
    MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA...
    ...
    -----END PUBLIC KEY-----

Body lines are 64 base64 characters; the last body line holds the remainder.
"""
from __future__ import annotations

import base64
import binascii
from typing import List, Tuple

from ..exceptions import FormatError

LINE_WIDTH = 64

_BEGIN = "-----BEGIN "
_END = "-----END "
_TAIL = " KEY-----"


def _wrap(b64: str, width: int = LINE_WIDTH) -> str:
    return "".join(b64[i:i + width] + "\n" for i in range(0, len(b64), width))


def encode_pem(data: bytes, label: str) -> str:
    """Armour ``data`` as a ``-----BEGIN <label> KEY-----`` block."""
    if "\n" in label or "\r" in label:
        raise FormatError("PEM label must not contain line breaks")
    body = base64.b64encode(bytes(data)).decode("ascii")
    return f"{_BEGIN}{label}{_TAIL}\n{_wrap(body)}{_END}{label}{_TAIL}"


def _marker_label(line: str, prefix: str) -> str:
    if not (line.startswith(prefix) and line.endswith(_TAIL)) or len(line) < len(prefix) + len(_TAIL):
        raise FormatError(f"Missing PEM marker: expected {prefix.strip()} ... KEY-----")
    return line[len(prefix):len(line) - len(_TAIL)]


def _split(text: str | bytes) -> Tuple[str, List[str]]:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError:
            raise FormatError("PEM data must be ASCII") from None
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    if len(lines) < 2:
        raise FormatError("PEM block needs both BEGIN and END markers")
    begin = _marker_label(lines[0], _BEGIN)
    end = _marker_label(lines[-1], _END)
    if begin != end:
        raise FormatError(f"PEM markers disagree: BEGIN {begin!r} vs END {end!r}")
    return begin, lines[1:-1]


def pem_label(text: str | bytes) -> str:
    """Return the label of a PEM block (``PRIVATE``, ``PUBLIC``, ...)."""
    label, _body = _split(text)
    return label


def decode_pem(text: str | bytes, label: str | None = None) -> bytes:
    """Strip the markers from a PEM block and return the decoded body.

    When ``label`` is given the block must carry exactly that label.
    """
    found, body = _split(text)
    if label is not None and found != label:
        raise FormatError(f"Expected a {label} KEY block, got {found} KEY")
    joined = "".join(line.strip() for line in body)
    try:
        return base64.b64decode(joined.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise FormatError(f"PEM body is not valid base64: {exc}") from exc


__all__ = ["LINE_WIDTH", "encode_pem", "decode_pem", "pem_label"]
