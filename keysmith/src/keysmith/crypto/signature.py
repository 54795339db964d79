from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any

from ..exceptions import FormatError


def to_text(signature: bytes) -> str:
    """Standard base64 (with padding) over the raw signature bytes"""
    return base64.b64encode(bytes(signature)).decode("ascii")


def from_text(text: str) -> bytes:
    """Strict inverse of :func:`to_text`"""
    try:
        return base64.b64decode(text, validate=True)
    except (ValueError, TypeError) as exc:
        raise FormatError(f"Signature text is not valid base64: {exc}") from exc


@dataclass(frozen=True, slots=True)
class Signature:
    """Immutable signature bytes with a base64 text form"""
    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def from_text(cls, text: str) -> Signature:
        return cls(from_text(text))

    def to_text(self) -> str:
        return to_text(self.value)

    def to_json(self) -> str:
        return self.to_text()

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.to_text()


class SignatureJSONEncoder(json.JSONEncoder):
    """Serialize :class:`Signature` values as their base64 string"""

    def default(self, o: Any) -> Any:
        if isinstance(o, Signature):
            return o.to_json()
        return super().default(o)


__all__ = ["Signature", "SignatureJSONEncoder", "from_text", "to_text"]
