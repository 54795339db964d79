import dataclasses
import json

import pytest

from keysmith.crypto.signature import Signature, SignatureJSONEncoder, from_text, to_text
from keysmith.exceptions import FormatError


def test_to_text_is_standard_base64() -> None:
    assert to_text(b"hello") == "aGVsbG8="
    assert to_text(b"\xfb\xff") == "+/8="
    assert to_text(b"") == ""


def test_from_text_inverts_to_text() -> None:
    assert from_text("aGVsbG8=") == b"hello"
    assert from_text("") == b""


@pytest.mark.parametrize("text", ["not base64!", "abc", "aGVsbG8", "é", "aGVs bG8="])
def test_from_text_rejects_invalid_base64(text: str) -> None:
    with pytest.raises(FormatError):
        from_text(text)
    with pytest.raises(FormatError):
        Signature.from_text(text)


def test_signature_behaves_like_a_value() -> None:
    sig = Signature(b"\x01\x02\x03")
    assert bytes(sig) == b"\x01\x02\x03"
    assert len(sig) == 3
    assert str(sig) == sig.to_text() == "AQID"
    assert Signature.from_text("AQID") == sig
    assert hash(sig) == hash(Signature(b"\x01\x02\x03"))


def test_signature_is_immutable() -> None:
    sig = Signature(b"\x01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        sig.value = b"\x02"  # type: ignore[misc]


def test_signature_copies_mutable_buffers() -> None:
    buf = bytearray(b"ab")
    sig = Signature(buf)
    buf[0] = 0
    assert sig.value == b"ab"
    assert isinstance(sig.value, bytes)


def test_json_encoding_is_quoted_base64() -> None:
    payload = json.dumps({"sig": Signature(b"\x01\x02")}, cls=SignatureJSONEncoder)
    assert payload == '{"sig": "AQI="}'
    assert Signature.from_text(json.loads(payload)["sig"]) == Signature(b"\x01\x02")


def test_json_encoder_still_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=SignatureJSONEncoder)
