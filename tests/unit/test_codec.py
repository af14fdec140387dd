import base64

import pytest

from pysignify.codec import (
    ED25519,
    AlgorithmTag,
    PrivateKeyRecord,
    PublicKeyRecord,
    SignatureRecord,
    decode_private_key_record,
    decode_public_key_record,
    decode_signature_record,
    encode_record,
)
from pysignify.exceptions import AlgorithmError, FormatError
from pysignify.utils import b64d, b64e, to_fixed


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def test_record_layout_is_tag_fingerprint_payload() -> None:
    record = PublicKeyRecord(algorithm=ED25519, fingerprint=bytes(range(1, 9)), payload=b"\x7f" * 32)
    packed = record.to_bytes()
    assert len(packed) == 42
    assert packed[:2] == b"Ed"
    assert packed[2:10] == bytes(range(1, 9))
    assert packed[10:] == b"\x7f" * 32


@pytest.mark.parametrize(
    ("kind", "size"),
    [(PublicKeyRecord, 42), (PrivateKeyRecord, 74), (SignatureRecord, 74)],
)
def test_record_sizes(kind, size) -> None:
    assert kind.size() == size


@pytest.mark.parametrize(
    ("decoder", "size"),
    [
        (decode_public_key_record, 42),
        (decode_private_key_record, 74),
        (decode_signature_record, 74),
    ],
)
@pytest.mark.parametrize("delta", [-1, 1])
def test_decode_rejects_off_by_one_lengths(decoder, size: int, delta: int) -> None:
    with pytest.raises(FormatError):
        decoder(_b64(b"Ed" + bytes(size - 2 + delta)))


def test_decode_accepts_exact_length() -> None:
    record = decode_signature_record(_b64(b"Ed" + b"\x01" * 8 + b"\x02" * 64))
    assert record.algorithm == ED25519
    assert record.fingerprint == b"\x01" * 8
    assert record.payload == b"\x02" * 64


def test_encode_round_trips() -> None:
    record = PrivateKeyRecord(algorithm=ED25519, fingerprint=b"\x09" * 8, payload=bytes(range(64)))
    text = encode_record(record)
    assert decode_private_key_record(text) == record
    assert encode_record(decode_private_key_record(text)) == text


def test_unknown_tag_decodes_but_is_unusable() -> None:
    record = decode_public_key_record(_b64(b"Bk" + bytes(40)))
    assert record.algorithm == AlgorithmTag(b"Bk")
    assert not record.algorithm.is_ed25519
    with pytest.raises(AlgorithmError):
        record.algorithm.require_ed25519()


def test_record_rejects_wrong_field_sizes() -> None:
    with pytest.raises(FormatError):
        PublicKeyRecord(algorithm=ED25519, fingerprint=b"\x00" * 7, payload=bytes(32))
    with pytest.raises(FormatError):
        SignatureRecord(algorithm=ED25519, fingerprint=bytes(8), payload=bytes(63))
    with pytest.raises(FormatError):
        AlgorithmTag(b"E")


def test_to_fixed_never_pads_or_truncates() -> None:
    assert to_fixed(bytearray(b"ab"), 2) == b"ab"
    with pytest.raises(FormatError):
        to_fixed(b"abc", 2)
    with pytest.raises(FormatError):
        to_fixed(b"a", 2)


@pytest.mark.parametrize("empty", [b"", None])
def test_b64e_refuses_empty_input(empty) -> None:
    with pytest.raises(FormatError):
        b64e(empty)


@pytest.mark.parametrize("text", ["", "not base64!", "RWQ", "RWQ-_w=="])
def test_b64d_is_strict(text: str) -> None:
    with pytest.raises(FormatError):
        b64d(text)
