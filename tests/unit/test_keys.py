from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

import pysignify.crypto.ed25519 as primitive
from pysignify.codec import ED25519, PrivateKeyRecord
from pysignify.exceptions import FormatError, KeyDerivationError, PreconditionError
from pysignify.keys import PrivateKey, PublicKey, derive_from_seed, generate_seed_token
from pysignify.utils import parse_untrusted


def _reference_public(seed: bytes) -> bytes:
    return Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def test_zero_seed_scenario(private_key: PrivateKey) -> None:
    public = private_key.public_key()
    assert public.fingerprint == bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert private_key.fingerprint == bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert public.raw is not None and private_key.raw is not None
    assert public.raw.payload == private_key.raw.payload[32:]
    assert public.raw.payload == _reference_public(bytes(32))
    assert private_key.raw.payload[:32] == bytes(32)


def test_derivation_is_deterministic(zero_seed_token: bytes) -> None:
    first = derive_from_seed(zero_seed_token)
    second = derive_from_seed(zero_seed_token)
    assert first.raw == second.raw
    assert first.encode() == second.encode()


def test_fingerprint_is_stamped_not_derived(zero_seed_token: bytes) -> None:
    other = derive_from_seed(zero_seed_token[:32] + b"\xff" * 8)
    original = derive_from_seed(zero_seed_token)
    assert other.fingerprint == b"\xff" * 8
    assert other.raw.payload == original.raw.payload


@pytest.mark.parametrize("size", [0, 32, 39, 41])
def test_seed_token_must_be_40_bytes(size: int) -> None:
    with pytest.raises(FormatError):
        derive_from_seed(bytes(size))


def test_broken_backend_is_fatal(monkeypatch: pytest.MonkeyPatch, zero_seed_token: bytes) -> None:
    real = primitive.derive_key_from_seed

    def corrupt(seed: bytes) -> bytes:
        expanded = real(seed)
        return expanded[:32] + bytes(32)

    monkeypatch.setattr(primitive, "derive_key_from_seed", corrupt)
    with pytest.raises(KeyDerivationError):
        derive_from_seed(zero_seed_token)


def test_generate_seed_token_size() -> None:
    assert len(generate_seed_token()) == 40
    assert generate_seed_token() != generate_seed_token()


def test_public_key_file_shape(private_key: PrivateKey) -> None:
    data = private_key.public_key_file("alice")
    lines = data.decode("utf-8").split("\n")
    assert lines[0] == "untrusted comment: signify public key alice"
    assert lines[2] == ""
    assert PublicKey.from_base64(lines[1]).raw == private_key.public_key().raw


def test_public_key_file_encodes_once() -> None:
    public = derive_from_seed(bytes(40)).public_key()
    assert public.encoded == ""
    public.public_key_file()
    assert public.encoded
    comment, encoded = parse_untrusted(public.public_key_file())
    assert comment == "signify public key "
    assert encoded == public.encoded


def test_public_key_file_without_material_fails() -> None:
    with pytest.raises(FormatError):
        PublicKey().public_key_file("x")
    with pytest.raises(PreconditionError):
        PrivateKey().public_key_file("x")


def test_private_key_round_trip(private_key: PrivateKey) -> None:
    text = private_key.encode()
    decoded = PrivateKey.from_base64(text)
    assert decoded.raw == private_key.raw
    assert decoded.encode() == text
    comment, encoded = parse_untrusted(private_key.private_key_file("bob"))
    assert comment == "signify private key bob"
    assert encoded == text


def test_public_key_round_trip(private_key: PrivateKey) -> None:
    public = private_key.public_key()
    text = public.encode()
    assert PublicKey.from_base64(text).encode() == text


def test_public_key_keeps_private_algorithm_tag() -> None:
    key = PrivateKey(raw=PrivateKeyRecord(algorithm=ED25519, fingerprint=bytes(8), payload=bytes(64)))
    assert key.public_key().algorithm == ED25519
    assert key.public_key().raw.payload == bytes(32)


def test_decode_rejects_public_key_text_as_private(private_key: PrivateKey) -> None:
    with pytest.raises(FormatError):
        PrivateKey.from_base64(private_key.public_key().encode())
