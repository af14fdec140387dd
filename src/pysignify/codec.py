"""Fixed-layout binary records and their base64 text form.

Every key and signature is a record of ``algorithm tag (2) || fingerprint (8)
|| payload (N)``, packed big-endian with no padding or length prefixes. The
record kinds differ only in ``N``:

* public key: 32 bytes (42 total)
* private key: 64 bytes (74 total)
* signature: 64 bytes (74 total)
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

from .exceptions import AlgorithmError, FormatError
from .utils import b64d, b64e, to_fixed

ALGORITHM_TAG_SIZE = 2
FINGERPRINT_SIZE = 8
SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64
SIGNATURE_SIZE = 64
PRIVATE_PUBLIC_KEY_OFFSET = PRIVATE_KEY_SIZE - PUBLIC_KEY_SIZE
SEED_TOKEN_SIZE = SEED_SIZE + FINGERPRINT_SIZE

_ED25519_TAG = b"Ed"

R = TypeVar("R", bound="BinaryRecord")


@dataclass(frozen=True, slots=True)
class AlgorithmTag:
    """Two-byte algorithm identifier.

    Only ``Ed`` is recognised. Any other value is kept verbatim so that records
    carrying it still decode, but it cannot be used for signing or verifying.
    """

    raw: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", to_fixed(self.raw, ALGORITHM_TAG_SIZE))

    @property
    def is_ed25519(self) -> bool:
        return self.raw == _ED25519_TAG

    @property
    def name(self) -> str:
        return "Ed25519" if self.is_ed25519 else f"unknown({self.raw.hex()})"

    def require_ed25519(self) -> None:
        if not self.is_ed25519:
            raise AlgorithmError(f"unknown signature algorithm: {self.name}")

    def __str__(self) -> str:
        return self.name


ED25519 = AlgorithmTag(_ED25519_TAG)


@dataclass(frozen=True, slots=True)
class BinaryRecord:
    algorithm: AlgorithmTag
    fingerprint: bytes
    payload: bytes

    PAYLOAD_SIZE: ClassVar[int] = 0
    KIND: ClassVar[str] = "record"

    def __post_init__(self) -> None:
        object.__setattr__(self, "fingerprint", to_fixed(self.fingerprint, FINGERPRINT_SIZE))
        object.__setattr__(self, "payload", to_fixed(self.payload, self.PAYLOAD_SIZE))

    @classmethod
    def layout(cls) -> struct.Struct:
        return struct.Struct(f">{ALGORITHM_TAG_SIZE}s{FINGERPRINT_SIZE}s{cls.PAYLOAD_SIZE}s")

    @classmethod
    def size(cls) -> int:
        return ALGORITHM_TAG_SIZE + FINGERPRINT_SIZE + cls.PAYLOAD_SIZE

    def to_bytes(self) -> bytes:
        try:
            return self.layout().pack(self.algorithm.raw, self.fingerprint, self.payload)
        except struct.error as exc:  # pragma: no cover - layout is static
            raise FormatError(f"{self.KIND}: pack failed: {exc}") from exc

    @classmethod
    def from_bytes(cls: Type[R], data: bytes) -> R:
        if len(data) != cls.size():
            raise FormatError(f"invalid {cls.KIND} size: expected {cls.size()} bytes, got {len(data)}")
        algorithm, fingerprint, payload = cls.layout().unpack(data)
        return cls(algorithm=AlgorithmTag(algorithm), fingerprint=fingerprint, payload=payload)


@dataclass(frozen=True, slots=True)
class PublicKeyRecord(BinaryRecord):
    PAYLOAD_SIZE: ClassVar[int] = PUBLIC_KEY_SIZE
    KIND: ClassVar[str] = "public key"


@dataclass(frozen=True, slots=True)
class PrivateKeyRecord(BinaryRecord):
    PAYLOAD_SIZE: ClassVar[int] = PRIVATE_KEY_SIZE
    KIND: ClassVar[str] = "private key"


@dataclass(frozen=True, slots=True)
class SignatureRecord(BinaryRecord):
    PAYLOAD_SIZE: ClassVar[int] = SIGNATURE_SIZE
    KIND: ClassVar[str] = "signature"


def encode_record(record: BinaryRecord) -> str:
    return b64e(record.to_bytes())


def _decode(text: str, kind: Type[R]) -> R:
    return kind.from_bytes(b64d(text))


def decode_public_key_record(text: str) -> PublicKeyRecord:
    return _decode(text, PublicKeyRecord)


def decode_private_key_record(text: str) -> PrivateKeyRecord:
    return _decode(text, PrivateKeyRecord)


def decode_signature_record(text: str) -> SignatureRecord:
    return _decode(text, SignatureRecord)


__all__ = [
    "ALGORITHM_TAG_SIZE",
    "AlgorithmTag",
    "BinaryRecord",
    "ED25519",
    "FINGERPRINT_SIZE",
    "PRIVATE_KEY_SIZE",
    "PRIVATE_PUBLIC_KEY_OFFSET",
    "PUBLIC_KEY_SIZE",
    "PrivateKeyRecord",
    "PublicKeyRecord",
    "SEED_SIZE",
    "SEED_TOKEN_SIZE",
    "SIGNATURE_SIZE",
    "SignatureRecord",
    "decode_private_key_record",
    "decode_public_key_record",
    "decode_signature_record",
    "encode_record",
]
