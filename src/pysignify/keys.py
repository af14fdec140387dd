"""Public and private key values.

A private key is only ever produced from a 40-byte seed token (32-byte seed
followed by an 8-byte fingerprint) or by decoding a previously encoded one.
The fingerprint is stamped from the seed token; it is never a hash of the key.
"""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

import structlog

from .codec import (
    ED25519,
    PRIVATE_KEY_SIZE,
    PRIVATE_PUBLIC_KEY_OFFSET,
    SEED_SIZE,
    SEED_TOKEN_SIZE,
    AlgorithmTag,
    PrivateKeyRecord,
    PublicKeyRecord,
    decode_private_key_record,
    decode_public_key_record,
    encode_record,
)
from .crypto import ed25519
from .exceptions import FormatError, KeyDerivationError, PreconditionError, SignifyError
from .utils import render_untrusted

PUBLIC_KEY_COMMENT = "signify public key"
PRIVATE_KEY_COMMENT = "signify private key"
SELF_TEST_MESSAGE = b"Nachts sind alle blauen Katzen grau!"

logger = structlog.get_logger(__name__)


def _comment(prefix: str, extra: str) -> str:
    return f"{prefix} {extra}"


@dataclass(slots=True)
class PublicKey:
    """Public key record plus its cached base64 form (empty until encoded)"""

    raw: Optional[PublicKeyRecord] = None
    encoded: str = ""

    @classmethod
    def from_base64(cls, text: str) -> PublicKey:
        key = cls(encoded=text.strip())
        key.decode()
        return key

    @property
    def algorithm(self) -> AlgorithmTag:
        return self.require_raw().algorithm

    @property
    def fingerprint(self) -> bytes:
        return self.require_raw().fingerprint

    def require_raw(self) -> PublicKeyRecord:
        if self.raw is None:
            raise PreconditionError("no public key loaded")
        return self.raw

    def ensure_raw(self) -> PublicKeyRecord:
        """Return the record, decoding the cached text first when needed"""
        if self.raw is None:
            if not self.encoded:
                raise PreconditionError("no public key found")
            self.decode()
        return self.require_raw()

    def encode(self) -> str:
        self.encoded = encode_record(self.require_raw())
        return self.encoded

    def decode(self) -> PublicKeyRecord:
        self.raw = decode_public_key_record(self.encoded)
        return self.raw

    def public_key_file(self, comment: str = "") -> bytes:
        """Render ``untrusted comment: signify public key <comment>`` + base64"""
        if not self.encoded:
            try:
                self.encode()
            except SignifyError as exc:
                raise FormatError(f"public key file: encode public key: {exc}") from exc
        return render_untrusted(_comment(PUBLIC_KEY_COMMENT, comment), self.encoded)


@dataclass(slots=True)
class PrivateKey:
    raw: Optional[PrivateKeyRecord] = None
    encoded: str = ""

    @classmethod
    def from_base64(cls, text: str) -> PrivateKey:
        key = cls(encoded=text.strip())
        key.decode()
        return key

    @property
    def algorithm(self) -> AlgorithmTag:
        return self.require_raw().algorithm

    @property
    def fingerprint(self) -> bytes:
        return self.require_raw().fingerprint

    def require_raw(self) -> PrivateKeyRecord:
        if self.raw is None or len(self.raw.payload) != PRIVATE_KEY_SIZE:
            raise PreconditionError("no private key")
        return self.raw

    def encode(self) -> str:
        self.encoded = encode_record(self.require_raw())
        return self.encoded

    def decode(self) -> PrivateKeyRecord:
        self.raw = decode_private_key_record(self.encoded)
        return self.raw

    def public_key(self) -> PublicKey:
        """Project the trailing 32 bytes of the expanded key; no crypto involved"""
        record = self.require_raw()
        return PublicKey(
            raw=PublicKeyRecord(
                algorithm=record.algorithm,
                fingerprint=record.fingerprint,
                payload=record.payload[PRIVATE_PUBLIC_KEY_OFFSET:],
            )
        )

    def public_key_file(self, comment: str = "") -> bytes:
        try:
            self.require_raw()
        except PreconditionError as exc:
            raise PreconditionError(f"public key file: {exc}") from exc
        return self.public_key().public_key_file(comment)

    def private_key_file(self, comment: str = "") -> bytes:
        """Render the unencrypted private key artifact"""
        if not self.encoded:
            self.encode()
        return render_untrusted(_comment(PRIVATE_KEY_COMMENT, comment), self.encoded)


def generate_seed_token() -> bytes:
    return secrets.token_bytes(SEED_TOKEN_SIZE)


def derive_from_seed(seed_token: bytes) -> PrivateKey:
    """Deterministically derive a private key and prove it can sign.

    Raises :class:`FormatError` for a seed token of the wrong size and
    :class:`KeyDerivationError` when derivation or the sign/verify self-test
    fails. The latter means the backend is broken; do not retry.
    """
    if len(seed_token) != SEED_TOKEN_SIZE:
        raise FormatError(f"seed token must be {SEED_TOKEN_SIZE} bytes, got {len(seed_token)}")

    from .message import Message
    from .protocol import sign

    seed, fingerprint = bytes(seed_token[:SEED_SIZE]), bytes(seed_token[SEED_SIZE:])
    try:
        key = PrivateKey(
            raw=PrivateKeyRecord(
                algorithm=ED25519,
                fingerprint=fingerprint,
                payload=ed25519.derive_key_from_seed(seed),
            )
        )
        sign(Message(raw=SELF_TEST_MESSAGE), key)
    except Exception as exc:
        logger.critical("key derivation self-test failed", fingerprint=fingerprint.hex(), error=str(exc))
        raise KeyDerivationError(f"internal: generate keypair: {exc}") from exc
    logger.debug("derived private key", fingerprint=fingerprint.hex())
    return key


__all__ = [
    "PRIVATE_KEY_COMMENT",
    "PUBLIC_KEY_COMMENT",
    "PrivateKey",
    "PublicKey",
    "SELF_TEST_MESSAGE",
    "derive_from_seed",
    "generate_seed_token",
]
