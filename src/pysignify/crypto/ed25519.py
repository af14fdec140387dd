"""Ed25519 primitive over ``cryptography``.

Private keys use the expanded 64-byte layout ``seed || public key``.
"""
from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from ..codec import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SEED_SIZE, SIGNATURE_SIZE
from ..exceptions import FormatError


def _raw_public(key: Ed25519PublicKey) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def derive_key_from_seed(seed: bytes) -> bytes:
    """Deterministically expand a 32-byte seed into ``seed || public key``"""
    if len(seed) != SEED_SIZE:
        raise FormatError(f"ed25519 seed must be {SEED_SIZE} bytes")
    private = Ed25519PrivateKey.from_private_bytes(bytes(seed))
    return bytes(seed) + _raw_public(private.public_key())


def sign(expanded_key: bytes, message: bytes) -> bytes:
    if len(expanded_key) != PRIVATE_KEY_SIZE:
        raise FormatError(f"ed25519 private key must be {PRIVATE_KEY_SIZE} bytes")
    private = Ed25519PrivateKey.from_private_bytes(expanded_key[:SEED_SIZE])
    return private.sign(message)


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    if len(public_key) != PUBLIC_KEY_SIZE or len(signature) != SIGNATURE_SIZE:
        return False
    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(signature, message)
    except (InvalidSignature, ValueError):
        return False
    return True


__all__ = ["derive_key_from_seed", "sign", "verify"]
