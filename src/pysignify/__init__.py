"""Create and verify OpenBSD signify / minisign compatible Ed25519 signatures."""
from __future__ import annotations

from .codec import ED25519, AlgorithmTag
from .exceptions import (
    AlgorithmError,
    AuthenticationError,
    FatalInvariantError,
    FingerprintMismatchError,
    FormatError,
    KeyDerivationError,
    PreconditionError,
    SelfVerificationError,
    SignatureVerificationError,
    SignifyError,
)
from .files import read_private_key, read_public_key, read_signature
from .keys import PrivateKey, PublicKey, derive_from_seed, generate_seed_token
from .message import Message
from .protocol import SignedMessage, Verification, is_valid, sign, signature_file, verify
from .signature import Signature
from .version import __version__

__all__ = [
    "AlgorithmError",
    "AlgorithmTag",
    "AuthenticationError",
    "ED25519",
    "FatalInvariantError",
    "FingerprintMismatchError",
    "FormatError",
    "KeyDerivationError",
    "Message",
    "PreconditionError",
    "PrivateKey",
    "PublicKey",
    "SelfVerificationError",
    "Signature",
    "SignatureVerificationError",
    "SignedMessage",
    "SignifyError",
    "Verification",
    "__version__",
    "derive_from_seed",
    "generate_seed_token",
    "is_valid",
    "read_private_key",
    "read_public_key",
    "read_signature",
    "sign",
    "signature_file",
    "verify",
]
