from __future__ import annotations

"""Central exception hierarchy"""
class SignifyError(Exception):
    """Base exception for all failures"""


class FormatError(SignifyError):
    """Raised for malformed base64, wrong record sizes or malformed files"""


class AlgorithmError(SignifyError):
    """Raised when an algorithm tag is unknown or does not match its use"""


class PreconditionError(SignifyError):
    """Raised when required key material or message bytes are missing"""


class AuthenticationError(SignifyError):
    """Raised when a signature does not authenticate a message"""


class FingerprintMismatchError(AuthenticationError):
    """Raised when a signature belongs to a different key-generation instance"""


class SignatureVerificationError(AuthenticationError):
    """Raised when the Ed25519 verifier rejects a signature"""


class FatalInvariantError(SignifyError):
    """Raised when the cryptographic backend or record layout is broken.

    Callers should log and abort rather than retry: any value produced on the
    failing path is untrustworthy.
    """


class KeyDerivationError(FatalInvariantError):
    """Raised when deterministic key derivation or its self-test fails"""


class SelfVerificationError(FatalInvariantError):
    """Raised when a freshly produced signature does not verify"""


__all__ = [
    "AlgorithmError",
    "AuthenticationError",
    "FatalInvariantError",
    "FingerprintMismatchError",
    "FormatError",
    "KeyDerivationError",
    "PreconditionError",
    "SelfVerificationError",
    "SignatureVerificationError",
    "SignifyError",
]
