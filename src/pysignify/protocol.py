"""Sign and verify messages.

Neither operation mutates its inputs beyond decoding cached base64 forms on
demand. The outcome is returned as a value (:class:`SignedMessage`,
:class:`Verification`) holding the message, the signature and the public key
that was bound to the operation, so rendering a signature file afterwards does
not depend on hidden state.

Every signature is verified against the derived public key before ``sign``
returns it; a signature that fails this check raises
:class:`SelfVerificationError` and is never handed back.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import structlog

from .codec import ED25519, SignatureRecord
from .crypto import ed25519
from .exceptions import (
    AlgorithmError,
    FingerprintMismatchError,
    FormatError,
    PreconditionError,
    SelfVerificationError,
    SignatureVerificationError,
    SignifyError,
)
from .keys import PrivateKey, PublicKey
from .message import Message
from .signature import Signature
from .utils import render_untrusted

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SignedMessage:
    message: Message
    signature: Signature
    public_key: PublicKey

    def signature_file(self) -> bytes:
        """Render ``untrusted comment: <message comment>`` + signature base64"""
        if not self.signature.encoded:
            self.signature.encode()
        return render_untrusted(self.message.untrusted_comment, self.signature.encoded)

    def verify(self, public_key: Optional[PublicKey] = None) -> Verification:
        return verify(self.message, self.signature, public_key or self.public_key)


@dataclass(frozen=True, slots=True)
class Verification:
    verified: bool
    message: Message
    signature: Signature
    public_key: PublicKey


def sign(message: Message, private_key: PrivateKey) -> SignedMessage:
    try:
        record = private_key.require_raw()
    except PreconditionError as exc:
        raise PreconditionError(f"sign failed: {exc}") from exc
    try:
        raw = message.ensure_raw()
    except PreconditionError as exc:
        raise PreconditionError(f"sign failed: {exc}") from exc
    except FormatError as exc:
        raise FormatError(f"sign failed: {exc}") from exc

    # bind the signature to this key before the cryptographic step
    public_key = private_key.public_key()
    fingerprint = record.fingerprint

    if record.algorithm.is_ed25519:
        payload = ed25519.sign(record.payload, raw)
    else:
        raise AlgorithmError(f"sign failed: unknown signature algorithm: {record.algorithm}")
    signature = Signature(raw=SignatureRecord(algorithm=ED25519, fingerprint=fingerprint, payload=payload))

    try:
        verify(message, signature, public_key)
    except SignifyError as exc:
        logger.critical("verify after sign failed", fingerprint=fingerprint.hex(), error=str(exc))
        raise SelfVerificationError(f"sign failed: verify after sign: {exc}") from exc

    try:
        signature.encode()
    except SignifyError as exc:
        raise FormatError(f"sign failed: unable to encode signature: {exc}") from exc

    logger.debug("signed message", fingerprint=fingerprint.hex(), size=len(raw))
    return SignedMessage(message=message, signature=signature, public_key=public_key)


def verify(message: Message, signature: Signature, public_key: PublicKey) -> Verification:
    """Verify ``signature`` over ``message`` with ``public_key``.

    Missing raw forms of the key, signature and message are each decoded from
    their cached base64 text. Checks run in order: fingerprint binding, then
    algorithm tags, then the Ed25519 verifier. Each failure raises; success
    returns a :class:`Verification` with ``verified=True``.
    """
    try:
        pub = public_key.ensure_raw()
        sig = signature.ensure_raw()
        raw = message.ensure_raw()
    except PreconditionError as exc:
        raise PreconditionError(f"verify failed: {exc}") from exc
    except FormatError as exc:
        raise FormatError(f"verify failed: {exc}") from exc

    if sig.fingerprint != pub.fingerprint:
        logger.warning(
            "fingerprint mismatch",
            signature_fingerprint=sig.fingerprint.hex(),
            key_fingerprint=pub.fingerprint.hex(),
        )
        raise FingerprintMismatchError("fingerprint matching failed: wrong public key for message")

    if not (sig.algorithm.is_ed25519 and pub.algorithm.is_ed25519):
        raise AlgorithmError(
            f"unknown signature algorithm: signature={sig.algorithm} public key={pub.algorithm}"
        )

    if not ed25519.verify(pub.payload, raw, sig.payload):
        logger.warning("signature verification failed", fingerprint=pub.fingerprint.hex())
        raise SignatureVerificationError("ed25519 signature verification failed")

    logger.debug("verified message", fingerprint=pub.fingerprint.hex(), size=len(raw))
    return Verification(verified=True, message=message, signature=signature, public_key=public_key)


def is_valid(
    message: Message, signature: Signature, public_key: PublicKey
) -> Tuple[bool, Optional[SignifyError]]:
    """Boolean-plus-error form of :func:`verify`"""
    try:
        return verify(message, signature, public_key).verified, None
    except SignifyError as exc:
        return False, exc


def signature_file(message: Message, private_key: PrivateKey) -> bytes:
    """Sign ``message`` and render a signify-compatible signature file"""
    return sign(message, private_key).signature_file()


__all__ = ["SignedMessage", "Verification", "is_valid", "sign", "signature_file", "verify"]
