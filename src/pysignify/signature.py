from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec import AlgorithmTag, SignatureRecord, decode_signature_record, encode_record
from .exceptions import PreconditionError


@dataclass(slots=True)
class Signature:
    """Signature record plus its cached base64 form (empty until encoded)"""

    raw: Optional[SignatureRecord] = None
    encoded: str = ""

    @classmethod
    def from_base64(cls, text: str) -> Signature:
        sig = cls(encoded=text.strip())
        sig.decode()
        return sig

    @property
    def algorithm(self) -> AlgorithmTag:
        return self.require_raw().algorithm

    @property
    def fingerprint(self) -> bytes:
        return self.require_raw().fingerprint

    def require_raw(self) -> SignatureRecord:
        if self.raw is None:
            raise PreconditionError("no signature loaded")
        return self.raw

    def ensure_raw(self) -> SignatureRecord:
        if self.raw is None:
            if not self.encoded:
                raise PreconditionError("no signature found")
            self.decode()
        return self.require_raw()

    def encode(self) -> str:
        self.encoded = encode_record(self.require_raw())
        return self.encoded

    def decode(self) -> SignatureRecord:
        self.raw = decode_signature_record(self.encoded)
        return self.raw


__all__ = ["Signature"]
