from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import PreconditionError
from .utils import b64d, b64e


@dataclass(slots=True)
class Message:
    """Bytes to be signed or verified.

    ``raw`` may be absent when only the base64 form ``encoded`` is known; the
    protocol decodes it on demand.
    """

    raw: Optional[bytes] = None
    encoded: str = ""
    untrusted_comment: str = ""

    @classmethod
    def from_base64(cls, text: str, untrusted_comment: str = "") -> Message:
        return cls(encoded=text.strip(), untrusted_comment=untrusted_comment)

    def encode(self) -> str:
        self.encoded = b64e(self.raw)
        return self.encoded

    def decode(self) -> bytes:
        self.raw = b64d(self.encoded)
        return self.raw

    def ensure_raw(self) -> bytes:
        if self.raw is not None:
            return self.raw
        if not self.encoded:
            raise PreconditionError("no raw message and no base64 message to decode")
        return self.decode()


__all__ = ["Message"]
