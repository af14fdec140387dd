import base64
import binascii

from ..exceptions import FormatError


def b64d(value: str) -> bytes:
    """Strict standard base64 decode (no URL-safe alphabet, padding required)"""
    if not value:
        raise FormatError("base64 decode: nothing to decode")
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise FormatError(f"base64 decode: {exc}") from exc
