from __future__ import annotations

from ..exceptions import FormatError


def to_fixed(data: bytes | bytearray | memoryview, size: int) -> bytes:
    """Copy ``data`` into an immutable buffer of exactly ``size`` bytes"""
    if len(data) != size:
        raise FormatError(f"length mismatch: expected {size} bytes, got {len(data)}")
    return bytes(data)
