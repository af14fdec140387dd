from __future__ import annotations

from .b64d import b64d
from .b64e import b64e
from .buffers import to_fixed
from .text import UNTRUSTED_COMMENT, parse_untrusted, render_untrusted

__all__ = [
    "UNTRUSTED_COMMENT",
    "b64d",
    "b64e",
    "parse_untrusted",
    "render_untrusted",
    "to_fixed",
]
