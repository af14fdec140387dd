"""Two-line ``untrusted comment`` text artifacts."""
from __future__ import annotations

from typing import Tuple

from ..exceptions import FormatError

UNTRUSTED_COMMENT = "untrusted comment:"
_PREFIX = UNTRUSTED_COMMENT + " "


def render_untrusted(comment: str, encoded: str) -> bytes:
    """Assemble ``untrusted comment: <comment>\\n<encoded>\\n``"""
    if "\n" in comment or "\r" in comment:
        raise FormatError("untrusted comment must be a single line")
    return f"{_PREFIX}{comment}\n{encoded}\n".encode("utf-8")


def parse_untrusted(data: bytes | str) -> Tuple[str, str]:
    """Split an artifact into ``(comment, base64 text)``.

    Lines end at LF only; a trailing CR is dropped so CRLF files read back.
    Anything after the second line is ignored.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError("untrusted file is not valid UTF-8") from exc
    lines = [line[:-1] if line.endswith("\r") else line for line in data.split("\n")]
    if len(lines) < 2:
        raise FormatError("untrusted file must have a comment line and a base64 line")
    header, encoded = lines[0], lines[1].strip()
    if not header.startswith(_PREFIX):
        raise FormatError(f"missing '{_PREFIX}' header")
    if not encoded:
        raise FormatError("untrusted file has an empty base64 line")
    return header[len(_PREFIX):], encoded


__all__ = ["UNTRUSTED_COMMENT", "parse_untrusted", "render_untrusted"]
