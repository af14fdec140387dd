from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Tuple, Union

from .exceptions import FormatError, SignifyError
from .keys import PrivateKey, PublicKey
from .signature import Signature
from .utils import parse_untrusted

# bytes are file content; str and path-like values name a file to read
Source = Union[bytes, str, "os.PathLike[str]"]


def _load(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return Path(source).read_bytes()


def _parse(source: Source, kind: str) -> Tuple[str, str]:
    try:
        return parse_untrusted(_load(source))
    except FormatError as exc:
        raise FormatError(f"{kind} file: {exc}") from exc


def read_public_key(source: Source) -> Tuple[PublicKey, str]:
    comment, encoded = _parse(source, "public key")
    try:
        return PublicKey.from_base64(encoded), comment
    except SignifyError as exc:
        raise FormatError(f"public key file: {exc}") from exc


def read_private_key(source: Source) -> Tuple[PrivateKey, str]:
    comment, encoded = _parse(source, "private key")
    try:
        return PrivateKey.from_base64(encoded), comment
    except SignifyError as exc:
        raise FormatError(f"private key file: {exc}") from exc


def read_signature(source: Source) -> Tuple[Signature, str]:
    comment, encoded = _parse(source, "signature")
    try:
        return Signature.from_base64(encoded), comment
    except SignifyError as exc:
        raise FormatError(f"signature file: {exc}") from exc


def write_file(path: Path, data: bytes, *, private: bool = False) -> None:
    """Write ``data`` atomically (temp file + rename); private files get 0600"""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp, 0o600 if private else 0o644)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


__all__ = ["read_private_key", "read_public_key", "read_signature", "write_file"]
