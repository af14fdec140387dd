import base64

from ..exceptions import FormatError


def b64e(data: bytes | None) -> str:
    """Standard padded base64 encode; refuses empty input"""
    if not data:
        raise FormatError("base64 encode: nothing to encode")
    return base64.b64encode(data).decode("ascii")
