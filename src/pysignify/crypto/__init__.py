from . import ed25519

__all__ = ["ed25519"]
