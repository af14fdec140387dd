from __future__ import annotations

import pytest

from pysignify.keys import PrivateKey, derive_from_seed

ZERO_SEED_TOKEN = bytes(32) + bytes([1, 2, 3, 4, 5, 6, 7, 8])
OTHER_SEED_TOKEN = bytes(range(32)) + b"\xaa" * 8


@pytest.fixture
def private_key() -> PrivateKey:
    return derive_from_seed(ZERO_SEED_TOKEN)


@pytest.fixture
def other_private_key() -> PrivateKey:
    return derive_from_seed(OTHER_SEED_TOKEN)


@pytest.fixture
def zero_seed_token() -> bytes:
    return ZERO_SEED_TOKEN
