"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sidekit.config import CodecConfig
from sidekit.encoder import JsonEncoder


class FixedByteSource:
    """Byte source that replays a canned byte string."""

    def __init__(self, data: bytes = bytes(range(16))):
        self._data = data
        self.calls: list[int] = []

    def random_bytes(self, n: int) -> bytes:
        self.calls.append(n)
        return self._data


class FailingByteSource:
    """Byte source whose entropy pool is unavailable."""

    def random_bytes(self, n: int) -> bytes:
        raise OSError("entropy source unavailable")


@pytest.fixture
def fixed_bytes():
    return FixedByteSource()


@pytest.fixture
def encoder():
    return JsonEncoder()


@pytest.fixture
def shallow_encoder():
    return JsonEncoder(CodecConfig(max_depth=2))
