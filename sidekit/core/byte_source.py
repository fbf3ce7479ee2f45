"""Random byte source abstraction."""

from __future__ import annotations

import secrets
from typing import Protocol


class ByteSource(Protocol):
    def random_bytes(self, n: int) -> bytes: ...


class SystemByteSource:
    """Default implementation: the OS CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
