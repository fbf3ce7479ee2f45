"""ID generation utilities."""

from __future__ import annotations

import re
import uuid
from typing import Protocol

from sidekit.core.byte_source import ByteSource, SystemByteSource

UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class IdGenerator(Protocol):
    def generate(self) -> str: ...


class UuidV4Generator:
    """Default implementation: UUID v4 built from an injectable byte source."""

    def __init__(self, byte_source: ByteSource | None = None):
        self._byte_source = byte_source or SystemByteSource()

    def generate(self) -> str:
        data = bytearray(self._byte_source.random_bytes(16))
        if len(data) != 16:
            raise ValueError(f"Byte source returned {len(data)} bytes, expected 16")
        data[6] = data[6] & 0x0F | 0x40  # version 0100
        data[8] = data[8] & 0x3F | 0x80  # variant 10
        return str(uuid.UUID(bytes=bytes(data)))


def is_uuid4(value: object) -> bool:
    """Return True if *value* is a canonical lowercase version-4 identifier."""
    return isinstance(value, str) and UUID4_PATTERN.fullmatch(value) is not None
