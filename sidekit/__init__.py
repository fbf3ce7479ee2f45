"""SideKit: UUID v4 generation and JSON encoding helpers."""

from sidekit.config import CodecConfig, RuntimeConfig
from sidekit.core.byte_source import ByteSource, SystemByteSource
from sidekit.core.errors import InvalidArgumentError, SideKitError
from sidekit.core.id_generator import IdGenerator, UuidV4Generator, is_uuid4
from sidekit.core.types import EncodeOption, JsonError
from sidekit.encoder import JsonEncoder, JsonSerializable

__all__ = [
    "ByteSource",
    "CodecConfig",
    "EncodeOption",
    "IdGenerator",
    "InvalidArgumentError",
    "JsonEncoder",
    "JsonError",
    "JsonSerializable",
    "RuntimeConfig",
    "SideKitError",
    "SystemByteSource",
    "UuidV4Generator",
    "is_uuid4",
]
