"""Encoder module: JSON encoding/decoding and object normalization."""

from sidekit.core.types import EncodeOption, JsonError
from sidekit.encoder.json_encoder import JsonEncoder
from sidekit.encoder.serializable import JsonSerializable

__all__ = ["EncodeOption", "JsonEncoder", "JsonError", "JsonSerializable"]
