"""Custom-serialization capability."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonSerializable(Protocol):
    """An object that provides its own JSON-ready representation."""

    def json_serialize(self) -> Any: ...
