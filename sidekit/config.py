"""Runtime configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field

from sidekit.core.types import EncodeOption


@dataclass
class CodecConfig:
    encode_options: int = EncodeOption.DEFAULT
    as_mapping: bool = True
    max_depth: int = 512

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


@dataclass
class RuntimeConfig:
    codec: CodecConfig = field(default_factory=CodecConfig)
