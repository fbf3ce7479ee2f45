"""Tests for core utilities: IdGenerator, ByteSource, errors, config."""

from __future__ import annotations

import re

import pytest

from sidekit.config import CodecConfig, RuntimeConfig
from sidekit.core.byte_source import SystemByteSource
from sidekit.core.errors import InvalidArgumentError, SideKitError
from sidekit.core.id_generator import UuidV4Generator, is_uuid4
from sidekit.core.types import EncodeOption, JsonError
from tests.conftest import FailingByteSource, FixedByteSource

UUID4_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


# ---- IdGenerator ----

def test_uuid_generator_format():
    gen = UuidV4Generator()
    for _ in range(200):
        uid = gen.generate()
        assert len(uid) == 36
        assert UUID4_RE.match(uid)


def test_uuid_generator_uniqueness():
    gen = UuidV4Generator()
    ids = {gen.generate() for _ in range(10_000)}
    assert len(ids) == 10_000


def test_uuid_generator_sets_version_and_variant(fixed_bytes):
    gen = UuidV4Generator(fixed_bytes)
    assert gen.generate() == "00010203-0405-4607-8809-0a0b0c0d0e0f"
    assert fixed_bytes.calls == [16]


def test_uuid_generator_preserves_remaining_bits():
    gen = UuidV4Generator(FixedByteSource(b"\xff" * 16))
    assert gen.generate() == "ffffffff-ffff-4fff-bfff-ffffffffffff"

    gen = UuidV4Generator(FixedByteSource(b"\x00" * 16))
    assert gen.generate() == "00000000-0000-4000-8000-000000000000"


def test_uuid_generator_propagates_byte_source_failure():
    gen = UuidV4Generator(FailingByteSource())
    with pytest.raises(OSError, match="entropy source unavailable"):
        gen.generate()


def test_uuid_generator_rejects_short_byte_source():
    gen = UuidV4Generator(FixedByteSource(b"\x00" * 8))
    with pytest.raises(ValueError, match="expected 16"):
        gen.generate()


def test_is_uuid4():
    assert is_uuid4("00010203-0405-4607-8809-0a0b0c0d0e0f")
    assert not is_uuid4("00010203-0405-1607-8809-0a0b0c0d0e0f")  # version 1
    assert not is_uuid4("00010203-0405-4607-c809-0a0b0c0d0e0f")  # wrong variant
    assert not is_uuid4("00010203-0405-4607-8809-0A0B0C0D0E0F")
    assert not is_uuid4("00010203-0405-4607-8809-0a0b0c0d0e0f\n")
    assert not is_uuid4(None)


# ---- ByteSource ----

def test_system_byte_source_length():
    src = SystemByteSource()
    assert len(src.random_bytes(16)) == 16
    assert len(src.random_bytes(0)) == 0


def test_system_byte_source_varies():
    src = SystemByteSource()
    assert src.random_bytes(32) != src.random_bytes(32)


# ---- Errors ----

def test_invalid_argument_error_fields():
    err = InvalidArgumentError("Syntax error.", JsonError.SYNTAX)
    assert err.message == "Syntax error."
    assert err.code == 4
    assert str(err) == "Syntax error."
    assert isinstance(err, SideKitError)
    assert isinstance(err, ValueError)


def test_invalid_argument_error_default_code():
    assert InvalidArgumentError("Invalid JSON data.").code == 0


def test_json_error_messages_cover_every_code():
    for error in JsonError:
        assert error.message
    assert JsonError.DEPTH.message == "The maximum stack depth has been exceeded."
    assert JsonError.UNKNOWN.message == "Unknown JSON encoding/decoding error."


# ---- Config ----

def test_codec_config_defaults():
    cfg = CodecConfig()
    assert cfg.encode_options == EncodeOption.DEFAULT == 320
    assert cfg.as_mapping is True
    assert cfg.max_depth == 512


def test_codec_config_rejects_non_positive_depth():
    with pytest.raises(ValueError, match="max_depth"):
        CodecConfig(max_depth=0)


def test_runtime_config_builds_codec_config():
    cfg = RuntimeConfig()
    assert isinstance(cfg.codec, CodecConfig)
    assert RuntimeConfig().codec is not cfg.codec


def test_html_option_combination():
    html = EncodeOption.HTML
    assert html & EncodeOption.UNESCAPED_UNICODE
    assert not html & EncodeOption.UNESCAPED_SLASHES
    for flag in (EncodeOption.HEX_TAG, EncodeOption.HEX_AMP, EncodeOption.HEX_APOS, EncodeOption.HEX_QUOT):
        assert html & flag
