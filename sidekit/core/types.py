"""Core enums shared by the encoder and configuration."""

from __future__ import annotations

from enum import IntEnum, IntFlag


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EncodeOption(IntFlag):
    HEX_TAG = 1
    HEX_AMP = 2
    HEX_APOS = 4
    HEX_QUOT = 8
    UNESCAPED_SLASHES = 64
    PRETTY_PRINT = 128
    UNESCAPED_UNICODE = 256

    DEFAULT = UNESCAPED_SLASHES | UNESCAPED_UNICODE
    HTML = UNESCAPED_UNICODE | HEX_QUOT | HEX_TAG | HEX_AMP | HEX_APOS


class JsonError(IntEnum):
    UNKNOWN = 0
    DEPTH = 1
    STATE_MISMATCH = 2
    CTRL_CHAR = 3
    SYNTAX = 4
    UTF8 = 5
    RECURSION = 6
    INF_OR_NAN = 7
    UNSUPPORTED_TYPE = 8

    @property
    def message(self) -> str:
        return JSON_ERROR_MESSAGES[self]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

JSON_ERROR_MESSAGES: dict[JsonError, str] = {
    JsonError.UNKNOWN: "Unknown JSON encoding/decoding error.",
    JsonError.DEPTH: "The maximum stack depth has been exceeded.",
    JsonError.STATE_MISMATCH: "Invalid or malformed JSON.",
    JsonError.CTRL_CHAR: "Control character error, possibly incorrectly encoded.",
    JsonError.SYNTAX: "Syntax error.",
    JsonError.UTF8: "Malformed UTF-8 characters, possibly incorrectly encoded.",
    JsonError.RECURSION: "One or more recursive references in the value to be encoded.",
    JsonError.INF_OR_NAN: "One or more NAN or INF values in the value to be encoded",
    JsonError.UNSUPPORTED_TYPE: "A value of a type that cannot be encoded was given",
}
