"""Exception hierarchy for SideKit."""

from __future__ import annotations


class SideKitError(Exception):
    """SideKit base exception."""


class InvalidArgumentError(SideKitError, ValueError):
    """Input could not be encoded or decoded.

    ``code`` holds the numeric fault code (a ``JsonError`` member for codec
    faults, ``0`` when the cause is unknown).
    """

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code
