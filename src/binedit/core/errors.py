"""
Error kinds raised by the editing core.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Programmatic error categories reported alongside a failed operation."""

    INVALID_ARGUMENT = 'InvalidArgument'
    OUT_OF_RANGE = 'OutOfRange'
    MALFORMED_HEX = 'MalformedHex'
    EMPTY_CLIPBOARD = 'EmptyClipboard'
    EMPTY_HISTORY = 'EmptyHistory'
    NO_ACTIVE_BUFFER = 'NoActiveBuffer'


class BinEditError(Exception):
    """Base class for all recoverable editing errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(BinEditError, ValueError):
    """A numeric or hex argument is missing or cannot be parsed."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRange(BinEditError, IndexError):
    """An offset or offset+length falls outside the buffer."""

    kind = ErrorKind.OUT_OF_RANGE


class MalformedHex(BinEditError, ValueError):
    """A hex byte string has odd length or non-hex characters."""

    kind = ErrorKind.MALFORMED_HEX


class EmptyClipboard(BinEditError):
    kind = ErrorKind.EMPTY_CLIPBOARD


class EmptyHistory(BinEditError):
    kind = ErrorKind.EMPTY_HISTORY


class NoActiveBuffer(BinEditError):
    kind = ErrorKind.NO_ACTIVE_BUFFER
