"""
Core package for the binary editing session.

This package implements the mutable ByteBuffer with its bounded HistoryStack
and single-slot Clipboard, and the EditorSession that validates and dispatches
named operations against them.
"""

from .buffer import ByteBuffer, Clipboard, HistoryStack
from .config import EditorConfig
from .errors import (
    BinEditError,
    EmptyClipboard,
    EmptyHistory,
    ErrorKind,
    InvalidArgument,
    MalformedHex,
    NoActiveBuffer,
    OutOfRange
)
from .session import (
    OPERATIONS,
    EditorSession,
    EditPayload,
    ExportPayload,
    OperationResult
)

__all__ = [
    'ByteBuffer',
    'Clipboard',
    'HistoryStack',
    'EditorConfig',
    'BinEditError',
    'EmptyClipboard',
    'EmptyHistory',
    'ErrorKind',
    'InvalidArgument',
    'MalformedHex',
    'NoActiveBuffer',
    'OutOfRange',
    'OPERATIONS',
    'EditorSession',
    'EditPayload',
    'ExportPayload',
    'OperationResult'
]
