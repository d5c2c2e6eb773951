"""
In-memory binary editor core: mount a blob, edit it by offset, undo, diff
against the original, checksum and bit-expand it.
"""

from .core import (
    OPERATIONS,
    BinEditError,
    EditorConfig,
    EditorSession,
    ErrorKind,
    ExportPayload,
    OperationResult
)
from .utils.transcode import bit_expand as transcode

__version__ = "0.1.0"

__all__ = [
    'OPERATIONS',
    'BinEditError',
    'EditorConfig',
    'EditorSession',
    'ErrorKind',
    'ExportPayload',
    'OperationResult',
    'transcode'
]
