"""
Editing engine: one mounted buffer, its history and clipboard behind a lock.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final, List, Mapping, Optional, Tuple

from .buffer import ByteBuffer, BytesLike, Clipboard, HistoryStack
from .config import EditorConfig
from .errors import (
    BinEditError,
    ErrorKind,
    InvalidArgument,
    NoActiveBuffer
)
from . import reports
from ..utils.checksum import checksums
from ..utils.diff import DiffReport, binary_diff
from ..utils.hex_utils import hex_dump, parse_hex_bytes, parse_hex_int
from ..utils.search import SearchEngine
from ..utils.transcode import bit_expand

logger = logging.getLogger(__name__)

OPERATIONS: Final[Tuple[str, ...]] = (
    'dump', 'edit', 'overwrite', 'insert', 'delete', 'search',
    'copy', 'paste', 'checksum', 'diff', 'undo', 'save'
)
MUTATING_OPERATIONS: Final[Tuple[str, ...]] = (
    'edit', 'overwrite', 'insert', 'delete', 'paste'
)

NO_BUFFER_STATUS_MESSAGE: Final[str] = "Error: No data stream mounted."
NOTHING_TO_UNDO_STATUS_MESSAGE: Final[str] = "Nothing to undo."
UNDO_STATUS_MESSAGE: Final[str] = "Reverted to previous buffer state."
CHECKSUM_STATUS_MESSAGE: Final[str] = "Integrity validation complete."
SAVE_STATUS_MESSAGE: Final[str] = "State finalized. Extraction ready."
EXPANDED_FILE_NAME: Final[str] = 'expanded_stream.bin'


@dataclass(frozen=True)
class EditPayload:
    """Outcome of a single-byte edit."""
    offset: int
    old_value: int
    new_value: int
    dump: str = ''


@dataclass(frozen=True)
class ExportPayload:
    """Binary output ready to be written to a file."""
    data: bytes
    file_name: str
    undo_entries: int = 0

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class OperationResult:
    """Structured outcome of EditorSession.invoke."""
    ok: bool
    operation: str
    status_message: str
    payload: Any = None
    error_kind: Optional[ErrorKind] = None
    report: Optional[str] = None

    @classmethod
    def failure(cls, operation: str, error: BinEditError) -> 'OperationResult':
        if error.kind is ErrorKind.EMPTY_HISTORY:
            message = NOTHING_TO_UNDO_STATUS_MESSAGE
        elif error.kind is ErrorKind.NO_ACTIVE_BUFFER:
            message = NO_BUFFER_STATUS_MESSAGE
        else:
            message = f"Error: {error.message}"

        return cls(False, operation, message, error_kind=error.kind)

    def as_bytes(self) -> Optional[bytes]:
        """Raw binary payload, or None when the result is not binary."""

        if isinstance(self.payload, ExportPayload):
            return self.payload.data

        if isinstance(self.payload, (bytes, bytearray)):
            return bytes(self.payload)

        return None

    def as_text(self) -> str:
        """Textual report if one was produced, otherwise the status line."""

        if self.report is not None:
            return self.report

        return self.status_message


Handler = Callable[[Mapping[str, Any]], OperationResult]


class EditorSession:
    """
    Single-writer editing session.

    The buffer, history and clipboard are one critical section: mount, every
    dispatched operation, raw export and transcoding all hold the same lock.
    """

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()
        self.buffer: Optional[ByteBuffer] = None
        self.history = HistoryStack(self.config.history_limit)
        self.clipboard = Clipboard()
        self._lock = threading.RLock()
        self.operation_handlers: Dict[str, Handler] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[str, Handler]:
        """Set up the operation dispatch table."""

        return {
            'dump': self._dump,
            'edit': self._edit,
            'overwrite': self._overwrite,
            'insert': self._insert,
            'delete': self._delete,
            'search': self._search,
            'copy': self._copy,
            'paste': self._paste,
            'checksum': self._checksum,
            'diff': self._diff,
            'undo': self._undo,
            'save': self._save,
        }

    @property
    def is_mounted(self) -> bool:
        return self.buffer is not None

    def mount(self, data: BytesLike, name: Optional[str] = None) -> None:
        """Start a new session on data, discarding history and clipboard."""

        with self._lock:
            self.buffer = ByteBuffer(data, name)
            self.history.clear()
            self.clipboard.clear()

            logger.info("Mounted %d bytes%s", len(self.buffer),
                        f" from {name}" if name else "")

    def invoke(self, operation: str, args: Optional[Mapping[str, Any]] = None,
               **kwargs: Any) -> OperationResult:
        """
        Run one named operation with string arguments.

        Args:
            operation (str): One of OPERATIONS
            args (Mapping): Named string arguments (offset, length, value,
                values, pattern, mode); keyword arguments are merged on top

        Returns:
            OperationResult: ok=False with an error kind when the operation
            was rejected, in which case no state was changed
        """

        merged: Dict[str, Any] = dict(args or {})
        merged.update(kwargs)

        with self._lock:
            try:
                handler = self.operation_handlers.get(operation)
                if handler is None:
                    raise InvalidArgument(f"Unknown operation '{operation}'")

                self._require_buffer()

                logger.debug("Dispatching %s with %r", operation, merged)
                return handler(merged)

            except BinEditError as e:
                logger.info("%s failed (%s): %s", operation, e.kind.value, e.message)
                return OperationResult.failure(operation, e)

    def export_raw(self) -> ExportPayload:
        """The current working bytes under the mounted name."""

        with self._lock:
            buf = self._require_buffer()
            return ExportPayload(
                buf.to_bytes(),
                buf.name or self.config.default_file_name,
                len(self.history)
            )

    def transcode(self, data: Optional[BytesLike] = None) -> bytes:
        """Bit-expand data, or a snapshot of the working buffer when omitted."""

        if data is not None:
            return bit_expand(data)

        with self._lock:
            return bit_expand(self._require_buffer().to_bytes())

    def _require_buffer(self) -> ByteBuffer:
        if self.buffer is None:
            raise NoActiveBuffer("No data stream mounted.")

        return self.buffer

    def _hex_values(self, args: Mapping[str, Any]) -> bytes:
        values = args.get('values')
        if not isinstance(values, str):
            raise InvalidArgument("Missing argument 'values'")

        return parse_hex_bytes(values)

    def _commit(self) -> ByteBuffer:
        """Snapshot the working buffer ahead of a mutation."""

        buf = self._require_buffer()
        self.history.snapshot(buf.working)
        return buf

    def _dump(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        start = parse_hex_int(args.get('offset', '0'), 'offset')
        length = parse_hex_int(
            args.get('length', f"{self.config.default_dump_length:X}"), 'length'
        )

        text = hex_dump(buf.working, start, length, self.config.bytes_per_line)
        shown = max(0, min(len(buf), start + length) - start)

        return OperationResult(
            True, 'dump',
            f"Projecting {shown} bytes from offset 0x{start:X}.",
            payload=text, report=text
        )

    def _edit(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        offset = parse_hex_int(args.get('offset'), 'offset')
        value = parse_hex_int(args.get('value'), 'value')

        if value > 0xFF:
            raise InvalidArgument(f"Byte value 0x{value:X} must be between 0x00 and 0xFF")

        buf.check_offset(offset)

        self._commit()
        old_value = buf.replace_byte(offset, value)

        context_start = max(0, offset - self.config.edit_context_before)
        context = hex_dump(buf.working, context_start,
                           self.config.edit_context_length, self.config.bytes_per_line)

        return OperationResult(
            True, 'edit',
            f"Edited 0x{offset:X}: 0x{old_value:02X} -> 0x{value:02X}.",
            payload=EditPayload(offset, old_value, value, context),
            report=context
        )

    def _overwrite(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        offset = parse_hex_int(args.get('offset'), 'offset')
        data = self._hex_values(args)

        buf.check_range(offset, len(data))

        self._commit()
        buf.replace_range(offset, data)

        return OperationResult(
            True, 'overwrite',
            f"Overwrote {len(data)} bytes at 0x{offset:X}.",
            payload=len(data)
        )

    def _insert(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        offset = parse_hex_int(args.get('offset'), 'offset')
        data = self._hex_values(args)

        buf.check_insert_point(offset)

        self._commit()
        buf.insert_bytes(offset, data)

        return OperationResult(
            True, 'insert',
            f"Inserted {len(data)} bytes at 0x{offset:X}. New size: {len(buf)} bytes.",
            payload=len(buf)
        )

    def _delete(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        offset = parse_hex_int(args.get('offset'), 'offset')
        length = parse_hex_int(args.get('length'), 'length')

        buf.check_range(offset, length)

        self._commit()
        buf.delete_range(offset, length)

        return OperationResult(
            True, 'delete',
            f"Deleted {length} bytes at 0x{offset:X}. New size: {len(buf)} bytes.",
            payload=len(buf)
        )

    def _search(self, args: Mapping[str, Any]) -> OperationResult:
        """
        Locate every occurrence of 'pattern'.

        With the default mode='auto' a pattern that is well-formed hex
        ("DE AD", "cafe") is searched as bytes and anything else as UTF-8
        text; mode='hex' or mode='text' forces one reading.
        """

        pattern = args.get('pattern')
        mode = args.get('mode', 'auto')

        results, mode = SearchEngine(self._require_buffer()).find_all(pattern, mode)
        offsets: List[int] = [r.position for r in results]

        if not offsets:
            status = f"No matches found for '{pattern}' ({mode})."
        else:
            listed = ', '.join(f"0x{pos:X}" for pos in offsets)
            status = f"Found {len(offsets)} matches for '{pattern}' ({mode}): {listed}"

        return OperationResult(True, 'search', status, payload=offsets)

    def _copy(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        offset = parse_hex_int(args.get('offset'), 'offset')
        length = parse_hex_int(args.get('length'), 'length')

        count = self.clipboard.yank(buf.get_byte_range(offset, length))

        return OperationResult(
            True, 'copy',
            f"Yanked {count} bytes from 0x{offset:X} to memory.",
            payload=count
        )

    def _paste(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        data = self.clipboard.peek()
        offset = parse_hex_int(args.get('offset'), 'offset')

        buf.check_insert_point(offset)

        self._commit()
        buf.insert_bytes(offset, data)

        return OperationResult(
            True, 'paste',
            f"Pasted {len(data)} bytes at 0x{offset:X}.",
            payload=len(buf)
        )

    def _checksum(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        hashes = checksums(buf.to_bytes())

        return OperationResult(
            True, 'checksum', CHECKSUM_STATUS_MESSAGE,
            payload=hashes,
            report=reports.integrity_report(hashes, len(buf))
        )

    def _diff(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        report: DiffReport = binary_diff(buf.original, buf.to_bytes())

        if report.is_identical:
            status = "No differences from the mounted original."
        else:
            status = f"{len(report)} modified offsets against the mounted original."
            if report.size_mismatch:
                status += (f" Size {report.size_mismatch.original_length}"
                           f" -> {report.size_mismatch.working_length} bytes.")

        return OperationResult(
            True, 'diff', status,
            payload=report,
            report=reports.diff_report(report, self.config.diff_preview_limit)
        )

    def _undo(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        self.history.undo(buf)

        return OperationResult(True, 'undo', UNDO_STATUS_MESSAGE, payload=len(buf))

    def _save(self, args: Mapping[str, Any]) -> OperationResult:
        buf = self._require_buffer()
        export = ExportPayload(
            buf.to_bytes(),
            f"surgical_edit_{buf.name or self.config.default_file_name}",
            len(self.history)
        )

        return OperationResult(
            True, 'save', SAVE_STATUS_MESSAGE,
            payload=export,
            report=reports.save_summary(len(export), export.undo_entries)
        )
