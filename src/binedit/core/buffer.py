"""
Buffer module holding the mounted binary, its undo history and the clipboard.
"""

from typing import List, Optional, Union
from collections import deque

from .config import HISTORY_LIMIT
from .errors import EmptyClipboard, EmptyHistory, OutOfRange

BytesLike = Union[bytes, bytearray, memoryview]


class ByteBuffer:
    """Original and working copies of a mounted binary."""

    def __init__(self, data: BytesLike = b'', name: Optional[str] = None) -> None:
        self._original = bytes(data)
        self.working = bytearray(data)
        self.name = name

    @property
    def original(self) -> bytes:
        """The baseline captured at mount time."""

        return self._original

    @property
    def modified(self) -> bool:
        return bytes(self.working) != self._original

    def __len__(self) -> int:
        return len(self.working)

    def check_range(self, offset: int, length: int = 0) -> None:
        """Raise OutOfRange unless [offset, offset+length) lies inside the buffer."""

        size = len(self.working)
        if offset < 0 or length < 0 or offset + length > size:
            raise OutOfRange(
                f"Range 0x{offset:X}+0x{length:X} exceeds buffer size 0x{size:X}"
            )

    def check_offset(self, offset: int) -> None:
        """Raise OutOfRange unless offset addresses an existing byte."""

        if not 0 <= offset < len(self.working):
            raise OutOfRange(
                f"Offset 0x{offset:X} outside buffer of size 0x{len(self.working):X}"
            )

    def check_insert_point(self, offset: int) -> None:
        """Raise OutOfRange unless offset is a valid splice point (end included)."""

        if not 0 <= offset <= len(self.working):
            raise OutOfRange(
                f"Insert offset 0x{offset:X} outside buffer of size 0x{len(self.working):X}"
            )

    def get_byte_range(self, offset: int, length: int) -> bytes:
        self.check_range(offset, length)
        return bytes(self.working[offset:offset + length])

    def replace_byte(self, offset: int, value: int) -> int:
        """Replace a byte and return its previous value."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        self.check_offset(offset)

        old_value = self.working[offset]
        self.working[offset] = value
        return old_value

    def replace_range(self, offset: int, data: bytes) -> None:
        self.check_range(offset, len(data))
        self.working[offset:offset + len(data)] = data

    def insert_bytes(self, offset: int, data: bytes) -> None:
        self.check_insert_point(offset)
        self.working[offset:offset] = data

    def delete_range(self, offset: int, length: int) -> None:
        self.check_range(offset, length)
        del self.working[offset:offset + length]

    def restore(self, snapshot: bytes) -> None:
        """Replace the working copy wholesale."""

        self.working = bytearray(snapshot)

    def to_bytes(self) -> bytes:
        return bytes(self.working)


class HistoryStack:
    """Bounded FIFO-evicting log of full working-buffer snapshots."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")

        self.limit = limit
        self._snapshots: deque = deque(maxlen=limit)

    def snapshot(self, data: BytesLike) -> None:
        """Push a copy of data, evicting the oldest snapshot when full."""

        self._snapshots.append(bytes(data))

    def pop(self) -> bytes:
        if not self._snapshots:
            raise EmptyHistory("Nothing to undo.")

        return self._snapshots.pop()

    def undo(self, buffer: ByteBuffer) -> None:
        """Restore the most recent snapshot into buffer."""

        buffer.restore(self.pop())

    def clear(self) -> None:
        self._snapshots.clear()

    def entries(self) -> List[bytes]:
        """Snapshots oldest first."""

        return list(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)


class Clipboard:
    """Single slot holding the last yanked byte range."""

    def __init__(self) -> None:
        self._data: Optional[bytes] = None

    def yank(self, data: BytesLike) -> int:
        self._data = bytes(data)
        return len(self._data)

    def peek(self) -> bytes:
        """Return the held bytes without consuming them."""

        if self._data is None:
            raise EmptyClipboard("Clipboard empty.")

        return self._data

    def clear(self) -> None:
        self._data = None

    @property
    def is_empty(self) -> bool:
        return self._data is None

    def __len__(self) -> int:
        return 0 if self._data is None else len(self._data)
