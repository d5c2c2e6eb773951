"""
Byte-wise comparison of two buffers.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class DiffEntry:
    """A single differing byte within the common prefix."""
    offset: int
    original: int
    working: int


@dataclass(frozen=True)
class SizeMismatch:
    original_length: int
    working_length: int


@dataclass
class DiffReport:
    """Mismatching offsets plus an optional length delta."""
    entries: List[DiffEntry] = field(default_factory=list)
    size_mismatch: Optional[SizeMismatch] = None

    @property
    def is_identical(self) -> bool:
        return not self.entries and self.size_mismatch is None

    def __len__(self) -> int:
        return len(self.entries)


def binary_diff(original: bytes, working: bytes) -> DiffReport:
    """
    Compare two byte sequences over their overlapping length.

    Args:
        original (bytes): Baseline bytes
        working (bytes): Current bytes

    Returns:
        DiffReport: Entries in ascending offset order; the non-overlapping
        tail produces no entries, only a SizeMismatch
    """

    common = min(len(original), len(working))
    entries = [
        DiffEntry(i, original[i], working[i])
        for i in range(common)
        if original[i] != working[i]
    ]

    size_mismatch = None
    if len(original) != len(working):
        size_mismatch = SizeMismatch(len(original), len(working))

    return DiffReport(entries, size_mismatch)
