"""
Configuration defaults for an editing session.
"""

from dataclasses import dataclass
from typing import Final

HISTORY_LIMIT: Final[int] = 100
BYTES_PER_LINE: Final[int] = 16
DEFAULT_DUMP_LENGTH: Final[int] = 0x200
EDIT_CONTEXT_BEFORE: Final[int] = 0x20
EDIT_CONTEXT_LENGTH: Final[int] = 0x80
DIFF_PREVIEW_LIMIT: Final[int] = 10
DEFAULT_FILE_NAME: Final[str] = 'file.bin'


@dataclass(frozen=True)
class EditorConfig:
    """Tunable limits for an EditorSession."""

    history_limit: int = HISTORY_LIMIT
    bytes_per_line: int = BYTES_PER_LINE
    default_dump_length: int = DEFAULT_DUMP_LENGTH
    edit_context_before: int = EDIT_CONTEXT_BEFORE
    edit_context_length: int = EDIT_CONTEXT_LENGTH
    diff_preview_limit: int = DIFF_PREVIEW_LIMIT
    default_file_name: str = DEFAULT_FILE_NAME

    def __post_init__(self) -> None:
        if self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")

        if self.bytes_per_line < 1:
            raise ValueError("bytes_per_line must be at least 1")
