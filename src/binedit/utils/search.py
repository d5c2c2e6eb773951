"""
Search functionality over the working buffer.
"""

from typing import Final, List, Tuple

from ..core.buffer import ByteBuffer
from ..core.errors import InvalidArgument, MalformedHex
from .hex_utils import find_all, parse_hex_bytes

SEARCH_MODES: Final[Tuple[str, ...]] = ('auto', 'hex', 'text')


class SearchResult:
    """Represents a search result with position and match information."""

    def __init__(self, position: int, length: int, match: bytes):
        self.position = position
        self.length = length
        self.match = match

    def __repr__(self) -> str:
        return f"SearchResult(position=0x{self.position:X}, length={self.length})"


def resolve_pattern(pattern: str, mode: str = 'auto') -> Tuple[bytes, str]:
    """
    Decide how a user pattern is searched.

    Args:
        pattern (str): Hex byte string or literal text
        mode (str): 'hex' or 'text' to force a reading; 'auto' treats a
            well-formed hex byte string as hex and anything else as text,
            so words like "cafe" need mode='text' to be found as text

    Returns:
        Tuple[bytes, str]: The needle and the mode actually used
    """

    if not isinstance(pattern, str) or not pattern:
        raise InvalidArgument("Missing argument 'pattern'")

    if mode not in SEARCH_MODES:
        raise InvalidArgument(f"Unknown search mode '{mode}'")

    if mode == 'hex':
        return parse_hex_bytes(pattern), 'hex'

    if mode == 'auto':
        try:
            return parse_hex_bytes(pattern), 'hex'
        except MalformedHex:
            pass

    return pattern.encode('utf-8'), 'text'


class SearchEngine:
    """Finds byte patterns in a ByteBuffer's working data."""

    def __init__(self, buffer: ByteBuffer) -> None:
        self.buffer = buffer

    def find_all(self, pattern: str, mode: str = 'auto') -> Tuple[List[SearchResult], str]:
        """
        Find all occurrences of a pattern, first to last.

        Args:
            pattern (str): Hex byte string or literal text
            mode (str): One of SEARCH_MODES

        Returns:
            Tuple[List[SearchResult], str]: Results and the mode used
        """

        needle, used = resolve_pattern(pattern, mode)

        data = bytes(self.buffer.working)
        results = [
            SearchResult(pos, len(needle), needle)
            for pos in find_all(data, needle)
        ]

        return results, used
