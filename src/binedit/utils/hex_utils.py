"""
Utility functions for hex dump rendering and hex argument parsing.
"""

import re
from typing import Optional, Tuple, Final

from ..core.config import BYTES_PER_LINE, DEFAULT_DUMP_LENGTH
from ..core.errors import InvalidArgument, MalformedHex

HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'
HEX_INT_PATTERN: Final[re.Pattern] = re.compile(r'^(?:0[xX])?([0-9A-Fa-f]+)$')
HEX_SEPARATORS: Final[re.Pattern] = re.compile(r'[\s,]+')


def to_ascii(data: bytes) -> str:
    """Printable ASCII projection, '.' for everything else."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def get_byte_range(data: bytes, start: int, length: int) -> Tuple[bytes, int]:
    """
    Get a range of bytes and the actual number of bytes returned.

    Args:
        data (bytes): Source bytes
        start (int): Starting offset
        length (int): Number of bytes to get

    Returns:
        Tuple[bytes, int]: The bytes and actual length returned
    """

    if start < 0 or length <= 0 or start >= len(data):
        return b'', 0

    end = min(start + length, len(data))
    return bytes(data[start:end]), end - start


def hex_dump(data: bytes, start: int = 0, length: int = DEFAULT_DUMP_LENGTH,
             bytes_per_line: int = BYTES_PER_LINE) -> str:
    """
    Render a classic offset / hex / ASCII table for a byte range.

    The range is clamped to the buffer; a start outside the buffer yields an
    empty string rather than an error.

    Args:
        data (bytes): Source bytes
        start (int): First offset to render
        length (int): Number of bytes to render
        bytes_per_line (int): Bytes per row

    Returns:
        str: One newline-terminated row per chunk
    """

    chunk, count = get_byte_range(data, start, length)
    hex_width = bytes_per_line * 3 - 1

    rows = []
    for pos in range(0, count, bytes_per_line):
        row = chunk[pos:pos + bytes_per_line]
        hex_part = ' '.join(f"{b:02X}" for b in row)
        rows.append(
            f"{format_offset(start + pos)}  {hex_part.ljust(hex_width)}  |{to_ascii(row)}|\n"
        )

    return ''.join(rows)


def parse_hex_bytes(hex_str: str) -> bytes:
    """
    Parse a hex byte string, raising MalformedHex when it is not well formed.

    Whitespace and commas separate tokens; each token may carry a 0x prefix.
    The concatenated digits must be non-empty and of even length.
    """

    if not isinstance(hex_str, str):
        raise InvalidArgument("Missing hex byte string")

    tokens = [t for t in HEX_SEPARATORS.split(hex_str.strip()) if t]
    clean_str = ''.join(t[2:] if t[:2] in ('0x', '0X') else t for t in tokens)

    if not clean_str:
        raise MalformedHex("Empty hex byte string")

    if not all(c in HEX_DIGITS for c in clean_str):
        raise MalformedHex(f"Invalid hex digits in '{hex_str}'")

    if len(clean_str) % 2:
        raise MalformedHex(f"Odd number of hex digits in '{hex_str}'")

    return bytes.fromhex(clean_str)


def parse_hex_int(value: Optional[str], name: str = 'value') -> int:
    """
    Parse a hexadecimal integer argument such as '0x10' or 'ff'.

    Raises:
        InvalidArgument: the value is missing, empty or not hexadecimal
    """

    if value is None:
        raise InvalidArgument(f"Missing argument '{name}'")

    if not isinstance(value, str):
        raise InvalidArgument(f"Argument '{name}' must be a hex string, got {type(value).__name__}")

    match = HEX_INT_PATTERN.match(value.strip())
    if not match:
        raise InvalidArgument(f"Argument '{name}' is not a hex number: '{value}'")

    return int(match.group(1), 16)


def find_all(data: bytes, pattern: bytes) -> list:
    """Every start offset of pattern in data, overlapping matches included."""

    if not pattern:
        return []

    positions = []
    pos = data.find(pattern)
    while pos >= 0:
        positions.append(pos)
        pos = data.find(pattern, pos + 1)

    return positions
