"""
Utility package with the stateless codecs used by the editing core.
"""

from .hex_utils import (
    format_offset,
    get_byte_range,
    hex_dump,
    parse_hex_bytes,
    parse_hex_int,
    find_all,
    to_ascii
)
from .checksum import checksums
from .diff import DiffEntry, DiffReport, SizeMismatch, binary_diff
from .transcode import MalformedStream, bit_expand, bit_collapse
from .search import SEARCH_MODES, SearchEngine, SearchResult, resolve_pattern

__all__ = [
    'format_offset',
    'get_byte_range',
    'hex_dump',
    'parse_hex_bytes',
    'parse_hex_int',
    'find_all',
    'to_ascii',
    'checksums',
    'DiffEntry',
    'DiffReport',
    'SizeMismatch',
    'binary_diff',
    'MalformedStream',
    'bit_expand',
    'bit_collapse',
    'SEARCH_MODES',
    'SearchEngine',
    'SearchResult',
    'resolve_pattern'
]
