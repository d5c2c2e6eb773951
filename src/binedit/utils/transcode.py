"""
Bit-expansion transcoding: every 0 bit becomes 01 and every 1 bit becomes 10.
"""

from typing import Final, List


class MalformedStream(ValueError):
    """An expanded stream contains a bit pair other than 01 or 10."""


def _expand_byte(value: int) -> int:
    expanded = 0
    for bit in range(7, -1, -1):
        expanded = (expanded << 2) | (0b10 if (value >> bit) & 1 else 0b01)

    return expanded


EXPANSION_TABLE: Final[List[bytes]] = [
    _expand_byte(value).to_bytes(2, 'big') for value in range(256)
]


def bit_expand(data: bytes) -> bytes:
    """
    Expand each input bit (MSB first) into two output bits.

    Every input byte maps to exactly two output bytes, so the bit string is
    always a whole number of bytes and the zero padding the encoding allows
    for is never needed.

    Args:
        data (bytes): Source bytes, left untouched

    Returns:
        bytes: A new sequence of exactly 2 * len(data) bytes
    """

    return b''.join(EXPANSION_TABLE[b] for b in bytes(data))


def bit_collapse(data: bytes) -> bytes:
    """
    Reverse bit_expand by reading output bits in pairs (01 -> 0, 10 -> 1).

    Raises:
        MalformedStream: odd length, or a 00 / 11 pair
    """

    data = bytes(data)
    if len(data) % 2:
        raise MalformedStream("Expanded stream must have an even number of bytes")

    result = bytearray()
    for pos in range(0, len(data), 2):
        word = int.from_bytes(data[pos:pos + 2], 'big')
        value = 0
        for shift in range(14, -1, -2):
            pair = (word >> shift) & 0b11
            if pair == 0b01:
                value <<= 1
            elif pair == 0b10:
                value = (value << 1) | 1
            else:
                raise MalformedStream(
                    f"Invalid bit pair {pair:02b} in byte pair at offset 0x{pos:X}"
                )

        result.append(value)

    return bytes(result)
