"""
Tests for checksums, binary diff and bit-expansion.
"""

import hashlib
import random

import pytest

import binedit
from binedit.utils import checksum as checksum_module
from binedit.utils.checksum import checksums, is_placeholder, unavailable_marker
from binedit.utils.diff import DiffEntry, SizeMismatch, binary_diff
from binedit.utils.transcode import (
    EXPANSION_TABLE,
    MalformedStream,
    bit_collapse,
    bit_expand
)


def test_checksums_known_vectors():
    report = checksums(b'abc')

    assert report['SHA256'] == 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    assert report['SHA1'] == 'a9993e364706816aba3e25717850c26c9cd0d89d'
    assert report['MD5'] == '900150983cd24fb0d6963f7d28e17f72'


def test_checksums_empty_buffer():
    report = checksums(b'')
    assert report['SHA256'] == hashlib.sha256(b'').hexdigest()


def test_missing_algorithm_degrades_to_placeholder(monkeypatch, caplog):
    real_digest = checksum_module.compute_digest

    def no_md5(algorithm, data):
        if algorithm == 'md5':
            raise ValueError("unsupported hash type md5")
        return real_digest(algorithm, data)

    monkeypatch.setattr(checksum_module, 'compute_digest', no_md5)
    report = checksums(b'abc')

    assert report['MD5'] == unavailable_marker('MD5') == '[MD5_UNAVAILABLE]'
    assert is_placeholder(report['MD5'])
    assert not is_placeholder(report['SHA1'])
    assert report['SHA256'] == hashlib.sha256(b'abc').hexdigest()
    assert 'md5' in caplog.text


def test_diff_identical():
    report = binary_diff(b'\x01\x02', b'\x01\x02')
    assert report.is_identical
    assert len(report) == 0


def test_diff_reports_mismatches_in_order():
    report = binary_diff(b'\x00\x01\x02\x03', b'\x09\x01\x02\x08')
    assert report.entries == [DiffEntry(0, 0x00, 0x09), DiffEntry(3, 0x03, 0x08)]
    assert report.size_mismatch is None


def test_diff_ignores_tail_but_reports_size():
    report = binary_diff(b'\x00\x01', b'\x00\x01\xff\xff\xff')
    assert report.entries == []
    assert report.size_mismatch == SizeMismatch(2, 5)
    assert not report.is_identical


def test_bit_expand_single_bytes():
    assert bit_expand(b'\x00') == b'\x55\x55'
    assert bit_expand(b'\xff') == b'\xaa\xaa'
    assert bit_expand(b'\x0f') == b'\x55\xaa'
    assert bit_expand(b'\x80') == b'\x95\x55'
    assert bit_expand(b'') == b''


def test_bit_expand_matches_bit_string_definition():
    data = bytes(range(256))
    bits = ''.join(f"{b:08b}" for b in data)
    expanded = ''.join('01' if bit == '0' else '10' for bit in bits)
    expanded += '0' * ((8 - len(expanded) % 8) % 8)
    expected = bytes(int(expanded[i:i + 8], 2) for i in range(0, len(expanded), 8))

    assert bit_expand(data) == expected


def test_bit_expand_length_is_exactly_double():
    rng = random.Random(1234)
    for size in (1, 2, 7, 64, 333):
        data = bytes(rng.randrange(256) for _ in range(size))
        out = bit_expand(data)
        # 2*8*N bits is always a whole number of bytes, so no padding
        assert (2 * 8 * size) % 8 == 0
        assert len(out) == 2 * size
        assert bit_collapse(out) == data


def test_bit_expand_does_not_mutate_source():
    data = bytearray(b'\x12\x34')
    bit_expand(data)
    assert data == bytearray(b'\x12\x34')


def test_expansion_table_entries():
    assert len(EXPANSION_TABLE) == 256
    assert all(len(entry) == 2 for entry in EXPANSION_TABLE)


def test_bit_collapse_rejects_invalid_pairs():
    with pytest.raises(MalformedStream):
        bit_collapse(b'\x00\x00')
    with pytest.raises(MalformedStream):
        bit_collapse(b'\x55')
    with pytest.raises(ValueError):
        bit_collapse(b'\xff\xff')


def test_module_level_transcode_without_session():
    assert binedit.transcode(b'\x00\xff') == b'\x55\x55\xaa\xaa'
