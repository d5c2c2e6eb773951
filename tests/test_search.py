"""
Tests for the search engine.
"""

import pytest

from binedit.core.buffer import ByteBuffer
from binedit.core.errors import InvalidArgument, MalformedHex
from binedit.utils.search import SearchEngine, resolve_pattern


@pytest.fixture
def engine():
    return SearchEngine(ByteBuffer(b'MZ\x90\x00PE\x00\x00MZ cafe\xca\xfe'))


def test_resolve_pattern_auto():
    assert resolve_pattern('4D 5A') == (b'MZ', 'hex')
    assert resolve_pattern('MZ') == (b'MZ', 'text')
    assert resolve_pattern('héllo') == ('héllo'.encode('utf-8'), 'text')
    assert resolve_pattern('cafe') == (b'\xca\xfe', 'hex')


def test_resolve_pattern_forced_modes():
    assert resolve_pattern('cafe', 'text') == (b'cafe', 'text')
    assert resolve_pattern('4D5A', 'hex') == (b'MZ', 'hex')

    with pytest.raises(MalformedHex):
        resolve_pattern('MZ', 'hex')
    with pytest.raises(InvalidArgument):
        resolve_pattern('MZ', 'regex')


@pytest.mark.parametrize("pattern", ['', None])
def test_resolve_pattern_requires_pattern(pattern):
    with pytest.raises(InvalidArgument):
        resolve_pattern(pattern)


def test_find_all(engine):
    results, mode = engine.find_all('MZ')

    assert mode == 'text'
    assert [r.position for r in results] == [0, 8]
    assert results[0].length == 2

    results, mode = engine.find_all('00')
    assert mode == 'hex'
    assert [r.position for r in results] == [3, 6, 7]


def test_find_all_text_word_that_is_also_hex(engine):
    results, _ = engine.find_all('cafe')
    assert [r.position for r in results] == [15]

    results, mode = engine.find_all('cafe', mode='text')
    assert mode == 'text'
    assert [r.position for r in results] == [11]
