import pytest

from binedit.core.session import EditorSession

SAMPLE = bytes([0x00, 0xFF, 0x10, 0x20])


@pytest.fixture
def session():
    """A session with the four-byte sample mounted."""
    s = EditorSession()
    s.mount(SAMPLE, 'sample.bin')
    return s


@pytest.fixture
def empty_session():
    return EditorSession()
