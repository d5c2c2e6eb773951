"""
Checksum computation over a full buffer.
"""

import hashlib
import logging
from typing import Dict, Final, Tuple

logger = logging.getLogger(__name__)

CHECKSUM_ALGORITHMS: Final[Tuple[Tuple[str, str], ...]] = (
    ('SHA256', 'sha256'),
    ('SHA1', 'sha1'),
    ('MD5', 'md5'),
)


def unavailable_marker(label: str) -> str:
    """Labelled placeholder used when an algorithm cannot be computed."""

    return f"[{label}_UNAVAILABLE]"


def compute_digest(algorithm: str, data: bytes) -> str:
    """
    Hex digest of data with the named hashlib algorithm.

    Raises:
        ValueError: the algorithm is not provided by this interpreter
    """

    if algorithm == 'md5':
        # FIPS-restricted builds only allow MD5 outside security contexts
        digest = hashlib.new(algorithm, usedforsecurity=False)
    else:
        digest = hashlib.new(algorithm)

    digest.update(data)
    return digest.hexdigest()


def checksums(data: bytes) -> Dict[str, str]:
    """
    Compute SHA256, SHA1 and MD5 over data.

    A missing algorithm never fails the report; its entry degrades to a
    labelled placeholder instead.

    Args:
        data (bytes): The full buffer to hash

    Returns:
        Dict[str, str]: Label to lowercase hex digest (or placeholder)
    """

    data = bytes(data)
    report = {}

    for label, algorithm in CHECKSUM_ALGORITHMS:
        try:
            report[label] = compute_digest(algorithm, data)
        except ValueError as e:
            logger.warning("Hash algorithm %s unavailable: %s", algorithm, e)
            report[label] = unavailable_marker(label)

    return report


def is_placeholder(value: str) -> bool:
    return value.startswith('[') and value.endswith('_UNAVAILABLE]')
