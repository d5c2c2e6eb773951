"""
Plain-text reports derived from the buffer state.
"""

from typing import Dict, Final

from .config import DIFF_PREVIEW_LIMIT
from ..utils.diff import DiffReport

INTEGRITY_HEADER: Final[str] = "INTEGRITY REPORT\n----------------"
DIFF_HEADER: Final[str] = "BINARY DIFF REPORT\n------------------"
NO_DIFFERENCES: Final[str] = "No byte-level differences detected."
EXPANSION_MAPPING: Final[str] = "- Mapping (0->01, 1->10) applied."


def integrity_report(hashes: Dict[str, str], size: int) -> str:
    return (
        f"{INTEGRITY_HEADER}\n"
        f"SHA-256: {hashes['SHA256']}\n"
        f"SHA-1:   {hashes['SHA1']}\n"
        f"MD5:     {hashes['MD5']}\n"
        f"\n"
        f"Buffer Magnitude: {size} bytes"
    )


def diff_report(report: DiffReport, preview_limit: int = DIFF_PREVIEW_LIMIT) -> str:
    """
    Summarise a DiffReport, listing at most preview_limit modified offsets.
    """

    if report.entries:
        lines = [f"Modified Offsets ({len(report.entries)}):"]
        lines.extend(
            f"0x{e.offset:X}: 0x{e.original:X} -> 0x{e.working:X}"
            for e in report.entries[:preview_limit]
        )
        if len(report.entries) > preview_limit:
            lines.append("...")
        body = '\n'.join(lines)
    else:
        body = NO_DIFFERENCES

    if report.size_mismatch:
        delta = (f"{report.size_mismatch.original_length} -> "
                 f"{report.size_mismatch.working_length}")
    else:
        delta = "None"

    return f"{DIFF_HEADER}\n{body}\n\nSize Delta: {delta}"


def save_summary(size: int, undo_entries: int) -> str:
    return (
        "Session finalized.\n"
        f"- Final Size: {size} bytes\n"
        f"- Changes recorded: {undo_entries}"
    )


def transcode_summary(size: int) -> str:
    return (
        "Bit-expansion successful.\n"
        f"{EXPANSION_MAPPING}\n"
        f"- Final Size: {size} bytes."
    )
