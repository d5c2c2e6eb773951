#!/usr/bin/python3

"""
Command line driver for binedit.
"""

import sys
import argparse
import logging
import os
import shlex
from typing import Dict, Optional, Sequence, Tuple

from .core.session import EXPANDED_FILE_NAME, EditorSession, OperationResult
from .core.reports import transcode_summary

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="binedit",
        description="binedit - apply byte-level operations to a binary file"
    )
    parser.add_argument(
        "file",
        type=str,
        help="Binary file to mount"
    )
    parser.add_argument(
        "-e", "--exec",
        dest="operations",
        action="append",
        default=[],
        metavar="OPERATION",
        help="Operation with key=value arguments, e.g. -e 'edit offset=0x10 value=FF'. Repeatable."
    )
    parser.add_argument(
        "--transcode",
        action="store_true",
        help="Bit-expand the buffer (0->01, 1->10) after all operations"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Write the last binary result (save or transcode) to this path"
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight hex dumps for the terminal"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity"
    )
    return parser.parse_args(argv)


def parse_operation(spec: str) -> Tuple[str, Dict[str, str]]:
    """Split 'name key=value ...' into the operation name and its arguments."""

    parts = shlex.split(spec)
    if not parts:
        raise ValueError("Empty operation")

    args = {}
    for part in parts[1:]:
        key, sep, value = part.partition('=')
        if not sep:
            raise ValueError(f"Expected key=value, got '{part}'")
        args[key] = value

    return parts[0], args


def print_result(result: OperationResult, highlighter=None) -> None:
    print(result.status_message)

    if result.report is None or result.report == result.status_message:
        return

    text = result.report
    if highlighter is not None and result.operation in ('dump', 'edit'):
        text = highlighter.highlight(text)

    print(text.rstrip('\n'))


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    highlighter = None
    if args.color:
        from .core.syntax import DumpHighlighter
        highlighter = DumpHighlighter()

    try:
        with open(args.file, 'rb') as f:
            data = f.read()
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    session = EditorSession()
    session.mount(data, os.path.basename(args.file))

    failed = False
    binary: Optional[bytes] = None
    file_name: Optional[str] = None

    for spec in args.operations:
        try:
            name, op_args = parse_operation(spec)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            failed = True
            continue

        result = session.invoke(name, op_args)
        print_result(result, highlighter)

        if not result.ok:
            failed = True
            continue

        payload = result.as_bytes()
        if payload is not None:
            binary = payload
            file_name = result.payload.file_name

    if args.transcode:
        binary = session.transcode()
        file_name = EXPANDED_FILE_NAME
        print(transcode_summary(len(binary)))

    if args.output:
        if binary is None:
            print("Error: No binary result to write (run 'save' or --transcode)", file=sys.stderr)
            return 1

        with open(args.output, 'wb') as f:
            f.write(binary)
        print(f"Wrote {len(binary)} bytes to {args.output}")
    elif binary is not None:
        logger.info("Binary result %s not written (no --output)", file_name)

    return 1 if failed else 0


def main() -> None:
    """Entry point for the application."""
    sys.exit(run())


if __name__ == "__main__":
    main()
