"""
Entry input and command output files for panaddr.

Entries are read one per line from a text file, from stdin, or from inline
arguments. Generated commands can be written to a file.
"""

import os
import sys
import logging
from typing import Iterable, List, Optional, TextIO

from .exceptions import FileOperationError

logger = logging.getLogger("panaddr")

STDIN_MARKER = "-"


def read_entries(
    arguments: Optional[Iterable[str]] = None,
    input_file: Optional[str] = None,
    stdin: Optional[TextIO] = None,
) -> List[str]:
    """
    Collect raw entries from inline arguments and an input file.

    Inline arguments come first, followed by the lines of the file. Lines are
    returned as read; trimming and blank-line removal happen in the request.

    Args:
        arguments: Entries given on the command line (optional)
        input_file: Path to a file with one entry per line, or "-" for stdin (optional)
        stdin: Stream used for "-" (defaults to sys.stdin)

    Returns:
        List[str]: Raw entries in input order

    Raises:
        FileOperationError: If the input file does not exist or cannot be read
    """
    entries = list(arguments or [])

    if input_file == STDIN_MARKER:
        stream = stdin or sys.stdin
        logger.debug("Reading entries from stdin")
        entries.extend(stream.read().splitlines())
    elif input_file:
        if not os.path.exists(input_file):
            logger.error(f"Input file not found: {input_file}")
            raise FileOperationError(f"Input file not found: {input_file}")
        try:
            # utf-8-sig drops the BOM spreadsheet exports put on the first line
            with open(input_file, "r", encoding="utf-8-sig") as f:
                entries.extend(f.read().splitlines())
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read input file {input_file}: {e}")
            raise FileOperationError(f"Cannot read input file {input_file}: {e}")
        logger.debug(f"Read entries from {input_file}")

    logger.debug(f"Collected {len(entries)} raw entries")
    return entries


def write_output(text: str, output_file: str) -> str:
    """
    Write generated commands to a file.

    Args:
        text: Newline-joined commands
        output_file: Destination path

    Returns:
        str: Absolute path of the written file

    Raises:
        FileOperationError: If the file cannot be written
    """
    path = os.path.abspath(output_file)
    try:
        dir_path = os.path.dirname(path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
            if text and not text.endswith("\n"):
                f.write("\n")
    except OSError as e:
        logger.error(f"Cannot write output file {output_file}: {e}")
        raise FileOperationError(f"Cannot write output file {output_file}: {e}")

    logger.info(f"Commands written to {path}")
    return path
