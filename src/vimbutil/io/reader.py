from __future__ import annotations

"""
File Reading Component.

Reads whole files as text. Failures are not raised to the caller: they are
reported once through the logger and signalled by a None result.
"""

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def get_file_contents(filename: str, encoding: str = DEFAULT_ENCODING) -> Optional[str]:
    """
    Retrieve the full content of a regular file.

    Line endings are returned untouched. Undecodable bytes are replaced
    with U+FFFD instead of aborting the read.

    Args:
        filename: Path of the file to read.
        encoding: Text encoding of the file.

    Returns:
        Optional[str]: File content, or None if the file is missing or
        cannot be read.
    """
    if not os.path.isfile(filename):
        logger.error(f"Cannot open {filename}: file not found")
        return None

    try:
        with open(filename, "r", encoding=encoding, errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        logger.error(f"Cannot open {filename}: {e.strerror or e}")
        return None
    except LookupError as e:
        logger.error(f"Cannot open {filename}: {e}")
        return None


def get_lines(filename: str, encoding: str = DEFAULT_ENCODING) -> Optional[List[str]]:
    """
    Retrieve the file content split on newline characters.

    A final newline produces a trailing empty element, and lines keep any
    surrounding whitespace.

    Returns:
        Optional[List[str]]: Raw lines, or None if the file cannot be read.
    """
    content = get_file_contents(filename, encoding)
    if content is None:
        return None
    return content.split("\n")
