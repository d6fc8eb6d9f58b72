from __future__ import annotations

from .reader import get_file_contents, get_lines
from .tmpfile import create_tmp_file
from .unique_list import EntryStrategy, LineStrategy, file_to_unique_list

__all__ = [
    "get_file_contents",
    "get_lines",
    "create_tmp_file",
    "EntryStrategy",
    "LineStrategy",
    "file_to_unique_list",
]
