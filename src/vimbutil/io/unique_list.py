from __future__ import annotations

"""
Unique List Loader.

Turns a line-oriented file (history, bookmarks, shortcuts) into an ordered
list with at most one entry per key. A later line for an existing key
replaces the earlier entry and takes the later position, so the result is
ordered by the line on which each surviving key was last seen.
"""

import logging
import string
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Optional

from vimbutil.io.reader import DEFAULT_ENCODING, get_lines
from vimbutil.text import ascii_upper

logger = logging.getLogger(__name__)


class EntryStrategy(ABC):
    """
    Hooks that define how lines become entries and which entries collide.

    Subclasses must implement parse(). Providing key() lets the loader
    deduplicate through a dict, and the default equal() then compares keys.
    Without key() every new entry is compared against the list with
    equal(). A strategy overriding both must keep them consistent.
    """

    @abstractmethod
    def parse(self, line: str) -> Optional[Any]:
        """
        Convert a stripped, non-empty line into an entry.

        Returns:
            Optional[Any]: The entry, or None to skip the line.
        """

    def key(self, entry: Any) -> Optional[Hashable]:
        """Hashable dedup key of an entry, or None if there is none."""
        return None

    def equal(self, a: Any, b: Any) -> bool:
        """Whether two entries belong to the same key."""
        key_a = self.key(a)
        if key_a is not None:
            return key_a == self.key(b)
        return a == b

    def release(self, entry: Any) -> None:
        """Dispose of an entry evicted by a later duplicate."""


class LineStrategy(EntryStrategy):
    """
    Keep each line as-is.

    Args:
        ignore_case: Compare keys with ASCII case folding.
        separator: If set, only the part before the first separator is the
            key, e.g. ' ' for 'name value' lines.
    """

    def __init__(self, ignore_case: bool = False, separator: Optional[str] = None) -> None:
        self.ignore_case = ignore_case
        self.separator = separator

    def parse(self, line: str) -> Optional[str]:
        return line

    def key(self, entry: str) -> Hashable:
        if self.separator:
            entry = entry.split(self.separator, 1)[0]
        if self.ignore_case:
            entry = ascii_upper(entry)
        return entry


def file_to_unique_list(
        filename: str,
        strategy: EntryStrategy,
        encoding: str = DEFAULT_ENCODING,
) -> List[Any]:
    """
    Load a file into an ordered list of unique entries.

    Blank lines and lines rejected by the strategy contribute nothing. A
    missing or unreadable file yields an empty list; the reader logs why.

    Args:
        filename: File to load.
        strategy: Parsing and dedup hooks.
        encoding: Text encoding of the file.

    Returns:
        List[Any]: Entries in the order their keys were last seen.
    """
    lines = get_lines(filename, encoding)
    if not lines:
        return []

    entries: Dict[Hashable, Any] = {}

    for raw in lines:
        line = raw.strip(string.whitespace)
        if not line:
            continue

        value = strategy.parse(line)
        if value is None:
            continue

        slot = strategy.key(value)
        if slot is None:
            slot = _find_slot(entries, value, strategy)

        # Re-inserting moves the key to the end of the dict order.
        old = entries.pop(slot, None)
        if old is not None:
            strategy.release(old)
        entries[slot] = value

    result = list(entries.values())
    logger.debug(f"Loaded {len(result)} unique entries from {filename}")
    return result


def _find_slot(entries: Dict[Hashable, Any], value: Any, strategy: EntryStrategy) -> Hashable:
    """Slot of the entry equal to value, or a fresh slot if there is none."""
    for slot, existing in entries.items():
        if strategy.equal(value, existing):
            return slot
    return object()
