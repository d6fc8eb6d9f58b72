from __future__ import annotations

"""
Text Helpers.

Case-insensitive substring search with ASCII-only folding and
delimiter-based string replacement.
"""

import string
from typing import Optional, TypeVar

AnyText = TypeVar("AnyText", str, bytes)

# Only a-z are folded; non-ASCII letters compare byte-for-byte.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(value: AnyText) -> AnyText:
    """Upper-case ASCII letters only."""
    if isinstance(value, bytes):
        # bytes.upper() only touches ASCII letters
        return value.upper()
    return value.translate(_ASCII_UPPER)


def find_case_insensitive(haystack: AnyText, needle: AnyText) -> Optional[int]:
    """
    Locate needle in haystack ignoring ASCII case.

    Args:
        haystack: Text or bytes to search in.
        needle: Text or bytes to look for (same type as haystack).

    Returns:
        Optional[int]: Offset of the first match, or None. An empty needle
        matches at offset 0.
    """
    if len(needle) > len(haystack):
        return None

    pos = ascii_upper(haystack).find(ascii_upper(needle))
    return pos if pos >= 0 else None


def str_replace(search: str, replace: str, text: Optional[str]) -> Optional[str]:
    """
    Replace every non-overlapping occurrence of search in text.

    The text is split on search and the chunks are joined with replace.
    None propagates, and an empty search leaves the text unchanged.
    """
    if text is None:
        return None
    if not search:
        return text
    return replace.join(text.split(search))
