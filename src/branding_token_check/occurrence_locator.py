# -*- coding: utf-8 -*-
"""
Locate token names inside a translated string.

Token names are frequently prefixes of other token names, for example
Word_Full and Word_Full_2010. Scanning shortest-first would anchor
Word_Full inside every Word_Full_2010, so names are processed longest
first and a position that is already claimed is skipped over entirely.

The result maps start offsets to token names; the bare name text is
recorded whether or not valid (! ) markup surrounds it.
"""

from typing import Iterable, Optional

from .models import Occurrence


def _longest_first(token_names: Iterable[str]) -> list[str]:
    """Order names by descending length, ties broken alphabetically."""
    return sorted(set(token_names), key=lambda name: (-len(name), name))


def _overlapping(start: int, end: int, occurrences: dict[int, str]) -> Optional[Occurrence]:
    """Return the recorded occurrence overlapping [start, end), if any."""
    for existing_start, existing_name in occurrences.items():
        existing_end = existing_start + len(existing_name)
        # Spans overlap if neither is completely before the other
        if not (end <= existing_start or start >= existing_end):
            return Occurrence(existing_start, existing_name)
    return None


def locate_occurrences(token_names: Iterable[str], text: Optional[str]) -> dict[int, str]:
    """
    Find every non-overlapping occurrence of the given names in text.

    Matching is ordinal and case-sensitive. When a name would overlap
    a span already claimed by a longer (or equal length) name,
    it is not recorded and scanning resumes after the claimed span.

    Args:
        token_names: Token names to look for.
        text: String to scan. None is treated as empty.

    Returns:
        Mapping of start offset to token name, ordered by offset.
    """
    if not text:
        return {}

    occurrences: dict[int, str] = {}

    for name in _longest_first(token_names):
        if not name:
            continue
        cursor = 0
        while cursor < len(text):
            start = text.find(name, cursor)
            if start == -1:
                break

            claimed = _overlapping(start, start + len(name), occurrences)
            if claimed is None:
                occurrences[start] = name
                cursor = start + len(name)
            else:
                # Jump over the entire longer token
                cursor = claimed.end

    return dict(sorted(occurrences.items()))


def iter_occurrences(token_names: Iterable[str], text: Optional[str]) -> list[Occurrence]:
    """Same as locate_occurrences, as a list of Occurrence records."""
    return [
        Occurrence(start, name)
        for start, name in locate_occurrences(token_names, text).items()
    ]
