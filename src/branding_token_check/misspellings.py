# -*- coding: utf-8 -*-
"""
Fuzzy detection of misspelled token names.

The translation is split into candidate words (maximal runs of word
characters). For each source token name, a word is a likely corruption
if its edit distance to the name is non-zero and within a budget of
ceil(sensitivity * len(name)), and it is not itself a source token name.

Only words whose length is within the same budget are compared, since
no other word can be within the edit distance budget.
"""

import logging
import math
import re
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .config import DEFAULT_TOKEN_COMPARISON_SENSITIVITY
from .edit_distance import damerau_levenshtein_distance
from .models import IssueKind, TokenIssue

logger = logging.getLogger(__name__)


CANDIDATE_WORD_PATTERN = re.compile(r"\w+")


def split_candidate_words(text: Optional[str]) -> list[str]:
    """Split text into maximal runs of word characters, in order."""
    if not text:
        return []
    return CANDIDATE_WORD_PATTERN.findall(text)


def max_edit_distance(token_name: str, sensitivity: float) -> int:
    """
    Edit distance budget for a token name.

    Args:
        token_name: Source token name.
        sensitivity: Fraction of the name's length allowed as edits.

    Returns:
        ceil(sensitivity * len(token_name)).
    """
    # Rounding first keeps float noise (0.2 * 35 = 7.000000000000001) out of ceil
    return math.ceil(round(sensitivity * len(token_name), 9))


def _misspellings_of(
    token_name: str,
    words: list[str],
    known_tokens: set[str],
    sensitivity: float,
) -> tuple[str, ...]:
    budget = max_edit_distance(token_name, sensitivity)
    found: list[str] = []

    for word in words:
        if abs(len(word) - len(token_name)) > budget:
            continue
        if word in known_tokens or word in found:
            continue
        distance = damerau_levenshtein_distance(token_name, word)
        if 0 < distance <= budget:
            found.append(word)

    return tuple(found)


def extract_misspelled_tokens(
    source_token_names: Iterable[str],
    target: Optional[str],
    sensitivity: float = DEFAULT_TOKEN_COMPARISON_SENSITIVITY,
) -> Mapping[str, tuple[str, ...]]:
    """
    Map source token names to look-alike words found in the target.

    Args:
        source_token_names: Token names extracted from the source string.
        target: Translated string to search.
        sensitivity: Fraction of a name's length allowed as edit distance.

    Returns:
        Read-only mapping of token name to the distinct candidate words,
        in the order they appear in the target. Names without candidates
        are absent.
    """
    known_tokens = set(source_token_names)
    words = split_candidate_words(target)
    if not known_tokens or not words:
        return MappingProxyType({})

    misspellings: dict[str, tuple[str, ...]] = {}
    for name in sorted(known_tokens):
        candidates = _misspellings_of(name, words, known_tokens, sensitivity)
        if candidates:
            misspellings[name] = candidates

    if misspellings:
        logger.debug(
            "Possible token misspellings: %s",
            ", ".join(f"{k} => {'/'.join(v)}" for k, v in misspellings.items()),
        )
    return MappingProxyType(misspellings)


def report_misspelled_tokens(
    source_token_names: Iterable[str],
    target: Optional[str],
    sensitivity: float = DEFAULT_TOKEN_COMPARISON_SENSITIVITY,
    misspellings: Optional[Mapping[str, tuple[str, ...]]] = None,
) -> list[TokenIssue]:
    """
    Turn the misspelling map into MISSPELLED issues.

    Args:
        source_token_names: Token names extracted from the source string.
        target: Translated string to search.
        sensitivity: Fraction of a name's length allowed as edit distance.
        misspellings: Precomputed map, to avoid searching twice.

    Returns:
        One issue per source token name with candidates.
    """
    if misspellings is None:
        misspellings = extract_misspelled_tokens(source_token_names, target, sensitivity)

    return [
        TokenIssue(
            kind=IssueKind.MISSPELLED,
            message=(
                f"Source token name \"{name}\" possibly misspelled into: "
                f"\"{'; '.join(candidates)}\""
            ),
            token_name=name,
            candidates=tuple(candidates),
        )
        for name, candidates in misspellings.items()
    ]
