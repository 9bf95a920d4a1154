"""
Added and removed token detection.

Names already explained by the misspelling map are left out: a token
that was misspelled shows up as both missing from the target and as
an unknown word there, and is reported once, as a misspelling.
"""

from typing import Iterable, Mapping

from .models import IssueKind, TokenIssue


def find_added_and_removed(
    source_token_names: Iterable[str],
    target_token_names: Iterable[str],
    misspellings: Mapping[str, Iterable[str]],
) -> tuple[list[TokenIssue], list[TokenIssue]]:
    """
    Compare source and target token sets.

    Args:
        source_token_names: Token names extracted from the source string.
        target_token_names: Token names extracted from the target string.
        misspellings: Source name to misspelled candidates map.

    Returns:
        Tuple of (added_issues, removed_issues), each sorted by name.
    """
    source = set(source_token_names)
    target = set(target_token_names)
    misspelled_into = {word for words in misspellings.values() for word in words}

    added = target - source - misspelled_into
    removed = source - target - set(misspellings.keys())

    added_issues = [
        TokenIssue(
            kind=IssueKind.ADDED,
            message=f"Token \"{name}\" has been added to the target string.",
            token_name=name,
        )
        for name in sorted(added)
    ]
    removed_issues = [
        TokenIssue(
            kind=IssueKind.REMOVED,
            message=f"Token \"{name}\" has been removed from the target string.",
            token_name=name,
        )
        for name in sorted(removed)
    ]
    return added_issues, removed_issues
