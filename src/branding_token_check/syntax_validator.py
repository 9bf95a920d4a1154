# -*- coding: utf-8 -*-
"""
Broken token markup detection.

For every source token name found in the translation, the name must be
immediately preceded by "(!" and immediately followed by ")". Each
missing delimiter is reported separately, so one occurrence can yield
zero, one or two issues.
"""

from typing import Iterable, Optional

from .models import IssueKind, TokenIssue
from .occurrence_locator import iter_occurrences


TOKEN_OPENING = "(!"
TOKEN_CLOSING = ")"


def _has_opening(text: str, start: int) -> bool:
    """Check that "(!" ends right before start."""
    if start < len(TOKEN_OPENING):
        return False
    return text[start - len(TOKEN_OPENING):start] == TOKEN_OPENING


def _has_closing(text: str, end: int) -> bool:
    """Check that ")" starts right at end."""
    return end < len(text) and text[end] == TOKEN_CLOSING


def report_syntax_errors_for_tokens(
    source_token_names: Iterable[str],
    target: Optional[str],
) -> list[TokenIssue]:
    """
    Report source token names whose markup is corrupt in the target.

    Args:
        source_token_names: Token names extracted from the source string.
        target: Translated string to validate.

    Returns:
        SYNTAX_CORRUPT issues, ordered by position in the target.
    """
    if not target:
        return []

    issues: list[TokenIssue] = []

    for occurrence in iter_occurrences(source_token_names, target):
        token = occurrence.token_name

        if not _has_opening(target, occurrence.start):
            position = occurrence.start + 1
            issues.append(TokenIssue(
                kind=IssueKind.SYNTAX_CORRUPT,
                message=(
                    f"Branding token opening (! is corrupt at position {position} "
                    f"for token \"{token}\""
                ),
                token_name=token,
                position=position,
            ))

        if not _has_closing(target, occurrence.end):
            # 1-based position of the last character of the name
            position = occurrence.end
            issues.append(TokenIssue(
                kind=IssueKind.SYNTAX_CORRUPT,
                message=(
                    f"Branding token closing ) is corrupt at position {position} "
                    f"for token \"{token}\""
                ),
                token_name=token,
                position=position,
            ))

    return issues
