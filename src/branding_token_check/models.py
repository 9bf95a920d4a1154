"""
Data models for Branding Token Check.

This module defines the core data structures shared by the scanner,
the validators and the batch/CLI/API surfaces.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class IssueKind(Enum):
    """Category of a branding token defect found in a translation."""
    SYNTAX_CORRUPT = "syntax_corrupt"
    MISSPELLED = "misspelled"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class TokenIssue:
    """A single defect found while comparing source and target strings."""
    kind: IssueKind
    message: str
    token_name: str
    candidates: tuple[str, ...] = ()  # Misspelled look-alikes (MISSPELLED only)
    position: Optional[int] = None  # 1-based offset (SYNTAX_CORRUPT only)

    def to_dict(self) -> dict:
        """Serialize the issue for JSON output."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token_name": self.token_name,
            "candidates": list(self.candidates),
            "position": self.position,
        }


@dataclass(frozen=True)
class Occurrence:
    """Where a token name's bare text was found inside a string."""
    start: int
    token_name: str

    @property
    def end(self) -> int:
        """Exclusive end offset of the occurrence."""
        return self.start + len(self.token_name)


@dataclass
class TokenCheckResult:
    """
    Everything one source/target comparison produced.

    Besides the issues, the token sets and the misspelling map are kept
    so callers can reuse them without scanning the strings again.
    """
    issues: list[TokenIssue] = field(default_factory=list)
    source_tokens: set[str] = field(default_factory=set)
    target_tokens: set[str] = field(default_factory=set)
    misspellings: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    def issues_of(self, kind: IssueKind) -> list[TokenIssue]:
        """Return the issues of a single kind, in report order."""
        return [issue for issue in self.issues if issue.kind == kind]

    def get_summary(self) -> str:
        """Get human-readable summary."""
        if not self.issues:
            return f"Branding tokens OK: {len(self.source_tokens)} source tokens checked"

        counts = [
            f"{len(self.issues_of(kind))} {kind.value.replace('_', ' ')}"
            for kind in IssueKind
            if self.issues_of(kind)
        ]
        return f"Branding tokens FAILED: {', '.join(counts)}"


@dataclass
class LocResource:
    """A localized resource: one source string and its translation."""
    resource_id: str
    source: str
    target: str
    language: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize missing strings to empty ones."""
        self.source = self.source or ""
        self.target = self.target or ""


@dataclass
class ResourceCheckResult:
    """Outcome of checking a single LocResource."""
    resource: LocResource
    result: TokenCheckResult
    messages: list[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.messages)
