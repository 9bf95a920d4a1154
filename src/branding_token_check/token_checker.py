# -*- coding: utf-8 -*-
"""
Branding token check for localized resources.

This check detects the most common corruptions of branding tokens,
placeholders of the form (!Name) that are replaced with product names
at build time. A corrupted token shows up in the UI unresolved, or
resolves to the wrong product name.

Four defects are detected:
1. Broken token syntax: a source token name appears in the translation
   without its (! ) markup.
2. Misspelled token names: the translation contains a word that is a
   small edit away from a source token name.
3. Tokens added: the translation uses tokens the source does not.
4. Tokens removed: the translation drops tokens the source uses.

Usage:
    checker = BrandingTokenChecker(sensitivity=0.2)
    result = checker.report_problems(source_text, target_text)
    for issue in result.issues:
        print(issue.message)
"""

import logging
from typing import Iterable, Mapping, Optional

from .config import DEFAULT_TOKEN_COMPARISON_SENSITIVITY, TokenCheckConfig
from .misspellings import extract_misspelled_tokens, report_misspelled_tokens
from .models import (
    IssueKind,
    LocResource,
    ResourceCheckResult,
    TokenCheckResult,
    TokenIssue,
)
from .set_diff import find_added_and_removed
from .syntax_validator import report_syntax_errors_for_tokens
from .token_scanner import extract_token_names

logger = logging.getLogger(__name__)


SYNTAX_MESSAGE_PREFIX = "Translation contains the following token names with incorrect markups: "
MISSPELLED_MESSAGE_PREFIX = "Translation contains possibly misspelled token names: "
ADDED_MESSAGE_PREFIX = "Translation contains the following extra tokens that do not exist in source string: "
REMOVED_MESSAGE_PREFIX = "Translation is missing the following tokens that exist in source string: "


class BrandingTokenChecker:
    """
    Compares branding tokens between a source string and its translation.

    The checker holds no state besides its sensitivity, so one instance
    can be shared across any number of resources.
    """

    def __init__(self, sensitivity: float = DEFAULT_TOKEN_COMPARISON_SENSITIVITY):
        """
        Initialize the checker.

        Args:
            sensitivity: Fraction of a token name's length allowed as edit
                distance when comparing words for misspellings. The higher
                the value, the more potential false positives are reported.
        """
        if not 0 <= sensitivity <= 1:
            raise ValueError(f"sensitivity must be between 0 and 1, got {sensitivity}")
        self.sensitivity = sensitivity

    @classmethod
    def from_config(cls, config: TokenCheckConfig) -> "BrandingTokenChecker":
        return cls(sensitivity=config.token_comparison_sensitivity)

    def extract_token_names(self, text: Optional[str]) -> set[str]:
        return extract_token_names(text)

    def report_syntax_errors_for_tokens(
        self,
        source_token_names: Iterable[str],
        target: Optional[str],
    ) -> list[TokenIssue]:
        return report_syntax_errors_for_tokens(source_token_names, target)

    def extract_misspelled_tokens(
        self,
        source_token_names: Iterable[str],
        target: Optional[str],
    ) -> Mapping[str, tuple[str, ...]]:
        return extract_misspelled_tokens(source_token_names, target, self.sensitivity)

    def report_problems(self, source: Optional[str], target: Optional[str]) -> TokenCheckResult:
        """
        Run all four checks on a source/target pair.

        Args:
            source: Source (original language) string.
            target: Translated string.

        Returns:
            TokenCheckResult with syntax, misspelled, added and removed
            issues in that order, plus the token sets and misspelling map.
        """
        source_tokens = self.extract_token_names(source)
        target_tokens = self.extract_token_names(target)

        syntax_issues = self.report_syntax_errors_for_tokens(source_tokens, target)
        misspellings = self.extract_misspelled_tokens(source_tokens, target)
        misspelled_issues = report_misspelled_tokens(
            source_tokens, target, self.sensitivity, misspellings=misspellings
        )
        added_issues, removed_issues = find_added_and_removed(
            source_tokens, target_tokens, misspellings
        )

        result = TokenCheckResult(
            issues=syntax_issues + misspelled_issues + added_issues + removed_issues,
            source_tokens=source_tokens,
            target_tokens=target_tokens,
            misspellings=misspellings,
        )
        logger.debug(
            "Checked %d source / %d target tokens: %d issues",
            len(source_tokens), len(target_tokens), len(result.issues),
        )
        return result

    def check_resource(
        self,
        resource: LocResource,
        config: Optional[TokenCheckConfig] = None,
    ) -> ResourceCheckResult:
        """
        Check one localized resource and build its report messages.

        Args:
            resource: Resource with source and target strings.
            config: Check toggles; defaults to TokenCheckConfig().

        Returns:
            ResourceCheckResult. Issues of disabled checks are dropped.
        """
        config = config or TokenCheckConfig()
        result = self.report_problems(resource.source, resource.target)

        enabled = _enabled_kinds(config, resource.language)
        result.issues = [issue for issue in result.issues if issue.kind in enabled]

        return ResourceCheckResult(
            resource=resource,
            result=result,
            messages=format_check_messages(result),
        )

    def check_resources(
        self,
        resources: Iterable[LocResource],
        config: Optional[TokenCheckConfig] = None,
    ) -> list[ResourceCheckResult]:
        """Check every resource, keeping input order."""
        config = config or TokenCheckConfig()
        results = [self.check_resource(resource, config) for resource in resources]

        failed = sum(1 for r in results if r.has_issues)
        logger.info(f"Branding token check: {failed}/{len(results)} resources with issues")
        return results


def _enabled_kinds(config: TokenCheckConfig, language: Optional[str]) -> set[IssueKind]:
    kinds = set()
    if config.report_syntax_errors:
        kinds.add(IssueKind.SYNTAX_CORRUPT)
    if config.report_misspellings:
        kinds.add(IssueKind.MISSPELLED)
    if config.report_added_tokens:
        kinds.add(IssueKind.ADDED)
    if config.should_report_removed(language):
        kinds.add(IssueKind.REMOVED)
    return kinds


def format_check_messages(result: TokenCheckResult) -> list[str]:
    """
    Aggregate issues into one message per failed check.

    Args:
        result: Result of report_problems (possibly filtered).

    Returns:
        Up to four messages, in check order. Checks without issues
        produce no message.
    """
    messages = []

    syntax = result.issues_of(IssueKind.SYNTAX_CORRUPT)
    if syntax:
        messages.append(SYNTAX_MESSAGE_PREFIX + "; ".join(i.message for i in syntax))

    misspelled = result.issues_of(IssueKind.MISSPELLED)
    if misspelled:
        messages.append(MISSPELLED_MESSAGE_PREFIX + "; ".join(
            f"{i.token_name} => {', '.join(i.candidates)}" for i in misspelled
        ))

    added = result.issues_of(IssueKind.ADDED)
    if added:
        messages.append(ADDED_MESSAGE_PREFIX + ", ".join(i.token_name for i in added))

    removed = result.issues_of(IssueKind.REMOVED)
    if removed:
        messages.append(REMOVED_MESSAGE_PREFIX + ", ".join(i.token_name for i in removed))

    return messages
