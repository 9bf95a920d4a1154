# -*- coding: utf-8 -*-
"""
Centralized configuration for Branding Token Check.

This module provides a configuration dataclass that controls how
sensitive misspelling detection is and which of the four checks
are reported for a resource.
"""

from dataclasses import dataclass, field
from typing import Optional


DEFAULT_TOKEN_COMPARISON_SENSITIVITY = 0.2


@dataclass
class TokenCheckConfig:
    """
    Configuration for branding token checking.

    Attributes:
        token_comparison_sensitivity: Fraction of a token name's length
            allowed as edit distance when looking for misspellings. The
            budget is ceil(sensitivity * len(name)). Higher values catch
            more corruptions and report more false positives.

        report_syntax_errors: Report token names with broken (! or ) markup.
        report_misspellings: Report words that look like misspelled tokens.
        report_added_tokens: Report tokens present only in the translation.
        report_removed_tokens: Report tokens missing from the translation.

        removed_check_exempt_languages: Languages for which missing tokens
            are not reported. Some languages tend to de-personify messages
            by dropping product names, so a removed token is expected there.
    """

    token_comparison_sensitivity: float = DEFAULT_TOKEN_COMPARISON_SENSITIVITY

    report_syntax_errors: bool = True
    report_misspellings: bool = True
    report_added_tokens: bool = True
    report_removed_tokens: bool = True

    removed_check_exempt_languages: set[str] = field(default_factory=set)

    def __post_init__(self):
        """Validate configuration values."""
        if not 0 <= self.token_comparison_sensitivity <= 1:
            raise ValueError(
                f"token_comparison_sensitivity must be between 0 and 1, "
                f"got {self.token_comparison_sensitivity}"
            )
        self.removed_check_exempt_languages = {
            lang.strip().lower()
            for lang in self.removed_check_exempt_languages
            if lang and lang.strip()
        }

    def should_report_removed(self, language: Optional[str] = None) -> bool:
        """Check if missing tokens should be reported for a language.

        Args:
            language: Language/culture code of the translation, if known.

        Returns:
            False if the removed check is disabled or the language is exempt.
        """
        if not self.report_removed_tokens:
            return False
        if language and language.strip().lower() in self.removed_check_exempt_languages:
            return False
        return True

    @classmethod
    def strict(cls, **overrides) -> "TokenCheckConfig":
        """Create config that reports more potential misspellings.

        Args:
            **overrides: Override any config values

        Returns:
            TokenCheckConfig with a wider edit-distance budget
        """
        defaults = {"token_comparison_sensitivity": 0.3}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def lenient(cls, **overrides) -> "TokenCheckConfig":
        """Create config for noisy projects.

        Lenient mode:
        - Only near-identical words are treated as misspellings
        - Missing tokens are not reported

        Args:
            **overrides: Override any config values

        Returns:
            TokenCheckConfig with lenient defaults
        """
        defaults = {
            "token_comparison_sensitivity": 0.1,
            "report_removed_tokens": False,
        }
        defaults.update(overrides)
        return cls(**defaults)
