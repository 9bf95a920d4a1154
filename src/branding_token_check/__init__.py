"""
Branding Token Check

Integrity checks for branding tokens in localized strings:
- Extracts (!Token) names from source and translated text
- Detects broken (! ) markup around token names in translations
- Detects likely misspelled token names with Damerau-Levenshtein distance
- Reports tokens added to or removed from the translation
"""

__version__ = "1.0.0"
__author__ = "Branding Token Check Team"

from .config import TokenCheckConfig, DEFAULT_TOKEN_COMPARISON_SENSITIVITY

from .models import (
    IssueKind,
    TokenIssue,
    Occurrence,
    TokenCheckResult,
    LocResource,
    ResourceCheckResult,
)

from .token_scanner import TOKEN_NAME_PATTERN, extract_token_names
from .occurrence_locator import locate_occurrences, iter_occurrences
from .syntax_validator import report_syntax_errors_for_tokens
from .edit_distance import damerau_levenshtein_distance
from .misspellings import (
    extract_misspelled_tokens,
    report_misspelled_tokens,
    split_candidate_words,
    max_edit_distance,
)
from .set_diff import find_added_and_removed

from .token_checker import BrandingTokenChecker, format_check_messages

from .resource_loader import ResourceLoadError, load_resources

__all__ = [
    # Configuration
    "TokenCheckConfig",
    "DEFAULT_TOKEN_COMPARISON_SENSITIVITY",
    # Models
    "IssueKind",
    "TokenIssue",
    "Occurrence",
    "TokenCheckResult",
    "LocResource",
    "ResourceCheckResult",
    # Token extraction
    "TOKEN_NAME_PATTERN",
    "extract_token_names",
    # Markup validation
    "locate_occurrences",
    "iter_occurrences",
    "report_syntax_errors_for_tokens",
    # Misspelling detection
    "damerau_levenshtein_distance",
    "extract_misspelled_tokens",
    "report_misspelled_tokens",
    "split_candidate_words",
    "max_edit_distance",
    # Added/removed tokens
    "find_added_and_removed",
    # Checker
    "BrandingTokenChecker",
    "format_check_messages",
    # Resource loading
    "ResourceLoadError",
    "load_resources",
]
