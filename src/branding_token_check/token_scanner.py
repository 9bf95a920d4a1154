"""
Branding token extraction.

A branding token has the form (!Name), where Name is a run of word
characters. Tokens are replaced with product names at build time, so
the set of names in a string is what has to survive translation.
"""

import re
from typing import Optional


TOKEN_NAME_PATTERN = re.compile(r"\(!(?P<token_name>\w+)\)")


def extract_token_names(text: Optional[str]) -> set[str]:
    """
    Extract the distinct token names used in a string.

    Args:
        text: String to scan. None is treated as empty.

    Returns:
        Set of names captured between "(!" and ")".
    """
    if not text:
        return set()

    return {match.group("token_name") for match in TOKEN_NAME_PATTERN.finditer(text)}
