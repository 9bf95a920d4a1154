"""Tests for branding token name extraction."""

import pytest

from branding_token_check.token_scanner import TOKEN_NAME_PATTERN, extract_token_names


class TestExtractTokenNames:
    """Token names are captured between (! and )."""

    def test_single_token(self):
        """A single token is extracted without its markup."""
        assert extract_token_names("Open (!Word_Full)") == {"Word_Full"}

    def test_multiple_tokens(self):
        """All distinct tokens are extracted."""
        text = "(!idftCOUNT) of (!idftSUM) in (!Excel_Short)"
        assert extract_token_names(text) == {"idftCOUNT", "idftSUM", "Excel_Short"}

    def test_duplicates_collapse(self):
        """Repeated tokens appear once."""
        text = "(!Word_Full) and again (!Word_Full)"
        assert extract_token_names(text) == {"Word_Full"}

    def test_case_sensitive(self):
        """Names differing only by case are distinct."""
        assert extract_token_names("(!word) (!Word)") == {"word", "Word"}

    def test_digits_and_underscores(self):
        """Word characters include digits and underscores."""
        assert extract_token_names("(!Word_Full_2010)") == {"Word_Full_2010"}

    @pytest.mark.parametrize("text", [
        "",
        None,
        "No tokens here",
        "(!) empty name",
        "(! Word_Full) space after bang",
        "(!Word_Full missing close",
        "Word_Full) missing open",
        "(!Word-Full) hyphen is not a word character",
    ])
    def test_no_tokens(self, text):
        """Empty, missing or malformed markup yields an empty set."""
        assert extract_token_names(text) == set()

    def test_idempotent(self):
        """Extracting twice from the same text gives the same set."""
        text = "(!A) (!B_2) (!A) (!C"
        assert extract_token_names(text) == extract_token_names(text)

    def test_members_appear_literally(self):
        """Every extracted name appears wrapped in markup in the text."""
        text = "x(!One)y(!Two_2)z((!Three))"
        for name in extract_token_names(text):
            assert f"(!{name})" in text

    def test_pattern_named_group(self):
        """The pattern exposes the name as a named group."""
        match = TOKEN_NAME_PATTERN.search("see (!Word_Full) here")
        assert match.group("token_name") == "Word_Full"
