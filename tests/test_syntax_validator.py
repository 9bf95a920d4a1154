# -*- coding: utf-8 -*-
"""
Tests for token occurrence location and markup validation.

Token names are often prefixes of one another (Word_Full vs
Word_Full_2010); these tests guard against the shorter name being
anchored inside the longer one.
"""

import pytest

from branding_token_check.models import IssueKind, Occurrence
from branding_token_check.occurrence_locator import iter_occurrences, locate_occurrences
from branding_token_check.syntax_validator import report_syntax_errors_for_tokens


# =============================================================================
# OCCURRENCE LOCATION
# =============================================================================

class TestLocateOccurrences:
    """Longest-first, non-overlapping occurrence location."""

    def test_longer_token_wins_at_same_position(self):
        """Only the longer token is anchored where both could match."""
        result = locate_occurrences(
            {"Word_Full", "Word_Full_2010"},
            "see (!Word_Full_2010) here",
        )
        assert result == {6: "Word_Full_2010"}

    def test_both_tokens_at_different_positions(self):
        """Prefix tokens are still found where they stand alone."""
        result = locate_occurrences(
            {"Word_Full", "Word_Full_2010"},
            "(!Word_Full) and (!Word_Full_2010)",
        )
        assert result == {2: "Word_Full", 19: "Word_Full_2010"}

    def test_suffix_token_inside_longer_token_skipped(self):
        """A shorter name starting inside a claimed span is not recorded."""
        result = locate_occurrences({"Word_Full_2010", "Full_2010"}, "(!Word_Full_2010)")
        assert result == {2: "Word_Full_2010"}

    def test_repeated_occurrences(self):
        """Every occurrence of a name is recorded."""
        result = locate_occurrences({"idftSUM"}, "(!idftSUM) + idftSUM")
        assert result == {2: "idftSUM", 13: "idftSUM"}

    def test_bare_name_without_markup_is_located(self):
        """Occurrences are recorded regardless of surrounding markup."""
        assert locate_occurrences({"idftCOUNT"}, "idftCOUNT") == {0: "idftCOUNT"}

    def test_token_at_end_of_text(self):
        """A name ending exactly at the end of the text is found."""
        assert locate_occurrences({"A"}, "xA") == {1: "A"}

    def test_case_sensitive(self):
        """Matching is ordinal and case-sensitive."""
        assert locate_occurrences({"Word_Full"}, "(!word_full)") == {}

    def test_offsets_are_ordered(self):
        """Results are ordered by offset."""
        result = locate_occurrences({"BB", "A"}, "A BB A")
        assert list(result) == sorted(result)

    def test_spans_never_overlap(self):
        """No two recorded spans overlap."""
        occurrences = iter_occurrences(
            {"ab", "abc", "bcd", "cd", "d"},
            "abcd abcd bcd",
        )
        for first, second in zip(occurrences, occurrences[1:]):
            assert first.end <= second.start

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text(self, text):
        """Empty or missing text has no occurrences."""
        assert locate_occurrences({"Word_Full"}, text) == {}

    def test_no_token_names(self):
        """No names, no occurrences."""
        assert locate_occurrences(set(), "(!Word_Full)") == {}

    def test_iter_occurrences_records(self):
        """iter_occurrences returns Occurrence records with spans."""
        occurrences = iter_occurrences({"idftSUM"}, "(!idftSUM)")
        assert occurrences == [Occurrence(2, "idftSUM")]
        assert occurrences[0].end == 9


# =============================================================================
# MARKUP VALIDATION
# =============================================================================

class TestReportSyntaxErrors:
    """Broken (! and ) markup is reported per delimiter."""

    def test_valid_markup(self):
        """Intact tokens produce no issues."""
        assert report_syntax_errors_for_tokens({"idftCOUNT"}, "(!idftCOUNT)") == []

    def test_missing_opening(self):
        """Missing (! produces exactly one opening issue."""
        issues = report_syntax_errors_for_tokens({"idftCOUNT"}, "idftCOUNT)")

        assert len(issues) == 1
        assert issues[0].kind == IssueKind.SYNTAX_CORRUPT
        assert issues[0].token_name == "idftCOUNT"
        assert issues[0].position == 1
        assert issues[0].message == (
            'Branding token opening (! is corrupt at position 1 for token "idftCOUNT"'
        )

    def test_missing_closing_at_end_of_string(self):
        """Missing ) at the end of the string produces one closing issue."""
        issues = report_syntax_errors_for_tokens({"idftCOUNT"}, "(!idftCOUNT")

        assert len(issues) == 1
        assert issues[0].position == 11
        assert "closing ) is corrupt at position 11" in issues[0].message

    def test_wrong_closing_character(self):
        """A different character after the name is a closing issue."""
        issues = report_syntax_errors_for_tokens({"idftCOUNT"}, "(!idftCOUNT] total")

        assert len(issues) == 1
        assert "closing" in issues[0].message

    def test_both_delimiters_missing(self):
        """A bare name produces an opening and a closing issue."""
        issues = report_syntax_errors_for_tokens({"idftCOUNT"}, "Total: idftCOUNT items")

        assert [("opening" in i.message, "closing" in i.message) for i in issues] == [
            (True, False),
            (False, True),
        ]

    def test_offset_one_fails_opening(self):
        """A name at offset 1 cannot be preceded by (! ."""
        issues = report_syntax_errors_for_tokens({"idftCOUNT"}, "!idftCOUNT)")

        assert len(issues) == 1
        assert issues[0].position == 2
        assert "opening" in issues[0].message

    def test_half_opening(self):
        """Only "(" or only "!" before the name is corrupt."""
        assert len(report_syntax_errors_for_tokens({"Word_Full"}, "x(Word_Full)")) == 1
        assert len(report_syntax_errors_for_tokens({"Word_Full"}, "x !Word_Full)")) == 1

    def test_prefix_token_not_reported_inside_longer(self):
        """Word_Full is not reported as corrupt inside (!Word_Full_2010)."""
        issues = report_syntax_errors_for_tokens(
            {"Word_Full", "Word_Full_2010"},
            "Start (!Word_Full_2010) now",
        )
        assert issues == []

    def test_token_not_in_target(self):
        """Names absent from the target are not syntax issues."""
        assert report_syntax_errors_for_tokens({"idftSUM"}, "(!idftCOUNT)") == []

    @pytest.mark.parametrize("target", ["", None])
    def test_empty_target(self, target):
        """Empty target degrades to no issues."""
        assert report_syntax_errors_for_tokens({"idftCOUNT"}, target) == []

    def test_issues_ordered_by_position(self):
        """Issues come out in target order."""
        issues = report_syntax_errors_for_tokens(
            {"Beta", "Alpha"},
            "Beta) then (!Alpha",
        )
        assert [i.token_name for i in issues] == ["Beta", "Alpha"]
