"""
Unit tests for cts_match/candidates.py.

Acceptance criteria:
- Split on runs of whitespace, newlines and commas
- Exact, case-sensitive, full-string equality only
- Absent code never matches
"""

import pytest

from cts_match.candidates import match_candidate, parse_candidates


class TestParseCandidates:

    def test_mixed_separators(self):
        assert parse_candidates("1243, 3412\n4231") == ["1243", "3412", "4231"]

    def test_tabs_and_repeated_separators(self):
        assert parse_candidates("\t345126,,  215436\r\n\n534126 ") == ["345126", "215436", "534126"]

    @pytest.mark.parametrize("text", ["", "   ", ",,\n", None])
    def test_no_tokens(self, text):
        assert parse_candidates(text) == []


class TestMatchCandidate:

    def test_found(self):
        assert match_candidate("3412", "1243, 3412\n4231") == "3412"

    def test_not_found(self):
        assert match_candidate("3412", "1243 4231") is None

    def test_absent_code(self):
        assert match_candidate(None, "3412") is None
        assert match_candidate("", "3412") is None

    def test_no_numeric_equality(self):
        """'04' and '4' are the same number but different answers."""
        assert match_candidate("4", "04 40") is None
        assert match_candidate("04", "4") is None

    def test_no_partial_match(self):
        assert match_candidate("3412", "34120 13412 341") is None

    def test_case_sensitive(self):
        assert match_candidate("ab", "AB Ab") is None

    def test_first_equal_candidate_returned(self):
        assert match_candidate("3412", "3412 3412") == "3412"

    def test_empty_text(self):
        assert match_candidate("3412", "") is None
