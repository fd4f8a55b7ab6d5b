"""Tests for the column matching engine."""

import pytest

from columnsmith.matching import (
    ColumnMatchStatus,
    MatchClassification,
    classify_columns,
    has_unmatched_columns,
    match_columns,
    unmatched_active,
    unmatched_reference,
)


class TestMatchColumns:
    """Test overall classification."""

    def test_no_reference(self):
        result = match_columns(["a", "b"], None)
        assert result.classification == MatchClassification.NO_REFERENCE
        assert result.message == "Upload a reference CSV to begin matching."
        assert result.progress_percent is None
        assert result.has_reference is False

    def test_empty_reference_counts_as_none(self):
        result = match_columns(["a"], [])
        assert result.classification == MatchClassification.NO_REFERENCE

    def test_perfect_match(self):
        result = match_columns(["a", "b", "c"], ["a", "b", "c"])

        assert result.classification == MatchClassification.PERFECT
        assert result.message.startswith("Perfect Match!")
        assert result.progress_percent == 100.0
        assert result.name_matched == {"a", "b", "c"}
        assert result.position_match_count == 3

    def test_same_names_wrong_order_is_partial(self):
        result = match_columns(["a", "c", "b"], ["a", "b", "c"])

        assert result.classification == MatchClassification.PARTIAL
        assert result.name_matched == {"a", "b", "c"}
        assert result.position_matched == {"a"}
        assert result.progress_percent == 100.0
        assert result.message == (
            "3 of 3 reference columns matched by name. 1 are in the correct position."
        )

    def test_swapped_names_have_no_position_match(self):
        result = match_columns(["name", "id", "phone"], ["id", "name", "email"])

        assert result.classification == MatchClassification.PARTIAL
        assert result.name_matched == {"name", "id"}
        assert result.position_matched == set()
        assert result.progress_percent == pytest.approx(66.7, abs=0.05)

    def test_partial_overlap(self):
        result = match_columns(["a", "x", "c"], ["a", "b", "c"])

        assert result.classification == MatchClassification.PARTIAL
        assert result.name_matched == {"a", "c"}
        assert result.position_matched == {"a", "c"}
        assert result.position_match_count == 2
        assert result.progress_percent == pytest.approx(200 / 3)
        assert result.message == (
            "2 of 3 reference columns matched by name. 2 are in the correct position."
        )

    def test_extra_active_column_prevents_perfect(self):
        result = match_columns(["a", "b", "c"], ["a", "b"])

        assert result.classification == MatchClassification.PARTIAL
        assert result.position_match_count == 2
        assert result.progress_percent == 100.0

    def test_no_overlap(self):
        result = match_columns(["x", "y"], ["a", "b"])

        assert result.classification == MatchClassification.PARTIAL
        assert result.name_matched == set()
        assert result.progress_percent == 0.0

    def test_empty_active_against_reference(self):
        result = match_columns([], ["a"])
        assert result.classification == MatchClassification.PARTIAL
        assert result.progress_percent == 0.0

    def test_duplicate_active_names_count_once(self):
        result = match_columns(["a", "a"], ["a", "b"])
        assert result.matched_count == 1
        assert result.progress_percent == 50.0

    def test_is_pure(self):
        active = ["a", "c", "b"]
        reference = ["a", "b", "c"]
        assert match_columns(active, reference) == match_columns(active, reference)
        assert active == ["a", "c", "b"]


class TestClassifyColumns:
    """Test per-column annotations."""

    def test_without_reference(self):
        assert classify_columns(["a"], None) is None

    def test_empty_reference_agrees_with_match_columns(self):
        assert match_columns(["a"], []).classification == MatchClassification.NO_REFERENCE
        assert classify_columns(["a"], []) is None

    def test_statuses_and_titles(self):
        matches = classify_columns(["a", "c", "z"], ["a", "b", "c"])

        assert [m.status for m in matches] == [
            ColumnMatchStatus.POSITION,
            ColumnMatchStatus.NAME,
            ColumnMatchStatus.NONE,
        ]
        assert matches[0].title == 'Perfect Match: Column "a" is in the correct position.'
        assert "wrong position" in matches[1].title
        assert matches[2].title == 'No Match: Column "z" does not exist in the reference.'

    def test_columns_past_reference_length(self):
        matches = classify_columns(["a", "b", "a"], ["a", "b"])
        assert matches[2].status == ColumnMatchStatus.NAME


class TestUnmatched:
    """Test the leftovers fed to the suggestion step."""

    def test_unmatched_lists(self):
        active = ["id", "fname", "mail"]
        reference = ["id", "first_name", "email"]
        result = match_columns(active, reference)

        assert unmatched_active(active, result) == [1, 2]
        assert unmatched_reference(reference, result) == ["first_name", "email"]
        assert has_unmatched_columns(active, reference, result) is True

    def test_nothing_left_when_all_names_match(self):
        active = ["b", "a"]
        reference = ["a", "b"]
        result = match_columns(active, reference)

        assert unmatched_active(active, result) == []
        assert unmatched_reference(reference, result) == []
        assert has_unmatched_columns(active, reference, result) is False

    def test_extra_reference_column(self):
        active = ["a"]
        reference = ["a", "b"]
        result = match_columns(active, reference)
        assert has_unmatched_columns(active, reference, result) is True
