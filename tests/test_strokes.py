"""
Tests for handicap stroke allocation and course difficulty tables.
"""

import pytest

from src.config import COURSE_PROFILES, DEFAULT_COURSE
from src.ingestion.scorecard import InputFormatError
from src.skins.engine import strokes_received, validate_hole_difficulty
from src.utils import get_course_profile


class TestStrokesReceived:
    """Tests for strokes_received function."""

    def test_scratch_player_gets_nothing(self):
        assert strokes_received(0, 10) == 0

    def test_fractional_half_rounds_up_onto_hole(self):
        # ceil(4.5) = 5, hole ranked 5 receives a stroke
        assert strokes_received(4.5, 5) == 1

    def test_fractional_half_stops_after_rounded_count(self):
        assert strokes_received(4.5, 6) == 0

    def test_whole_half_strokes_up_to_itself(self):
        assert strokes_received(4.0, 4) == 1

    def test_whole_half_does_not_round_up(self):
        # 4.0 is treated as exactly 4, unlike 4.5
        assert strokes_received(4.0, 5) == 0

    def test_half_of_two_misses_fourth_hardest(self):
        assert strokes_received(2, 4) == 0

    def test_hardest_hole_first(self):
        assert strokes_received(0.5, 1) == 1
        assert strokes_received(0.5, 2) == 0

    def test_large_handicap_capped_at_one_stroke(self):
        assert strokes_received(30, 1) == 1
        assert strokes_received(30, 18) == 1


class TestStrokesProperties:
    """Tests for properties that hold across all handicaps and holes."""

    def test_always_zero_or_one(self):
        for doubled in range(0, 73):
            half = doubled / 2
            for difficulty in range(1, 19):
                assert strokes_received(half, difficulty) in (0, 1)

    def test_monotonic_in_handicap(self):
        """A higher handicap never loses a stroke on a given hole."""
        for difficulty in range(1, 19):
            strokes = [strokes_received(doubled / 2, difficulty) for doubled in range(0, 41)]
            for i in range(len(strokes) - 1):
                assert strokes[i] <= strokes[i + 1]

    def test_harder_holes_get_strokes_first(self):
        for doubled in range(0, 37):
            strokes = [strokes_received(doubled / 2, d) for d in range(1, 19)]
            for i in range(len(strokes) - 1):
                assert strokes[i] >= strokes[i + 1]


class TestValidateHoleDifficulty:
    """Tests for validate_hole_difficulty function."""

    def test_accepts_course_profile(self):
        ranks = validate_hole_difficulty(COURSE_PROFILES[DEFAULT_COURSE])
        assert ranks == (4, 14, 16, 2, 18, 8, 6, 12, 10)

    def test_returns_tuple_for_list_input(self):
        assert isinstance(validate_hole_difficulty([1, 3, 5, 7, 9, 11, 13, 15, 17]), tuple)

    def test_rejects_wrong_length(self):
        with pytest.raises(InputFormatError):
            validate_hole_difficulty([1, 2, 3])

    def test_rejects_out_of_range(self):
        with pytest.raises(InputFormatError):
            validate_hole_difficulty([0, 2, 3, 4, 5, 6, 7, 8, 9])
        with pytest.raises(InputFormatError):
            validate_hole_difficulty([19, 2, 3, 4, 5, 6, 7, 8, 9])

    def test_rejects_repeats(self):
        with pytest.raises(InputFormatError):
            validate_hole_difficulty([1, 1, 3, 4, 5, 6, 7, 8, 9])

    def test_rejects_non_integers(self):
        with pytest.raises(InputFormatError):
            validate_hole_difficulty([1.5, 2, 3, 4, 5, 6, 7, 8, 9])
        with pytest.raises(InputFormatError):
            validate_hole_difficulty(["1", 2, 3, 4, 5, 6, 7, 8, 9])


class TestCourseProfile:
    """Tests for get_course_profile utility."""

    def test_known_course(self):
        assert get_course_profile("st_peters") == (4, 14, 16, 2, 18, 8, 6, 12, 10)

    def test_unknown_course(self):
        with pytest.raises(ValueError, match="Unknown course"):
            get_course_profile("augusta")
