# =============================================================================
# tests/test_ranges.py - Range Construction Tests
# =============================================================================

import pytest

from arraykit import make_range


class TestNumericRanges:
    """Tests for integer and fractional ranges."""

    def test_ascending(self):
        assert make_range(1, 5) == [1, 2, 3, 4, 5]

    def test_descending(self):
        assert make_range(5, 1) == [5, 4, 3, 2, 1]

    def test_integer_bounds_stay_integers(self):
        assert all(isinstance(n, int) for n in make_range(-2, 2))

    def test_fractional_step_is_exact(self):
        assert make_range(1, 2, 0.5) == [1, 1.5, 2]

    def test_tenths_land_exactly_on_the_bound(self):
        result = make_range(0, 1, 0.1)
        assert len(result) == 11
        assert result[3] == 0.3
        assert result[-1] == 1.0

    def test_fractional_bounds(self):
        assert make_range(0.1, 0.5, 0.1) == [0.1, 0.2, 0.3, 0.4, 0.5]

    def test_descending_fractional(self):
        assert make_range(1.2, 1, 0.1) == [1.2, 1.1, 1.0]

    def test_numeric_text_bounds(self):
        assert make_range("1", "3") == [1, 2, 3]
        assert make_range("0.5", "1.5", "0.5") == [0.5, 1.0, 1.5]

    def test_step_that_overshoots_stops_before_the_bound(self):
        assert make_range(1, 10, 4) == [1, 5, 9]

    def test_descending_is_the_ascending_walk_reversed(self):
        assert make_range(10, 1, 4) == [9, 5, 1]

    def test_equal_bounds(self):
        assert make_range(3, 3) == [3]
        assert make_range(1.5, 1.5) == [1.5]


class TestStepNormalization:
    """The step is always a positive magnitude; direction comes from the bounds."""

    @pytest.mark.parametrize("step", [0, -1, -0.5, "x", None, "-2"])
    def test_invalid_steps_become_one(self, step):
        assert make_range(1, 3, step) == [1, 2, 3]

    def test_numeric_text_step(self):
        assert make_range(0, 6, "3") == [0, 3, 6]

    def test_step_sign_does_not_set_direction(self):
        assert make_range(3, 1, -1) == [3, 2, 1]


class TestLetterRanges:
    """Tests for alphabetic ranges."""

    def test_lowercase(self):
        assert make_range("a", "e") == ["a", "b", "c", "d", "e"]

    def test_uppercase_descending(self):
        assert make_range("D", "A") == ["D", "C", "B", "A"]

    def test_letter_step(self):
        assert make_range("a", "e", 2) == ["a", "c", "e"]

    def test_single_letter(self):
        assert make_range("q", "q") == ["q"]


class TestMalformedRanges:
    """Malformed requests degrade to an empty list without raising."""

    @pytest.mark.parametrize("start, stop", [
        ("a", "Z"),
        ("ab", "c"),
        (1, "a"),
        ("a", 1),
        ("é", "z"),
        (None, 5),
        ([1], [2]),
    ])
    def test_empty(self, start, stop):
        assert make_range(start, stop) == []
