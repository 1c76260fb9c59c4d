# =============================================================================
# tests/test_aggregate.py - Aggregation Tests
# =============================================================================
# Tests for sum, product, max and min, including coercion rules, sentinels
# and the builtin fast path for plain numeric sequences.
# =============================================================================

import math

import pytest

from arraykit import max_element, min_element, product, sum_collection
from arraykit.config import settings


# =============================================================================
# sum
# =============================================================================

class TestSum:
    """Tests for sum_collection()."""

    def test_list(self):
        assert sum_collection([1, 2, 3]) == 6

    def test_mapping(self):
        assert sum_collection({"a": 1, "b": 2}) == 3

    def test_numeric_text_is_coerced(self):
        assert sum_collection(["1", " 2.5"]) == 3.5

    def test_implicit_coercion_of_blanks_and_bools(self):
        assert sum_collection([True, None, "", 4]) == 5

    def test_non_numeric_text_poisons_total(self):
        assert math.isnan(sum_collection([1, "x", 2]))

    def test_empty_collection(self):
        assert sum_collection([]) == 0
        assert sum_collection({}) == 0

    @pytest.mark.parametrize("value", [5, "123", None])
    def test_non_collection_is_nan(self, value):
        assert math.isnan(sum_collection(value))


# =============================================================================
# product
# =============================================================================

class TestProduct:
    """Tests for product()."""

    def test_numbers(self):
        assert product([2, 3, 4]) == 24

    def test_non_numeric_elements_are_skipped(self):
        assert product([2, "x", 3]) == 6

    def test_zero_is_numeric(self):
        assert product([2, 0, "x", 3]) == 0

    def test_numeric_text_is_multiplied(self):
        assert product(["1.5", 2]) == 3.0

    def test_no_numeric_elements(self):
        assert product([]) == 0
        assert product(["a", None, True]) == 0


# =============================================================================
# max / min
# =============================================================================

class TestMaxMin:
    """Tests for max_element() and min_element()."""

    def test_plain_numbers(self):
        assert max_element([3, 1, 4, 1, 5]) == 5
        assert min_element([3, 1, 4, 1, 5]) == 1

    def test_projection_returns_original_element(self):
        assert max_element([3, 1, 4, 1, 5], lambda value, index, target: -value) == 1
        words = ["pear", "fig", "banana"]
        assert max_element(words, lambda value, index, target: len(value)) == "banana"
        assert min_element(words, lambda value, index, target: len(value)) == "fig"

    def test_ties_keep_first_seen(self):
        records = [{"id": "a", "n": 1}, {"id": "b", "n": 1}]
        assert max_element(records, lambda value, index, target: value["n"])["id"] == "a"
        assert min_element(records, lambda value, index, target: value["n"])["id"] == "a"

    def test_mapping_values(self, scores):
        assert max_element(scores) == 47
        assert min_element(scores) == 12

    def test_mapping_callback_receives_keys(self, scores):
        assert max_element(scores, lambda value, key, target: -len(key)) == 31

    def test_context_binding(self):
        target = {"x": 10}
        result = min_element([1, 9, 12], lambda ctx, value, index, arr: abs(ctx["x"] - value), target)
        assert result == 9

    def test_mixed_types_compare_as_numbers(self):
        assert max_element([1, "5", 3]) == "5"
        assert min_element([4, "2", 3]) == "2"

    def test_nan_elements_never_win(self):
        assert max_element([1, math.nan, 3]) == 3
        assert min_element([math.nan, 2, 1]) == 1

    def test_input_is_not_modified(self):
        data = [5, 2, 8]
        max_element(data)
        min_element(data, lambda value, index, target: value)
        assert data == [5, 2, 8]

    def test_empty_collection_gives_sentinel(self):
        assert max_element([]) == -math.inf
        assert min_element({}) == math.inf

    @pytest.mark.parametrize("target", [42, "abc", None])
    def test_non_collection_gives_sentinel(self, target):
        assert max_element(target) == -math.inf
        assert min_element(target) == math.inf


class TestFastPath:
    """The builtin shortcut must not change results."""

    def test_same_result_with_fast_path_disabled(self, monkeypatch):
        data = [7, -2, 7.0, 3.5, 1]
        fast = (max_element(data), min_element(data))

        monkeypatch.setattr(settings, "MAX_MIN_FAST_PATH_LIMIT", 0)
        assert (max_element(data), min_element(data)) == fast

    def test_sequences_over_the_limit_are_walked(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_MIN_FAST_PATH_LIMIT", 3)
        assert max_element(list(range(10))) == 9
        assert min_element(list(range(10, 0, -1))) == 1

    def test_ties_keep_first_seen_on_fast_path(self):
        data = [1, 3.0, 3]
        result = max_element(data)
        assert result == 3 and isinstance(result, float)
