# =============================================================================
# tests/test_sequence.py - Sequence Operation Tests
# =============================================================================
# Tests for in_array, unique, flatten and shuffle.
# =============================================================================

import math
from collections import Counter

import pytest

from arraykit import flatten, in_array, shuffle, unique


# =============================================================================
# in_array
# =============================================================================

class TestInArray:
    """Tests for in_array()."""

    def test_found(self):
        assert in_array("b", ["a", "b", "b"]) == 1

    def test_missing(self):
        assert in_array(9, [1, 2, 3]) == -1

    def test_bool_and_int_are_distinct(self):
        assert in_array(True, [1, True]) == 1
        assert in_array(1, [True, 1]) == 1

    def test_containers_match_by_identity(self):
        inner = [1]
        assert in_array(inner, [[1], inner]) == 1
        assert in_array([1], [[1]]) == -1

    def test_nan_is_never_found(self):
        assert in_array(math.nan, [math.nan]) == -1

    @pytest.mark.parametrize("from_index, expected", [
        (0, 0),
        (1, 2),
        (3, -1),
        (10, -1),
        (-1, 2),
        (-10, 0),
    ])
    def test_from_index(self, from_index, expected):
        assert in_array("x", ["x", "y", "x"], from_index) == expected

    def test_non_sequence(self):
        assert in_array("a", "abc") == -1


# =============================================================================
# unique
# =============================================================================

class TestUnique:
    """Tests for unique()."""

    def test_numeric_text_collapses_into_numbers(self):
        assert unique([1, "1", 2, 2, "3"]) == [1, 2, 3]

    def test_parsed_values_are_stored(self):
        result = unique(["2", "2.5"])
        assert result == [2, 2.5]
        assert isinstance(result[0], int)
        assert isinstance(result[1], float)

    def test_different_numerals_same_number(self):
        assert unique(["1", "1.0"]) == [1]

    def test_first_occurrence_wins_by_default(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_keep_last(self):
        assert unique(["b", "a", "b", "c", "a"], keep_last=True) == ["b", "c", "a"]

    def test_keep_last_with_numeric_text(self):
        assert unique([1, 2, "1"], True) == [2, 1]

    def test_input_is_not_modified(self):
        data = [3, "3", 1, 3]
        unique(data, keep_last=True)
        assert data == [3, "3", 1, 3]

    def test_tuple_input(self):
        assert unique((1, 1, 2)) == [1, 2]

    def test_bools_are_not_numbers(self):
        assert unique([1, True, 1.0, False, 0]) == [1, True, False, 0]

    def test_non_numeric_text_is_kept_as_text(self):
        assert unique(["a", "A", "a"]) == ["a", "A"]

    def test_equal_containers_are_distinct(self):
        assert len(unique([[1], [1]])) == 2

    @pytest.mark.parametrize("value", ["abc", {"a": 1}, None, 5])
    def test_non_sequence(self, value):
        assert unique(value) == []


# =============================================================================
# flatten
# =============================================================================

class TestFlatten:
    """Tests for flatten()."""

    def test_nested(self):
        assert flatten([1, [2, [3, 4], 5]]) == [1, 2, 3, 4, 5]

    def test_already_flat_is_unchanged(self):
        assert flatten([1, 2, 3]) == [1, 2, 3]

    def test_idempotent(self, nested_list):
        once = flatten(nested_list)
        assert once == [1, 2, "3", 4, 5, "2"]
        assert flatten(once) == once

    def test_tuples_and_empty_sequences(self):
        assert flatten([(1, (2,)), [], [[]], 3]) == [1, 2, 3]

    def test_mappings_and_text_are_leaves(self):
        leaf = {"a": 1}
        assert flatten([leaf, ["bc"]]) == [leaf, "bc"]

    def test_non_sequence_is_returned_as_is(self):
        leaf = {"a": [1, [2]]}
        assert flatten(leaf) is leaf
        assert flatten(7) == 7


# =============================================================================
# shuffle
# =============================================================================

class TestShuffle:
    """Tests for shuffle()."""

    def test_is_a_permutation(self):
        data = list(range(20))
        result = shuffle(data)
        assert sorted(result) == data
        assert len(result) == len(data)

    def test_keeps_duplicates(self):
        data = [1, 1, 2, 2, 2]
        assert Counter(shuffle(data)) == Counter(data)

    def test_input_is_not_modified(self):
        data = [1, 2, 3, 4]
        shuffle(data)
        assert data == [1, 2, 3, 4]

    def test_mapping_values(self):
        assert sorted(shuffle({"a": 1, "b": 2, "c": 3})) == [1, 2, 3]

    def test_text_characters(self):
        assert sorted(shuffle("cab")) == ["a", "b", "c"]

    def test_seed_is_reproducible(self):
        data = list(range(10))
        assert shuffle(data, seed=7) == shuffle(data, seed=7)

    def test_empty_and_non_collections(self):
        assert shuffle([]) == []
        assert shuffle(None) == []
        assert shuffle(12) == []

    def test_positions_are_uniform(self):
        """Every element lands in every position about equally often."""
        trials = 4000
        data = ["a", "b", "c", "d"]
        counts = {position: Counter() for position in range(len(data))}

        for _ in range(trials):
            for position, value in enumerate(shuffle(data)):
                counts[position][value] += 1

        expected = trials / len(data)
        for position in counts:
            for value in data:
                assert abs(counts[position][value] - expected) < expected * 0.2
