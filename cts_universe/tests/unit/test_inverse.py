"""
Unit tests for cts_transforms/inverse.py.

API: inverse_transform(top, bottom, operator) -> code or None

Acceptance criteria:
- Rank positions use a stable sort
- Operator inversion rejects non-permutations
- Worked example yields 2143
- Same failure conditions as the forward transform
"""

from itertools import permutations

import pytest

from cts_transforms.forward import forward_transform, reorder_by_operator
from cts_transforms.inverse import (
    inverse_transform,
    invert_operator,
    rank_positions,
    top_ranks,
)

TOP4 = ["+", "▲", "●", "■"]
BOTTOM4 = ["▲", "■", "+", "●"]


class TestRankPositions:

    def test_permutation_ranks_are_unchanged(self):
        assert rank_positions([2, 4, 1, 3]) == [2, 4, 1, 3]

    def test_sparse_values(self):
        assert rank_positions([30, 10, 20]) == [3, 1, 2]

    def test_ties_keep_position_order(self):
        # Both 5s: the earlier position ranks first
        assert rank_positions([5, 1, 5]) == [2, 1, 3]

    def test_empty(self):
        assert rank_positions([]) == []

    def test_returns_plain_ints(self):
        assert all(type(v) is int for v in rank_positions([3, 1, 2]))


class TestInvertOperator:

    def test_swap(self):
        assert invert_operator([1, 3, 2, 4]) == [1, 3, 2, 4]

    def test_cycle(self):
        # A = [2, 3, 1]: value 1 sits at position 3, 2 at 1, 3 at 2
        assert invert_operator([2, 3, 1]) == [3, 1, 2]

    def test_double_inverse_is_identity(self):
        for op in permutations([1, 2, 3, 4, 5]):
            assert invert_operator(invert_operator(list(op))) == list(op)

    def test_duplicates_rejected(self):
        assert invert_operator([1, 1, 3]) is None

    def test_out_of_range_rejected(self):
        assert invert_operator([1, 2, 4]) is None


class TestTopRanks:

    def test_one_indexed(self):
        assert top_ranks(TOP4) == {"+": 1, "▲": 2, "●": 3, "■": 4}


class TestInverseScenarios:

    def test_n4_worked_example(self):
        assert inverse_transform(TOP4, BOTTOM4, "1324") == "2143"

    def test_n6_default_shapes(self):
        top = ["%", "●", "■", "▲", "+", "X"]
        bottom = ["X", "+", "■", "%", "▲", "●"]
        assert inverse_transform(top, bottom, "241356") == "361542"

    def test_repeated_bottom_symbol_ties_by_position(self):
        # bottom ranks [2, 2, 1, 3]: the first ▲ ranks ahead of the second
        assert inverse_transform(TOP4, ["▲", "▲", "+", "●"], "1324") == "2134"

    def test_identity_operator_matches_forward(self):
        assert inverse_transform(TOP4, BOTTOM4, "1234") == "2413"
        assert forward_transform(TOP4, BOTTOM4, "1234") == "2413"

    def test_differs_from_forward_in_general(self):
        assert inverse_transform(TOP4, BOTTOM4, "1324") != forward_transform(TOP4, BOTTOM4, "1324")


class TestInverseFailures:

    @pytest.mark.parametrize(
        "top,bottom,op",
        [
            (TOP4[:3], BOTTOM4, "1324"),
            (TOP4, BOTTOM4[:3], "1324"),
            (TOP4, BOTTOM4, "132"),
            (TOP4, BOTTOM4, "13245"),
        ],
    )
    def test_invalid_length(self, top, bottom, op):
        assert inverse_transform(top, bottom, op) is None

    def test_operator_out_of_range(self):
        assert inverse_transform(TOP4, BOTTOM4, "1325") is None

    def test_duplicate_operator_rejected(self):
        """Repeated operator digits have no unique inverse."""
        assert inverse_transform(TOP4, BOTTOM4, "1134") is None
        assert inverse_transform(TOP4, BOTTOM4, "4444") is None

    def test_symbol_mismatch(self):
        assert inverse_transform(TOP4, ["▲", "■", "+", "X"], "1324") is None


class TestInverseProperties:

    def test_output_is_n_digit_permutation(self):
        for op in permutations([1, 2, 3, 4]):
            for bottom in permutations(TOP4):
                code = inverse_transform(TOP4, list(bottom), list(op))
                assert code is not None
                assert sorted(code) == ["1", "2", "3", "4"]

    def test_reordered_top_as_bottom_gives_ascending_code(self):
        for op in permutations([1, 2, 3, 4]):
            q = reorder_by_operator(TOP4, list(op))
            assert inverse_transform(TOP4, q, list(op)) == "1234"

    def test_deterministic(self):
        assert inverse_transform(TOP4, BOTTOM4, "1324") == inverse_transform(TOP4, BOTTOM4, "1324")
