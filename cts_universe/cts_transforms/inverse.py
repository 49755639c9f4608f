"""
Inverse transform: the Bottom→Top code.

API:
    inverse_transform(top, bottom, operator) -> code or None

Rank-based rather than map-based: instead of renumbering a reordered
sequence, it ranks bottom's positions by where their symbols sit in top
and reads those ranks back through the inverted operator.

- Step 1: top_rank[s] = 1-indexed position of s in T
- Step 2: bottom_ranks[p] = top_rank[B[p]]
- Step 3: Stable sort of positions by bottom_ranks -> rank_pos[p]
- Step 4: Invert the operator, A_inv[i] = p + 1 where A[p] = i
- Step 5: Output rank_pos[A_inv[i]] for i = 1..N

Pure function; invalid input yields None, never an exception.
"""

from typing import Dict, List, Optional

import numpy as np

from cts_core.types import DerivedCode, Operator, Symbol, SymbolSeq
from cts_core.validation import OperatorLike, diagnose_inputs, parse_operator


def top_ranks(top: SymbolSeq) -> Dict[Symbol, int]:
    return {symbol: i + 1 for i, symbol in enumerate(top)}


def rank_positions(bottom_ranks: List[int]) -> List[int]:
    """
    Rank each position by its value, ties kept in position order.

    Args:
        bottom_ranks: Top rank of the symbol at each bottom position

    Returns:
        rank_pos where rank_pos[p] = (index of p in the stable sort) + 1

    Examples:
        >>> rank_positions([2, 4, 1, 3])
        [2, 4, 1, 3]
        >>> rank_positions([30, 10, 20])
        [3, 1, 2]
    """
    order = np.argsort(np.asarray(bottom_ranks, dtype=np.int64), kind="stable")
    rank_pos = np.empty(len(order), dtype=np.int64)
    rank_pos[order] = np.arange(1, len(order) + 1)
    return rank_pos.tolist()


def invert_operator(operator: Operator) -> Optional[List[int]]:
    """
    Invert a 1-indexed selection operator.

    Returns:
        A_inv (1-indexed values) with A_inv[A[p] - 1] = p + 1, or None if
        operator is not a permutation of 1..N

    Examples:
        >>> invert_operator([2, 3, 1])
        [3, 1, 2]
        >>> invert_operator([1, 1, 3]) is None
        True
    """
    n = len(operator)
    inverse = [0] * n
    for p, target in enumerate(operator):
        if target < 1 or target > n or inverse[target - 1] != 0:
            return None
        inverse[target - 1] = p + 1
    return inverse


def inverse_transform(
    top: SymbolSeq, bottom: SymbolSeq, operator: OperatorLike
) -> Optional[DerivedCode]:
    """
    Derive the complementary code reconstructing top's order from bottom.

    Args:
        top: Top sequence T (permutation of the alphabet)
        bottom: Bottom sequence B (permutation of the alphabet)
        operator: Operator A as digit string or int sequence

    Returns:
        String of len(T) digits, or None when inputs are incomplete or invalid

    Examples:
        >>> inverse_transform(["+", "▲", "●", "■"], ["▲", "■", "+", "●"], "1324")
        '2143'
    """
    if diagnose_inputs(top, bottom, operator) is not None:
        return None

    ranks = top_ranks(top)
    bottom_ranks = [ranks[symbol] for symbol in bottom]
    rank_pos = rank_positions(bottom_ranks)

    a_inv = invert_operator(parse_operator(operator))
    if a_inv is None:
        return None

    return "".join(str(rank_pos[a_inv[i] - 1]) for i in range(len(a_inv)))
