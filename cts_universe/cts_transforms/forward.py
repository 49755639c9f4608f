"""
Forward transform: the Top→Bottom code.

API:
    forward_transform(top, bottom, operator) -> code or None

Algorithm:
- Step 1: Reorder top by the operator, Q[i] = T[A[i] - 1]
- Step 2: Renumber Q, symbol Q[i] -> i + 1
- Step 3: Read bottom through the renumbering map, one digit per symbol

Pure function; invalid input yields None, never an exception.
"""

from typing import Dict, List, Optional

from cts_core.types import DerivedCode, Operator, Symbol, SymbolSeq
from cts_core.validation import OperatorLike, diagnose_inputs, parse_operator


def reorder_by_operator(top: SymbolSeq, operator: Operator) -> Optional[List[Symbol]]:
    """
    Apply the operator as a 1-indexed selection over top.

    Args:
        top: Top sequence T
        operator: Operator A, values in [1, len(T)]

    Returns:
        Q with Q[i] = T[A[i] - 1], or None if lengths differ or an index
        falls outside T

    Examples:
        >>> reorder_by_operator(["+", "▲", "●", "■"], [1, 3, 2, 4])
        ['+', '●', '▲', '■']
    """
    if len(top) != len(operator):
        return None
    if any(idx < 1 or idx > len(top) for idx in operator):
        return None
    return [top[idx - 1] for idx in operator]


def build_renumber_map(reordered: SymbolSeq) -> Dict[Symbol, int]:
    """Map each symbol of a reordered sequence to its 1-indexed position."""
    return {symbol: i + 1 for i, symbol in enumerate(reordered)}


def forward_transform(
    top: SymbolSeq, bottom: SymbolSeq, operator: OperatorLike
) -> Optional[DerivedCode]:
    """
    Derive the code bottom decodes to once top is reordered by operator.

    Args:
        top: Top sequence T (permutation of the alphabet)
        bottom: Bottom sequence B (permutation of the alphabet)
        operator: Operator A as digit string or int sequence

    Returns:
        String of len(T) digits, or None when inputs are incomplete or invalid

    Examples:
        >>> forward_transform(["+", "▲", "●", "■"], ["▲", "■", "+", "●"], "1324")
        '3412'
    """
    if diagnose_inputs(top, bottom, operator) is not None:
        return None

    reordered = reorder_by_operator(top, parse_operator(operator))
    if reordered is None:
        return None

    renumber = build_renumber_map(reordered)
    ranks = [renumber.get(symbol) for symbol in bottom]
    if any(rank is None for rank in ranks):
        return None

    return "".join(str(rank) for rank in ranks)
