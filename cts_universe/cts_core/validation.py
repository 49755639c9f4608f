"""
Input normalization and validation shared by both transforms.

Provides:
- normalize_operator: Strip non-digits from raw operator text
- parse_operator: Digit string (or int sequence) -> Operator
- is_permutation: Check values are exactly 1..n
- diagnose_inputs: First InputIssue blocking a computation, or None

Nothing here raises on bad puzzle input; problems are reported as
InputIssue constants so callers can tell "still typing" from "invalid".
"""

import re
from typing import Optional, Sequence, Union

from .types import InputIssue, Operator, SymbolSeq

_NON_DIGIT = re.compile(r"[^0-9]")

OperatorLike = Union[str, Sequence[int]]


def normalize_operator(raw: str, n: Optional[int] = None) -> str:
    """
    Strip every non-digit character from operator text.

    When n is given the result is truncated to n characters, matching a
    text field limited to n digits.

    Examples:
        >>> normalize_operator(" 1-3 2 4 ")
        '1324'
        >>> normalize_operator("132456", n=4)
        '1324'
    """
    digits = _NON_DIGIT.sub("", raw or "")
    if n is not None:
        digits = digits[:n]
    return digits


def parse_operator(raw: OperatorLike) -> Optional[Operator]:
    """
    Parse an operator into a list of ints, one per digit.

    Args:
        raw: Digit string ("1324") or sequence of ints ([1, 3, 2, 4])

    Returns:
        List of ints, or None if any entry is not numeric
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        if not all(ch in "0123456789" for ch in raw):
            return None
        return [int(ch) for ch in raw]

    values = []
    for value in raw:
        # bool is an int subclass but never a valid operator entry
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        values.append(int(value))
    return values


def in_range(values: Sequence[int], n: int) -> bool:
    return all(1 <= v <= n for v in values)


def is_permutation(values: Sequence[int], n: int) -> bool:
    """True iff values contains each of 1..n exactly once."""
    return len(values) == n and sorted(values) == list(range(1, n + 1))


def diagnose_inputs(
    top: SymbolSeq,
    bottom: SymbolSeq,
    operator: OperatorLike,
    n: Optional[int] = None,
) -> Optional[str]:
    """
    Report the first reason (top, bottom, operator) cannot be transformed.

    Checks, in order:
    1. len(top) == n
    2. len(bottom) == n
    3. operator has n entries
    4. every operator entry is numeric
    5. every operator entry is in [1, n]
    6. operator is a permutation of 1..n
    7. top has n distinct symbols and every bottom symbol occurs in top

    Args:
        top: Top sequence T
        bottom: Bottom sequence B
        operator: Operator A as digit string or int sequence
        n: Puzzle size; defaults to the longest of top, bottom and operator

    Returns:
        InputIssue constant, or None when all checks pass

    Examples:
        >>> diagnose_inputs(["+", "●"], ["●", "+"], "21")
        >>> diagnose_inputs(["+", "●"], ["●"], "21")
        'INCOMPLETE_BOTTOM'
        >>> diagnose_inputs(["+", "●"], ["●", "+"], "11")
        'OPERATOR_NOT_PERMUTATION'
    """
    if top is None or bottom is None or operator is None:
        if top is None:
            return InputIssue.INCOMPLETE_TOP
        if bottom is None:
            return InputIssue.INCOMPLETE_BOTTOM
        return InputIssue.INCOMPLETE_OPERATOR

    if n is None:
        n = max(len(top), len(bottom), len(operator))

    if len(top) != n or n == 0:
        return InputIssue.INCOMPLETE_TOP
    if len(bottom) != n:
        return InputIssue.INCOMPLETE_BOTTOM
    if len(operator) != n:
        return InputIssue.INCOMPLETE_OPERATOR

    values = parse_operator(operator)
    if values is None:
        return InputIssue.OPERATOR_NOT_NUMERIC
    if not in_range(values, n):
        return InputIssue.OPERATOR_OUT_OF_RANGE
    if not is_permutation(values, n):
        return InputIssue.OPERATOR_NOT_PERMUTATION

    # Bottom may repeat a symbol, but only ones top renumbers
    if len(set(top)) != n or any(symbol not in top for symbol in bottom):
        return InputIssue.SYMBOL_MISMATCH

    return None
