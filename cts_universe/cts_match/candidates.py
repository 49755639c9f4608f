"""
Candidate answer parsing and exact matching.

Candidates arrive as free-form pasted text ("345126 215436, 534126\n...").
Matching is exact string equality after trimming: "04" never matches "4".
"""

import re
from typing import List, Optional

from cts_core.types import DerivedCode

_SEPARATORS = re.compile(r"[\s,]+")


def parse_candidates(raw_text: Optional[str]) -> List[str]:
    """
    Split raw text on runs of whitespace/commas, dropping empty tokens.

    Examples:
        >>> parse_candidates("1243, 3412\\n4231")
        ['1243', '3412', '4231']
        >>> parse_candidates("  ,, ")
        []
    """
    if not raw_text:
        return []
    tokens = (token.strip() for token in _SEPARATORS.split(raw_text))
    return [token for token in tokens if token]


def match_candidate(code: Optional[DerivedCode], raw_text: Optional[str]) -> Optional[str]:
    """
    Return the first candidate exactly equal to code.

    Args:
        code: Derived code, or None when nothing was computed
        raw_text: Free-form candidate list

    Returns:
        The matching candidate, or None (always None when code is absent)

    Examples:
        >>> match_candidate("3412", "1243, 3412\\n4231")
        '3412'
        >>> match_candidate(None, "3412") is None
        True
    """
    if not code:
        return None
    for candidate in parse_candidates(raw_text):
        if candidate == code:
            return candidate
    return None
