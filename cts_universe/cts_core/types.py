"""
Core type definitions for the CTS reorder-and-renumber solver.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

# A symbol is one glyph shown on a puzzle button ("●", "■", "+", ...)
Symbol = str

# Top/bottom arrangements as read off the puzzle
SymbolSeq = Sequence[Symbol]

# Operator as 1-indexed selection positions, e.g. [1, 3, 2, 4]
Operator = List[int]

# N decimal digits, e.g. "3412"
DerivedCode = str


class InputIssue:
    """
    Reasons an input snapshot cannot produce a derived code.

    Listed in the order diagnose_inputs() checks them, so a caller always
    sees the earliest blocking problem (still typing before bad values).
    """

    INCOMPLETE_TOP = "INCOMPLETE_TOP"
    INCOMPLETE_BOTTOM = "INCOMPLETE_BOTTOM"
    INCOMPLETE_OPERATOR = "INCOMPLETE_OPERATOR"
    OPERATOR_NOT_NUMERIC = "OPERATOR_NOT_NUMERIC"
    OPERATOR_OUT_OF_RANGE = "OPERATOR_OUT_OF_RANGE"
    OPERATOR_NOT_PERMUTATION = "OPERATOR_NOT_PERMUTATION"
    SYMBOL_MISMATCH = "SYMBOL_MISMATCH"

    INCOMPLETE = (INCOMPLETE_TOP, INCOMPLETE_BOTTOM, INCOMPLETE_OPERATOR)


@dataclass(frozen=True)
class Alphabet:
    """Ordered set of distinct puzzle symbols."""

    symbols: Tuple[Symbol, ...]

    def __post_init__(self):
        if len(self.symbols) == 0:
            raise ValueError("Alphabet requires at least one symbol")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Alphabet symbols must be distinct, got {self.symbols}")

    @classmethod
    def of(cls, symbols) -> "Alphabet":
        """Build from any iterable of symbols (a plain string splits per character)."""
        return cls(tuple(symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self.symbols


@dataclass
class SolveResult:
    """
    Outcome of one solve over an input snapshot.

    - forward_code: Top→Bottom code (None when inputs are not usable)
    - inverse_code: Bottom→Top code (None when not requested or not usable)
    - forward_match / inverse_match: first candidate equal to each code
    - issue: InputIssue constant explaining a missing code, else None
    """

    forward_code: Optional[DerivedCode] = None
    inverse_code: Optional[DerivedCode] = None
    forward_match: Optional[str] = None
    inverse_match: Optional[str] = None
    issue: Optional[str] = None

    @property
    def computed(self) -> bool:
        return self.forward_code is not None

    @property
    def matched(self) -> bool:
        return self.forward_match is not None or self.inverse_match is not None
