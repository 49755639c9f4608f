"""
Puzzle session: the one configurable caller of the engine.

Owns the mutable input state (top/bottom sequences, operator text, options
text). Rows only grow one symbol at a time up to N and shrink from the end.
Every solve() re-runs the pure transforms over a snapshot of that state.
"""

import logging
from typing import List, Optional, Tuple

from cts_core.presets import PuzzleConfig
from cts_core.types import Alphabet, SolveResult, Symbol, SymbolSeq
from cts_core.validation import OperatorLike, diagnose_inputs, normalize_operator
from cts_match.candidates import match_candidate
from cts_transforms.forward import forward_transform
from cts_transforms.inverse import inverse_transform

logger = logging.getLogger(__name__)


class PuzzleSession:
    """
    Input state for one puzzle instance plus the solve entry point.

    Examples:
        >>> session = PuzzleSession(PuzzleConfig.for_size(4))
        >>> for s in ["+", "▲", "●", "■"]:
        ...     _ = session.add_top(s)
        >>> for s in ["▲", "■", "+", "●"]:
        ...     _ = session.add_bottom(s)
        >>> session.set_operator("1324")
        >>> session.solve().forward_code
        '3412'
    """

    def __init__(self, config: PuzzleConfig):
        self._config = config
        self._top: List[Symbol] = []
        self._bottom: List[Symbol] = []
        self._operator_text = ""
        self._options_text = ""

    @property
    def config(self) -> PuzzleConfig:
        return self._config

    @property
    def alphabet(self) -> Alphabet:
        return self._config.alphabet

    @property
    def n(self) -> int:
        return self._config.n

    @property
    def top(self) -> Tuple[Symbol, ...]:
        return tuple(self._top)

    @property
    def bottom(self) -> Tuple[Symbol, ...]:
        return tuple(self._bottom)

    @property
    def operator_text(self) -> str:
        return self._operator_text

    @property
    def options_text(self) -> str:
        return self._options_text

    def _append(self, seq: List[Symbol], symbol: Symbol) -> bool:
        if symbol not in self.alphabet:
            raise ValueError(f"Symbol {symbol!r} is not in alphabet {self.alphabet.symbols}")
        if len(seq) >= self.n:
            return False
        seq.append(symbol)
        return True

    def add_top(self, symbol: Symbol) -> bool:
        """Append to the top row; False (no change) once it holds N symbols."""
        return self._append(self._top, symbol)

    def add_bottom(self, symbol: Symbol) -> bool:
        """Append to the bottom row; False (no change) once it holds N symbols."""
        return self._append(self._bottom, symbol)

    def undo_top(self) -> Optional[Symbol]:
        return self._top.pop() if self._top else None

    def undo_bottom(self) -> Optional[Symbol]:
        return self._bottom.pop() if self._bottom else None

    def set_operator(self, raw: str) -> None:
        self._operator_text = normalize_operator(raw, self.n)

    def set_options(self, text: str) -> None:
        self._options_text = text or ""

    def reset(self) -> None:
        self._top = []
        self._bottom = []
        self._operator_text = ""
        self._options_text = ""

    def set_alphabet(self, alphabet: Alphabet) -> None:
        """Switch to another alphabet; all entered input is cleared."""
        logger.debug("Alphabet change %s -> %s, clearing inputs",
                     self.alphabet.symbols, alphabet.symbols)
        self._config = PuzzleConfig(alphabet=alphabet,
                                    dual_direction=self._config.dual_direction)
        self.reset()

    def solve(self) -> SolveResult:
        """
        Compute both derived codes and their candidate matches.

        Idempotent: identical state always produces an identical result.
        The inverse code is only computed when config.dual_direction is set.
        """
        return solve_snapshot(
            self.top,
            self.bottom,
            self._operator_text,
            self._options_text,
            dual_direction=self._config.dual_direction,
            n=self.n,
        )


def solve_snapshot(
    top: SymbolSeq,
    bottom: SymbolSeq,
    operator: OperatorLike,
    options_text: str = "",
    dual_direction: bool = True,
    n: Optional[int] = None,
) -> SolveResult:
    """
    Solve one immutable input snapshot.

    Args:
        top: Top sequence T
        bottom: Bottom sequence B
        operator: Operator A (digit string or int sequence)
        options_text: Free-form candidate answers
        dual_direction: Also compute the Bottom→Top code
        n: Puzzle size; defaults to the longest of top, bottom and operator

    Returns:
        SolveResult; issue is set (and codes are None) when inputs are unusable
    """
    issue = diagnose_inputs(top, bottom, operator, n=n)
    if issue is not None:
        logger.debug("No code: %s (top=%d, bottom=%d, operator=%r)",
                     issue, len(top or ()), len(bottom or ()), operator)
        return SolveResult(issue=issue)

    forward_code = forward_transform(top, bottom, operator)
    inverse_code = inverse_transform(top, bottom, operator) if dual_direction else None

    result = SolveResult(
        forward_code=forward_code,
        inverse_code=inverse_code,
        forward_match=match_candidate(forward_code, options_text),
        inverse_match=match_candidate(inverse_code, options_text),
    )
    logger.debug("Solved: forward=%s inverse=%s matched=%s",
                 forward_code, inverse_code, result.matched)
    return result
