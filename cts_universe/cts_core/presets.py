"""
Alphabet presets and puzzle configuration.

Provides:
- DEFAULT_PRESETS: Built-in symbol sets keyed by puzzle size
- alphabet_for_size: Look up a preset alphabet
- PuzzleConfig: Explicit configuration handed to a PuzzleSession

The preset table is read-only; callers wanting other symbols pass their own
mapping (or an Alphabet) instead of mutating module state.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .types import Alphabet, Symbol

DEFAULT_PRESETS: Mapping[int, Sequence[Symbol]] = MappingProxyType({
    3: ("●", "■", "▲"),
    4: ("+", "▲", "●", "■"),
    5: ("●", "■", "▲", "+", "X"),
    6: ("%", "●", "■", "▲", "+", "X"),
})

DEFAULT_SIZE = 6


def alphabet_for_size(
    n: int, presets: Optional[Mapping[int, Sequence[Symbol]]] = None
) -> Alphabet:
    """
    Return the preset alphabet for puzzle size n.

    Args:
        n: Number of symbols in the puzzle
        presets: Optional table overriding DEFAULT_PRESETS

    Returns:
        Alphabet of exactly n symbols

    Raises:
        KeyError: If no preset exists for n
        ValueError: If the preset has the wrong size or repeated symbols

    Examples:
        >>> alphabet_for_size(4).symbols
        ('+', '▲', '●', '■')
    """
    table = DEFAULT_PRESETS if presets is None else presets
    if n not in table:
        raise KeyError(f"No alphabet preset for size {n}. Known sizes: {sorted(table)}")

    alphabet = Alphabet.of(table[n])
    if len(alphabet) != n:
        raise ValueError(f"Preset for size {n} has {len(alphabet)} symbols")
    return alphabet


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Configuration for one puzzle instance.

    - alphabet: Symbols the puzzle uses (size N)
    - dual_direction: Also compute the Bottom→Top code
    """

    alphabet: Alphabet
    dual_direction: bool = True

    @classmethod
    def for_size(cls, n: int = DEFAULT_SIZE, dual_direction: bool = True) -> "PuzzleConfig":
        return cls(alphabet=alphabet_for_size(n), dual_direction=dual_direction)

    @property
    def n(self) -> int:
        return len(self.alphabet)
