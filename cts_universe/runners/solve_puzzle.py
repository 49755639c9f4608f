"""
Solve a single CTS puzzle from the command line.

Usage:
    cts-solve --size 4 --top "+ ▲ ● ■" --bottom "▲ ■ + ●" --operator 1324 \
        --options "1243, 3412 4231"

Exit status: 0 when a code was computed, 1 when inputs are unusable,
2 on bad arguments (unknown size, symbol outside the alphabet).
"""

import argparse
import logging
import sys

from cts_core.presets import DEFAULT_SIZE, PuzzleConfig, alphabet_for_size
from cts_core.types import Alphabet
from cts_session.session import PuzzleSession

from runners.utils import parse_symbols, setup_logger


def build_session(args) -> PuzzleSession:
    """Build a session from parsed arguments, feeding it one symbol at a time."""
    if args.alphabet:
        alphabet = Alphabet.of(parse_symbols(args.alphabet))
    else:
        alphabet = alphabet_for_size(args.size)

    session = PuzzleSession(
        PuzzleConfig(alphabet=alphabet, dual_direction=not args.single_direction)
    )

    for label, symbols, add in (
        ("top", parse_symbols(args.top), session.add_top),
        ("bottom", parse_symbols(args.bottom), session.add_bottom),
    ):
        if len(symbols) > session.n:
            raise ValueError(f"{label} row has {len(symbols)} symbols, puzzle size is {session.n}")
        for symbol in symbols:
            add(symbol)

    session.set_operator(args.operator)
    if args.options:
        session.set_options(args.options)
    return session


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Reorder top by the operator, renumber, read bottom as a code"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Puzzle size selecting a preset alphabet (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--alphabet", type=str, default=None, help="Custom symbols, overrides --size"
    )
    parser.add_argument("--top", type=str, required=True, help="Top row symbols")
    parser.add_argument("--bottom", type=str, required=True, help="Bottom row symbols")
    parser.add_argument("--operator", type=str, required=True, help="Operator digits, e.g. 241356")
    parser.add_argument("--options", type=str, default="", help="Candidate answers")
    parser.add_argument(
        "--single-direction", action="store_true", help="Skip the Bottom→Top code"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logger = setup_logger("cts_solve", level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        session = build_session(args)
    except (KeyError, ValueError) as e:
        # KeyError str() quotes its message
        logger.error(e.args[0] if e.args else type(e).__name__)
        return 2

    result = session.solve()

    if not result.computed:
        logger.warning(f"No code computed: {result.issue}")
        return 1

    print(f"Top→Bottom code: {result.forward_code}")
    if session.config.dual_direction:
        print(f"Bottom→Top code: {result.inverse_code}")

    if session.options_text:
        if result.forward_match:
            print(f"Match (Top→Bottom): {result.forward_match}")
        if result.inverse_match:
            print(f"Match (Bottom→Top): {result.inverse_match}")
        if not result.matched:
            print("No option matches the computed code")

    return 0


if __name__ == "__main__":
    sys.exit(main())
