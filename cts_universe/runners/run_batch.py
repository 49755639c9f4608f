"""
Batch runner: solve every puzzle in a JSON file and write receipts.

Usage:
    cts-batch puzzles.json --out receipts/ [--limit N] [--single-direction]

Each puzzle gets a receipt with both codes, candidate matches and a status:
- PASS: a code was computed and agrees with "expected" (or with an option)
- MISMATCH: a code was computed but nothing agrees with it
- NO_CODE: inputs were unusable (receipt carries the InputIssue)
- FAIL: an exception escaped while solving
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional

from cts_core.types import SolveResult
from cts_session.session import solve_snapshot

from runners.utils import (
    build_receipt,
    compute_summary_stats,
    load_puzzles,
    parse_symbols,
    save_receipt,
    setup_logger,
)


def receipt_status(puzzle: Dict[str, Any], result: SolveResult) -> str:
    if not result.computed:
        return "NO_CODE"

    expected = puzzle.get("expected")
    if expected is not None:
        codes = {result.forward_code, result.inverse_code}
        return "PASS" if str(expected) in codes else "MISMATCH"

    if puzzle.get("options"):
        return "PASS" if result.matched else "MISMATCH"

    return "PASS"


def solve_puzzle_entry(
    puzzle_id: str,
    puzzle: Dict[str, Any],
    logger: logging.Logger,
    dual_direction: bool = True,
) -> Dict[str, Any]:
    """
    Solve one puzzle and build its receipt.

    Args:
        puzzle_id: Puzzle identifier
        puzzle: Puzzle dict (top, bottom, operator, options?, expected?)
        logger: Logger instance
        dual_direction: Also compute the Bottom→Top code

    Returns:
        Receipt dictionary
    """
    try:
        top = parse_symbols(puzzle["top"])
        bottom = parse_symbols(puzzle["bottom"])
        operator = puzzle["operator"]
        if isinstance(operator, int):
            operator = str(operator)

        result = solve_snapshot(
            top,
            bottom,
            operator,
            puzzle.get("options", ""),
            dual_direction=dual_direction,
        )
        status = receipt_status(puzzle, result)

        if status == "NO_CODE":
            logger.warning(f"Puzzle {puzzle_id}: no code ({result.issue})")
        else:
            logger.info(
                f"Puzzle {puzzle_id}: forward={result.forward_code} "
                f"inverse={result.inverse_code} status={status}"
            )

        return build_receipt(puzzle_id, puzzle, result=result, status=status)

    except Exception as e:
        logger.error(f"Puzzle {puzzle_id}: Exception - {type(e).__name__}: {e}")
        logger.debug(traceback.format_exc())
        return build_receipt(puzzle_id, puzzle, status="FAIL", error=str(e))


def run_batch(
    puzzle_file: Path,
    receipts_dir: Path,
    logger: logging.Logger,
    limit: Optional[int] = None,
    dual_direction: bool = True,
) -> List[Dict[str, Any]]:
    """Solve every puzzle in puzzle_file, saving one receipt each."""
    logger.info(f"Loading puzzles from {puzzle_file}...")
    puzzles = load_puzzles(puzzle_file, limit=limit)
    logger.info(f"Loaded {len(puzzles)} puzzles")

    receipts = []
    for puzzle_id, puzzle in puzzles.items():
        receipt = solve_puzzle_entry(puzzle_id, puzzle, logger, dual_direction)
        receipts.append(receipt)
        save_receipt(receipt, receipts_dir)

    return receipts


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve a file of CTS reorder-and-renumber puzzles"
    )
    parser.add_argument("puzzle_file", type=Path, help="JSON file of puzzles")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("receipts"),
        help="Directory for per-puzzle receipts (default: receipts/)",
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Only solve the first N puzzles"
    )
    parser.add_argument(
        "--single-direction",
        action="store_true",
        help="Skip the Bottom→Top code",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write the log to this file"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("cts_batch", args.log_file, level=level)

    logger.info("=" * 60)
    logger.info("CTS batch solve")
    logger.info(f"Puzzle file: {args.puzzle_file}")
    logger.info(f"Receipts: {args.out}")
    logger.info("=" * 60)

    try:
        receipts = run_batch(
            args.puzzle_file,
            args.out,
            logger,
            limit=args.limit,
            dual_direction=not args.single_direction,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 2

    stats = compute_summary_stats(receipts)

    logger.info("=" * 60)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 60)
    logger.info(f"Total puzzles: {stats['total_puzzles']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Mismatched: {stats['mismatched']}")
    logger.info(f"No code: {stats['no_code']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate']:.2%}")
    for issue, count in stats.get("issues", {}).items():
        logger.info(f"  {issue}: {count}")

    return 0 if stats["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
