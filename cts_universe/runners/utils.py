"""
Utility functions for the CTS runners.

Provides:
- Puzzle loading from JSON files
- Symbol-row parsing from command-line text
- Logging setup
- Receipt generation and summary statistics
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from cts_core.order_hash import hash64, puzzle_fingerprint
from cts_core.types import SolveResult, Symbol


def load_puzzles(puzzle_file: Path, limit: Optional[int] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load puzzles from a JSON file.

    Expected layout:
        {"puzzle_id": {"top": [...], "bottom": [...], "operator": "1324",
                       "options": "...", "expected": "3412"}}

    "options" and "expected" are optional. "top"/"bottom" may also be
    strings, parsed with parse_symbols().

    Args:
        puzzle_file: Path to the JSON file
        limit: Optional limit on number of puzzles to load

    Returns:
        Dict mapping puzzle_id -> puzzle_dict

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a puzzle is missing a required key
    """
    puzzle_file = Path(puzzle_file)
    if not puzzle_file.exists():
        raise FileNotFoundError(f"Puzzle file not found: {puzzle_file}")

    with open(puzzle_file, "r", encoding="utf-8") as f:
        all_puzzles = json.load(f)

    required = ("top", "bottom", "operator")
    for puzzle_id, puzzle in all_puzzles.items():
        missing = [key for key in required if key not in puzzle]
        if missing:
            raise ValueError(f"Puzzle '{puzzle_id}' is missing keys: {missing}")

    if limit is not None:
        puzzle_ids = list(all_puzzles.keys())[:limit]
        all_puzzles = {pid: all_puzzles[pid] for pid in puzzle_ids}

    return all_puzzles


def parse_symbols(raw: Any) -> List[Symbol]:
    """
    Parse a symbol row.

    Whitespace- or comma-separated text splits on separators; text without
    separators splits per character; lists pass through.

    Examples:
        >>> parse_symbols("+ ▲ ● ■")
        ['+', '▲', '●', '■']
        >>> parse_symbols("+▲●■")
        ['+', '▲', '●', '■']
    """
    if raw is None:
        return []
    if not isinstance(raw, str):
        return [str(s) for s in raw]

    text = raw.replace(",", " ")
    if any(ch.isspace() for ch in text.strip()):
        return text.split()
    return list(text.strip())


def setup_logger(name: str, log_file: Optional[Path] = None, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for a runner.

    Args:
        name: Logger name
        log_file: Optional path to log file (console only when omitted)
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def receipt_fingerprint(puzzle: Dict[str, Any]) -> str:
    """
    Fingerprint a puzzle for its receipt.

    Rows that cannot be parsed fall back to hashing the raw field reprs.
    """
    try:
        top = parse_symbols(puzzle.get("top"))
        bottom = parse_symbols(puzzle.get("bottom"))
        return puzzle_fingerprint(top, bottom, puzzle.get("operator", ""))
    except (TypeError, ValueError):
        raw = {key: repr(puzzle.get(key)) for key in ("top", "bottom", "operator")}
        return f"{hash64(raw):016x}"


def build_receipt(
    puzzle_id: str,
    puzzle: Dict[str, Any],
    result: Optional[SolveResult] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for a puzzle.

    Args:
        puzzle_id: Puzzle identifier
        puzzle: Puzzle dict as loaded (top, bottom, operator, ...)
        result: SolveResult when solving ran
        status: "PASS", "MISMATCH", "NO_CODE" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "puzzle_id": puzzle_id,
        "fingerprint": receipt_fingerprint(puzzle),
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if result is not None:
        receipt["codes"] = {
            "forward": result.forward_code,
            "inverse": result.inverse_code,
        }
        receipt["matches"] = {
            "forward": result.forward_match,
            "inverse": result.inverse_match,
        }
        if result.issue is not None:
            receipt["issue"] = result.issue

    if "expected" in puzzle:
        receipt["expected"] = puzzle["expected"]

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/)

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['puzzle_id']}.json"

    with open(receipt_file, "w", encoding="utf-8") as f:
        json.dump(receipt, f, indent=2, ensure_ascii=False)

    return receipt_file


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary
    """
    total = len(receipts)
    by_status: Dict[str, int] = {}
    for r in receipts:
        by_status[r["status"]] = by_status.get(r["status"], 0) + 1

    passed = by_status.get("PASS", 0)
    stats = {
        "total_puzzles": total,
        "passed": passed,
        "mismatched": by_status.get("MISMATCH", 0),
        "no_code": by_status.get("NO_CODE", 0),
        "failed": by_status.get("FAIL", 0),
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    # Issue breakdown for puzzles that produced no code
    issues = [r["issue"] for r in receipts if "issue" in r]
    if issues:
        stats["issues"] = {issue: issues.count(issue) for issue in sorted(set(issues))}

    return stats
