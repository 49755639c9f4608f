"""
Deterministic fingerprints for puzzle snapshots.

Provides:
- hash64: SHA-256 over canonical JSON, truncated to a 64-bit int
- puzzle_fingerprint: Stable hex id for a (top, bottom, operator) snapshot

Stable across runs. No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any

from .types import SymbolSeq
from .validation import OperatorLike, normalize_operator


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash of any JSON-serializable object.

    Keys are sorted and separators compacted before hashing, so dict order
    never changes the result. Non-ASCII symbols are kept as-is.

    Examples:
        >>> hash64(["+", "●"]) == hash64(["+", "●"])
        True
    """
    canonical = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    digest = hashlib.sha256(canonical.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def puzzle_fingerprint(top: SymbolSeq, bottom: SymbolSeq, operator: OperatorLike) -> str:
    """
    16-hex-digit id for one puzzle snapshot.

    The operator is compared in its normalized digit form, so "1324",
    "1 3 2 4" and [1, 3, 2, 4] all fingerprint identically.
    """
    if isinstance(operator, str):
        op_text = normalize_operator(operator)
    else:
        op_text = "".join(str(v) for v in operator)

    payload = {"top": list(top), "bottom": list(bottom), "operator": op_text}
    return f"{hash64(payload):016x}"
