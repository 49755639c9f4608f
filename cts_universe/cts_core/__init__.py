"""
cts_core: Core primitives for the CTS reorder-and-renumber solver.

Provides:
- types: Alphabet, Symbol, Operator, DerivedCode, SolveResult, InputIssue
- presets: Alphabet-by-size table and PuzzleConfig
- validation: Operator normalization and input diagnosis
- order_hash: Deterministic puzzle fingerprints (SHA-256)
"""

__all__ = [
    "order_hash",
    "presets",
    "types",
    "validation",
]
