"""
Stateful caller wrapping the pure engine (input mutation + solve).
"""

from .session import PuzzleSession, solve_snapshot

__all__ = ["PuzzleSession", "solve_snapshot"]
