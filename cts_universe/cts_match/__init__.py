"""
Candidate matching against derived codes.
"""

from .candidates import match_candidate, parse_candidates

__all__ = ["match_candidate", "parse_candidates"]
