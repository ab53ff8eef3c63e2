"""
Edit-distance helpers for typo-tolerant matching.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

# Length gaps above this are returned as-is instead of the full distance.
LENGTH_GAP_CUTOFF = 3
MIN_FUZZY_LENGTH = 3


def levenshtein(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    When the lengths differ by more than LENGTH_GAP_CUTOFF the length
    difference is returned directly; it is a lower bound, not the exact
    distance.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    gap = abs(len(a) - len(b))
    if gap > LENGTH_GAP_CUTOFF:
        return gap
    return Levenshtein.distance(a, b)


def fuzzy_match(a: str, b: str, max_dist: int = 2) -> bool:
    """True if a and b are equal, or both long enough and within max_dist edits."""
    if a == b:
        return True
    if len(a) < MIN_FUZZY_LENGTH or len(b) < MIN_FUZZY_LENGTH:
        return False
    return levenshtein(a, b) <= max_dist
