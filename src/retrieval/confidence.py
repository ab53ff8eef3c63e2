"""
Confidence bands for ranked result sets.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

HIGH_SCORE = 25.0
MEDIUM_SCORE = 12.0
HIGH_MIN_RESULTS = 2


class Scored(Protocol):
    score: float


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def confidence_for_scores(scores: Sequence[float]) -> Confidence:
    """Band a descending list of scores by the top score and result count."""
    if not scores:
        return Confidence.LOW
    top = scores[0]
    if top >= HIGH_SCORE and len(scores) >= HIGH_MIN_RESULTS:
        return Confidence.HIGH
    if top >= MEDIUM_SCORE:
        return Confidence.MEDIUM
    return Confidence.LOW


def get_confidence(ranked: Sequence[Scored]) -> Confidence:
    """Overall confidence of ranked results (objects with a ``score`` attribute)."""
    return confidence_for_scores([r.score for r in ranked])


def result_confidence(score: float, rank: int, overall: Confidence) -> Confidence:
    """The top result carries the overall band; the rest are banded on their own score."""
    if rank == 0:
        return overall
    return Confidence.MEDIUM if score >= MEDIUM_SCORE else Confidence.LOW
