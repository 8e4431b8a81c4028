"""
Ordinal progress arithmetic.

Training progress is a four level scale.  Summaries average it by
mapping each level to a score, taking the mean and mapping the mean
back onto the scale with fixed, inclusive thresholds.
"""

from __future__ import annotations

from typing import Iterable

from ..schemas.training import ProgressLevel

PROGRESS_SCORES = {
    ProgressLevel.poor: 1,
    ProgressLevel.fair: 2,
    ProgressLevel.good: 3,
    ProgressLevel.excellent: 4,
}
SCORE_LEVELS = {score: level for level, score in PROGRESS_SCORES.items()}

# A mean maps to the lowest level whose score plus this margin reaches it:
# up to 1.5 poor, 2.5 fair, 3.5 good, above that excellent.
BUCKET_MARGIN = 0.5

# Mean used when there is nothing to average.
NEUTRAL_SCORE = 2


def progress_score(level: ProgressLevel) -> int:
    return PROGRESS_SCORES[ProgressLevel(level)]


def bucket_score(score: float) -> ProgressLevel:
    """Map an averaged score back onto the progress scale."""
    for value in sorted(SCORE_LEVELS):
        if score <= value + BUCKET_MARGIN:
            return SCORE_LEVELS[value]
    return SCORE_LEVELS[max(SCORE_LEVELS)]


def average_progress(levels: Iterable[ProgressLevel]) -> ProgressLevel:
    """Bucketed mean of ``levels``; ``fair`` when there are none."""
    scores = [progress_score(level) for level in levels]
    mean = sum(scores) / len(scores) if scores else NEUTRAL_SCORE
    return bucket_score(mean)
