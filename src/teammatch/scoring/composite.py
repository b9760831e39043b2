"""Composite ranker: weighted sum of the four sub-scores, capped at 1.0."""

from __future__ import annotations

from src.teammatch.config import settings
from src.teammatch.models import SubScores


def composite_score(scores: SubScores) -> float:
    w = settings.match_weights
    total = (
        w.skills * scores.skills
        + w.interests * scores.interests
        + w.experience * scores.experience
        + w.availability * scores.availability
    )
    return min(total, 1.0)
