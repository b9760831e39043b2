"""Experience sub-score (15% weight): closeness on the beginner-expert scale."""

from __future__ import annotations

from src.teammatch.domain_model import experience_distance_score
from src.teammatch.models import UserProfile


def score(a: UserProfile, b: UserProfile) -> float:
    return experience_distance_score(a.experience, b.experience)
