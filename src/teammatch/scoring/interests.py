"""Interests sub-score (25% weight): overlap over the larger interest set."""

from __future__ import annotations

from src.teammatch.models import UserProfile


def common_interests(a: UserProfile, b: UserProfile) -> list[str]:
    have_b = set(b.interests)
    return [i for i in dict.fromkeys(a.interests) if i in have_b]


def score(a: UserProfile, b: UserProfile) -> float:
    interests_a = set(a.interests)
    interests_b = set(b.interests)
    total = max(len(interests_a), len(interests_b))
    if total == 0:
        return 0.0
    return len(interests_a & interests_b) / total
