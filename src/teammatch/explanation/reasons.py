"""Compatibility reasons: structured overlaps to short human-readable lines.

Lines are emitted in a fixed order and only when their condition holds:
shared skills, common interests, complementary skills, same experience,
good schedule compatibility.
"""

from __future__ import annotations

from src.teammatch.config import settings
from src.teammatch.models import UserProfile


def build_reasons(
    perspective: UserProfile,
    other: UserProfile,
    *,
    shared: list[str],
    interests: list[str],
    complementary: list[str],
    availability: float,
) -> list[str]:
    reasons: list[str] = []
    if shared:
        reasons.append(f"Shared skills: {', '.join(shared)}")
    if interests:
        reasons.append(f"Common interests: {', '.join(interests)}")
    if complementary:
        reasons.append(f"Complementary skills: {', '.join(complementary)}")
    if perspective.experience == other.experience:
        reasons.append(f"Same experience: {perspective.experience.capitalize()}")
    if availability > settings.good_schedule_threshold:
        reasons.append("Good schedule compatibility")
    return reasons
