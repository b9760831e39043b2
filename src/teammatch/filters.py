"""Candidate pool filtering for the discover view.

Narrows a user pool before ranking: free-text search, a single skill, and
one of a few quick filters.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum

from src.teammatch.models import UserProfile

HIGH_RATING = 4.0


class FilterType(str, Enum):
    ALL = "all"
    SKILL_MATCH = "skill_match"
    HIGH_RATED = "high_rated"
    AVAILABLE = "available"


def _matches_search(user: UserProfile, text: str) -> bool:
    needle = text.lower()
    return (
        needle in user.name.lower()
        or any(needle in s.lower() for s in user.skills)
        or any(needle in i.lower() for i in user.interests)
    )


def _passes(
    user: UserProfile,
    filter_type: FilterType,
    current_user: UserProfile | None,
) -> bool:
    if filter_type is FilterType.SKILL_MATCH:
        if current_user is None:
            return True
        return bool(set(user.skills) & set(current_user.skills))
    if filter_type is FilterType.HIGH_RATED:
        return user.rating >= HIGH_RATING
    if filter_type is FilterType.AVAILABLE:
        return bool(user.availability)
    return True


def filter_candidates(
    users: list[UserProfile],
    *,
    current_user: UserProfile | None = None,
    search_text: str = "",
    skill: str = "",
    filter_type: FilterType | str = FilterType.ALL,
) -> list[UserProfile]:
    """Apply search, skill and quick filters in that order.  Keeps input order."""
    filter_type = FilterType(filter_type)
    result = list(users)
    if current_user is not None:
        result = [u for u in result if u.id != current_user.id]
    if search_text:
        result = [u for u in result if _matches_search(u, search_text)]
    if skill:
        result = [u for u in result if skill in u.skills]
    return [u for u in result if _passes(u, filter_type, current_user)]


def filter_counts(
    users: list[UserProfile], current_user: UserProfile | None = None,
) -> dict[FilterType, int]:
    return {
        ft: len(filter_candidates(users, current_user=current_user, filter_type=ft))
        for ft in FilterType
    }


def skill_counts(
    users: list[UserProfile], limit: int | None = None,
) -> list[tuple[str, int]]:
    """Most common skills across the pool, by count then name."""
    counts = Counter(s for u in users for s in dict.fromkeys(u.skills))
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:limit] if limit is not None else ranked
