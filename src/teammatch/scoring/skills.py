"""Skills sub-score (40% weight).

Two signals over the larger of the two skill sets:
  - shared skills          60%
  - complementary skills   40%  (directional, reference -> candidate)
"""

from __future__ import annotations

import logging

from src.teammatch.config import settings
from src.teammatch.domain_model import complementary_skills
from src.teammatch.models import UserProfile

logger = logging.getLogger(__name__)


def shared_skills(a: UserProfile, b: UserProfile) -> list[str]:
    """Skills both users list, in A's order."""
    have_b = set(b.skills)
    return [s for s in dict.fromkeys(a.skills) if s in have_b]


def score(a: UserProfile, b: UserProfile) -> float:
    """Compute skills compatibility for A's perspective on B.  [0.0, 1.0]."""
    skills_a = set(a.skills)
    skills_b = set(b.skills)
    denom = max(len(skills_a), len(skills_b))
    if denom == 0:
        return 0.0

    weights = settings.skills_weights
    shared = len(skills_a & skills_b)
    complementary = len(complementary_skills(a.skills, b.skills))
    result = (
        weights.shared * shared / denom
        + weights.complementary * complementary / denom
    )
    logger.debug(
        "Skills %s->%s: shared=%d complementary=%d denom=%d -> %.3f",
        a.id, b.id, shared, complementary, denom, result,
    )
    return result
