"""Availability sub-score (20% weight).

Fraction of the hours either user has an opinion about where both are free.
"""

from __future__ import annotations

import logging

from src.teammatch.availability import expand_slots
from src.teammatch.models import UserProfile

logger = logging.getLogger(__name__)


def availability_overlap(a: UserProfile, b: UserProfile) -> float:
    """Compute schedule overlap between two users.  [0.0, 1.0]."""
    slots_a = expand_slots(a.availability)
    slots_b = expand_slots(b.availability)

    all_keys = slots_a.keys() | slots_b.keys()
    if not all_keys:
        return 0.0

    both_free = sum(
        1 for key in all_keys if slots_a.get(key) and slots_b.get(key)
    )
    result = both_free / len(all_keys)
    logger.debug(
        "Availability %s<->%s: both_free=%d union=%d -> %.3f",
        a.id, b.id, both_free, len(all_keys), result,
    )
    return result


score = availability_overlap
