"""Top-level orchestrator: ties all components together.

Pipeline:
  1. Load / receive user profiles
  2. Score every candidate against the reference user on four sub-scores
  3. Combine into a weighted match score, rank (stable, descending)
  4. Attach compatibility reasons
  5. Optionally build one briefing per user with top-K matches and
     recommendations
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

from src.teammatch.config import settings
from src.teammatch.domain_model import complementary_skills
from src.teammatch.explanation.reasons import build_reasons
from src.teammatch.models import MatchBriefing, MatchResult, SubScores, UserProfile
from src.teammatch.recommendation.generator import generate_recommendations
from src.teammatch.scoring import availability, experience, interests, skills
from src.teammatch.scoring.composite import composite_score

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def load_sample_users() -> list[UserProfile]:
    path = DATA_DIR / "sample_users.json"
    with open(path) as f:
        raw = json.load(f)
    return [UserProfile(**u) for u in raw]


def load_users_from_json(data: list[dict]) -> list[UserProfile]:
    return [UserProfile(**u) for u in data]


def score_pair(reference: UserProfile, candidate: UserProfile) -> MatchResult:
    """Score one candidate from the reference user's perspective."""
    overlap = availability.availability_overlap(reference, candidate)
    sub_scores = SubScores(
        skills=skills.score(reference, candidate),
        interests=interests.score(reference, candidate),
        experience=experience.score(reference, candidate),
        availability=overlap,
    )
    shared = skills.shared_skills(reference, candidate)
    complementary = complementary_skills(reference.skills, candidate.skills)
    reasons = build_reasons(
        reference, candidate,
        shared=shared,
        interests=interests.common_interests(reference, candidate),
        complementary=complementary,
        availability=overlap,
    )
    match_score = composite_score(sub_scores)
    logger.debug(
        "Match %s->%s: skills=%.3f interests=%.3f experience=%.3f "
        "availability=%.3f -> %.3f",
        reference.id, candidate.id, sub_scores.skills, sub_scores.interests,
        sub_scores.experience, sub_scores.availability, match_score,
    )
    return MatchResult(
        user=candidate,
        match_score=match_score,
        compatibility_reasons=reasons,
        shared_skills=shared,
        complementary_skills=complementary,
        availability_overlap=overlap,
        scores=sub_scores,
    )


def rank_matches(
    reference: UserProfile, candidates: list[UserProfile],
) -> list[MatchResult]:
    """Rank a candidate pool against the reference user.

    The reference user is dropped from the pool by id.  Sorting is stable,
    so equal scores keep their input order.
    """
    results = [
        score_pair(reference, c) for c in candidates if c.id != reference.id
    ]
    results.sort(key=lambda r: r.match_score, reverse=True)
    return results


def run(
    users: list[UserProfile],
    top_k: int | None = None,
    include_recommendations: bool = True,
    progress_callback: Callable[[str, float], None] | None = None,
) -> list[MatchBriefing]:
    k = top_k or settings.match_top_k
    n = len(users)

    def _progress(label: str, frac: float) -> None:
        if progress_callback:
            progress_callback(label, frac)

    briefings: list[MatchBriefing] = []
    for i, user in enumerate(users):
        _progress("Ranking matches...", i / n)
        matches = rank_matches(user, users)[:k]
        recs = []
        if include_recommendations:
            recs = generate_recommendations(
                user.skills, user.interests, user.experience, user.role,
            )
        briefings.append(MatchBriefing(
            user_id=user.id,
            user_name=user.name,
            matches=matches,
            recommendations=recs,
        ))

    _progress("Complete", 1.0)
    logger.info(
        "Pipeline complete: %d users, %d pairs scored, %d briefings "
        "(recommendations=%s)",
        n, n * max(n - 1, 0), len(briefings),
        "on" if include_recommendations else "off",
    )
    return briefings
