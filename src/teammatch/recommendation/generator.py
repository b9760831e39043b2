"""Rule-driven recommendation generator.

Five independent sub-generators read the static tables in ``domain_model``
and their outputs are merged into one ranked list:

  1. teammate archetypes   (complementary skills x pair compatibility)
  2. skill progression     (next skills to learn)
  3. project ideas         (by interest)
  4. events                (skill relevance above the floor)
  5. learning paths        (by skill)

No randomness and no I/O.  A skill or interest missing from a table simply
contributes nothing.
"""

from __future__ import annotations

import logging

from src.teammatch.config import settings
from src.teammatch.domain_model import (
    COMPLEMENTARY_SKILLS,
    EVENTS,
    LEARNING_PATHS,
    PROGRESSION_BASE_SCORE,
    PROJECT_IDEAS,
    SKILL_PROGRESSION,
    event_relevance,
    experience_adjustment,
    pair_compatibility,
    progression_bonus,
    teammate_multiplier,
)
from src.teammatch.models import Recommendation, RecommendationSet, UserProfile

logger = logging.getLogger(__name__)


def _known(keys: list[str], table, limit: int) -> list[str]:
    """First ``limit`` entries of ``keys`` (input order) that the table knows."""
    return [k for k in keys[:limit] if k in table]


def teammate_recommendations(
    skills: list[str], experience: str,
) -> list[Recommendation]:
    recs: list[Recommendation] = []
    multiplier = teammate_multiplier(experience)
    for skill in _known(skills, COMPLEMENTARY_SKILLS, settings.teammate_skill_limit):
        for comp in COMPLEMENTARY_SKILLS[skill][:settings.suggestions_per_key]:
            score = min(pair_compatibility(skill, comp) * multiplier, 1.0)
            recs.append(Recommendation(
                type="teammate",
                title=f"Partner with {comp} Experts",
                description=(
                    f"Find teammates skilled in {comp} to complement your "
                    f"{skill} expertise and create well-rounded projects"
                ),
                score=score,
                reasons=[
                    f"Complementary to your {skill} skills",
                    "High collaboration potential",
                    "Balanced team composition",
                ],
            ))
    return recs


def skill_recommendations(
    skills: list[str], experience: str,
) -> list[Recommendation]:
    recs: list[Recommendation] = []
    score = PROGRESSION_BASE_SCORE * progression_bonus(experience)
    for skill in _known(skills, SKILL_PROGRESSION, settings.progression_skill_limit):
        for next_skill in SKILL_PROGRESSION[skill][:settings.suggestions_per_key]:
            recs.append(Recommendation(
                type="skill",
                title=f"Master {next_skill}",
                description=(
                    f"Take your {skill} expertise to the next level by "
                    f"learning {next_skill}, a natural progression for "
                    f"{experience.lower()} developers"
                ),
                score=score,
                reasons=[
                    f"Natural progression from {skill}",
                    "High industry demand",
                    "Career advancement opportunity",
                ],
            ))
    return recs


def project_recommendations(
    interests: list[str], experience: str,
) -> list[Recommendation]:
    recs: list[Recommendation] = []
    adjustment = experience_adjustment(experience)
    for interest in _known(interests, PROJECT_IDEAS, settings.project_interest_limit):
        title, description, base_score = PROJECT_IDEAS[interest][0]
        recs.append(Recommendation(
            type="project",
            title=title,
            description=description,
            score=min(base_score * adjustment, 1.0),
            reasons=[
                f"Aligns with your {interest} interests",
                "Matches your skill level",
                "Great for portfolio building",
            ],
        ))
    return recs


def event_recommendations(skills: list[str]) -> list[Recommendation]:
    recs: list[Recommendation] = []
    for title, description, event_skills in EVENTS:
        relevance = event_relevance(skills, event_skills)
        if relevance <= settings.event_relevance_floor:
            continue
        recs.append(Recommendation(
            type="event",
            title=title,
            description=description,
            score=relevance,
            reasons=[
                "Relevant to your skills",
                "Great networking opportunity",
                "Learn from industry experts",
            ],
        ))
    return recs


def learning_recommendations(
    skills: list[str], experience: str,
) -> list[Recommendation]:
    recs: list[Recommendation] = []
    adjustment = experience_adjustment(experience)
    for skill in _known(skills, LEARNING_PATHS, settings.learning_skill_limit):
        title, description, base_score = LEARNING_PATHS[skill]
        recs.append(Recommendation(
            type="learning",
            title=title,
            description=description,
            score=min(base_score * adjustment, 1.0),
            reasons=[
                "Structured learning path",
                "Industry-relevant curriculum",
                f"Advance your {skill} expertise",
            ],
        ))
    return recs


def generate_recommendations(
    skills: list[str],
    interests: list[str],
    experience: str,
    role: str,
    top_k: int | None = None,
) -> list[Recommendation]:
    """Rank suggestions from all five sub-generators and keep the top K.

    ``experience`` is matched case-insensitively; an unknown level takes
    each table's neutral multiplier.  Ties keep generation order.
    """
    k = top_k if top_k is not None else settings.recommendation_top_k
    skills = list(skills)
    interests = list(interests)

    recs: list[Recommendation] = []
    recs.extend(teammate_recommendations(skills, experience))
    recs.extend(skill_recommendations(skills, experience))
    recs.extend(project_recommendations(interests, experience))
    recs.extend(event_recommendations(skills))
    recs.extend(learning_recommendations(skills, experience))

    ranked = sorted(recs, key=lambda r: r.score, reverse=True)[:k]
    logger.info(
        "Generated %d recommendations (kept %d) for role=%s experience=%s",
        len(recs), len(ranked), role, experience,
    )
    return ranked


def fallback_recommendations(
    skills: list[str], interests: list[str],
) -> list[Recommendation]:
    """Minimal skill/interest echo used when the main generator fails."""
    recs: list[Recommendation] = []
    for skill in skills[:2]:
        recs.append(Recommendation(
            type="teammate",
            title=f"Find {skill} Collaborators",
            description=f"Connect with other {skill} experts for your projects",
            score=0.85,
            reasons=["Shared expertise", "Collaboration potential"],
        ))
    for interest in interests[:2]:
        recs.append(Recommendation(
            type="project",
            title=f"{interest} Projects",
            description=(
                f"Join exciting {interest} projects that match your interests"
            ),
            score=0.80,
            reasons=["Matches interests", "Skill building"],
        ))
    return recs


def recommend_for(user: UserProfile) -> RecommendationSet:
    """Recommendations for a stored profile, wrapped with an expiry.

    When none of the user's skills or interests are in the knowledge tables
    the simple fallback set is used instead of an empty list.
    """
    recs = generate_recommendations(
        user.skills, user.interests, user.experience, user.role,
    )
    if not recs and (user.skills or user.interests):
        logger.warning(
            "No table matches for %s, using fallback recommendations", user.id,
        )
        recs = fallback_recommendations(user.skills, user.interests)
    return RecommendationSet(
        user_id=user.id,
        recommendations=recs,
        ttl_days=settings.recommendation_ttl_days,
    )
