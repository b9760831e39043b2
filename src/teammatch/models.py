"""Pydantic v2 data models: the value objects flowing through the engine."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

ExperienceLevel = Literal["beginner", "intermediate", "advanced", "expert"]

RecommendationType = Literal["teammate", "skill", "project", "event", "learning"]

EXPERIENCE_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced", "expert")
RECOMMENDATION_TYPES: tuple[str, ...] = ("teammate", "skill", "project", "event", "learning")

DAY_NAMES: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

SlotKey = tuple[int, int]  # (day_of_week, hour)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _slugify(name: str) -> str:
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[\s]+", "-", slug)
    return slug


def normalize_experience(value: Any) -> str:
    """Lower-case a level label; unknown values become ``beginner``."""
    if isinstance(value, str):
        level = value.strip().lower()
        if level in EXPERIENCE_LEVELS:
            return level
    return "beginner"


def normalize_recommendation_type(value: Any) -> str:
    if isinstance(value, str):
        kind = value.strip().lower()
        if kind in RECOMMENDATION_TYPES:
            return kind
    return "teammate"


# ---------------------------------------------------------------------------
# User profile
# ---------------------------------------------------------------------------

class AvailabilitySlot(BaseModel):
    """Half-open ``[start_hour, end_hour)`` range on one weekday (0 = Sunday)."""

    model_config = {"frozen": True}

    day_of_week: int = Field(ge=0, le=6)
    start_hour: int = Field(ge=0, le=24)
    end_hour: int = Field(ge=0, le=24)
    is_available: bool = True

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]

    def hours(self) -> range:
        return range(self.start_hour, self.end_hour)


class UserProfile(BaseModel):
    id: str | None = None
    name: str
    email: str = ""
    bio: str = ""
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    availability: list[AvailabilitySlot] = Field(default_factory=list)
    location: str = ""
    experience: ExperienceLevel = "beginner"
    role: str = "developer"
    completed_projects: int = 0
    rating: float = 5.0

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, value: Any) -> str:
        return normalize_experience(value)

    @model_validator(mode="after")
    def _normalize_fields(self) -> UserProfile:
        if not self.id:
            self.id = _slugify(self.name)
        return self


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class SubScores(BaseModel):
    skills: float = 0.0
    interests: float = 0.0
    experience: float = 0.0
    availability: float = 0.0


class MatchResult(BaseModel):
    user: UserProfile
    match_score: float = 0.0
    compatibility_reasons: list[str] = Field(default_factory=list)
    shared_skills: list[str] = Field(default_factory=list)
    complementary_skills: list[str] = Field(default_factory=list)
    availability_overlap: float = 0.0
    scores: SubScores = Field(default_factory=SubScores)


class Recommendation(BaseModel):
    type: RecommendationType = "teammate"
    title: str
    description: str = ""
    score: float = 0.0
    reasons: list[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        return normalize_recommendation_type(value)


class RecommendationSet(BaseModel):
    """Recommendations generated for one user, with a cache expiry."""

    user_id: str
    recommendations: list[Recommendation] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: datetime | None = None
    ttl_days: int = Field(default=7, ge=0, exclude=True)

    @model_validator(mode="after")
    def _set_expiry(self) -> RecommendationSet:
        if self.expires_at is None:
            self.expires_at = self.generated_at + timedelta(days=self.ttl_days)
        return self

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


class MatchBriefing(BaseModel):
    user_id: str
    user_name: str
    matches: list[MatchResult] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
