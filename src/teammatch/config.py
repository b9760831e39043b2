"""Configuration: weights, thresholds, result limits."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class MatchWeights(BaseModel):
    skills: float = Field(default=0.40, ge=0.0, le=1.0)
    interests: float = Field(default=0.25, ge=0.0, le=1.0)
    experience: float = Field(default=0.15, ge=0.0, le=1.0)
    availability: float = Field(default=0.20, ge=0.0, le=1.0)


class SkillsWeights(BaseModel):
    shared: float = 0.60
    complementary: float = 0.40


class Settings(BaseSettings):
    match_weights: MatchWeights = MatchWeights()
    skills_weights: SkillsWeights = SkillsWeights()

    good_schedule_threshold: float = 0.5
    event_relevance_floor: float = 0.6

    teammate_skill_limit: int = 3
    progression_skill_limit: int = 2
    project_interest_limit: int = 2
    learning_skill_limit: int = 2
    suggestions_per_key: int = 2

    recommendation_top_k: int = 8
    recommendation_ttl_days: int = 7
    match_top_k: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
