"""Shared builders for in-memory user profiles."""

from __future__ import annotations

import pytest

from src.teammatch.models import AvailabilitySlot, UserProfile


def make_user(
    name: str,
    skills: list[str] | None = None,
    interests: list[str] | None = None,
    experience: str = "intermediate",
    availability: list[AvailabilitySlot] | None = None,
    id: str | None = None,
    rating: float = 5.0,
) -> UserProfile:
    return UserProfile(
        id=id,
        name=name,
        skills=skills or [],
        interests=interests or [],
        experience=experience,
        availability=availability or [],
        rating=rating,
    )


def weekday_slots(start: int = 9, end: int = 17) -> list[AvailabilitySlot]:
    return [
        AvailabilitySlot(day_of_week=d, start_hour=start, end_hour=end)
        for d in range(1, 6)
    ]


@pytest.fixture
def frontend_user() -> UserProfile:
    return make_user(
        "Reference",
        skills=["Frontend Development"],
        interests=["Hackathon"],
        availability=weekday_slots(),
    )


@pytest.fixture
def backend_user() -> UserProfile:
    return make_user(
        "Candidate",
        skills=["Backend Development"],
        interests=["Hackathon"],
        availability=weekday_slots(),
    )
