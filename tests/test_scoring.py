"""Unit tests for the sub-scores, the composite, and match ranking."""

from __future__ import annotations

import pytest

from conftest import make_user, weekday_slots
from src.teammatch.engine import rank_matches, score_pair
from src.teammatch.models import AvailabilitySlot, SubScores, UserProfile
from src.teammatch.scoring import availability, experience, interests, skills
from src.teammatch.scoring.composite import composite_score


def _slot(day: int, start: int, end: int, free: bool = True) -> AvailabilitySlot:
    return AvailabilitySlot(
        day_of_week=day, start_hour=start, end_hour=end, is_available=free,
    )


class TestSkillsScore:
    def test_both_empty(self):
        assert skills.score(make_user("A"), make_user("B")) == 0.0

    def test_shared_only(self):
        a = make_user("A", skills=["Python"])
        b = make_user("B", skills=["Python"])
        assert skills.score(a, b) == pytest.approx(0.6)

    def test_complementary_only(self):
        a = make_user("A", skills=["Frontend Development"])
        b = make_user("B", skills=["Backend Development"])
        assert skills.score(a, b) == pytest.approx(0.4)

    def test_denominator_is_larger_set(self):
        a = make_user("A", skills=["Python"])
        b = make_user("B", skills=["Python", "Cooking", "Knitting", "Chess"])
        assert skills.score(a, b) == pytest.approx(0.6 / 4)

    def test_shared_skills_in_reference_order(self):
        a = make_user("A", skills=["React", "Swift", "Python"])
        b = make_user("B", skills=["Python", "React"])
        assert skills.shared_skills(a, b) == ["React", "Python"]


class TestInterestsScore:
    def test_both_empty(self):
        assert interests.score(make_user("A"), make_user("B")) == 0.0

    def test_identical(self):
        a = make_user("A", interests=["Hackathon", "Design"])
        b = make_user("B", interests=["Design", "Hackathon"])
        assert interests.score(a, b) == 1.0

    def test_half(self):
        a = make_user("A", interests=["Hackathon", "Design"])
        b = make_user("B", interests=["Hackathon"])
        assert interests.score(a, b) == 0.5


class TestExperienceScore:
    @pytest.mark.parametrize(
        "level_a,level_b,expected",
        [
            ("beginner", "beginner", 1.0),
            ("intermediate", "advanced", 0.8),
            ("beginner", "advanced", 0.6),
            ("beginner", "expert", 0.4),
        ],
    )
    def test_distance(self, level_a, level_b, expected):
        a = make_user("A", experience=level_a)
        b = make_user("B", experience=level_b)
        assert experience.score(a, b) == expected


class TestAvailabilityOverlap:
    def test_self_copy_is_one(self):
        a = make_user("A", availability=weekday_slots())
        b = a.model_copy(update={"id": "copy"})
        assert availability.availability_overlap(a, b) == 1.0

    def test_empty_candidate_is_zero(self):
        a = make_user("A", availability=weekday_slots())
        b = make_user("B")
        assert availability.availability_overlap(a, b) == 0.0

    def test_both_empty_is_zero(self):
        assert availability.availability_overlap(make_user("A"), make_user("B")) == 0.0

    def test_partial_overlap(self):
        a = make_user("A", availability=[_slot(1, 9, 17)])
        b = make_user("B", availability=[_slot(1, 13, 21)])
        # union 9..20 = 12 hours, both free 13..16 = 4 hours
        assert availability.availability_overlap(a, b) == pytest.approx(4 / 12)

    def test_unavailable_hours_join_union(self):
        a = make_user("A", availability=[_slot(1, 9, 11)])
        b = make_user("B", availability=[_slot(1, 9, 10), _slot(1, 10, 11, free=False)])
        assert availability.availability_overlap(a, b) == 0.5

    def test_last_write_wins(self):
        a = make_user("A", availability=[_slot(1, 9, 10), _slot(1, 9, 10, free=False)])
        b = make_user("B", availability=[_slot(1, 9, 10)])
        assert availability.availability_overlap(a, b) == 0.0

    def test_unmerged_slots_tolerated(self):
        a = make_user("A", availability=[_slot(1, 9, 12), _slot(1, 12, 17)])
        b = make_user("B", availability=[_slot(1, 9, 17)])
        assert availability.availability_overlap(a, b) == 1.0


class TestCompositeScore:
    def test_zero_scores(self):
        assert composite_score(SubScores()) == 0.0

    def test_perfect_scores(self):
        s = composite_score(
            SubScores(skills=1.0, interests=1.0, experience=1.0, availability=1.0),
        )
        assert s == pytest.approx(1.0)
        assert s <= 1.0

    def test_skills_dominant(self):
        high_skills = SubScores(skills=0.9, interests=0.3, experience=0.2, availability=0.2)
        high_interests = SubScores(skills=0.3, interests=0.9, experience=0.2, availability=0.2)
        assert composite_score(high_skills) > composite_score(high_interests)


class TestScorePair:
    def test_frontend_backend_scenario(self, frontend_user, backend_user):
        result = score_pair(frontend_user, backend_user)
        assert result.shared_skills == []
        assert result.complementary_skills == ["Backend Development"]
        assert result.scores.skills == pytest.approx(0.4)
        assert result.scores.interests == 1.0
        assert result.scores.experience == 1.0
        assert result.availability_overlap == 1.0
        assert result.match_score == pytest.approx(0.76)

    def test_reasons_order(self):
        a = make_user(
            "A", skills=["Frontend Development", "React"], interests=["Hackathon"],
            availability=weekday_slots(),
        )
        b = make_user(
            "B", skills=["React", "Backend Development"], interests=["Hackathon"],
            availability=weekday_slots(),
        )
        assert score_pair(a, b).compatibility_reasons == [
            "Shared skills: React",
            "Common interests: Hackathon",
            "Complementary skills: Backend Development",
            "Same experience: Intermediate",
            "Good schedule compatibility",
        ]

    def test_no_reasons_for_strangers(self):
        a = make_user("A", skills=["Swift"], experience="beginner")
        b = make_user("B", skills=["Cooking"], experience="expert")
        assert score_pair(a, b).compatibility_reasons == []

    def test_half_overlap_is_not_good_schedule(self):
        a = make_user("A", availability=[_slot(1, 9, 11)])
        b = make_user("B", availability=[_slot(1, 9, 10), _slot(1, 10, 11, free=False)])
        reasons = score_pair(a, b).compatibility_reasons
        assert "Good schedule compatibility" not in reasons

    def test_empty_reference_never_fails(self, backend_user):
        result = score_pair(make_user("Empty"), backend_user)
        assert 0.0 <= result.match_score <= 1.0


class TestRankMatches:
    def test_empty_pool(self, frontend_user):
        assert rank_matches(frontend_user, []) == []

    def test_reference_excluded(self, frontend_user, backend_user):
        results = rank_matches(frontend_user, [frontend_user, backend_user])
        assert [r.user.id for r in results] == [backend_user.id]

    def test_sorted_descending(self, frontend_user, backend_user):
        stranger = make_user("Stranger", skills=["Cooking"], experience="expert")
        results = rank_matches(frontend_user, [stranger, backend_user])
        assert [r.user.id for r in results] == [backend_user.id, stranger.id]
        scores = [r.match_score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, frontend_user):
        twin_b = make_user("Twin B", skills=["Backend Development"])
        twin_a = make_user("Twin A", skills=["Backend Development"])
        results = rank_matches(frontend_user, [twin_b, twin_a])
        assert results[0].match_score == results[1].match_score
        assert [r.user.id for r in results] == ["twin-b", "twin-a"]

        results = rank_matches(frontend_user, [twin_a, twin_b])
        assert [r.user.id for r in results] == ["twin-a", "twin-b"]

    def test_scores_bounded(self, frontend_user, backend_user):
        pool = [
            backend_user,
            make_user("Same", skills=["Frontend Development"], interests=["Hackathon"],
                      availability=weekday_slots()),
            make_user("Empty"),
            make_user("Busy", availability=[_slot(0, 0, 24, free=False)]),
        ]
        for r in rank_matches(frontend_user, pool):
            assert 0.0 <= r.match_score <= 1.0


class TestProfileCoercion:
    def test_unknown_experience_defaults_to_beginner(self):
        assert UserProfile(name="X", experience="Guru").experience == "beginner"

    def test_capitalised_experience(self):
        assert UserProfile(name="X", experience="Expert").experience == "expert"

    def test_id_from_name(self):
        assert UserProfile(name="Ada Lovelace").id == "ada-lovelace"
