"""Deterministic domain model: the hand-authored knowledge tables.

Every table is read-only module data.  Scorer and recommendation generator
share the complementary-skills map so that match explanations and teammate
suggestions agree.  Swap these tables to retarget the engine at a different
community (design studio, research lab, ...).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from src.teammatch.models import EXPERIENCE_LEVELS

# ---------------------------------------------------------------------------
# Layer 1: Complementary skills
# ---------------------------------------------------------------------------

COMPLEMENTARY_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Frontend Development": ("Backend Development", "UI/UX Design"),
    "Backend Development": (
        "Frontend Development", "DevOps", "Database Design", "API Design",
    ),
    "UI/UX Design": (
        "Frontend Development", "User Research", "Swift", "React",
    ),
    "iOS Development": ("Backend Development", "UI/UX Design"),
    "Data Science": (
        "Machine Learning", "Statistics", "Business Analysis", "Visualization",
    ),
    "Machine Learning": ("Data Science", "Python", "Statistics", "Research"),
    "Project Management": (
        "Communication", "Leadership", "Technical Writing",
        "Business Analysis", "Marketing", "Strategy",
    ),
    "Swift": (
        "UI/UX Design", "Backend Development", "Product Management",
        "Quality Assurance",
    ),
    "Python": ("Data Science", "Machine Learning", "Web Development", "DevOps"),
    "React": (
        "Backend Development", "UI/UX Design", "Mobile Development", "Testing",
    ),
    "JavaScript": ("Backend Development", "UI/UX Design", "Testing", "DevOps"),
    "DevOps": ("Backend Development", "Cloud Computing", "Security", "Monitoring"),
    "Mobile Development": (
        "UI/UX Design", "Backend Development", "Testing", "Analytics",
    ),
})


def complementary_skills(
    skills_a: Iterable[str], skills_b: Iterable[str],
) -> list[str]:
    """Skills of B that pair well with a skill A already has.

    Directional (A -> B).  Ordered by A's skills, then table order, with
    duplicates collapsed.
    """
    have_b = set(skills_b)
    found: list[str] = []
    seen: set[str] = set()
    for skill in dict.fromkeys(skills_a):
        for comp in COMPLEMENTARY_SKILLS.get(skill, ()):
            if comp in have_b and comp not in seen:
                seen.add(comp)
                found.append(comp)
    return found


# ---------------------------------------------------------------------------
# Layer 2: Experience scale
# ---------------------------------------------------------------------------

_LEVEL_INDEX: Mapping[str, int] = MappingProxyType(
    {level: idx for idx, level in enumerate(EXPERIENCE_LEVELS)}
)

_DISTANCE_SCORES: tuple[float, ...] = (1.0, 0.8, 0.6, 0.4)
_DISTANCE_DEFAULT = 0.2


def experience_index(level: str) -> int:
    return _LEVEL_INDEX.get(level.lower(), 0)


def experience_distance_score(level_a: str, level_b: str) -> float:
    distance = abs(experience_index(level_a) - experience_index(level_b))
    if distance < len(_DISTANCE_SCORES):
        return _DISTANCE_SCORES[distance]
    return _DISTANCE_DEFAULT


TEAMMATE_MULTIPLIER: Mapping[str, float] = MappingProxyType({
    "beginner": 0.95, "intermediate": 1.0, "advanced": 1.05, "expert": 1.1,
})
TEAMMATE_MULTIPLIER_DEFAULT = 1.0

# Lower for senior users: they have usually met the next topics already.
PROGRESSION_BONUS: Mapping[str, float] = MappingProxyType({
    "beginner": 0.95, "intermediate": 0.90, "advanced": 0.85, "expert": 0.80,
})
PROGRESSION_BONUS_DEFAULT = 0.85
PROGRESSION_BASE_SCORE = 0.85

EXPERIENCE_ADJUSTMENT: Mapping[str, float] = MappingProxyType({
    "beginner": 1.1, "intermediate": 1.05, "advanced": 1.0, "expert": 0.95,
})
EXPERIENCE_ADJUSTMENT_DEFAULT = 1.0


def _level_lookup(table: Mapping[str, float], level: str, default: float) -> float:
    return table.get(level.strip().lower(), default)


def teammate_multiplier(level: str) -> float:
    return _level_lookup(TEAMMATE_MULTIPLIER, level, TEAMMATE_MULTIPLIER_DEFAULT)


def progression_bonus(level: str) -> float:
    return _level_lookup(PROGRESSION_BONUS, level, PROGRESSION_BONUS_DEFAULT)


def experience_adjustment(level: str) -> float:
    return _level_lookup(EXPERIENCE_ADJUSTMENT, level, EXPERIENCE_ADJUSTMENT_DEFAULT)


# ---------------------------------------------------------------------------
# Layer 3: Teammate pair compatibility
# ---------------------------------------------------------------------------

BASE_COMPATIBILITY: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "Swift": MappingProxyType({
        "UI/UX Design": 0.95, "Backend Development": 0.90,
        "Product Management": 0.85,
    }),
    "UI/UX Design": MappingProxyType({
        "Frontend Development": 0.93, "User Research": 0.90,
        "Product Management": 0.88,
    }),
    "Backend Development": MappingProxyType({
        "Frontend Development": 0.92, "DevOps": 0.89, "Database Design": 0.87,
    }),
    "Machine Learning": MappingProxyType({
        "Data Science": 0.94, "Python": 0.91, "Statistics": 0.88,
    }),
    "Python": MappingProxyType({
        "Data Science": 0.90, "Machine Learning": 0.88,
        "Backend Development": 0.85,
    }),
})
BASE_COMPATIBILITY_DEFAULT = 0.80


def pair_compatibility(skill: str, complementary_skill: str) -> float:
    return BASE_COMPATIBILITY.get(skill, {}).get(
        complementary_skill, BASE_COMPATIBILITY_DEFAULT,
    )


# ---------------------------------------------------------------------------
# Layer 4: Knowledge tables for suggestions
# ---------------------------------------------------------------------------

SKILL_PROGRESSION: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Swift": ("SwiftUI", "Combine", "Core Data", "ARKit", "CloudKit"),
    "UI/UX Design": (
        "Figma Advanced", "Design Systems", "User Research", "Prototyping",
        "Accessibility",
    ),
    "Python": ("Django", "FastAPI", "TensorFlow", "Docker", "AWS"),
    "React": ("Next.js", "TypeScript", "React Native", "GraphQL", "Redux"),
    "JavaScript": ("Node.js", "TypeScript", "Vue.js", "Express", "MongoDB"),
    "Machine Learning": (
        "Deep Learning", "MLOps", "Computer Vision", "NLP", "PyTorch",
    ),
    "Backend Development": (
        "Microservices", "GraphQL", "Docker", "Kubernetes", "API Design",
    ),
    "Frontend Development": (
        "TypeScript", "Progressive Web Apps", "Testing",
        "Performance Optimization",
    ),
    "Mobile Development": (
        "React Native", "Flutter", "Kotlin", "iOS", "Cross-platform",
    ),
})

# interest -> ((title, description, base_score), ...)
PROJECT_IDEAS: Mapping[str, tuple[tuple[str, str, float], ...]] = MappingProxyType({
    "Hackathon": (
        ("AI-Powered Sustainability Challenge",
         "24-hour hackathon focused on environmental solutions using AI and "
         "machine learning", 0.90),
        ("Mobile Health Innovation Contest",
         "Develop mobile applications that improve healthcare accessibility",
         0.85),
        ("Fintech Disruption Hackathon",
         "Create innovative financial technology solutions", 0.80),
    ),
    "Mobile Development": (
        ("Cross-Platform Social App",
         "Build a social networking application using modern mobile "
         "frameworks", 0.88),
        ("AR Shopping Experience",
         "Create an augmented reality application for retail", 0.85),
        ("Fitness Tracking Ecosystem",
         "Develop a comprehensive health and fitness mobile platform", 0.82),
    ),
    "Web Development": (
        ("Developer Community Platform",
         "Build a collaborative platform for developers to share projects "
         "and connect", 0.90),
        ("Real-time Collaboration Suite",
         "Create a comprehensive team productivity and collaboration tool",
         0.87),
        ("E-commerce Analytics Dashboard",
         "Develop advanced analytics and business intelligence platform",
         0.84),
    ),
    "AI/ML": (
        ("Computer Vision for Accessibility",
         "AI system to help visually impaired users navigate", 0.92),
        ("Natural Language Processing Tool",
         "Smart text analysis and generation platform", 0.89),
        ("Predictive Analytics Platform",
         "Business intelligence tool with machine learning", 0.86),
    ),
    "Design": (
        ("Design System Framework",
         "Create comprehensive design system for developers", 0.88),
        ("User Experience Research Tool",
         "Platform for conducting and analyzing UX research", 0.85),
        ("Accessibility Design Checker",
         "Tool to ensure digital accessibility compliance", 0.83),
    ),
})

# (title, description, relevant skills)
EVENTS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("iOS Developer Meetup",
     "Connect with local iOS developers and learn about latest Swift "
     "developments",
     ("Swift", "Mobile Development")),
    ("AI/ML Workshop Series",
     "Hands-on workshops covering machine learning and artificial "
     "intelligence",
     ("Machine Learning", "Python", "AI/ML")),
    ("UX Design Conference",
     "Learn from industry leaders about user experience and design thinking",
     ("UI/UX Design", "Design")),
    ("Startup Pitch Competition",
     "Present your ideas and connect with entrepreneurs and investors",
     ("Business", "Entrepreneurship")),
    ("Open Source Contribution Day",
     "Learn how to contribute to open source projects and collaborate with "
     "global developers",
     ("Programming", "Collaboration")),
    ("Web Development Bootcamp",
     "Intensive workshop on modern web development techniques",
     ("Web Development", "JavaScript", "React")),
)

# skill -> (title, description, base_score)
LEARNING_PATHS: Mapping[str, tuple[str, str, float]] = MappingProxyType({
    "Swift": ("iOS Development Mastery",
              "Comprehensive path from beginner to advanced iOS development",
              0.90),
    "Python": ("Full-Stack Python Development",
               "Master backend development, data science, and automation",
               0.88),
    "React": ("Modern Frontend Engineering",
              "Advanced React patterns, performance optimization, and "
              "ecosystem", 0.86),
    "UI/UX Design": ("User-Centered Design Systems",
                     "Learn design thinking, research methods, and system "
                     "design", 0.89),
    "Machine Learning": ("AI/ML Engineering Track",
                         "From fundamentals to production ML systems", 0.92),
    "Backend Development": ("Scalable Systems Architecture",
                            "Design and build high-performance backend "
                            "systems", 0.87),
    "DevOps": ("Cloud Infrastructure Mastery",
               "Container orchestration, CI/CD, and cloud platforms", 0.85),
})


def event_relevance(user_skills: list[str], event_skills: Iterable[str]) -> float:
    event_skills = tuple(event_skills)
    matched = sum(1 for s in user_skills if s in event_skills)
    max_matches = min(len(user_skills), len(event_skills))
    if matched == 0 or max_matches == 0:
        return 0.6
    return min(0.6 + 0.4 * (matched / max_matches), 1.0)
