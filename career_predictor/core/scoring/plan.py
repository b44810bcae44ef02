"""Action plan: recommendations, learning resources and a suggested schedule."""

from dataclasses import dataclass

from career_predictor.core.scoring.types import (
    AssessmentInput,
    Category,
    Recommendation,
    Resource,
    Schedule,
)


def format_hours(hours: float) -> str:
    """Render an hour count without a trailing '.0' (3.0 -> '3', 4.5 -> '4.5')."""
    if float(hours).is_integer():
        return str(int(hours))
    return str(hours)


# =============================================================================
# Recommendations
# =============================================================================

MAINTAIN_MOMENTUM = Recommendation(
    title="Maintain Learning Momentum",
    description="Continue your current learning pace and stay consistent",
    priority="medium",
    timeframe="Ongoing",
)


def generate_recommendations(category: Category, data: AssessmentInput) -> list[Recommendation]:
    """
    Select recommendations for a category.

    High and medium end with the shared momentum item; low gets three
    distinct items instead.
    """
    category = Category(category)

    if category == Category.HIGH:
        return [
            Recommendation(
                title="Network and Build Portfolio",
                description="Start networking in your industry and create impressive portfolio projects",
                priority="high",
                timeframe="Next 2 months",
            ),
            Recommendation(
                title="Apply Strategically",
                description="Begin applying to positions that match your skills and goals",
                priority="high",
                timeframe="Next month",
            ),
            MAINTAIN_MOMENTUM.model_copy(),
        ]

    if category == Category.MEDIUM:
        return [
            Recommendation(
                title="Increase Study Time",
                description=(
                    f"Increase daily study time from {format_hours(data.study_hours)} "
                    "to at least 3 hours"
                ),
                priority="high",
                timeframe="This week",
            ),
            Recommendation(
                title="Improve Consistency",
                description="Establish and stick to a daily learning routine",
                priority="high",
                timeframe="Next 2 weeks",
            ),
            MAINTAIN_MOMENTUM.model_copy(),
        ]

    return [
        Recommendation(
            title="Complete Learning Schedule Overhaul",
            description="Restructure your entire daily schedule to prioritize learning",
            priority="high",
            timeframe="This week",
        ),
        Recommendation(
            title="Set More Realistic Timeline",
            description=(
                f"Consider extending your {data.timeframe} goal to allow for "
                "proper skill development"
            ),
            priority="high",
            timeframe="Immediately",
        ),
        Recommendation(
            title="Find Accountability Partner",
            description="Get someone to help keep you on track with your goals",
            priority="medium",
            timeframe="Next 2 weeks",
        ),
    ]


# =============================================================================
# Resources (keyword rules)
# =============================================================================

BASE_RESOURCES = [
    Resource(
        title="Coursera Professional Certificates",
        type="course",
        description="Industry-recognized certificates for career advancement",
        url="https://coursera.org",
    ),
    Resource(
        title="GitHub Portfolio Development",
        type="practice",
        description="Build and showcase your projects on GitHub",
        url="https://github.com",
    ),
]


@dataclass(frozen=True)
class ResourceRule:
    keywords: tuple[str, ...]
    resource: Resource

    def matches(self, dream_job: str) -> bool:
        text = dream_job.lower()
        return any(keyword in text for keyword in self.keywords)


RESOURCE_RULES: list[ResourceRule] = [
    ResourceRule(
        keywords=("software", "developer", "engineer"),
        resource=Resource(
            title="LeetCode Technical Practice",
            type="practice",
            description="Essential coding practice for technical interviews",
            url="https://leetcode.com",
        ),
    ),
    ResourceRule(
        keywords=("data", "analyst", "scientist"),
        resource=Resource(
            title="Kaggle Data Science Courses",
            type="course",
            description="Hands-on data science learning and competitions",
            url="https://kaggle.com/learn",
        ),
    ),
]


def generate_resources(dream_job: str) -> list[Resource]:
    """Base resources plus one entry per matching keyword rule, in rule order."""
    resources = [r.model_copy() for r in BASE_RESOURCES]
    for rule in RESOURCE_RULES:
        if rule.matches(dream_job):
            resources.append(rule.resource.model_copy())
    return resources


# =============================================================================
# Schedule
# =============================================================================

WEEKLY_TASKS = [
    "Complete 1 major project or assignment",
    "Network with 2-3 industry professionals",
    "Review and adjust learning plan",
    "Skills assessment and gap analysis",
]

MONTHLY_TASKS = [
    "Complete a certification or major course",
    "Update portfolio and resume",
    "Conduct mock interviews",
    "Reassess goals and timeline",
]


def generate_schedule(data: AssessmentInput) -> Schedule:
    recommended_study_hours = max(3, data.study_hours + 1)
    return Schedule(
        daily=[
            f"Focused learning: {format_hours(recommended_study_hours)} hours",
            "Practice/project work: 1 hour",
            "Industry reading: 30 minutes",
            "Progress review: 15 minutes",
        ],
        weekly=list(WEEKLY_TASKS),
        monthly=list(MONTHLY_TASKS),
    )
