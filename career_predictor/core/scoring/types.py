"""Pydantic models for the success prediction engine.

Wire format is camelCase JSON (``studyHours``, ``dreamJob``...); attributes
are snake_case and populated by either name.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Enums
# =============================================================================


class LearningStyle(str, Enum):
    """Preferred way of learning, chosen on the skills step."""

    VISUAL = "visual"
    HANDS_ON = "hands-on"
    STRUCTURED = "structured"
    SOCIAL = "social"
    MIXED = "mixed"


class Timeframe(str, Enum):
    """Target horizon for reaching the dream job."""

    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"
    TWO_YEARS = "2years"
    THREE_YEARS = "3years"
    FIVE_YEARS = "5years"


class Category(str, Enum):
    """Coarse classification of the success probability."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


Priority = Literal["high", "medium", "low"]
ResourceType = Literal["course", "book", "practice", "tool"]


# =============================================================================
# Input
# =============================================================================


class AssessmentInput(_CamelModel):
    """Self-reported habits and goals collected by the questionnaire."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Personal information
    name: str
    age: str = Field(..., description="Age as entered (numeric text)")
    current_role: str

    # Daily habits, hours per day
    study_hours: float = Field(..., ge=0)
    sleep_hours: float = Field(..., ge=0)
    exercise_hours: float = Field(..., ge=0)
    recreation_hours: float = Field(..., ge=0)
    work_hours: float = Field(..., ge=0)

    # Learning & skills
    current_skills: str
    learning_style: LearningStyle
    motivation: int = Field(..., ge=1, le=10)
    consistency: int = Field(..., ge=1, le=10)

    # Career goals
    dream_job: str
    timeframe: str = Field(
        ..., min_length=1, description="Normally a Timeframe value; others adjust the score by 0"
    )
    previous_experience: str
    future_learning_plan: str
    challenges: str = ""


# =============================================================================
# Output
# =============================================================================


class Recommendation(_CamelModel):
    """An actionable next step."""

    title: str
    description: str
    priority: Priority
    timeframe: str


class Resource(_CamelModel):
    """A learning resource suggestion."""

    title: str
    type: ResourceType
    description: str
    url: str


class Schedule(_CamelModel):
    """Suggested routine at three cadences."""

    daily: list[str]
    weekly: list[str]
    monthly: list[str]


class PredictionResult(_CamelModel):
    """Complete prediction for one assessment.

    ``reality_check`` is only set for the low category; serialize with
    ``exclude_none=True`` so the key is omitted otherwise.
    """

    success_probability: int = Field(..., ge=15, le=95)
    category: Category
    strengths: list[str] = Field(..., min_length=1)
    weaknesses: list[str] = Field(..., min_length=1)
    recommendations: list[Recommendation]
    resources: list[Resource]
    schedule: Schedule
    motivational_message: str
    reality_check: str | None = None


# =============================================================================
# Breakdown
# =============================================================================


class FactorContribution(_CamelModel):
    """How much one weighted factor moved the score."""

    factor: str = Field(..., description="Factor key (e.g., 'study_hours')")
    value: float | str = Field(..., description="Input value the rule was applied to")
    weight: float
    contribution: float = Field(..., description="base_delta * weight * 100")


class ScoreBreakdown(_CamelModel):
    """Per-factor explanation of a success probability."""

    base: float
    factors: list[FactorContribution]
    raw_score: float = Field(..., description="Base plus all contributions, before clamping")
    success_probability: int = Field(..., ge=15, le=95)
    category: Category
