"""Weighted scoring factors.

Each factor maps one aspect of an assessment to a base delta. The delta is
scaled as ``base_delta * weight * 100`` and added to a base score of 50, in
table order. The final score is clamped to [15, 95].

Factor weights (sum to 1.0):
- Study hours (20%)
- Sleep hours (15%)
- Exercise hours (10%)
- Recreation balance (10%)
- Motivation (12.5%) and consistency (12.5%)
- Previous experience (7.5%) and future learning plan (7.5%)
- Timeframe realism (5%); timeframes outside the known table adjust by 0

Text lengths are counted in UTF-16 code units (see ``text_length``).
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

from career_predictor.core.scoring.types import (
    AssessmentInput,
    Category,
    FactorContribution,
    ScoreBreakdown,
    Timeframe,
)

# =============================================================================
# Constants
# =============================================================================

BASE_SCORE = 50
MIN_SCORE = 15
MAX_SCORE = 95

HIGH_THRESHOLD = 75
MEDIUM_THRESHOLD = 50

TIMEFRAME_ADJUSTMENTS = {
    Timeframe.SIX_MONTHS.value: -20,
    Timeframe.ONE_YEAR.value: 10,
    Timeframe.TWO_YEARS.value: 15,
    Timeframe.THREE_YEARS.value: 10,
    Timeframe.FIVE_YEARS.value: 0,
}


# =============================================================================
# Factor rules (base deltas, before weighting)
# =============================================================================


def _study_delta(hours: float) -> float:
    if hours >= 4:
        return 25
    if hours >= 2:
        return 15
    if hours >= 1:
        return 5
    return -10


def _sleep_delta(hours: float) -> float:
    if 7 <= hours <= 9:
        return 20
    if 6 <= hours <= 10:
        return 10
    return -15


def _exercise_delta(hours: float) -> float:
    return 15 if hours >= 1 else -5


def _recreation_delta(hours: float) -> float:
    if 1 <= hours <= 4:
        return 10
    if hours > 6:
        return -15
    return 0


def _drive_delta(rating: int) -> float:
    """Motivation and consistency both center on 5 on a 1-10 scale."""
    return (rating - 5) * 4


def text_length(text: str) -> int:
    """
    Length of free text in UTF-16 code units.

    Browser clients measure answers this way, so a character outside the
    Basic Multilingual Plane (most emoji) counts as 2, not 1.
    """
    return len(text.encode("utf-16-le")) // 2


def _text_depth_delta(length: int) -> float:
    if length > 100:
        return 20
    if length > 50:
        return 10
    return 0


def _timeframe_delta(timeframe: str) -> float:
    return TIMEFRAME_ADJUSTMENTS.get(timeframe, 0)


# =============================================================================
# Factor table (declarative)
# =============================================================================


@dataclass(frozen=True)
class Factor:
    key: str
    weight: float
    value: Callable[[AssessmentInput], float | str]
    delta: Callable[[float | str], float]

    def contribution(self, data: AssessmentInput) -> float:
        return self.delta(self.value(data)) * self.weight * 100


FACTORS: list[Factor] = [
    Factor("study_hours", 0.2, lambda d: d.study_hours, _study_delta),
    Factor("sleep_hours", 0.15, lambda d: d.sleep_hours, _sleep_delta),
    Factor("exercise_hours", 0.1, lambda d: d.exercise_hours, _exercise_delta),
    Factor("recreation_hours", 0.1, lambda d: d.recreation_hours, _recreation_delta),
    Factor("motivation", 0.125, lambda d: d.motivation, _drive_delta),
    Factor("consistency", 0.125, lambda d: d.consistency, _drive_delta),
    Factor("previous_experience", 0.075, lambda d: text_length(d.previous_experience), _text_depth_delta),
    Factor("future_learning_plan", 0.075, lambda d: text_length(d.future_learning_plan), _text_depth_delta),
    Factor("timeframe", 0.05, lambda d: d.timeframe, _timeframe_delta),
]


# =============================================================================
# Score computation (pure)
# =============================================================================


def raw_score(data: AssessmentInput) -> float:
    """Base score plus every factor contribution, unclamped."""
    score = BASE_SCORE
    for factor in FACTORS:
        score += factor.contribution(data)
    return score


def clamp_score(score: float) -> float:
    """Clamp a raw score into the realistic [15, 95] range."""
    return max(MIN_SCORE, min(MAX_SCORE, score))


def categorize(score: float) -> Category:
    """Map a clamped score to its category."""
    if score >= HIGH_THRESHOLD:
        return Category.HIGH
    if score >= MEDIUM_THRESHOLD:
        return Category.MEDIUM
    return Category.LOW


def round_half_up(score: float) -> int:
    return int(math.floor(score + 0.5))


def compute_score(data: AssessmentInput) -> tuple[int, Category]:
    """
    Compute the success probability and category for an assessment.

    The category is taken from the clamped score before rounding.

    Returns:
        (success_probability, category)
    """
    clamped = clamp_score(raw_score(data))
    return round_half_up(clamped), categorize(clamped)


def score_breakdown(data: AssessmentInput) -> ScoreBreakdown:
    """
    Explain a success probability factor by factor.

    Uses the same factor table as ``compute_score``, so the breakdown always
    agrees with the prediction for the same input.
    """
    contributions = []
    score = BASE_SCORE
    for factor in FACTORS:
        amount = factor.contribution(data)
        score += amount
        contributions.append(
            FactorContribution(
                factor=factor.key,
                value=factor.value(data),
                weight=factor.weight,
                contribution=amount,
            )
        )

    clamped = clamp_score(score)
    return ScoreBreakdown(
        base=BASE_SCORE,
        factors=contributions,
        raw_score=score,
        success_probability=round_half_up(clamped),
        category=categorize(clamped),
    )
