"""Strengths, weaknesses and messages derived from an assessment.

Strengths and weaknesses are fixed ordered checklists of independent
predicates. Every predicate is evaluated; the triggered phrases are kept in
checklist order. An empty result is replaced by a single fallback phrase.
"""

from collections.abc import Callable

from career_predictor.core.scoring.factors import text_length
from career_predictor.core.scoring.types import AssessmentInput, Category

Check = tuple[Callable[[AssessmentInput], bool], str]

DEFAULT_STRENGTH = "Willingness to learn and improve"
DEFAULT_WEAKNESS = "Areas for minor improvements"


# =============================================================================
# Checklists
# =============================================================================

STRENGTH_CHECKS: list[Check] = [
    (lambda d: d.motivation >= 8, "Exceptionally high motivation level"),
    (lambda d: 6 <= d.motivation < 8, "Good motivation and drive"),
    (lambda d: d.consistency >= 8, "Excellent learning consistency"),
    (lambda d: 6 <= d.consistency < 8, "Decent learning routine"),
    (lambda d: d.study_hours >= 3, "Dedicated study time allocation"),
    (lambda d: 7 <= d.sleep_hours <= 9, "Healthy sleep patterns"),
    (lambda d: d.exercise_hours >= 1, "Regular physical activity"),
    (lambda d: text_length(d.previous_experience) > 50, "Relevant background experience"),
    (lambda d: text_length(d.future_learning_plan) > 50, "Well-thought-out learning plan"),
]

WEAKNESS_CHECKS: list[Check] = [
    (lambda d: d.study_hours < 2, "Limited daily study time"),
    (lambda d: d.sleep_hours < 7, "Insufficient sleep affecting performance"),
    (lambda d: d.sleep_hours > 9, "Excessive sleep reducing productive hours"),
    (lambda d: d.recreation_hours > 6, "High recreational time reducing focus"),
    (lambda d: d.exercise_hours < 0.5, "Lack of physical activity affecting energy"),
    (lambda d: d.motivation < 6, "Low motivation levels"),
    (lambda d: d.consistency < 6, "Inconsistent learning habits"),
    (lambda d: text_length(d.previous_experience) < 30, "Limited relevant experience"),
    (lambda d: text_length(d.future_learning_plan) < 30, "Vague future learning plans"),
]


def _run_checklist(data: AssessmentInput, checks: list[Check], fallback: str) -> list[str]:
    triggered = [phrase for predicate, phrase in checks if predicate(data)]
    return triggered or [fallback]


def generate_strengths(data: AssessmentInput) -> list[str]:
    """Ordered strengths; never empty."""
    return _run_checklist(data, STRENGTH_CHECKS, DEFAULT_STRENGTH)


def generate_weaknesses(data: AssessmentInput) -> list[str]:
    """Ordered weaknesses; never empty."""
    return _run_checklist(data, WEAKNESS_CHECKS, DEFAULT_WEAKNESS)


# =============================================================================
# Messages
# =============================================================================

MOTIVATIONAL_TEMPLATES = {
    Category.HIGH: (
        "Outstanding work, {name}! 🌟 Your dedication and structured approach show "
        "you're truly committed to achieving your goals. You're on the right path - "
        "keep pushing forward with confidence!"
    ),
    Category.MEDIUM: (
        "Great progress, {name}! 💪 You're building good habits and showing real "
        "potential. With some focused improvements and consistency, you'll "
        "significantly boost your chances of success!"
    ),
    Category.LOW: (
        "{name}, every expert was once a beginner! 🚀 Your journey starts with "
        "recognizing where you are and taking action. The fact that you're here "
        "shows you're ready to change - let's build that future together!"
    ),
}

REALITY_CHECK_TEMPLATE = (
    "Based on your current habits and the {timeframe} timeline for achieving "
    "{dream_job}, there are some significant challenges ahead. This isn't meant "
    "to discourage you - it's meant to help you succeed. Consider the "
    "recommendations below as your roadmap to transformation. Remember, many "
    "successful people had to completely restructure their approach before "
    "achieving their goals."
)


def generate_motivational_message(category: Category, name: str) -> str:
    return MOTIVATIONAL_TEMPLATES[Category(category)].format(name=name)


def generate_reality_check(data: AssessmentInput) -> str:
    """Cautionary note for low-category predictions."""
    return REALITY_CHECK_TEMPLATE.format(
        timeframe=data.timeframe,
        dream_job=data.dream_job,
    )
