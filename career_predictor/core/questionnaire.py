"""Caller-side validation contract for the assessment questionnaire.

The questionnaire is collected in four steps. A caller may only advance past
a step once that step's required fields are filled in. The prediction engine
assumes this has happened; the HTTP boundary re-checks only the fields it
cannot work without (name, dream job, timeframe), and only for absence.

Field names are the camelCase wire names.
"""

from dataclasses import dataclass
from typing import Any

# =============================================================================
# Steps (declarative)
# =============================================================================


@dataclass(frozen=True)
class QuestionnaireStep:
    number: int
    title: str
    required_fields: tuple[str, ...]


QUESTIONNAIRE_STEPS: list[QuestionnaireStep] = [
    QuestionnaireStep(1, "Personal Information", ("name", "age", "currentRole")),
    # Sliders all carry defaults, so nothing can be missing here
    QuestionnaireStep(2, "Daily Habits", ()),
    QuestionnaireStep(3, "Learning & Skills", ("currentSkills", "learningStyle")),
    QuestionnaireStep(
        4,
        "Career Goals",
        ("dreamJob", "timeframe", "previousExperience", "futureLearningPlan"),
    ),
]

_STEP_BY_NUMBER = {s.number: s for s in QUESTIONNAIRE_STEPS}

PREDICTION_REQUIRED_FIELDS = ("name", "dreamJob", "timeframe")

# Initial slider positions
QUESTIONNAIRE_DEFAULTS: dict[str, float] = {
    "studyHours": 2,
    "sleepHours": 8,
    "exerciseHours": 1,
    "recreationHours": 3,
    "workHours": 8,
    "motivation": 7,
    "consistency": 6,
}

# (min, max, step) in hours per day
SLIDER_RANGES: dict[str, tuple[float, float, float]] = {
    "studyHours": (0, 12, 0.5),
    "sleepHours": (4, 12, 0.5),
    "exerciseHours": (0, 6, 0.5),
    "recreationHours": (0, 10, 0.5),
    "workHours": (0, 16, 0.5),
}


# =============================================================================
# Validation (pure)
# =============================================================================


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_step_fields(data: dict[str, Any], step: int) -> list[str]:
    """
    List the required fields of a step that are absent or blank.

    Args:
        data: In-progress questionnaire answers keyed by wire name
        step: Step number (1-4)

    Returns:
        Missing field names in step order (empty when the step is complete)

    Raises:
        ValueError: If the step number is unknown
    """
    questionnaire_step = _STEP_BY_NUMBER.get(step)
    if questionnaire_step is None:
        raise ValueError(f"Unknown questionnaire step: {step}")

    return [f for f in questionnaire_step.required_fields if _is_blank(data.get(f))]


def validate_step(data: dict[str, Any], step: int) -> bool:
    """Whether the caller may advance past ``step``."""
    return not missing_step_fields(data, step)


def missing_prediction_fields(data: dict[str, Any]) -> list[str]:
    """
    Fields the prediction endpoint rejects the request without.

    Only absent, null and empty-string values count as missing here;
    whitespace-only answers pass (the form steps are stricter).
    """
    return [f for f in PREDICTION_REQUIRED_FIELDS if data.get(f) in (None, "")]
