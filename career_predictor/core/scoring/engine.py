"""Success prediction entry point.

Pure and deterministic: the same assessment always yields the same
PredictionResult. No I/O, no shared state.
"""

from career_predictor.core.logging import get_logger
from career_predictor.core.scoring.factors import compute_score
from career_predictor.core.scoring.feedback import (
    generate_motivational_message,
    generate_reality_check,
    generate_strengths,
    generate_weaknesses,
)
from career_predictor.core.scoring.plan import (
    generate_recommendations,
    generate_resources,
    generate_schedule,
)
from career_predictor.core.scoring.types import AssessmentInput, Category, PredictionResult

logger = get_logger(__name__)


def predict(data: AssessmentInput) -> PredictionResult:
    """
    Compute the success prediction for one assessment.

    Args:
        data: Validated assessment input

    Returns:
        PredictionResult with score, category, feedback, plan and messages.
        ``reality_check`` is only set when the category is low.
    """
    success_probability, category = compute_score(data)

    logger.debug(
        f"Scored assessment: probability={success_probability}, category={category.value}"
    )

    return PredictionResult(
        success_probability=success_probability,
        category=category,
        strengths=generate_strengths(data),
        weaknesses=generate_weaknesses(data),
        recommendations=generate_recommendations(category, data),
        resources=generate_resources(data.dream_job),
        schedule=generate_schedule(data),
        motivational_message=generate_motivational_message(category, data.name),
        reality_check=generate_reality_check(data) if category == Category.LOW else None,
    )
