"""Career success prediction engine.

Scores a daily-habit and career-goal assessment with weighted heuristics
and derives feedback from the same input:
- Success probability (15-95) and category (high / medium / low)
- Strengths and weaknesses
- Recommendations, learning resources and a suggested schedule
- Motivational message, plus a reality check for the low category

Usage:
    from career_predictor.core.scoring import AssessmentInput, predict

    result = predict(AssessmentInput.model_validate(payload))
    print(f"{result.category.value}: {result.success_probability}%")
"""

from career_predictor.core.scoring.engine import predict
from career_predictor.core.scoring.factors import FACTORS, compute_score, score_breakdown
from career_predictor.core.scoring.types import (
    AssessmentInput,
    Category,
    FactorContribution,
    LearningStyle,
    PredictionResult,
    Recommendation,
    Resource,
    Schedule,
    ScoreBreakdown,
    Timeframe,
)

__all__ = [
    "predict",
    "score_breakdown",
    "compute_score",
    "FACTORS",
    "AssessmentInput",
    "Category",
    "FactorContribution",
    "LearningStyle",
    "PredictionResult",
    "Recommendation",
    "Resource",
    "Schedule",
    "ScoreBreakdown",
    "Timeframe",
]
