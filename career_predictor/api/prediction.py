"""API endpoints for career success predictions."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request

from career_predictor.api.errors import PredictionAPIError
from career_predictor.core.logging import get_logger, log_with_context
from career_predictor.core.questionnaire import missing_prediction_fields
from career_predictor.core.scoring import (
    AssessmentInput,
    PredictionResult,
    ScoreBreakdown,
    predict,
    score_breakdown,
)

logger = get_logger(__name__)

router = APIRouter()

MISSING_FIELDS_MESSAGE = "Missing required fields: name, dreamJob, and timeframe are required"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"
PREDICTION_FAILED_MESSAGE = "Internal server error during prediction"


async def _read_assessment(request: Request) -> dict[str, Any]:
    """Parse the request body and run the boundary field check."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PredictionAPIError(400, INVALID_BODY_MESSAGE) from e

    if not isinstance(payload, dict):
        raise PredictionAPIError(400, INVALID_BODY_MESSAGE)

    missing = missing_prediction_fields(payload)
    if missing:
        logger.info(f"Rejected prediction request, missing fields: {', '.join(missing)}")
        raise PredictionAPIError(400, MISSING_FIELDS_MESSAGE)

    return payload


@router.post(
    "/prediction",
    response_model=PredictionResult,
    response_model_exclude_none=True,
)
async def create_prediction(request: Request) -> PredictionResult:
    """
    Score an assessment and return the full prediction.

    Body: AssessmentInput as camelCase JSON.

    Returns:
        PredictionResult; ``realityCheck`` is omitted unless the category is low

    Raises:
        PredictionAPIError 400: If name, dreamJob or timeframe is missing
        PredictionAPIError 500: If the prediction fails
    """
    payload = await _read_assessment(request)

    try:
        result = predict(AssessmentInput.model_validate(payload))
    except Exception as e:
        logger.exception("Prediction failed")
        raise PredictionAPIError(500, PREDICTION_FAILED_MESSAGE) from e

    log_with_context(
        logger,
        logging.INFO,
        "Computed prediction",
        category=result.category.value,
        success_probability=result.success_probability,
    )

    return result


@router.post("/prediction/breakdown", response_model=ScoreBreakdown)
async def get_prediction_breakdown(request: Request) -> ScoreBreakdown:
    """
    Explain how an assessment's success probability is built up.

    Same body and error contract as ``POST /prediction``.

    Returns:
        ScoreBreakdown with one contribution per scoring factor
    """
    payload = await _read_assessment(request)

    try:
        return score_breakdown(AssessmentInput.model_validate(payload))
    except Exception as e:
        logger.exception("Score breakdown failed")
        raise PredictionAPIError(500, PREDICTION_FAILED_MESSAGE) from e
