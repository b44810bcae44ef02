#!/usr/bin/env python3
"""
Score an assessment stored as a JSON file.

Reads a camelCase AssessmentInput from disk, runs the prediction engine and
prints the PredictionResult (or the per-factor breakdown) as JSON.

Usage:
    python scripts/predict_assessment.py assessment.json [--breakdown] [--fill-defaults]

Options:
    --breakdown: Print the per-factor score breakdown instead of the prediction
    --fill-defaults: Use the questionnaire's initial slider values for missing habit fields
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from career_predictor.core.logging import get_logger
from career_predictor.core.questionnaire import QUESTIONNAIRE_DEFAULTS, missing_prediction_fields
from career_predictor.core.scoring import AssessmentInput, predict, score_breakdown

logger = get_logger(__name__)


def load_assessment(path: Path, fill_defaults: bool = False) -> AssessmentInput:
    """Load and validate an assessment file."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Assessment file must contain a JSON object")

    if fill_defaults:
        payload = {**QUESTIONNAIRE_DEFAULTS, **payload}

    missing = missing_prediction_fields(payload)
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")

    return AssessmentInput.model_validate(payload)


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a career success assessment")
    parser.add_argument("path", type=Path, help="Path to an assessment JSON file")
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print the per-factor score breakdown",
    )
    parser.add_argument(
        "--fill-defaults",
        action="store_true",
        help="Fill missing habit fields with the questionnaire's slider defaults",
    )
    args = parser.parse_args()

    try:
        assessment = load_assessment(args.path, fill_defaults=args.fill_defaults)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Invalid assessment: {e}")
        sys.exit(1)

    if args.breakdown:
        output = score_breakdown(assessment).model_dump(mode="json", by_alias=True)
    else:
        result = predict(assessment)
        logger.info(f"Prediction for {assessment.name}: {result.success_probability}%")
        output = result.model_dump(mode="json", by_alias=True, exclude_none=True)

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
