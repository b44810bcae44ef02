"""API router for public endpoints."""

from fastapi import APIRouter

from career_predictor.api import prediction

router = APIRouter()

# Prediction scoring routes
router.include_router(prediction.router, tags=["prediction"])
