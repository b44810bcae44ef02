"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from career_predictor.api import router as api_router
from career_predictor.api.errors import PredictionAPIError, prediction_api_error_handler
from career_predictor.core.config import get_settings

DEMO_MESSAGE = "Hello from the career predictor server"

app = FastAPI(
    title="Career Success Predictor",
    description="Heuristic career success scoring for daily-habit and career-goal assessments",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PredictionAPIError, prediction_api_error_handler)


@app.get("/api/ping")
async def ping() -> JSONResponse:
    """Liveness probe."""
    return JSONResponse(content={"message": get_settings().PING_MESSAGE}, status_code=200)


@app.get("/api/demo")
async def demo() -> JSONResponse:
    """Demo endpoint."""
    return JSONResponse(content={"message": DEMO_MESSAGE}, status_code=200)


app.include_router(api_router, prefix="/api")
