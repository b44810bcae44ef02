"""Error responses for the public API.

Errors are returned as ``{"error": "<message>"}`` with the matching status code.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class PredictionAPIError(Exception):
    """Raised by route handlers to produce an ``{"error": ...}`` response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def prediction_api_error_handler(request: Request, exc: PredictionAPIError) -> JSONResponse:
    return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)
