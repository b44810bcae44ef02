"""Logging for the Career Success Predictor.

Lines are rendered as ``key=value`` pairs so prediction logs can be grepped
by category or score.
"""

import logging
import sys
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Render a record, plus any ``extra_data`` fields, as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        fields = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "extra_data", {}),
        }
        line = " ".join(f"{k}={v}" for k, v in fields.items())

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger writing structured lines to stdout.

    DEBUG in the dev environment, INFO elsewhere.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)

    from career_predictor.core.config import get_settings

    dev = get_settings().PREDICTOR_ENV == "dev"
    logger.setLevel(logging.DEBUG if dev else logging.INFO)
    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **fields: Any) -> None:
    """Log ``msg`` with extra key=value fields appended."""
    logger.log(level, msg, extra={"extra_data": fields})
