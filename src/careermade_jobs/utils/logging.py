"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any, Dict, Optional

import structlog
from rich.logging import RichHandler

from careermade_jobs.config import settings


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """
    Configure structlog and stdlib logging for the CLI.

    Args:
        level: Log level name; defaults to ``settings.log_level``
        debug: Render human-readable console lines instead of JSON;
            defaults to ``settings.debug``
    """
    level_number = _level_number(level or settings.log_level)
    use_console = settings.debug if debug is None else debug

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level_number,
        handlers=[RichHandler(rich_tracebacks=True, markup=True, show_path=use_console)],
        force=True,
    )

    renderer = structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="ISO"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **context: Any) -> structlog.BoundLogger:
    """Get a structured logger, optionally pre-bound with context."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


def log_filter_state(state: Any) -> Dict[str, Any]:
    """Create a log context summarising an active filter selection."""
    return {
        "filters": {
            "category": state.category,
            "subcategory": state.subcategory,
            "field": state.field,
            "locations": sorted(state.locations),
            "job_types": sorted(state.job_types),
            "specializations": sorted(state.specializations),
            "min_experience_years": state.min_experience_years,
            "min_salary_lpa": state.min_salary_lpa,
            "has_query": bool(state.query.strip()),
        }
    }
