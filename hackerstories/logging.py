"""Structured logging setup shared by the entrypoint and services."""

from __future__ import annotations

import logging
from typing import Any, Literal

import structlog

APP_NAME = "hackerstories"

Renderer = Literal["json", "console"]


def _add_app_name(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def configure_logging(level: int = logging.INFO, *, renderer: Renderer = "json") -> None:
    """Route structlog events to stdout; JSON lines unless a console renderer is asked for."""

    logging.basicConfig(level=level, format="%(message)s", handlers=[logging.StreamHandler()])
    final_processor = (
        structlog.dev.ConsoleRenderer(colors=False)
        if renderer == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            _add_app_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            final_processor,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger()

__all__ = ["APP_NAME", "configure_logging", "logger"]
