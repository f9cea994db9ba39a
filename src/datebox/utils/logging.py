"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from ..config import Settings


def setup_logging(log_level: str = "INFO", json: bool = True):
    """Configure structlog with JSON (or console) output to stdout.

    Should be called once at application startup.
    """
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def setup_logging_from_settings(settings: "Settings") -> None:
    """Apply the ``DATEBOX_LOG_*`` settings."""
    setup_logging(settings.log_level, json=settings.log_json)
