# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Structured Logging
JSON logs in production, console at DEBUG. Each render runs inside
render_context(), which tags its entries with render_id, template_id
and boat_class so one request can be followed through the log.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from structlog.types import EventDict, Processor

from rowgram.config import get_settings


def _add_app_info(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Inject application name into every log entry."""
    event_dict["app"] = "rowgram"
    return event_dict


def _drop_color_message_key(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    """Remove uvicorn's color_message to keep logs clean."""
    event_dict.pop("color_message", None)
    return event_dict


def configure_logging() -> None:
    """
    Configure structlog for JSON output in production and
    human-readable console output at DEBUG level.
    Called once at application startup.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _add_app_info,
        _drop_color_message_key,
    ]

    if settings.log_level == "DEBUG":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True)
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    # stdlib passthrough for uvicorn/fastapi
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str = "rowgram") -> structlog.BoundLogger:
    return structlog.get_logger(name)


def new_render_id() -> str:
    return uuid.uuid4().hex[:12]


@contextmanager
def render_context(
    template_id: str,
    boat_class: str,
    render_id: Optional[str] = None,
) -> Iterator[str]:
    """
    Bind render_id, template_id and boat_class onto every log entry
    emitted inside the block. Yields the render_id in use.

    Usage:
        with render_context("race-day", "8+") as render_id:
            log.info("render_complete", bytes=48213)
    """
    render_id = render_id or new_render_id()
    with structlog.contextvars.bound_contextvars(
        render_id=render_id,
        template_id=template_id,
        boat_class=boat_class,
    ):
        yield render_id
