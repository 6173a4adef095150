# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Render Errors + Global Error Handler
Typed failures raised by the roster/rendering engine, and the FastAPI
handlers that convert them into structured JSON error responses.
Registered on the FastAPI app in main.py.
"""

from __future__ import annotations

import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from rowgram.utils.logger import get_logger

log = get_logger(__name__)


class RenderError(Exception):
    """Base class for every typed render failure."""

    code = "RENDER_ERROR"


class InvalidBoatClass(RenderError, ValueError):
    """Raised when a boat class code is not in the registry."""

    code = "INVALID_BOAT_CLASS"

    def __init__(self, boat_class: str) -> None:
        self.boat_class = boat_class
        super().__init__(f"Unknown boat class '{boat_class}'.")


class RosterMismatch(RenderError, ValueError):
    """
    Raised when the roster disagrees with the boat class: wrong number of
    rower names, or a cox supplied/missing against the class definition.
    Carries expected vs actual so callers can surface a precise message.
    """

    code = "ROSTER_MISMATCH"

    def __init__(
        self,
        boat_class: str,
        expected: int,
        actual: int,
        field: str = "rower_names",
    ) -> None:
        self.boat_class = boat_class
        self.expected = expected
        self.actual = actual
        self.field = field
        if field == "cox":
            message = (
                f"Boat class '{boat_class}' expects {expected} cox "
                f"but {actual} was supplied."
            )
        else:
            message = (
                f"Boat class '{boat_class}' expects {expected} rower names "
                f"but {actual} were supplied."
            )
        super().__init__(message)


class UnknownTemplate(RenderError, KeyError):
    """Raised when a template_id has no registered renderer."""

    code = "UNKNOWN_TEMPLATE"

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Unknown template '{self.template_id}'."


class EmblemInvalid(RenderError, ValueError):
    """
    Raised when emblem bytes cannot be decoded or a preset reference does
    not resolve. Never reaches the client as an error: the coordinator
    downgrades it to a warning and renders without the emblem.
    """

    code = "EMBLEM_INVALID"


class SerializationFailure(RenderError, RuntimeError):
    """Raised when the drawing surface cannot be encoded to PNG."""

    code = "SERIALIZATION_FAILURE"


def _error_body(code: str, message: str, detail: Optional[dict] = None) -> dict:
    body = {"error": {"code": code, "message": message}}
    if detail:
        body["error"]["detail"] = detail
    return body


def register_error_handlers(app: FastAPI) -> None:
    """
    Register all global exception handlers on the FastAPI application.
    Call this in main.py after creating the app instance.
    """

    @app.exception_handler(InvalidBoatClass)
    async def invalid_boat_class_handler(
        req: Request, exc: InvalidBoatClass
    ) -> JSONResponse:
        log.warning("invalid_boat_class", path=str(req.url), boat_class=exc.boat_class)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(code=exc.code, message=str(exc)),
        )

    @app.exception_handler(RosterMismatch)
    async def roster_mismatch_handler(
        req: Request, exc: RosterMismatch
    ) -> JSONResponse:
        log.warning(
            "roster_mismatch",
            path=str(req.url),
            boat_class=exc.boat_class,
            field=exc.field,
            expected=exc.expected,
            actual=exc.actual,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                code=exc.code,
                message=str(exc),
                detail={
                    "field": exc.field,
                    "expected": exc.expected,
                    "actual": exc.actual,
                },
            ),
        )

    @app.exception_handler(UnknownTemplate)
    async def unknown_template_handler(
        req: Request, exc: UnknownTemplate
    ) -> JSONResponse:
        log.warning("unknown_template", path=str(req.url), template_id=exc.template_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body(code=exc.code, message=str(exc)),
        )

    @app.exception_handler(SerializationFailure)
    async def serialization_failure_handler(
        req: Request, exc: SerializationFailure
    ) -> JSONResponse:
        log.error("serialization_failure", path=str(req.url), error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                code=exc.code,
                message="The rendered image could not be encoded.",
            ),
        )

    @app.exception_handler(Exception)
    async def generic_handler(req: Request, exc: Exception) -> JSONResponse:
        tb = traceback.format_exc()
        log.error(
            "unhandled_exception",
            path=str(req.url),
            error=str(exc),
            exc_type=type(exc).__name__,
            traceback=tb,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred.",
            ),
        )
