# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — POST /render
Maps a JSON crew + template config to a PNG. Rendering is CPU-bound, so
it runs in a worker thread to keep the event loop free.

Emblem problems never fail the request. An emblem over EMBLEM_MAX_MB is
dropped here, before the engine sees it; undecodable data and unknown
presets are dropped by the engine. Either way the image renders without
the emblem and the reason is listed in X-Render-Warnings.
"""

from __future__ import annotations

import asyncio
from typing import Iterable
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import Response

from rowgram.api.middleware.error_handler import EmblemInvalid
from rowgram.config import get_settings
from rowgram.dependencies import CoordinatorDep, PresetStoreDep
from rowgram.models.api import RenderRequestBody
from rowgram.utils.logger import get_logger

router = APIRouter(tags=["render"])
log = get_logger(__name__)

# Header values must be latin-1; warnings can carry caller-supplied text
_WARNING_SAFE_CHARS = " !#$&'()*+,-./:;=?@[]^_`{|}~"


def warnings_header(warnings: Iterable[str]) -> str:
    """Join warnings with "; ", percent-encoding anything outside printable ASCII."""
    return "; ".join(quote(w, safe=_WARNING_SAFE_CHARS) for w in warnings)


@router.post(
    "/render",
    response_class=Response,
    summary="Render a crew roster image",
    description=(
        "Assigns seats for the crew's boat class and draws them with the "
        "chosen template. Returns image/png; non-fatal problems (such as a "
        "dropped emblem) are listed in the X-Render-Warnings header, "
        "percent-encoded."
    ),
    responses={200: {"content": {"image/png": {}}}},
)
async def render_roster(
    body: RenderRequestBody,
    coordinator: CoordinatorDep,
    presets: PresetStoreDep,
) -> Response:
    settings = get_settings()
    warnings: list[str] = []

    if body.emblem is not None and body.emblem.data is not None:
        if len(body.emblem.data) > settings.emblem_max_bytes:
            reason = f"Emblem exceeds maximum size of {settings.emblem_max_mb} MB."
            log.warning("emblem_dropped", source="upload", reason=reason, size=len(body.emblem.data))
            warnings.append(f"{EmblemInvalid.code}: {reason}")
            body = body.model_copy(update={"emblem": None})

    preset_colors = None
    if body.colors is None and body.emblem is not None and body.emblem.preset_reference:
        preset = presets.get_preset(body.emblem.preset_reference)
        if preset is not None:
            preset_colors = preset.colors

    request = body.to_render_request(settings, preset_colors)
    log.info(
        "render_request_received",
        template_id=request.template_id,
        boat_class=request.crew.boat_class,
        width=request.dimensions.width,
        height=request.dimensions.height,
    )

    result = await asyncio.to_thread(coordinator.render, request)
    warnings.extend(result.warnings)

    return Response(
        content=result.image_bytes,
        media_type=result.media_type,
        headers={
            "X-Render-Width": str(result.width),
            "X-Render-Height": str(result.height),
            "X-Render-Warnings": warnings_header(warnings),
        },
    )
