# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Render Coordinator
Runs one render request end to end, synchronously, in a single pass.

Order:
  1. Boat class lookup       (InvalidBoatClass)
  2. Renderer lookup         (UnknownTemplate)
  3. Roster check + seating  (RosterMismatch)
  4. Colours + emblem        (EmblemInvalid → warning only)
  5. Surface allocation + template render
  6. PNG encode              (SerializationFailure)

Steps 1-3 run before any surface is allocated, so a bad request costs
no pixel memory. Any failure aborts the request; no partial image is
ever returned and nothing is retried.
"""

from __future__ import annotations

import time
from typing import Mapping, Optional

import cv2

from rowgram.api.middleware.error_handler import SerializationFailure
from rowgram.config import Settings, get_settings
from rowgram.core.color_resolver import ClubPresetStore, resolve_theme
from rowgram.models.render import RenderRequest, RenderResult
from rowgram.modules.rendering.base import TemplateRenderer
from rowgram.modules.rendering.registry import TEMPLATE_REGISTRY, get_renderer
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.roster.boat_classes import get_boat_class
from rowgram.modules.roster.seat_assigner import assign_crew, build_crew
from rowgram.utils.logger import get_logger, render_context

log = get_logger(__name__)


class RenderCoordinator:
    """
    Stateless apart from its collaborators; safe to share across threads.

    Args:
        presets:   club preset lookup used for preset-referenced emblems
        renderers: template_id → renderer mapping (defaults to the
                   built-in registry)
        settings:  configuration override, mainly for tests
    """

    def __init__(
        self,
        presets: Optional[ClubPresetStore] = None,
        renderers: Optional[Mapping[str, TemplateRenderer]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._presets = presets
        self._renderers = renderers if renderers is not None else TEMPLATE_REGISTRY
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def render(self, request: RenderRequest) -> RenderResult:
        with render_context(request.template_id, request.crew.boat_class):
            return self._render(request)

    def _render(self, request: RenderRequest) -> RenderResult:
        t0 = time.perf_counter()

        # ── Validate before allocating anything ──────────────────────────────
        get_boat_class(request.crew.boat_class)
        renderer = get_renderer(request.template_id, self._renderers)
        crew = build_crew(request.crew)
        seats = assign_crew(crew)

        # ── Theme ────────────────────────────────────────────────────────────
        config, warnings = resolve_theme(request, self._presets, self.settings)

        # ── Draw ─────────────────────────────────────────────────────────────
        width, height = request.dimensions.width, request.dimensions.height
        surface = DrawingSurface(width, height)
        renderer.render(surface, crew, seats, config)

        # ── Encode ───────────────────────────────────────────────────────────
        try:
            png = surface.to_png()
        except (RuntimeError, cv2.error) as e:
            log.error("png_encode_failed", error=str(e))
            raise SerializationFailure(f"PNG encoding failed: {e}") from e

        log.info(
            "render_complete",
            width=width,
            height=height,
            bytes=len(png),
            warnings=len(warnings),
            elapsed_ms=round((time.perf_counter() - t0) * 1000, 1),
        )
        return RenderResult(
            image_bytes=png,
            width=width,
            height=height,
            warnings=warnings,
        )
