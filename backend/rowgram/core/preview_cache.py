# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Preview Cache
Single-entry memo of the most recent render plus a cancelable debounce,
for interactive editors that re-request a preview on every keystroke.

State:
  last_hash / last_result  the committed render (replaced, never merged)
  pending                  at most one scheduled request and its due time
  generation               bumped on every new input; stale renders are
                           discarded instead of committed

Paths:
  get_or_render(req)  immediate; a hash hit returns the stored result
                      without touching the coordinator
  schedule(req)       debounced; supersedes any pending request and is
                      fired by tick() once clock() reaches its due time,
                      or by a timer when a timer factory is supplied
  flush()             fire the pending request now

The clock is injectable so debounce behaviour is testable without
sleeping. One cache per interactive session.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from rowgram.api.middleware.error_handler import RenderError
from rowgram.config import get_settings
from rowgram.models.render import RenderRequest, RenderResult
from rowgram.utils.logger import get_logger

log = get_logger(__name__)

Clock = Callable[[], float]


class Renderer(Protocol):
    def render(self, request: RenderRequest) -> RenderResult: ...


class Timer(Protocol):
    daemon: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def content_hash(request: RenderRequest) -> str:
    """
    SHA-256 over a canonical JSON of everything that changes the pixels:
    template config, crew fields and emblem identity. Emblem bytes are
    represented by their own digest.
    """
    crew = request.crew
    template = request.template_config
    canonical = {
        "template_id": template.template_id,
        "dimensions": [template.dimensions.width, template.dimensions.height],
        "colors": [template.colors.primary.lower(), template.colors.secondary.lower()],
        "emblem": template.emblem.identity if template.emblem is not None else None,
        "crew": {
            "club_name": crew.club_name,
            "race_name": crew.race_name,
            "boat_name": crew.boat_name,
            "boat_class": crew.boat_class,
            "rower_names": list(crew.rower_names),
            "cox_name": crew.cox_name,
            "coach_name": crew.coach_name,
        },
    }
    blob = json.dumps(canonical, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class PendingPreview:
    request: RenderRequest
    request_hash: str
    due_at: float
    generation: int


class PreviewCache:
    """
    Every new input (a schedule() or a direct get_or_render()) takes the
    next generation number. A render commits, and is delivered to
    on_result, only if its generation is still the newest when it
    finishes; output for superseded input is discarded.
    """

    def __init__(
        self,
        coordinator: Renderer,
        debounce_seconds: Optional[float] = None,
        clock: Clock = time.monotonic,
        timer_factory: Optional[TimerFactory] = None,
        on_result: Optional[Callable[[RenderResult], None]] = None,
    ) -> None:
        if debounce_seconds is None:
            debounce_seconds = get_settings().preview_debounce_seconds
        if debounce_seconds < 0:
            raise ValueError(f"debounce_seconds must be >= 0, got {debounce_seconds}")

        self._coordinator = coordinator
        self._debounce = debounce_seconds
        self._clock = clock
        self._timer_factory = timer_factory
        self._on_result = on_result

        self._lock = threading.RLock()
        self._generation = 0
        self._last_hash: Optional[str] = None
        self._last_result: Optional[RenderResult] = None
        self._pending: Optional[PendingPreview] = None
        self._timer: Optional[Timer] = None

    # ─── State ───────────────────────────────────────────────────────────────

    @property
    def last_hash(self) -> Optional[str]:
        with self._lock:
            return self._last_hash

    @property
    def last_result(self) -> Optional[RenderResult]:
        with self._lock:
            return self._last_result

    @property
    def pending(self) -> Optional[PendingPreview]:
        with self._lock:
            return self._pending

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def _next_generation_locked(self) -> int:
        self._generation += 1
        return self._generation

    def _commit(
        self,
        request_hash: str,
        result: RenderResult,
        generation: int,
        deliver: bool = False,
    ) -> bool:
        """Replace the entry unless newer input arrived; False if discarded."""
        with self._lock:
            if generation != self._generation:
                log.debug(
                    "preview_stale_result_discarded",
                    request_hash=request_hash[:12],
                    generation=generation,
                    current=self._generation,
                )
                return False
            self._last_hash = request_hash
            self._last_result = result
            # delivered under the lock so callbacks arrive in commit order
            if deliver and self._on_result is not None:
                self._on_result(result)
            return True

    # ─── Immediate path ──────────────────────────────────────────────────────

    def get_or_render(self, request: RenderRequest) -> RenderResult:
        """
        Render now, or return the stored result on a hash hit. Supersedes
        any pending scheduled request. The result is always returned to
        the caller, but only committed if nothing newer arrived meanwhile.
        """
        request_hash = content_hash(request)
        with self._lock:
            self._cancel_locked()
            generation = self._next_generation_locked()
            if request_hash == self._last_hash and self._last_result is not None:
                log.debug("preview_cache_hit", request_hash=request_hash[:12])
                return self._last_result

        log.debug("preview_cache_miss", request_hash=request_hash[:12])
        result = self._coordinator.render(request)
        self._commit(request_hash, result, generation)
        return result

    # ─── Debounced path ──────────────────────────────────────────────────────

    def schedule(self, request: RenderRequest) -> PendingPreview:
        """Replace any pending request with this one, due after the debounce."""
        with self._lock:
            self._cancel_locked()
            pending = PendingPreview(
                request=request,
                request_hash=content_hash(request),
                due_at=self._clock() + self._debounce,
                generation=self._next_generation_locked(),
            )
            self._pending = pending
            if self._timer_factory is not None:
                timer = self._timer_factory(self._debounce, lambda: self._fire_timer(pending))
                timer.daemon = True
                timer.start()
                self._timer = timer
        log.debug(
            "preview_scheduled",
            request_hash=pending.request_hash[:12],
            due_at=pending.due_at,
            generation=pending.generation,
        )
        return pending

    def cancel_pending(self) -> bool:
        """Drop the pending request. Returns True if one was pending."""
        with self._lock:
            return self._cancel_locked()

    def _cancel_locked(self) -> bool:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        had_pending = self._pending is not None
        self._pending = None
        return had_pending

    def _take_pending(self, due_only: bool) -> Optional[PendingPreview]:
        with self._lock:
            pending = self._pending
            if pending is None:
                return None
            if due_only and self._clock() < pending.due_at:
                return None
            self._cancel_locked()
            return pending

    def _fire(self, pending: PendingPreview, deliver: bool) -> Optional[RenderResult]:
        """Render a taken request. None if it was superseded before or during the render."""
        with self._lock:
            if pending.generation != self._generation:
                return None
            if pending.request_hash == self._last_hash and self._last_result is not None:
                log.debug("preview_cache_hit", request_hash=pending.request_hash[:12])
                result = self._last_result
                if deliver and self._on_result is not None:
                    self._on_result(result)
                return result

        log.debug("preview_cache_miss", request_hash=pending.request_hash[:12])
        result = self._coordinator.render(pending.request)
        if not self._commit(pending.request_hash, result, pending.generation, deliver):
            return None
        return result

    def tick(self) -> Optional[RenderResult]:
        """Fire the pending request if it is due; None otherwise."""
        pending = self._take_pending(due_only=True)
        if pending is None:
            return None
        return self._fire(pending, deliver=False)

    def flush(self) -> Optional[RenderResult]:
        """Fire the pending request immediately, regardless of due time."""
        pending = self._take_pending(due_only=False)
        if pending is None:
            return None
        return self._fire(pending, deliver=False)

    def _fire_timer(self, scheduled: PendingPreview) -> None:
        with self._lock:
            if self._pending is not scheduled:
                return
            self._pending = None
            self._timer = None
        try:
            self._fire(scheduled, deliver=True)
        except RenderError as e:
            log.warning("preview_render_failed", error_code=e.code, error=str(e))
