# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 1 infrastructure smoke tests.
Tests config loading, logging, error bodies, the preset store and the
API surface end to end through the ASGI app.
"""

import base64
import json

import cv2
import numpy as np
import pytest

SCENARIO_CREW = {
    "club_name": "Isis Boat Club",
    "race_name": "Summer Eights",
    "boat_name": "M1",
    "boat_class": "eight-with-cox",
    "rower_names": ["Amy", "Bo", "Cal", "Dee", "Eve", "Fay", "Gio", "Hal"],
    "cox_name": "Ivy",
    "coach_name": "Sam",
}


def _png_bytes(color=(0, 0, 255, 255), size=32) -> bytes:
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:] = color
    ok, buf = cv2.imencode(".png", img)
    assert ok
    return buf.tobytes()


# ─── Config ──────────────────────────────────────────────────────────────────

def test_settings_load_defaults():
    from rowgram.config import Settings
    s = Settings(_env_file=None, log_level="INFO")
    assert s.default_width == 1080
    assert s.default_height == 1350
    assert s.default_template_id == "oxbridge-herald"
    assert s.default_primary_color == "#2563eb"
    assert s.default_secondary_color == "#1e40af"
    assert s.name_char_budget == 12
    assert s.preview_debounce_seconds == 0.4
    assert s.club_presets_path is None


def test_settings_env_override(monkeypatch):
    from rowgram.config import Settings
    monkeypatch.setenv("NAME_CHAR_BUDGET", "16")
    monkeypatch.setenv("DEFAULT_WIDTH", "1200")
    s = Settings(_env_file=None)
    assert s.name_char_budget == 16
    assert s.default_width == 1200


def test_settings_derived_helpers():
    from rowgram.config import Settings
    s = Settings(_env_file=None, emblem_max_mb=2, default_width=800, default_height=600)
    assert s.emblem_max_bytes == 2 * 1024 * 1024
    assert s.default_dimensions == (800, 600)


def test_get_settings_is_cached():
    from rowgram.config import get_settings
    assert get_settings() is get_settings()


# ─── Logging ─────────────────────────────────────────────────────────────────

def test_log_processors_tag_app_and_drop_color_message():
    from rowgram.utils.logger import _add_app_info, _drop_color_message_key
    event = {"event": "render_complete", "color_message": "\x1b[32mhi"}
    event = _drop_color_message_key(None, "info", _add_app_info(None, "info", event))
    assert event == {"event": "render_complete", "app": "rowgram"}


def test_get_logger_returns_bound_logger():
    from rowgram.utils.logger import configure_logging, get_logger
    configure_logging()
    log = get_logger("rowgram.test")
    assert hasattr(log, "info")
    assert hasattr(log, "warning")


def test_render_context_binds_and_unbinds_render_fields():
    import structlog
    from rowgram.utils.logger import render_context

    with render_context("race-day", "8+") as render_id:
        bound = structlog.contextvars.get_contextvars()
        assert bound == {"render_id": render_id, "template_id": "race-day", "boat_class": "8+"}
        assert len(render_id) == 12
    assert "render_id" not in structlog.contextvars.get_contextvars()


def test_render_context_keeps_a_supplied_render_id():
    import structlog
    from rowgram.utils.logger import render_context

    with render_context("modern-card", "1x", render_id="abc123") as render_id:
        assert render_id == "abc123"
        assert structlog.contextvars.get_contextvars()["render_id"] == "abc123"


# ─── Error bodies ────────────────────────────────────────────────────────────

def test_error_body_shape():
    from rowgram.api.middleware.error_handler import _error_body
    body = _error_body("X", "msg", {"field": "cox"})
    assert body == {"error": {"code": "X", "message": "msg", "detail": {"field": "cox"}}}
    assert "detail" not in _error_body("X", "msg")["error"]


def test_error_types_keep_builtin_bases():
    from rowgram.api.middleware.error_handler import (
        EmblemInvalid,
        InvalidBoatClass,
        RenderError,
        RosterMismatch,
        SerializationFailure,
        UnknownTemplate,
    )
    assert issubclass(InvalidBoatClass, ValueError)
    assert issubclass(RosterMismatch, ValueError)
    assert issubclass(UnknownTemplate, KeyError)
    assert issubclass(EmblemInvalid, ValueError)
    assert issubclass(SerializationFailure, RuntimeError)
    for cls in (InvalidBoatClass, RosterMismatch, UnknownTemplate, EmblemInvalid, SerializationFailure):
        assert issubclass(cls, RenderError)
    assert str(UnknownTemplate("nope")) == "Unknown template 'nope'."


# ─── Club presets ────────────────────────────────────────────────────────────

def test_in_memory_preset_store():
    from rowgram.core.color_resolver import ClubPreset, InMemoryClubPresetStore
    from rowgram.models.render import ColorScheme

    store = InMemoryClubPresetStore()
    assert store.get_preset("isis") is None
    store.put_preset(ClubPreset(
        preset_reference="isis",
        club_name="Isis Boat Club",
        colors=ColorScheme(primary="#002147", secondary="#a3c1ad"),
    ))
    assert store.get_preset("isis").club_name == "Isis Boat Club"
    assert len(store) == 1


def test_load_presets_file(tmp_path):
    from rowgram.core.color_resolver import load_presets_file

    (tmp_path / "crest.png").write_bytes(_png_bytes())
    presets = [
        {
            "preset_reference": "isis",
            "club_name": "Isis Boat Club",
            "colors": {"primary": "#002147", "secondary": "#a3c1ad"},
            "logo_path": "crest.png",
        },
        {
            "preset_reference": "plain",
            "colors": {"primary": "navy", "secondary": "gold"},
        },
    ]
    path = tmp_path / "presets.json"
    path.write_text(json.dumps(presets), encoding="utf-8")

    store = load_presets_file(path)
    assert len(store) == 2
    assert store.get_preset("isis").logo == _png_bytes()
    assert store.get_preset("plain").logo is None


# ─── API Smoke Tests ─────────────────────────────────────────────────────────
# ASGITransport plus asgi_lifespan so the lifespan runs
# (init_preset_store(), init_coordinator()) before any request.

from contextlib import asynccontextmanager
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager


@asynccontextmanager
async def lifespan_client():
    """
    Spin up the full FastAPI app including its lifespan (startup/shutdown),
    then yield an AsyncClient pointed at it.
    """
    import os
    os.environ["LOG_LEVEL"] = "WARNING"
    os.environ.pop("CLUB_PRESETS_PATH", None)

    from rowgram.config import get_settings
    get_settings.cache_clear()

    from rowgram.main import create_app
    test_app = create_app()

    async with LifespanManager(test_app) as manager:
        transport = ASGITransport(app=manager.app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.mark.asyncio
async def test_health_endpoint():
    async with lifespan_client() as c:
        resp = await c.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "rowgram"
    assert "race-day" in data["templates"]


@pytest.mark.asyncio
async def test_templates_endpoint():
    async with lifespan_client() as c:
        resp = await c.get("/templates")
    assert resp.status_code == 200
    ids = {t["template_id"] for t in resp.json()}
    assert ids == {
        "oxbridge-herald", "modern-card", "race-day", "championship-gold",
        "classic-lineup", "minimal-clean", "vintage-classic", "elite-performance",
        "regatta-royal", "henley-poster",
    }


@pytest.mark.asyncio
async def test_boat_classes_endpoint():
    async with lifespan_client() as c:
        resp = await c.get("/boat-classes")
    assert resp.status_code == 200
    classes = {bc["code"]: bc for bc in resp.json()}
    assert set(classes) == {"8+", "4+", "4-", "4x", "2-", "2x", "1x"}
    assert classes["8+"]["seat_names"][0] == "Cox"
    assert classes["1x"]["seat_names"] == ["Single"]


@pytest.mark.asyncio
async def test_render_returns_png_with_defaults():
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.headers["x-render-width"] == "1080"
    assert resp.headers["x-render-height"] == "1350"
    assert resp.headers["x-render-warnings"] == ""
    assert resp.content[:8] == b"\x89PNG\r\n\x1a\n"


@pytest.mark.asyncio
async def test_render_custom_dimensions_and_template():
    body = {
        "crew": SCENARIO_CREW,
        "template_id": "race-day",
        "dimensions": {"width": 540, "height": 540},
        "colors": {"primary": "#dc2626", "secondary": "#111827"},
    }
    async with lifespan_client() as c:
        resp = await c.post("/render", json=body)
    assert resp.status_code == 200
    decoded = cv2.imdecode(np.frombuffer(resp.content, np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape == (540, 540, 3)


@pytest.mark.asyncio
async def test_render_roster_mismatch_is_422():
    crew = dict(SCENARIO_CREW, rower_names=SCENARIO_CREW["rower_names"][:7])
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": crew})
    assert resp.status_code == 422
    err = resp.json()["error"]
    assert err["code"] == "ROSTER_MISMATCH"
    assert err["detail"] == {"field": "rower_names", "expected": 8, "actual": 7}


@pytest.mark.asyncio
async def test_render_invalid_boat_class_is_422():
    crew = dict(SCENARIO_CREW, boat_class="9+")
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": crew})
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_BOAT_CLASS"


@pytest.mark.asyncio
async def test_render_unknown_template_is_404():
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW, "template_id": "nonexistent"})
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "UNKNOWN_TEMPLATE"


@pytest.mark.asyncio
async def test_render_undecodable_emblem_is_a_warning():
    emblem = {"data": base64.b64encode(b"definitely not an image").decode("ascii")}
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW, "emblem": emblem})
    assert resp.status_code == 200
    assert "EMBLEM_INVALID" in resp.headers["x-render-warnings"]


@pytest.mark.asyncio
async def test_render_unknown_preset_is_a_warning():
    emblem = {"preset_reference": "no-such-club"}
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW, "emblem": emblem})
    assert resp.status_code == 200
    assert "no-such-club" in resp.headers["x-render-warnings"]


@pytest.mark.asyncio
async def test_render_with_valid_emblem():
    emblem = {"data": base64.b64encode(_png_bytes()).decode("ascii")}
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW, "emblem": emblem})
    assert resp.status_code == 200
    assert resp.headers["x-render-warnings"] == ""


@pytest.mark.asyncio
async def test_render_rejects_malformed_colour():
    body = {"crew": SCENARIO_CREW, "colors": {"primary": "not-a-colour", "secondary": "#fff"}}
    async with lifespan_client() as c:
        resp = await c.post("/render", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_render_rejects_non_positive_dimensions():
    body = {"crew": SCENARIO_CREW, "dimensions": {"width": 0, "height": 100}}
    async with lifespan_client() as c:
        resp = await c.post("/render", json=body)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_docs_available():
    async with lifespan_client() as c:
        resp = await c.get("/docs")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_render_non_ascii_preset_reference_is_a_warning():
    from urllib.parse import unquote

    emblem = {"preset_reference": "Łódź RC"}
    async with lifespan_client() as c:
        resp = await c.post("/render", json={"crew": SCENARIO_CREW, "emblem": emblem})
    assert resp.status_code == 200
    header = resp.headers["x-render-warnings"]
    assert header.isascii()
    assert header.startswith("EMBLEM_INVALID: ")
    assert "Łódź RC" in unquote(header)


@pytest.mark.asyncio
async def test_render_oversize_emblem_is_dropped_with_warning(monkeypatch):
    from rowgram.config import get_settings

    monkeypatch.setenv("EMBLEM_MAX_MB", "0")
    emblem = {"data": base64.b64encode(_png_bytes()).decode("ascii")}
    try:
        async with lifespan_client() as c:
            resp = await c.post("/render", json={"crew": SCENARIO_CREW, "emblem": emblem})
    finally:
        get_settings.cache_clear()
    assert resp.status_code == 200
    assert resp.content[:8] == b"\x89PNG\r\n\x1a\n"
    warnings = resp.headers["x-render-warnings"].split("; ")
    assert warnings == ["EMBLEM_INVALID: Emblem exceeds maximum size of 0 MB."]


def test_warnings_header_is_ascii_and_joined():
    from rowgram.api.routes.render import warnings_header

    assert warnings_header([]) == ""
    value = warnings_header(["EMBLEM_INVALID: Unknown preset 'Ålesund'", "second"])
    assert value.isascii()
    assert value == "EMBLEM_INVALID: Unknown preset '%C3%85lesund'; second"
    value.encode("latin-1")
