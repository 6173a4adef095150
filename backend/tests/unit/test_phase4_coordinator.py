# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 4 coordinator tests.
Request validation order, theme/emblem resolution, PNG encoding and
error propagation through RenderCoordinator.render().
"""

from unittest.mock import MagicMock

import cv2
import numpy as np
import pytest

EIGHT = ["Amy", "Bo", "Cal", "Dee", "Eve", "Fay", "Gio", "Hal"]


def _request(**overrides):
    from rowgram.models.crew import CrewPayload
    from rowgram.models.render import ColorScheme, Dimensions, RenderRequest

    crew_fields = {
        "club_name": "Isis Boat Club",
        "race_name": "Summer Eights",
        "boat_name": "M1",
        "boat_class": "8+",
        "rower_names": EIGHT,
        "cox_name": "Ivy",
        "coach_name": "Sam",
    }
    crew_fields.update(overrides.pop("crew", {}))
    fields = {
        "crew": CrewPayload(**crew_fields),
        "template_id": "modern-card",
        "dimensions": Dimensions(width=540, height=675),
        "colors": ColorScheme(primary="#2563eb", secondary="#1e40af"),
        "emblem": None,
    }
    fields.update(overrides)
    return RenderRequest(**fields)


def _png(bgra=(0, 128, 0, 255), size=32) -> bytes:
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:] = bgra
    ok, buf = cv2.imencode(".png", img)
    assert ok
    return buf.tobytes()


# ─── Happy path ──────────────────────────────────────────────────────────────

def test_render_returns_png_result():
    from rowgram.core.coordinator import RenderCoordinator

    result = RenderCoordinator().render(_request())
    assert result.media_type == "image/png"
    assert (result.width, result.height) == (540, 675)
    assert result.warnings == ()
    decoded = cv2.imdecode(np.frombuffer(result.image_bytes, np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape == (675, 540, 3)


@pytest.mark.parametrize("template_id", [
    "oxbridge-herald", "modern-card", "race-day", "championship-gold",
    "classic-lineup", "minimal-clean", "vintage-classic", "elite-performance",
    "regatta-royal", "henley-poster",
])
def test_render_each_template(template_id):
    from rowgram.core.coordinator import RenderCoordinator
    result = RenderCoordinator().render(_request(template_id=template_id))
    assert result.image_bytes[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_is_byte_identical_for_identical_requests():
    from rowgram.core.coordinator import RenderCoordinator
    coordinator = RenderCoordinator()
    a = coordinator.render(_request(template_id="oxbridge-herald"))
    b = coordinator.render(_request(template_id="oxbridge-herald"))
    assert a.image_bytes == b.image_bytes


# ─── Validation order ────────────────────────────────────────────────────────

def test_unknown_template_allocates_no_surface(monkeypatch):
    from rowgram.api.middleware.error_handler import UnknownTemplate
    from rowgram.core import coordinator as coordinator_module

    surface_cls = MagicMock()
    monkeypatch.setattr(coordinator_module, "DrawingSurface", surface_cls)

    with pytest.raises(UnknownTemplate) as exc_info:
        coordinator_module.RenderCoordinator().render(_request(template_id="nonexistent"))
    assert exc_info.value.template_id == "nonexistent"
    surface_cls.assert_not_called()


def test_invalid_boat_class_allocates_no_surface(monkeypatch):
    from rowgram.api.middleware.error_handler import InvalidBoatClass
    from rowgram.core import coordinator as coordinator_module

    surface_cls = MagicMock()
    monkeypatch.setattr(coordinator_module, "DrawingSurface", surface_cls)

    with pytest.raises(InvalidBoatClass):
        coordinator_module.RenderCoordinator().render(
            _request(crew={"boat_class": "12+"}, template_id="nonexistent")
        )
    surface_cls.assert_not_called()


def test_roster_mismatch_allocates_no_surface(monkeypatch):
    from rowgram.api.middleware.error_handler import RosterMismatch
    from rowgram.core import coordinator as coordinator_module

    surface_cls = MagicMock()
    monkeypatch.setattr(coordinator_module, "DrawingSurface", surface_cls)

    with pytest.raises(RosterMismatch):
        coordinator_module.RenderCoordinator().render(_request(crew={"rower_names": EIGHT + ["Jo"]}))
    surface_cls.assert_not_called()


def test_custom_renderer_mapping_is_used():
    from rowgram.core.coordinator import RenderCoordinator

    calls = []

    class Stub:
        template_id = "stub"
        display_name = "Stub"
        description = "records calls"

        def render(self, surface, crew, seats, config):
            calls.append((crew.club_name, seats.labels, config.width))
            surface.clear((0, 0, 0))

    result = RenderCoordinator(renderers={"stub": Stub()}).render(_request(template_id="stub"))
    assert calls == [("Isis Boat Club", ("Cox", "Stroke", "7", "6", "5", "4", "3", "2", "Bow"), 540)]
    assert result.width == 540


# ─── Emblem resolution ───────────────────────────────────────────────────────

def test_undecodable_emblem_becomes_warning():
    from rowgram.core.coordinator import RenderCoordinator
    from rowgram.models.render import ClubEmblem

    result = RenderCoordinator().render(_request(emblem=ClubEmblem(data=b"garbage")))
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("EMBLEM_INVALID")
    assert result.image_bytes[:8] == b"\x89PNG\r\n\x1a\n"


def test_preset_emblem_is_looked_up():
    from rowgram.core.color_resolver import ClubPreset, InMemoryClubPresetStore, resolve_theme
    from rowgram.models.render import ClubEmblem, ColorScheme

    store = InMemoryClubPresetStore([
        ClubPreset(
            preset_reference="isis",
            colors=ColorScheme(primary="#002147", secondary="#a3c1ad"),
            logo=_png(),
        )
    ])
    config, warnings = resolve_theme(_request(emblem=ClubEmblem(preset_reference="isis")), store)
    assert warnings == ()
    assert config.emblem is not None
    assert config.emblem.getpixel((0, 0)) == (0, 128, 0, 255)


def test_preset_without_logo_or_unknown_warns():
    from rowgram.core.color_resolver import ClubPreset, InMemoryClubPresetStore, resolve_theme
    from rowgram.models.render import ClubEmblem, ColorScheme

    store = InMemoryClubPresetStore([
        ClubPreset(preset_reference="plain", colors=ColorScheme(primary="navy", secondary="gold")),
    ])
    config, warnings = resolve_theme(_request(emblem=ClubEmblem(preset_reference="plain")), store)
    assert config.emblem is None
    assert "no logo" in warnings[0]

    config, warnings = resolve_theme(_request(emblem=ClubEmblem(preset_reference="ghost")), store)
    assert config.emblem is None
    assert "ghost" in warnings[0]

    config, warnings = resolve_theme(_request(emblem=ClubEmblem(preset_reference="ghost")), None)
    assert config.emblem is None
    assert warnings


def test_resolve_theme_maps_colours_and_settings():
    from rowgram.config import Settings
    from rowgram.core.color_resolver import resolve_theme
    from rowgram.models.render import ColorScheme

    settings = Settings(_env_file=None, name_char_budget=9, emblem_region_fraction=0.2)
    req = _request(colors=ColorScheme(primary="rgb(10, 20, 30)", secondary="white"))
    config, _ = resolve_theme(req, None, settings)
    assert config.primary == (10, 20, 30)
    assert config.secondary == (255, 255, 255)
    assert config.name_char_budget == 9
    assert config.emblem_fraction == 0.2


# ─── Encoding failures ───────────────────────────────────────────────────────

def test_png_encode_failure_is_serialization_failure(monkeypatch):
    from rowgram.api.middleware.error_handler import SerializationFailure
    from rowgram.core.coordinator import RenderCoordinator
    from rowgram.modules.rendering.surface import DrawingSurface

    def broken(self):
        raise RuntimeError("Failed to encode image to PNG bytes.")

    monkeypatch.setattr(DrawingSurface, "to_png", broken)
    with pytest.raises(SerializationFailure):
        RenderCoordinator().render(_request())


# ─── Models ──────────────────────────────────────────────────────────────────

def test_emblem_requires_exactly_one_source():
    from pydantic import ValidationError
    from rowgram.models.render import ClubEmblem

    with pytest.raises(ValidationError):
        ClubEmblem()
    with pytest.raises(ValidationError):
        ClubEmblem(data=b"x", preset_reference="isis")
    assert ClubEmblem(preset_reference="isis").identity == "preset:isis"
    assert ClubEmblem(data=b"x").identity.startswith("sha256:")


def test_colour_scheme_rejects_garbage():
    from pydantic import ValidationError
    from rowgram.models.render import ColorScheme

    with pytest.raises(ValidationError):
        ColorScheme(primary="#12", secondary="#fff")
    assert ColorScheme(primary=" #FFF ", secondary="navy").primary_rgb == (255, 255, 255)


def test_request_body_applies_defaults():
    from rowgram.config import Settings
    from rowgram.models.api import RenderRequestBody
    from rowgram.models.render import ColorScheme

    settings = Settings(_env_file=None)
    body = RenderRequestBody.model_validate({
        "crew": {"club_name": "X", "boat_class": "1x", "rower_names": ["Amy"]},
        "emblem": {"preset_reference": "isis"},
    })
    req = body.to_render_request(settings)
    assert req.template_id == "oxbridge-herald"
    assert (req.dimensions.width, req.dimensions.height) == (1080, 1350)
    assert req.colors.primary == "#2563eb"
    assert req.emblem.preset_reference == "isis"

    preset_colors = ColorScheme(primary="navy", secondary="gold")
    assert body.to_render_request(settings, preset_colors).colors == preset_colors


def test_request_body_decodes_base64_emblem():
    import base64
    from rowgram.models.api import RenderRequestBody

    body = RenderRequestBody.model_validate({
        "crew": {"club_name": "X", "boat_class": "1x", "rower_names": ["Amy"]},
        "emblem": {"data": base64.b64encode(b"\x89PNG-ish").decode("ascii")},
    })
    assert body.emblem.data == b"\x89PNG-ish"
