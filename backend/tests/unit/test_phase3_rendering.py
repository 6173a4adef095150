# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 3 rendering tests.
Drawing surface, text fitting, emblem placement and every template
variant drawn against a recording surface.
"""

import cv2
import numpy as np
import pytest

from rowgram.modules.rendering.surface import DrawingSurface

TEMPLATE_IDS = [
    "oxbridge-herald", "modern-card", "race-day", "championship-gold",
    "classic-lineup", "minimal-clean", "vintage-classic", "elite-performance",
    "regatta-royal", "henley-poster",
]
EIGHT = ["Amy", "Bo", "Cal", "Dee", "Eve", "Fay", "Gio", "Hal"]


class RecordingSurface(DrawingSurface):
    """DrawingSurface that remembers every text command it draws."""

    def __init__(self, width, height, background=(255, 255, 255)):
        super().__init__(width, height, background)
        self.texts = []

    def text(self, xy, text, font, fill, anchor="la"):
        self.texts.append({"text": text, "font": font, "fill": fill, "xy": xy, "anchor": anchor})
        super().text(xy, text, font, fill, anchor)

    def strings(self) -> list[str]:
        return [t["text"] for t in self.texts]


def _crew(boat_class="8+", names=None, cox="Ivy", coach="Sam", **kwargs):
    from rowgram.models.crew import CrewPayload
    from rowgram.modules.roster import assign_crew, build_crew

    payload = CrewPayload(
        club_name=kwargs.get("club_name", "Isis Boat Club"),
        race_name=kwargs.get("race_name", "Summer Eights"),
        boat_name=kwargs.get("boat_name", "M1"),
        boat_class=boat_class,
        rower_names=names if names is not None else EIGHT,
        cox_name=cox,
        coach_name=coach,
    )
    crew = build_crew(payload)
    return crew, assign_crew(crew)


def _config(width=1080, height=1350, primary=(37, 99, 235), secondary=(30, 64, 175), emblem=None):
    from rowgram.modules.rendering.base import RenderConfig
    return RenderConfig(width=width, height=height, primary=primary, secondary=secondary, emblem=emblem)


def _emblem_png(bgra=(0, 0, 255, 255), size=64) -> bytes:
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:] = bgra
    ok, buf = cv2.imencode(".png", img)
    assert ok
    return buf.tobytes()


# ─── Surface ─────────────────────────────────────────────────────────────────

def test_surface_rejects_non_positive_size():
    with pytest.raises(ValueError):
        DrawingSurface(0, 100)
    with pytest.raises(ValueError):
        DrawingSurface(100, -1)


def test_surface_fill_and_rect():
    s = DrawingSurface(40, 30, background=(10, 20, 30))
    assert s.size == (40, 30)
    assert s.pixel(5, 5) == (10, 20, 30)
    s.rect((0, 0, 9, 9), fill=(255, 0, 0))
    assert s.pixel(5, 5) == (255, 0, 0)


def test_surface_translucent_fill_blends():
    s = DrawingSurface(10, 10, background=(0, 0, 0))
    s.rect((0, 0, 9, 9), fill=(255, 255, 255, 128))
    r, g, b = s.pixel(5, 5)
    assert 120 <= r <= 135


def test_surface_to_png_decodes_to_same_size():
    s = DrawingSurface(64, 48)
    png = s.to_png()
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    decoded = cv2.imdecode(np.frombuffer(png, np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape == (48, 64, 3)


def test_surface_blit_rgba_composites():
    s = DrawingSurface(20, 20, background=(255, 255, 255))
    tile = np.zeros((10, 10, 4), dtype=np.uint8)
    tile[..., 0] = 255          # red
    tile[:5, :, 3] = 255        # top half opaque, bottom transparent
    s.blit(tile, (5, 5))
    assert s.pixel(8, 7) == (255, 0, 0)
    assert s.pixel(8, 12) == (255, 255, 255)


# ─── Text fitting ────────────────────────────────────────────────────────────

def test_truncate_to_budget():
    from rowgram.modules.rendering.text_fit import truncate_to_budget
    assert truncate_to_budget("Alexandrina-Beaumont", 12) == "Alexandrina…"
    assert truncate_to_budget("Bo", 12) == "Bo"
    assert truncate_to_budget("ExactlyTwelv", 12) == "ExactlyTwelv"
    assert len(truncate_to_budget("Thirteen chars", 12)) <= 12


def test_fit_name_respects_box_width():
    from rowgram.modules.rendering.fonts import get_font
    from rowgram.modules.rendering.text_fit import ELLIPSIS, fit_name, text_width

    font = get_font(40, "sans", "bold")
    full_budget = fit_name("Alexandrina-Beaumont", font, 10_000, 12)
    assert full_budget == "Alexandrina…"

    narrow = text_width("Alexandrina…", font) / 2
    squeezed = fit_name("Alexandrina-Beaumont", font, narrow, 12)
    assert squeezed.endswith(ELLIPSIS)
    assert text_width(squeezed, font) <= narrow
    assert len(squeezed) < len("Alexandrina…")


def test_fit_name_leaves_short_names_alone():
    from rowgram.modules.rendering.fonts import get_font
    from rowgram.modules.rendering.text_fit import fit_name
    assert fit_name("Bo", get_font(24), 500, 12) == "Bo"


def test_fit_line_shrinks_font_before_ellipsizing():
    from rowgram.modules.rendering.text_fit import fit_line, text_width
    text, font = fit_line("Isis Boat Club", 10_000, 40)
    assert text == "Isis Boat Club"
    assert font.size == 40

    text, font = fit_line("An Extremely Long Rowing Club Name Indeed", 200, 40, min_size=10)
    assert text_width(text, font) <= 200


# ─── Emblem ──────────────────────────────────────────────────────────────────

def test_decode_emblem_rejects_garbage():
    from rowgram.api.middleware.error_handler import EmblemInvalid
    from rowgram.modules.rendering.emblem import decode_emblem
    with pytest.raises(EmblemInvalid):
        decode_emblem(b"not an image")
    with pytest.raises(EmblemInvalid):
        decode_emblem(b"")


def test_decode_emblem_returns_rgba():
    from rowgram.modules.rendering.emblem import decode_emblem
    img = decode_emblem(_emblem_png())
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0)) == (255, 0, 0, 255)


@pytest.mark.parametrize("corner", ["top-left", "top-right", "bottom-left", "bottom-right"])
def test_emblem_region_depends_only_on_canvas(corner):
    from rowgram.modules.rendering.emblem import emblem_region
    x0, y0, x1, y1 = emblem_region(1080, 1350, corner, 0.14, 40)
    assert x1 - x0 == y1 - y0 == round(1080 * 0.14)
    assert 0 <= x0 and x1 <= 1080
    assert 0 <= y0 and y1 <= 1350


def test_place_emblem_preserves_aspect_and_centres():
    from rowgram.modules.rendering.emblem import place_emblem
    from PIL import Image

    s = DrawingSurface(100, 100, background=(255, 255, 255))
    wide = Image.new("RGBA", (40, 20), (0, 128, 0, 255))
    place_emblem(s, wide, (0, 0, 40, 40))
    assert s.pixel(20, 20) == (0, 128, 0)
    assert s.pixel(20, 5) == (255, 255, 255)     # letterboxed above


# ─── Templates ───────────────────────────────────────────────────────────────

def test_registry_lists_all_templates():
    from rowgram.modules.rendering.base import TemplateRenderer
    from rowgram.modules.rendering.registry import TEMPLATE_REGISTRY, list_templates

    assert sorted(TEMPLATE_REGISTRY) == sorted(TEMPLATE_IDS)
    for renderer in TEMPLATE_REGISTRY.values():
        assert isinstance(renderer, TemplateRenderer)
        assert vars(renderer) == {}
    assert {t["template_id"] for t in list_templates()} == set(TEMPLATE_IDS)


def test_get_renderer_unknown_raises():
    from rowgram.api.middleware.error_handler import UnknownTemplate
    from rowgram.modules.rendering.registry import get_renderer
    with pytest.raises(UnknownTemplate):
        get_renderer("nonexistent")


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_template_draws_header_and_roster(template_id):
    from rowgram.modules.rendering.registry import get_renderer

    crew, seats = _crew()
    surface = RecordingSurface(1080, 1350)
    get_renderer(template_id).render(surface, crew, seats, _config())
    drawn = surface.strings()

    assert any("Isis Boat Club" in t for t in drawn)
    for name in EIGHT + ["Ivy", "Sam"]:
        assert name in drawn, f"{template_id} did not draw {name}"
    for label in ("Stroke", "Bow"):
        assert any(label.lower() == t.lower() for t in drawn)


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_template_truncates_long_names_only(template_id):
    from rowgram.modules.rendering.registry import get_renderer

    names = ["Alexandrina-Beaumont", "Bo", "Cal", "Dee", "Eve", "Fay", "Gio", "Hal"]
    crew, seats = _crew(names=names)
    surface = RecordingSurface(1080, 1350)
    get_renderer(template_id).render(surface, crew, seats, _config())
    drawn = surface.strings()

    assert "Alexandrina-Beaumont" not in drawn
    truncated = [t for t in drawn if t.startswith("Alex") and t.endswith("…")]
    assert truncated and all(len(t) <= 12 for t in truncated)
    assert "Bo" in drawn


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_name_ink_is_independent_of_scheme(template_id):
    from rowgram.modules.rendering.registry import get_renderer

    def ink_for(cfg):
        crew, seats = _crew()
        surface = RecordingSurface(cfg.width, cfg.height)
        get_renderer(template_id).render(surface, crew, seats, cfg)
        return [t["fill"] for t in surface.texts if t["text"] == "Bo"]

    blue = ink_for(_config(primary=(37, 99, 235), secondary=(30, 64, 175)))
    yellow = ink_for(_config(primary=(250, 204, 21), secondary=(254, 240, 138)))
    assert blue and blue == yellow


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
@pytest.mark.parametrize("boat_class, names, cox", [
    ("1x", ["Amy"], None),
    ("2-", ["Amy", "Bo"], None),
    ("4+", ["Amy", "Bo", "Cal", "Dee"], "Ivy"),
])
def test_template_handles_every_boat_size(template_id, boat_class, names, cox):
    from rowgram.modules.rendering.registry import get_renderer

    crew, seats = _crew(boat_class=boat_class, names=names, cox=cox, coach=None, race_name="")
    surface = RecordingSurface(1080, 1350)
    get_renderer(template_id).render(surface, crew, seats, _config())
    drawn = surface.strings()
    for name in names:
        assert name in drawn
    if cox is None:
        assert "Ivy" not in drawn


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
@pytest.mark.parametrize("width, height", [(320, 240), (1080, 1080), (1920, 1080), (60, 600)])
def test_template_renders_at_any_size(template_id, width, height):
    from rowgram.modules.rendering.registry import get_renderer

    crew, seats = _crew()
    surface = DrawingSurface(width, height)
    get_renderer(template_id).render(surface, crew, seats, _config(width, height))
    assert surface.to_array().shape == (height, width, 3)


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_template_output_is_deterministic(template_id):
    from rowgram.modules.rendering.registry import get_renderer

    renderer = get_renderer(template_id)
    crew, seats = _crew()
    a, b = DrawingSurface(540, 675), DrawingSurface(540, 675)
    renderer.render(a, crew, seats, _config(540, 675))
    renderer.render(b, crew, seats, _config(540, 675))
    assert np.array_equal(a.to_array(), b.to_array())


@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_template_composites_emblem(template_id):
    from rowgram.modules.rendering.base import draw_emblem
    from rowgram.modules.rendering.emblem import decode_emblem
    from rowgram.modules.rendering.registry import get_renderer

    emblem = decode_emblem(_emblem_png(bgra=(0, 0, 255, 255)))   # opaque red
    cfg = _config(emblem=emblem)
    crew, seats = _crew()

    with_emblem = DrawingSurface(1080, 1350)
    without = DrawingSurface(1080, 1350)
    get_renderer(template_id).render(with_emblem, crew, seats, cfg)
    get_renderer(template_id).render(without, crew, seats, _config())

    assert not np.array_equal(with_emblem.to_array(), without.to_array())
    red = np.all(with_emblem.to_array() == (255, 0, 0), axis=-1)
    side = round(1080 * cfg.emblem_fraction)
    assert red.sum() >= 0.8 * side * side


def test_contrast_ink_picks_readable_colour():
    from rowgram.modules.rendering.base import contrast_ink
    assert contrast_ink((255, 255, 255)) == (17, 24, 39)
    assert contrast_ink((0, 0, 0)) == (255, 255, 255)


def test_render_config_scale():
    cfg = _config(540, 675)
    assert cfg.scale == 0.5
    assert cfg.px(40) == 20
    assert cfg.px(0.1) == 1
