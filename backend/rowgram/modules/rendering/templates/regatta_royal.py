# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Regatta Royal Template
Royal-regatta programme on a radial royal-blue field.

  Pattern: faint gold fleur-de-lis grid
  Header:  white banner under a gold crown; club, designation, and a
           gold shield carrying boat class and race
  Roster:  two parity columns with spelled-out seat titles
  Roles:   shield plates for cox and coach above a gold seal
  Emblem:  top-left
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns
from rowgram.utils.image_utils import radial_gradient

_ROYAL_BLUE = (30, 58, 138)
_GOLD = (255, 215, 0)
_WHITE = (255, 255, 255)
_JEWEL = (220, 38, 38)

_SEAT_TITLES = {
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
}


def _fleur(surface: DrawingSurface, cx: float, cy: float, cfg: RenderConfig) -> None:
    fill = (*_GOLD, 20)
    rx, ry = cfg.px(4), cfg.px(12)
    surface.ellipse((cx - rx, cy - cfg.px(10) - ry, cx + rx, cy - cfg.px(10) + ry), fill=fill)
    for side in (-1, 1):
        px = cx + side * cfg.px(8)
        surface.ellipse((px - rx, cy - cfg.px(5) - cfg.px(10), px + rx, cy - cfg.px(5) + cfg.px(10)), fill=fill)
    surface.rect((cx - cfg.px(2), cy + cfg.px(2), cx + cfg.px(2), cy + cfg.px(10)), fill=fill)


def _pattern(surface: DrawingSurface, cfg: RenderConfig) -> None:
    step_x, step_y = cfg.px(200), cfg.px(150)
    for x in range(cfg.px(100), cfg.width, step_x):
        for y in range(cfg.px(100), cfg.height, step_y):
            _fleur(surface, x, y, cfg)


def _crown(surface: DrawingSurface, cx: float, cy: float, cfg: RenderConfig) -> None:
    base = cy + cfg.px(10)
    surface.rect((cx - cfg.px(30), base, cx + cfg.px(30), base + cfg.px(8)), fill=_GOLD)
    for dx, height in ((-20, 15), (-10, 20), (0, 25), (10, 20), (20, 15)):
        x = cx + dx * cfg.scale
        surface.polygon([(x - cfg.px(4), base), (x, base - cfg.px(height)), (x + cfg.px(4), base)], fill=_GOLD)
    surface.circle((cx, cy - cfg.px(10)), cfg.px(3), fill=_JEWEL)


def _shield(
    surface: DrawingSurface,
    box: tuple[float, float, float, float],
    fill,
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    w, h = x1 - x0, y1 - y0
    mx = (x0 + x1) / 2
    points = [
        (mx, y0),
        (x1 - w * 0.12, y0 + h * 0.05),
        (x1, y0 + h / 3),
        (x1, y0 + h * 2 / 3),
        (x1 - w * 0.12, y1 - h * 0.05),
        (mx, y1),
        (x0 + w * 0.12, y1 - h * 0.05),
        (x0, y0 + h * 2 / 3),
        (x0, y0 + h / 3),
        (x0 + w * 0.12, y0 + h * 0.05),
    ]
    surface.polygon(points, fill=fill, outline=_GOLD, width=cfg.px(2))


def _marker(surface: DrawingSurface, x: float, y: float, cfg: RenderConfig) -> None:
    surface.polygon(
        [(x, y), (x + cfg.px(8), y + cfg.px(4)), (x + cfg.px(6), y + cfg.px(8)), (x - cfg.px(2), y + cfg.px(4))],
        fill=_GOLD,
    )


def _seat_entry(
    surface: DrawingSurface,
    entry: SeatEntry,
    x0: float,
    x1: float,
    top: float,
    row_h: float,
    cfg: RenderConfig,
) -> None:
    title_font = get_font(max(1, int(row_h * 0.36)), "serif", "bold")
    name_font = get_font(max(1, int(row_h * 0.42)), "serif", "regular")
    _marker(surface, x0, top + row_h * 0.22, cfg)
    text_x = x0 + cfg.px(16)
    surface.text((text_x, top + row_h * 0.3), _SEAT_TITLES.get(entry.seat_label, entry.seat_label),
                 title_font, _GOLD, anchor="lm")
    fitted = fit_name(entry.occupant_name, name_font, x1 - text_x, cfg.name_char_budget)
    surface.text((text_x, top + row_h * 0.72), fitted, name_font, _WHITE, anchor="lm")


def _role_plate(
    surface: DrawingSurface,
    cx: float,
    cy: float,
    title: str,
    name: str,
    cfg: RenderConfig,
) -> None:
    half_w, half_h = cfg.px(160), cfg.px(20)
    _shield(surface, (cx - half_w, cy - half_h, cx + half_w, cy + half_h), (*_GOLD, 77), cfg)
    title_font = get_font(cfg.px(16), "serif", "italic")
    name_font = get_font(cfg.px(18), "serif", "bold")
    surface.text((cx - cfg.px(6), cy), f"{title}:", title_font, _GOLD, anchor="rm")
    fitted = fit_name(name, name_font, half_w - cfg.px(30), cfg.name_char_budget)
    surface.text((cx + cfg.px(6), cy), fitted, name_font, _WHITE, anchor="lm")


def _seal(surface: DrawingSurface, cx: float, cy: float, cfg: RenderConfig) -> None:
    surface.circle((cx, cy), cfg.px(30), outline=_GOLD, width=cfg.px(3))
    surface.circle((cx, cy), cfg.px(20), fill=_GOLD)
    arm = cfg.px(12)
    surface.line([(cx - arm, cy), (cx + arm, cy)], _WHITE, cfg.px(2))
    surface.line([(cx, cy - arm), (cx, cy + arm)], _WHITE, cfg.px(2))


class RegattaRoyalTemplate:
    template_id = "regatta-royal"
    display_name = "Regatta Royal"
    description = "Royal regatta styling with heraldic elements"

    def render(
        self,
        surface: DrawingSurface,
        crew: Crew,
        seats: SeatAssignment,
        config: RenderConfig,
    ) -> None:
        cfg = config
        w, h = cfg.width, cfg.height
        cx = w / 2

        surface.blit(radial_gradient(w, h, [(0.0, _ROYAL_BLUE), (0.6, cfg.primary), (1.0, cfg.secondary)]))
        _pattern(surface, cfg)

        # ── Banner ──────────────────────────────────────────────────────────
        reserve = int(min(w, h) * cfg.emblem_fraction) + cfg.px(40) if cfg.emblem is not None else cfg.px(60)
        banner = (reserve, cfg.px(40), w - reserve, cfg.px(120))
        surface.rounded_rect(banner, cfg.px(20), fill=(255, 255, 255, 242), outline=_GOLD, width=cfg.px(3))
        _crown(surface, cx, cfg.px(60), cfg)
        title, title_font = fit_line("ROYAL REGATTA", banner[2] - banner[0] - cfg.px(30), cfg.px(32),
                                     "serif", "bold", min_size=1)
        surface.text((cx, cfg.px(108)), title, title_font, cfg.primary, anchor="ms")

        # ── Club ────────────────────────────────────────────────────────────
        text_w = w - 2 * cfg.px(60)
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(48), "serif", "bold")
        surface.text((cx, cfg.px(170)), club, club_font, _WHITE, anchor="ms")
        designation, des_font = fit_line(crew.designation, text_w, cfg.px(36), "serif")
        surface.text((cx, cfg.px(210)), designation, des_font, _GOLD, anchor="ms")

        shield = (cx - cfg.px(130), cfg.px(228), cx + cfg.px(130), cfg.px(290))
        _shield(surface, shield, (*_GOLD, 51), cfg)
        inner_w = shield[2] - shield[0] - cfg.px(40)
        boat, boat_font = fit_line(crew.boat_class.name, inner_w, cfg.px(22), "serif", "bold")
        surface.text((cx, cfg.px(252)), boat, boat_font, _WHITE, anchor="mm")
        if crew.race_name:
            race, race_font = fit_line(crew.race_name, inner_w, cfg.px(18), "serif")
            surface.text((cx, cfg.px(274)), race, race_font, _WHITE, anchor="mm")

        surface.text((cx, cfg.px(325)), "CREW PRESENTATION", get_font(cfg.px(24), "serif", "bold"),
                     _GOLD, anchor="ms")
        rule_y = cfg.px(340)
        surface.line([(cx - cfg.px(100), rule_y), (cx + cfg.px(100), rule_y)], _GOLD, cfg.px(2))
        for i in range(5):
            surface.circle((cx + (i - 2) * 20 * cfg.scale, rule_y), cfg.px(2), fill=_GOLD)

        # ── Seal + roles from the bottom up ─────────────────────────────────
        seal_cy = h - cfg.px(60)
        roles = []
        if seats.cox is not None:
            roles.append(("Royal Coxswain", seats.cox.occupant_name))
        if crew.coach_name:
            roles.append(("Head Coach", crew.coach_name))
        role_step = cfg.px(50)
        roles_top = seal_cy - cfg.px(50) - role_step * len(roles)
        for i, (title_text, name) in enumerate(roles):
            _role_plate(surface, cx, roles_top + role_step * i + role_step / 2, title_text, name, cfg)
        _seal(surface, cx, seal_cy, cfg)

        # ── Presentation columns ────────────────────────────────────────────
        stroke_side, bow_side = split_columns(seats)
        top = cfg.px(360)
        rows = max(1, len(stroke_side))
        row_h = max(1, min(cfg.px(56), int(max(1, roles_top - cfg.px(10) - top) / rows)))
        if bow_side:
            columns = ((cx - cfg.px(250), cx - cfg.px(20), stroke_side), (cx + cfg.px(40), cx + cfg.px(270), bow_side))
        else:
            columns = ((cx - cfg.px(120), cx + cfg.px(150), stroke_side),)
        for x0, x1, entries in columns:
            for i, entry in enumerate(entries):
                _seat_entry(surface, entry, x0, x1, top + i * row_h, row_h, cfg)

        draw_emblem(surface, cfg, "top-left", cfg.px(24))
