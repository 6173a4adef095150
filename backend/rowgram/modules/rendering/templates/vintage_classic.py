# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Vintage Classic Template
Old programme-sheet style on speckled cream paper.

  Border:  heavy and light rules in primary, corners cut diagonally
  Header:  "ROWING CLUB", club name, pennant banner with the designation,
           class • race, dotted ornament
  Roster:  seat label (primary) and name (brown ink) with dot leaders
  Roles:   double-ruled frames for Coxswain and Coach
  Footer:  stem-and-scroll flourish
  Emblem:  top-right, inside the inner rule
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment
from rowgram.modules.rendering.base import RenderConfig, contrast_ink, draw_emblem, texture_rng
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name

_PAPER = (245, 241, 232)
_SPECK = (139, 125, 107)
_INK = (44, 24, 16)

# Unit vectors for a half circle opening upwards (y grows downwards)
_HALF_ARC = [
    (1.0, 0.0), (0.924, 0.383), (0.707, 0.707), (0.383, 0.924), (0.0, 1.0),
    (-0.383, 0.924), (-0.707, 0.707), (-0.924, 0.383), (-1.0, 0.0),
]


def _paper(surface: DrawingSurface, crew: Crew, cfg: RenderConfig) -> None:
    surface.clear(_PAPER)
    rng = texture_rng(crew)
    for _ in range(1000):
        x, y = rng.uniform(0, cfg.width), rng.uniform(0, cfg.height)
        surface.rect((x, y, x + 1, y + 1), fill=(*_SPECK, int(rng.uniform(0, 0.1) * 255)))


def _border(surface: DrawingSurface, cfg: RenderConfig) -> int:
    w, h = cfg.width, cfg.height
    outer, inner = cfg.px(20), cfg.px(30)
    surface.rect((outer, outer, w - outer, h - outer), outline=cfg.primary, width=cfg.px(8))
    surface.rect((inner, inner, w - inner, h - inner), outline=cfg.primary, width=cfg.px(2))
    c = cfg.px(30)
    for (x0, y0), (x1, y1) in (
        ((inner, inner + c), (inner + c, inner)),
        ((w - inner - c, inner), (w - inner, inner + c)),
        ((inner, h - inner - c), (inner + c, h - inner)),
        ((w - inner - c, h - inner), (w - inner, h - inner - c)),
    ):
        surface.line([(x0, y0), (x1, y1)], cfg.primary, cfg.px(3))
    return inner


def _pennant(surface: DrawingSurface, box: tuple[float, float, float, float], color, notch: float) -> None:
    x0, y0, x1, y1 = box
    my = (y0 + y1) / 2
    surface.polygon(
        [(x0, y0), (x1 - notch, y0), (x1, my), (x1 - notch, y1), (x0, y1), (x0 + notch, my)],
        fill=color,
    )


def _ornament(surface: DrawingSurface, cx: float, y: float, cfg: RenderConfig) -> None:
    surface.circle((cx, y), cfg.px(6), fill=cfg.primary)
    for i in range(1, 4):
        offset = i * 15 * cfg.scale
        r = cfg.px(4 - i)
        surface.circle((cx - offset, y), r, fill=cfg.primary)
        surface.circle((cx + offset, y), r, fill=cfg.primary)


def _frame(
    surface: DrawingSurface,
    cx: float,
    cy: float,
    title: str,
    name: str,
    cfg: RenderConfig,
) -> None:
    half_w, half_h = cfg.px(150), cfg.px(19)
    box = (cx - half_w, cy - half_h, cx + half_w, cy + half_h)
    surface.rect(box, outline=cfg.primary, width=cfg.px(2))
    inset = cfg.px(5)
    surface.rect((box[0] + inset, box[1] + inset, box[2] - inset, box[3] - inset),
                 outline=cfg.primary, width=cfg.px(1))

    title_font = get_font(max(1, min(cfg.px(17), int(half_h * 0.9))), "serif", "italic")
    name_font = get_font(max(1, min(cfg.px(18), int(half_h * 0.95))), "serif", "bold")
    surface.text((cx - cfg.px(6), cy), f"{title}:", title_font, cfg.secondary, anchor="rm")
    fitted = fit_name(name, name_font, half_w - cfg.px(16), cfg.name_char_budget)
    surface.text((cx + cfg.px(6), cy), fitted, name_font, _INK, anchor="lm")


def _flourish(surface: DrawingSurface, cx: float, cy: float, cfg: RenderConfig) -> None:
    stem = cfg.px(15)
    surface.line([(cx, cy - stem), (cx, cy + stem)], cfg.primary, cfg.px(2))
    r = cfg.px(15)
    for side in (-1, 1):
        ox = cx + side * cfg.px(20)
        points = [(ox + r * c, cy + r * s) for c, s in _HALF_ARC]
        surface.line(points, cfg.primary, cfg.px(2))


class VintageClassicTemplate:
    template_id = "vintage-classic"
    display_name = "Vintage Classic"
    description = "Traditional parchment style with ornate decorations"

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

        _paper(surface, crew, cfg)
        inner = _border(surface, cfg)

        # ── Header ──────────────────────────────────────────────────────────
        reserve = (int(min(w, h) * cfg.emblem_fraction) + inner + cfg.px(30)
                   if cfg.emblem is not None else inner + cfg.px(40))
        text_w = w - 2 * reserve

        surface.text((cx, cfg.px(80)), "ROWING CLUB", get_font(cfg.px(24), "serif", "bold"),
                     cfg.secondary, anchor="ms")
        half = cfg.px(75)
        surface.line([(cx - half, cfg.px(95)), (cx + half, cfg.px(95))], cfg.primary, cfg.px(2))
        surface.circle((cx - half, cfg.px(95)), cfg.px(4), fill=cfg.primary)
        surface.circle((cx + half, cfg.px(95)), cfg.px(4), fill=cfg.primary)

        club, club_font = fit_line(crew.club_name, text_w, cfg.px(40), "serif", "bold")
        surface.text((cx, cfg.px(140)), club, club_font, _INK, anchor="ms")

        banner = (cx - cfg.px(200), cfg.px(170), cx + cfg.px(200), cfg.px(220))
        _pennant(surface, banner, cfg.primary, cfg.px(20))
        designation, des_font = fit_line(crew.designation, banner[2] - banner[0] - cfg.px(60),
                                         cfg.px(28), "serif", "bold")
        surface.text((cx, (banner[1] + banner[3]) / 2), designation, des_font,
                     contrast_ink(cfg.primary), anchor="mm")

        line, line_font = fit_line(crew.class_and_race, text_w, cfg.px(20), "serif")
        surface.text((cx, cfg.px(250)), line, line_font, cfg.secondary, anchor="ms")
        _ornament(surface, cx, cfg.px(270), cfg)

        # ── Footer + roles from the bottom up ───────────────────────────────
        flourish_y = h - cfg.px(60)
        roles = []
        if seats.cox is not None:
            roles.append(("Coxswain", seats.cox.occupant_name))
        if crew.coach_name:
            roles.append(("Coach", crew.coach_name))
        role_step = cfg.px(50)
        roles_top = flourish_y - cfg.px(40) - role_step * len(roles)

        # ── Roster ──────────────────────────────────────────────────────────
        rowers = seats.rowers
        top = cfg.px(300)
        line_h = max(1, min(cfg.px(32), int(max(1, roles_top - top) / max(1, len(rowers)))))
        label_font = get_font(max(1, min(cfg.px(16), int(line_h * 0.55))), "serif", "bold")
        name_font = get_font(max(1, min(cfg.px(18), int(line_h * 0.6))), "serif", "regular")
        dot_r = cfg.px(1.5)

        list_x = cx - cfg.px(150)
        label_x = list_x + cfg.px(60)
        name_x = list_x + cfg.px(80)
        leader_x = cx + cfg.px(120)
        name_box = leader_x - cfg.px(10) - name_x

        for i, entry in enumerate(rowers):
            y = top + line_h * i + line_h / 2
            surface.text((label_x, y), entry.seat_label, label_font, cfg.primary, anchor="rm")
            fitted = fit_name(entry.occupant_name, name_font, name_box, cfg.name_char_budget)
            surface.text((name_x, y), fitted, name_font, _INK, anchor="lm")
            if i < len(rowers) - 1:
                for dot in range(5):
                    surface.circle((leader_x + dot * 15 * cfg.scale, y), dot_r, fill=cfg.secondary)

        for i, (title, name) in enumerate(roles):
            _frame(surface, cx, roles_top + role_step * i + role_step / 2, title, name, cfg)

        _flourish(surface, cx, flourish_y, cfg)
        draw_emblem(surface, cfg, "top-right", inner + cfg.px(12))
