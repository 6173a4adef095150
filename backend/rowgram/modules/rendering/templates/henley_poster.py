# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Henley Poster Template
Riverside regatta poster: sky fading through the club colours into a
slate river.

  Header:  white title banner with a dark-red border, crossed oars,
           club, designation and a hexagonal event banner
  Roster:  two parity columns under "CREW COMPOSITION"
  Roles:   framed cox and coach plates above the river band
  Footer:  slate strip with place name and motto
  Emblem:  top-right, replacing the right-hand crown box
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns
from rowgram.utils.image_utils import linear_gradient

_SKY = (135, 206, 235)
_SLATE = (47, 79, 79)
_DARK_RED = (139, 0, 0)
_GOLD = (255, 215, 0)
_WHITE = (255, 255, 255)
_OAR = (139, 69, 19)


def _ripples(surface: DrawingSurface, cfg: RenderConfig) -> None:
    w, h = cfg.width, cfg.height
    step = cfg.px(40)
    amplitude = cfg.px(5)
    for y in range(int(h * 0.7), h, cfg.px(20)):
        points = [(x, y + (amplitude if (x // step) % 2 else -amplitude)) for x in range(0, w + step, step)]
        surface.line(points, (255, 255, 255, 25), cfg.px(2))


def _crown_box(surface: DrawingSurface, x: float, y: float, cfg: RenderConfig) -> None:
    size = cfg.px(60)
    surface.rect((x, y, x + size, y + size), fill=(*_GOLD, 204), outline=_DARK_RED, width=cfg.px(2))
    base = y + size * 0.7
    left, right = x + size * 0.2, x + size * 0.8
    surface.polygon(
        [
            (left, base), (left, y + size * 0.35), (x + size * 0.35, y + size * 0.5),
            (x + size * 0.5, y + size * 0.25), (x + size * 0.65, y + size * 0.5),
            (right, y + size * 0.35), (right, base),
        ],
        fill=_DARK_RED,
    )


def _oars(surface: DrawingSurface, cx: float, y: float, cfg: RenderConfig) -> None:
    reach = cfg.px(200)
    surface.line([(cx - reach, y), (cx + reach, y)], _OAR, cfg.px(4))
    for side in (-1, 1):
        bx = cx + side * reach
        surface.ellipse((bx - cfg.px(15), y - cfg.px(8), bx + cfg.px(15), y + cfg.px(8)), fill=_OAR)


def _hexagon(surface: DrawingSurface, box: tuple[float, float, float, float], cfg: RenderConfig) -> None:
    x0, y0, x1, y1 = box
    my = (y0 + y1) / 2
    cut = cfg.px(20)
    surface.polygon(
        [(x0, my), (x0 + cut, y0), (x1 - cut, y0), (x1, my), (x1 - cut, y1), (x0 + cut, y1)],
        fill=(*_GOLD, 51),
        outline=_GOLD,
        width=cfg.px(2),
    )


def _composition_entry(
    surface: DrawingSurface,
    entry: SeatEntry,
    x0: float,
    x1: float,
    top: float,
    row_h: float,
    last: bool,
    cfg: RenderConfig,
) -> None:
    label_font = get_font(max(1, int(row_h * 0.36)), "serif", "bold")
    name_font = get_font(max(1, int(row_h * 0.4)), "serif", "regular")
    surface.text((x0, top + row_h * 0.28), entry.seat_label, label_font, _GOLD, anchor="lm")
    fitted = fit_name(entry.occupant_name, name_font, x1 - x0, cfg.name_char_budget)
    surface.text((x0, top + row_h * 0.66), fitted, name_font, _WHITE, anchor="lm")
    if not last:
        surface.text(((x0 + x1) / 2, top + row_h * 0.94), "~", label_font, (*_GOLD, 128), anchor="mm")


def _role_frame(
    surface: DrawingSurface,
    cx: float,
    cy: float,
    title: str,
    name: str,
    cfg: RenderConfig,
) -> None:
    half_w, half_h = cfg.px(150), cfg.px(20)
    box = (cx - half_w, cy - half_h, cx + half_w, cy + half_h)
    surface.rect(box, fill=(255, 255, 255, 230), outline=_DARK_RED, width=cfg.px(2))
    title_font = get_font(cfg.px(16), "serif", "bold")
    name_font = get_font(cfg.px(18), "serif", "regular")
    surface.text((cx - cfg.px(6), cy), f"{title}:", title_font, _DARK_RED, anchor="rm")
    fitted = fit_name(name, name_font, half_w - cfg.px(16), cfg.name_char_budget)
    surface.text((cx + cfg.px(6), cy), fitted, name_font, _SLATE, anchor="lm")


class HenleyPosterTemplate:
    template_id = "henley-poster"
    display_name = "Henley Poster"
    description = "Traditional Henley Royal Regatta poster style"

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

        surface.blit(linear_gradient(
            w, h,
            [(0.0, _SKY), (0.3, cfg.primary), (0.7, cfg.secondary), (1.0, _SLATE)],
        ))
        _ripples(surface, cfg)

        # ── Title banner ────────────────────────────────────────────────────
        reserve = int(min(w, h) * cfg.emblem_fraction) + cfg.px(40) if cfg.emblem is not None else cfg.px(110)
        banner = (reserve, cfg.px(30), w - reserve, cfg.px(150))
        surface.rect(banner, fill=(255, 255, 255, 242), outline=_DARK_RED, width=cfg.px(4))
        inner_w = banner[2] - banner[0] - cfg.px(30)
        title, title_font = fit_line("HENLEY ROYAL REGATTA", inner_w, cfg.px(36), "serif", "bold", min_size=1)
        surface.text((cx, cfg.px(75)), title, title_font, _DARK_RED, anchor="ms")
        where, where_font = fit_line("THE THAMES • OXFORDSHIRE", inner_w, cfg.px(18), "serif", min_size=1)
        surface.text((cx, cfg.px(105)), where, where_font, _SLATE, anchor="ms")
        founded, founded_font = fit_line("Founded 1839", inner_w, cfg.px(14), "serif", "italic", min_size=1)
        surface.text((cx, cfg.px(130)), founded, founded_font, _SLATE, anchor="ms")

        _crown_box(surface, cfg.px(30), cfg.px(30), cfg)
        if cfg.emblem is None:
            _crown_box(surface, w - cfg.px(90), cfg.px(30), cfg)

        _oars(surface, cx, cfg.px(180), cfg)

        # ── Club + event ────────────────────────────────────────────────────
        text_w = w - 2 * cfg.px(60)
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(48), "serif", "bold")
        surface.text((cx, cfg.px(240)), club, club_font, _WHITE, anchor="ms")
        designation, des_font = fit_line(crew.designation, text_w, cfg.px(32), "serif", "italic")
        surface.text((cx, cfg.px(280)), designation, des_font, _GOLD, anchor="ms")

        event = (cx - cfg.px(180), cfg.px(300), cx + cfg.px(180), cfg.px(340))
        _hexagon(surface, event, cfg)
        line, line_font = fit_line(crew.class_and_race, event[2] - event[0] - cfg.px(50), cfg.px(20),
                                   "serif", "bold")
        surface.text((cx, (event[1] + event[3]) / 2), line, line_font, _WHITE, anchor="mm")

        surface.text((cx, cfg.px(390)), "CREW COMPOSITION", get_font(cfg.px(24), "serif", "bold"),
                     _WHITE, anchor="ms")

        # ── Footer + river band + roles from the bottom up ──────────────────
        footer_top = h - cfg.px(60)
        surface.rect((0, footer_top, w, h), fill=(*_SLATE, 230))
        place, place_font = fit_line("HENLEY-ON-THAMES • OXFORDSHIRE • ENGLAND", w - cfg.px(40), cfg.px(16),
                                     "serif", "bold", min_size=1)
        surface.text((cx, h - cfg.px(35)), place, place_font, _WHITE, anchor="ms")
        motto, motto_font = fit_line("The Home of Rowing", w - cfg.px(40), cfg.px(12), "serif", "italic",
                                     min_size=1)
        surface.text((cx, h - cfg.px(15)), motto, motto_font, _GOLD, anchor="ms")

        river_top = footer_top - cfg.px(60)
        surface.rect((0, river_top, w, footer_top), fill=(*_SLATE, 153))
        wave = cfg.px(30)
        points = [(x, river_top + cfg.px(20) + (cfg.px(5) if (x // wave) % 2 else 0))
                  for x in range(0, w + wave, wave)]
        surface.line(points, (255, 255, 255, 76), cfg.px(2))

        roles = []
        if seats.cox is not None:
            roles.append(("Coxswain", seats.cox.occupant_name))
        if crew.coach_name:
            roles.append(("Coach", crew.coach_name))
        role_step = cfg.px(50)
        roles_top = river_top - cfg.px(10) - role_step * len(roles)
        for i, (title_text, name) in enumerate(roles):
            _role_frame(surface, cx, roles_top + role_step * i + role_step / 2, title_text, name, cfg)

        # ── Crew composition ────────────────────────────────────────────────
        stroke_side, bow_side = split_columns(seats)
        top = cfg.px(410)
        rows = max(1, len(stroke_side))
        row_h = max(1, min(cfg.px(60), int(max(1, roles_top - cfg.px(10) - top) / rows)))
        if bow_side:
            columns = ((cx - cfg.px(250), cx - cfg.px(30), stroke_side), (cx + cfg.px(30), cx + cfg.px(250), bow_side))
        else:
            columns = ((cx - cfg.px(110), cx + cfg.px(110), stroke_side),)
        for x0, x1, entries in columns:
            for i, entry in enumerate(entries):
                _composition_entry(surface, entry, x0, x1, top + i * row_h, row_h, i == len(entries) - 1, cfg)

        draw_emblem(surface, cfg, "top-right", cfg.px(30))
