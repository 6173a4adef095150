# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Championship Gold Template
Prestigious trophy style: radial gold-into-club-colour field, black
title banner with gold rules, a dark roster panel with gold seat
medallions in two parity columns, gold-framed cox and coach plates and
a laurel footer. Emblem sits top-left inside the banner.
"""

from __future__ import annotations

import math

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns
from rowgram.utils.image_utils import radial_gradient

_GOLD = (212, 175, 55)
_PALE_GOLD = (253, 244, 196)
_BLACK = (10, 10, 10)
_WHITE = (255, 255, 255)
_PANEL = (12, 12, 20, 200)


def _medallion_row(
    surface: DrawingSurface,
    entry: SeatEntry,
    x0: float,
    x1: float,
    cy: float,
    row_h: float,
    cfg: RenderConfig,
) -> None:
    r = max(1.0, row_h * 0.42)
    mx = x0 + r
    surface.circle((mx, cy), r, fill=_GOLD, outline=_PALE_GOLD, width=max(1, cfg.px(2)))
    label, label_font = fit_line(entry.seat_label, r * 1.6, max(1, int(r * 0.75)),
                                 "serif", "bold", min_size=1)
    surface.text((mx, cy), label, label_font, _BLACK, anchor="mm")

    name_font = get_font(max(1, int(row_h * 0.45)), "serif", "bold")
    name_x = mx + r + cfg.px(14)
    fitted = fit_name(entry.occupant_name, name_font, x1 - name_x, cfg.name_char_budget)
    surface.text((name_x, cy), fitted, name_font, _WHITE, anchor="lm")


def _plate(
    surface: DrawingSurface,
    box: tuple[float, float, float, float],
    title: str,
    name: str,
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    surface.rect(box, fill=(0, 0, 0, 190))
    surface.rect(box, outline=_GOLD, width=cfg.px(3))
    inset = cfg.px(6)
    surface.rect((x0 + inset, y0 + inset, x1 - inset, y1 - inset), outline=_GOLD, width=cfg.px(1))
    cx = (x0 + x1) / 2
    surface.text((cx, y0 + (y1 - y0) * 0.32), title, get_font(cfg.px(15), "serif", "bold"),
                 _GOLD, anchor="mm")
    name_font = get_font(cfg.px(24), "serif", "bold")
    fitted = fit_name(name, name_font, (x1 - x0) - cfg.px(24), cfg.name_char_budget)
    surface.text((cx, y0 + (y1 - y0) * 0.68), fitted, name_font, _WHITE, anchor="mm")


def _laurel(surface: DrawingSurface, cx: float, cy: float, side: int, cfg: RenderConfig) -> None:
    """Branch of leaves arcing away from cx; side is -1 (left) or +1 (right)."""
    radius = cfg.px(48)
    for i in range(7):
        angle = math.radians(200 - i * 22) if side < 0 else math.radians(-20 + i * 22)
        lx = cx + side * cfg.px(70) + math.cos(angle) * radius * 0.6
        ly = cy - math.sin(angle) * radius * 0.5
        rx, ry = cfg.px(10), cfg.px(5)
        surface.ellipse((lx - rx, ly - ry, lx + rx, ly + ry), fill=_GOLD)


class ChampionshipGoldTemplate:
    template_id = "championship-gold"
    display_name = "Championship Gold"
    description = "Prestigious championship design with gold accents"

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
        m = cfg.px(36)

        surface.blit(radial_gradient(w, h, [(0.0, _PALE_GOLD), (0.45, cfg.primary), (1.0, cfg.secondary)]))

        # ── Title banner ────────────────────────────────────────────────────
        banner_h = cfg.px(220)
        surface.rect((0, m, w, m + banner_h), fill=_BLACK)
        surface.rect((0, m + cfg.px(8), w, m + cfg.px(12)), fill=_GOLD)
        surface.rect((0, m + banner_h - cfg.px(12), w, m + banner_h - cfg.px(8)), fill=_GOLD)

        region = draw_emblem(surface, cfg, "top-left", m + cfg.px(24))
        reserve = (region[2] + cfg.px(16)) if region else m + cfg.px(20)
        text_w = w - 2 * reserve

        surface.text((cx, m + cfg.px(52)), "CHAMPIONSHIP", get_font(cfg.px(44), "serif", "bold"),
                     _GOLD, anchor="mm")
        if crew.race_name:
            race, race_font = fit_line(crew.race_name.upper(), text_w, cfg.px(22), "serif", "bold")
            surface.text((cx, m + cfg.px(96)), race, race_font, _PALE_GOLD, anchor="mm")
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(32), "serif", "bold")
        surface.text((cx, m + cfg.px(142)), club, club_font, _WHITE, anchor="mm")
        line, line_font = fit_line(f"{crew.designation} • {crew.boat_class.name}", text_w,
                                   cfg.px(18), "serif", "italic")
        surface.text((cx, m + cfg.px(182)), line, line_font, _PALE_GOLD, anchor="mm")

        # ── Footer laurels ──────────────────────────────────────────────────
        laurel_cy = h - m - cfg.px(40)
        _laurel(surface, cx, laurel_cy, -1, cfg)
        _laurel(surface, cx, laurel_cy, 1, cfg)
        surface.star((cx, laurel_cy), cfg.px(16), cfg.px(7), 5, fill=_GOLD)

        # ── Plates ──────────────────────────────────────────────────────────
        plates = []
        if seats.cox is not None:
            plates.append(("COXSWAIN", seats.cox.occupant_name))
        if crew.coach_name:
            plates.append(("COACH", crew.coach_name))
        plate_h = cfg.px(86)
        plates_bottom = laurel_cy - cfg.px(60)
        panel_bottom = plates_bottom
        if plates:
            gap = cfg.px(24)
            plate_w = ((w - 2 * m) - gap * (len(plates) - 1)) / len(plates)
            for i, (title, name) in enumerate(plates):
                px0 = m + i * (plate_w + gap)
                _plate(surface, (px0, plates_bottom - plate_h, px0 + plate_w, plates_bottom), title, name, cfg)
            panel_bottom = plates_bottom - plate_h - cfg.px(24)

        # ── Roster panel ────────────────────────────────────────────────────
        panel_top = m + banner_h + cfg.px(30)
        panel = (m, panel_top, w - m, panel_bottom)
        surface.rounded_rect(panel, cfg.px(14), fill=_PANEL, outline=_GOLD, width=cfg.px(2))
        surface.text((cx, panel_top + cfg.px(32)), "THE CREW", get_font(cfg.px(24), "serif", "bold"),
                     _GOLD, anchor="mm")

        stroke_side, bow_side = split_columns(seats)
        inner_top = panel_top + cfg.px(62)
        inner_bottom = panel_bottom - cfg.px(18)
        rows = max(1, len(stroke_side))
        row_h = max(1, min(cfg.px(70), int((inner_bottom - inner_top) / rows)))

        pad = cfg.px(24)
        if bow_side:
            mid = cx
            columns = ((panel[0] + pad, mid - pad / 2, stroke_side), (mid + pad / 2, panel[2] - pad, bow_side))
        else:
            columns = ((panel[0] + pad, panel[2] - pad, stroke_side),)

        for x0, x1, entries in columns:
            for i, entry in enumerate(entries):
                _medallion_row(surface, entry, x0, x1, inner_top + i * row_h + row_h / 2, row_h, cfg)
