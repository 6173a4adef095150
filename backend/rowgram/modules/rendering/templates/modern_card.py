# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Modern Card Template
Contemporary card layout on a light page.

  Header:  rounded banner in secondary with club, designation, class • race
  Cox:     full-width row with a secondary badge, above the lineup
  Roster:  member cards in two columns split by seat parity
           (stroke side left, bow side right); primary seat badges
  Coach:   full-width row with a green badge
  Emblem:  top-right corner of the card
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, contrast_ink, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns

_PAGE = (248, 249, 250)
_CARD = (255, 255, 255)
_TILE = (241, 245, 249)
_INK = (30, 41, 59)
_MUTED = (100, 116, 139)
_COACH = (16, 185, 129)


def _member_tile(
    surface: DrawingSurface,
    box: tuple[float, float, float, float],
    badge_text: str,
    badge_color,
    name: str,
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    tile_h = y1 - y0
    surface.rounded_rect(box, cfg.px(8), fill=_TILE)

    pad = max(1, int(tile_h * 0.18))
    badge_w = max(cfg.px(72), int(tile_h * 1.4))
    badge = (x0 + pad, y0 + pad, x0 + pad + badge_w, y1 - pad)
    surface.rounded_rect(badge, cfg.px(5), fill=badge_color)

    label_size = max(1, int(tile_h * 0.3))
    label_text, label_font = fit_line(badge_text, badge_w - 2 * pad, label_size, "sans", "bold", min_size=1)
    surface.text(((badge[0] + badge[2]) / 2, (y0 + y1) / 2), label_text, label_font,
                 contrast_ink(badge_color), anchor="mm")

    name_font = get_font(max(1, int(tile_h * 0.38)), "sans", "regular")
    name_x = badge[2] + pad
    fitted = fit_name(name, name_font, x1 - pad - name_x, cfg.name_char_budget)
    surface.text((name_x, (y0 + y1) / 2), fitted, name_font, _INK, anchor="lm")


def _column(
    surface: DrawingSurface,
    entries: tuple[SeatEntry, ...],
    x0: float,
    x1: float,
    top: float,
    row_h: float,
    gap: float,
    cfg: RenderConfig,
) -> None:
    for i, entry in enumerate(entries):
        y = top + i * (row_h + gap)
        _member_tile(surface, (x0, y, x1, y + row_h), entry.seat_label, cfg.primary,
                     entry.occupant_name, cfg)


class ModernCardTemplate:
    template_id = "modern-card"
    display_name = "Modern Card"
    description = "Contemporary card-based design with member highlights"

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
        m = cfg.px(40)

        surface.clear(_PAGE)
        surface.rounded_rect((m + cfg.px(4), m + cfg.px(6), w - m + cfg.px(4), h - m + cfg.px(6)),
                             cfg.px(20), fill=(15, 23, 42, 18))
        surface.rounded_rect((m, m, w - m, h - m), cfg.px(20), fill=_CARD)
        surface.rect((m + cfg.px(10), m, w - m - cfg.px(10), m + cfg.px(8)), fill=cfg.primary)

        # ── Header ──────────────────────────────────────────────────────────
        hx0, hy0 = m + cfg.px(24), m + cfg.px(30)
        hx1, hy1 = w - m - cfg.px(24), m + cfg.px(30) + cfg.px(160)
        surface.rounded_rect((hx0, hy0, hx1, hy1), cfg.px(12), fill=cfg.secondary)

        region = draw_emblem(surface, cfg, "top-right", m + cfg.px(30))
        reserve = (region[2] - region[0] + cfg.px(16)) if region else 0
        text_w = (hx1 - hx0) - 2 * max(cfg.px(24), reserve)
        head_ink = contrast_ink(cfg.secondary)

        club, club_font = fit_line(crew.club_name, text_w, cfg.px(40), "sans", "bold")
        surface.text((cx, hy0 + cfg.px(46)), club, club_font, head_ink, anchor="mm")
        designation, des_font = fit_line(crew.designation, text_w, cfg.px(26), "sans")
        surface.text((cx, hy0 + cfg.px(92)), designation, des_font, head_ink, anchor="mm")
        line, line_font = fit_line(crew.class_and_race, text_w, cfg.px(19), "sans")
        surface.text((cx, hy0 + cfg.px(130)), line, line_font, head_ink, anchor="mm")

        # ── Body frame ──────────────────────────────────────────────────────
        bx0, bx1 = m + cfg.px(30), w - m - cfg.px(30)
        y = hy1 + cfg.px(30)
        body_bottom = h - m - cfg.px(56)
        row_h_max, gap = cfg.px(58), cfg.px(12)

        if seats.cox is not None:
            _member_tile(surface, (bx0, y, bx1, y + row_h_max), "COX", cfg.secondary,
                         seats.cox.occupant_name, cfg)
            y += row_h_max + cfg.px(24)

        coach_top = body_bottom
        if crew.coach_name:
            coach_top = body_bottom - row_h_max
            _member_tile(surface, (bx0, coach_top, bx1, body_bottom), "COACH", _COACH,
                         crew.coach_name, cfg)
            coach_top -= cfg.px(24)

        # ── Lineup ──────────────────────────────────────────────────────────
        stroke_side, bow_side = split_columns(seats)
        caption_font = get_font(cfg.px(15), "sans", "bold")
        if bow_side:
            col_gap = cfg.px(24)
            mid = (bx0 + bx1) / 2
            surface.text((bx0, y), "STROKE SIDE", caption_font, _MUTED, anchor="lt")
            surface.text((mid + col_gap / 2, y), "BOW SIDE", caption_font, _MUTED, anchor="lt")
        else:
            surface.text((bx0, y), "LINEUP", caption_font, _MUTED, anchor="lt")
        y += cfg.px(28)

        rows = max(1, len(stroke_side))
        available = max(1, coach_top - y)
        row_h = max(1, min(row_h_max, int((available - gap * (rows - 1)) / rows)))

        if bow_side:
            _column(surface, stroke_side, bx0, mid - col_gap / 2, y, row_h, gap, cfg)
            _column(surface, bow_side, mid + col_gap / 2, bx1, y, row_h, gap, cfg)
        else:
            _column(surface, stroke_side, bx0, bx1, y, row_h, gap, cfg)

        # ── Footer mark ─────────────────────────────────────────────────────
        surface.text((cx, h - m - cfg.px(26)), "ROWGRAM", get_font(cfg.px(14), "sans", "bold"),
                     cfg.primary, anchor="mm")
