# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Race Day Template
High-energy poster: primary field with diagonal secondary stripes under a
dark veil, a white "RACE DAY" banner, parity-split lineup columns on
white panels, red cox box, green coach box and a call-to-start footer.
Emblem sits bottom-right.
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, contrast_ink, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns

_WHITE = (255, 255, 255)
_INK = (17, 24, 39)
_COX = (220, 38, 38)
_COACH = (5, 150, 105)


def _stripes(surface: DrawingSurface, cfg: RenderConfig) -> None:
    w, h = cfg.width, cfg.height
    step, band = cfg.px(120), cfg.px(40)
    x = -h
    while x < w:
        surface.polygon(
            [(x, 0), (x + band, 0), (x + band + h, h), (x + h, h)],
            fill=(*cfg.secondary, 110),
        )
        x += step
    surface.rect((0, 0, w, h), fill=(0, 0, 0, 77))


def _lineup_row(
    surface: DrawingSurface,
    entry: SeatEntry,
    box: tuple[float, float, float, float],
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    row_h = y1 - y0
    surface.rounded_rect(box, cfg.px(6), fill=_WHITE)

    chip_w = max(cfg.px(80), int(row_h * 1.5))
    inset = max(1, int(row_h * 0.12))
    chip = (x0 + inset, y0 + inset, x0 + inset + chip_w, y1 - inset)
    surface.rounded_rect(chip, cfg.px(4), fill=cfg.secondary)
    label, label_font = fit_line(entry.seat_label.upper(), chip_w - 2 * inset,
                                 max(1, int(row_h * 0.32)), "sans", "bold", min_size=1)
    surface.text(((chip[0] + chip[2]) / 2, (y0 + y1) / 2), label, label_font,
                 contrast_ink(cfg.secondary), anchor="mm")

    name_font = get_font(max(1, int(row_h * 0.42)), "sans", "bold")
    name_x = chip[2] + cfg.px(12)
    fitted = fit_name(entry.occupant_name, name_font, x1 - cfg.px(10) - name_x, cfg.name_char_budget)
    surface.text((name_x, (y0 + y1) / 2), fitted, name_font, _INK, anchor="lm")


def _role_box(
    surface: DrawingSurface,
    box: tuple[float, float, float, float],
    title: str,
    name: str,
    color,
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    surface.rounded_rect(box, cfg.px(8), fill=color)
    title_font = get_font(cfg.px(16), "sans", "bold")
    name_font = get_font(cfg.px(24), "sans", "bold")
    cx = (x0 + x1) / 2
    surface.text((cx, y0 + (y1 - y0) * 0.3), title, title_font, _WHITE, anchor="mm")
    fitted = fit_name(name, name_font, (x1 - x0) - cfg.px(20), cfg.name_char_budget)
    surface.text((cx, y0 + (y1 - y0) * 0.68), fitted, name_font, _WHITE, anchor="mm")


class RaceDayTemplate:
    template_id = "race-day"
    display_name = "Race Day"
    description = "High-energy race day design with a bold lineup"

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

        surface.clear(cfg.primary)
        _stripes(surface, cfg)

        # ── Banner ──────────────────────────────────────────────────────────
        banner = (m, m, w - m, m + cfg.px(190))
        surface.rounded_rect(banner, cfg.px(10), fill=_WHITE)
        text_w = (w - 2 * m) - cfg.px(40)
        surface.text((cx, m + cfg.px(44)), "RACE DAY", get_font(cfg.px(52), "sans", "bold"),
                     cfg.primary, anchor="mm")
        if crew.race_name:
            race, race_font = fit_line(crew.race_name.upper(), text_w, cfg.px(26), "sans", "bold")
            surface.text((cx, m + cfg.px(94)), race, race_font, cfg.secondary, anchor="mm")
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(24), "sans", "bold")
        surface.text((cx, m + cfg.px(132)), club, club_font, _INK, anchor="mm")
        line, line_font = fit_line(f"{crew.designation} • {crew.boat_class.name}", text_w,
                                   cfg.px(18), "sans")
        surface.text((cx, m + cfg.px(164)), line, line_font, _INK, anchor="mm")

        # ── Bottom-up reserve: footer, emblem, roles ────────────────────────
        footer_h = cfg.px(64)
        footer = (m, h - m - footer_h, w - m, h - m)
        region = draw_emblem(surface, cfg, "bottom-right", m)
        footer_right = (region[0] - cfg.px(16)) if region else w - m
        surface.rounded_rect((footer[0], footer[1], footer_right, footer[3]), cfg.px(10), fill=_WHITE)
        cta, cta_font = fit_line("READY • SET • ROW", footer_right - footer[0] - cfg.px(30),
                                 cfg.px(30), "sans", "bold")
        surface.text(((footer[0] + footer_right) / 2, (footer[1] + footer[3]) / 2), cta, cta_font,
                     cfg.primary, anchor="mm")

        roles = []
        if seats.cox is not None:
            roles.append(("COX", seats.cox.occupant_name, _COX))
        if crew.coach_name:
            roles.append(("COACH", crew.coach_name, _COACH))
        role_h = cfg.px(84)
        roles_bottom = min(footer[1], region[1] if region else footer[1]) - cfg.px(24)
        roles_top = roles_bottom - (role_h if roles else 0)
        if roles:
            gap = cfg.px(20)
            box_w = ((w - 2 * m) - gap * (len(roles) - 1)) / len(roles)
            for i, (title, name, color) in enumerate(roles):
                bx = m + i * (box_w + gap)
                _role_box(surface, (bx, roles_top, bx + box_w, roles_bottom), title, name, color, cfg)
            roles_top -= cfg.px(24)

        # ── Lineup ──────────────────────────────────────────────────────────
        y = banner[3] + cfg.px(40)
        surface.text((cx, y), "CREW LINEUP", get_font(cfg.px(34), "sans", "bold"), _WHITE, anchor="mm")
        y += cfg.px(40)

        stroke_side, bow_side = split_columns(seats)
        rows = max(1, len(stroke_side))
        gap = cfg.px(14)
        row_h = max(1, min(cfg.px(64), int((roles_top - y - gap * (rows - 1)) / rows)))

        if bow_side:
            col_gap = cfg.px(24)
            col_w = ((w - 2 * m) - col_gap) / 2
            columns = ((m, stroke_side), (m + col_w + col_gap, bow_side))
        else:
            col_w = w - 2 * m
            columns = ((m, stroke_side),)

        for x0, entries in columns:
            for i, entry in enumerate(entries):
                ry = y + i * (row_h + gap)
                _lineup_row(surface, entry, (x0, ry, x0 + col_w, ry + row_h), cfg)
