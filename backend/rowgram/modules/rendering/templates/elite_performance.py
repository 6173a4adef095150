# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Elite Performance Template
Telemetry-dashboard look over a dark diagonal gradient through the club
colours.

  Header:  black strip with meter bars; club, CREW: designation, and a
           green class box
  Roster:  two parity columns of cells with gold seat chips and split bars
  Roles:   COXSWAIN and HEAD COACH rows above a black footer strip
  Overlay: faint green tech grid with corner crosshairs
  Emblem:  top-right
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment, SeatEntry
from rowgram.modules.rendering.base import RenderConfig, draw_emblem, texture_rng
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.modules.roster.seat_assigner import split_columns
from rowgram.utils.image_utils import linear_gradient

_NAVY = (15, 23, 42)
_SLATE = (30, 41, 59)
_GREEN = (0, 255, 65)
_GOLD = (255, 215, 0)
_RED = (255, 68, 68)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


def _hatching(surface: DrawingSurface, cfg: RenderConfig) -> None:
    w, h = cfg.width, cfg.height
    step = cfg.px(50)
    for x in range(-h, w + h, step):
        surface.line([(x, 0), (x + h, h)], (255, 255, 255, 13), 1)


def _tech_grid(surface: DrawingSurface, cfg: RenderConfig) -> None:
    w, h = cfg.width, cfg.height
    step = cfg.px(40)
    for x in range(0, w, step):
        surface.line([(x, 0), (x, h)], (*_GREEN, 25), 1)
    for y in range(0, h, step):
        surface.line([(0, y), (w, y)], (*_GREEN, 25), 1)

    inset, size = cfg.px(40), cfg.px(20)
    for x, y in ((inset, inset), (w - inset, inset), (inset, h - inset), (w - inset, h - inset)):
        surface.line([(x - size, y), (x + size, y)], _GREEN, cfg.px(2))
        surface.line([(x, y - size), (x, y + size)], _GREEN, cfg.px(2))


def _lineup_cell(
    surface: DrawingSurface,
    entry: SeatEntry,
    box: tuple[float, float, float, float],
    split: float,
    cfg: RenderConfig,
) -> None:
    x0, y0, x1, y1 = box
    cell_h = y1 - y0
    cy = (y0 + y1) / 2
    surface.rect(box, fill=(255, 255, 255, 13))

    pad = max(1, int(cell_h * 0.15))
    chip_w = max(cfg.px(64), int(cell_h * 1.9))
    chip = (x0 + pad, y0 + pad, x0 + pad + chip_w, y1 - pad)
    surface.rect(chip, fill=_GOLD)
    label, label_font = fit_line(entry.seat_label.upper(), chip_w - 2 * pad,
                                 max(1, int(cell_h * 0.4)), "sans", "bold", min_size=1)
    surface.text(((chip[0] + chip[2]) / 2, cy), label, label_font, _BLACK, anchor="mm")

    bar_w = cfg.px(60)
    bar_x = x1 - pad - bar_w
    surface.rect((bar_x, y1 - pad - cfg.px(3), bar_x + bar_w * split, y1 - pad), fill=_GREEN)

    name_font = get_font(max(1, int(cell_h * 0.42)), "sans", "bold")
    name_x = chip[2] + pad * 2
    fitted = fit_name(entry.occupant_name, name_font, bar_x - pad - name_x, cfg.name_char_budget)
    surface.text((name_x, cy), fitted, name_font, _WHITE, anchor="lm")


def _role_row(
    surface: DrawingSurface,
    cx: float,
    cy: float,
    role: str,
    name: str,
    color,
    cfg: RenderConfig,
) -> None:
    half_w, half_h = cfg.px(180), cfg.px(19)
    box = (cx - half_w, cy - half_h, cx + half_w, cy + half_h)
    surface.rect(box, fill=(*color, 51))
    surface.rect(box, outline=color, width=cfg.px(2))

    inset = cfg.px(5)
    badge = (box[0] + inset, box[1] + inset, box[0] + inset + cfg.px(110), box[3] - inset)
    surface.rect(badge, fill=color)
    badge_text, badge_font = fit_line(role, badge[2] - badge[0] - cfg.px(8), cfg.px(13),
                                      "sans", "bold", min_size=1)
    surface.text(((badge[0] + badge[2]) / 2, cy), badge_text, badge_font, _BLACK, anchor="mm")

    name_font = get_font(cfg.px(18), "sans", "bold")
    name_x = badge[2] + cfg.px(14)
    fitted = fit_name(name, name_font, box[2] - inset - name_x, cfg.name_char_budget)
    surface.text((name_x, cy), fitted, name_font, _WHITE, anchor="lm")


class ElitePerformanceTemplate:
    template_id = "elite-performance"
    display_name = "Elite Performance"
    description = "High-tech performance styling for elite crews"

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
            [(0.0, _NAVY), (0.3, cfg.primary), (0.7, cfg.secondary), (1.0, _SLATE)],
            diagonal=True,
        ))
        _hatching(surface, cfg)

        # ── Header strip ────────────────────────────────────────────────────
        surface.rect((0, cfg.px(30), w, cfg.px(130)), fill=(0, 0, 0, 178))
        meter_x0, meter_x1 = cfg.px(50), w - cfg.px(50)
        for offset, color, fraction in ((45, _GREEN, 1.0), (55, _GOLD, 0.85), (65, _RED, 0.75)):
            y = cfg.px(offset)
            surface.rect((meter_x0, y, meter_x0 + (meter_x1 - meter_x0) * fraction, y + cfg.px(4)), fill=color)

        reserve = int(min(w, h) * cfg.emblem_fraction) + cfg.px(40) if cfg.emblem is not None else cfg.px(50)
        text_w = w - 2 * reserve
        title, title_font = fit_line("ELITE PERFORMANCE", text_w, cfg.px(28), "sans", "bold")
        surface.text((cx, cfg.px(95)), title, title_font, _WHITE, anchor="ms")
        surface.text((cx, cfg.px(120)), "CREW ANALYTICS", get_font(cfg.px(20), "sans"), _WHITE, anchor="ms")

        club, club_font = fit_line(crew.club_name, text_w, cfg.px(44), "sans", "bold")
        surface.text((cx, cfg.px(180)), club, club_font, _WHITE, anchor="ms")
        designation, des_font = fit_line(f"CREW: {crew.designation.upper()}", text_w, cfg.px(32),
                                         "sans", "bold")
        surface.text((cx, cfg.px(220)), designation, des_font, _GREEN, anchor="ms")

        klass = (cx - cfg.px(170), cfg.px(250), cx + cfg.px(170), cfg.px(285))
        surface.rect(klass, fill=(*_GREEN, 51))
        surface.rect(klass, outline=_GREEN, width=cfg.px(2))
        line, line_font = fit_line(crew.class_and_race, klass[2] - klass[0] - cfg.px(16), cfg.px(20),
                                   "sans", "bold")
        surface.text((cx, (klass[1] + klass[3]) / 2), line, line_font, _WHITE, anchor="mm")

        # ── Footer strip + roles from the bottom up ─────────────────────────
        footer_top = h - cfg.px(60)
        surface.rect((0, footer_top, w, h), fill=(0, 0, 0, 204))
        tagline, tag_font = fit_line("MAXIMUM PERFORMANCE • ELITE EXCELLENCE • CHAMPIONSHIP READY",
                                     w - cfg.px(40), cfg.px(16), "sans", "bold", min_size=1)
        surface.text((cx, h - cfg.px(30)), tagline, tag_font, _GREEN, anchor="mm")

        roles = []
        if seats.cox is not None:
            roles.append(("COXSWAIN", seats.cox.occupant_name, _RED))
        if crew.coach_name:
            roles.append(("HEAD COACH", crew.coach_name, _GREEN))
        role_step = cfg.px(50)
        roles_top = footer_top - cfg.px(20) - role_step * len(roles)
        for i, (role, name, color) in enumerate(roles):
            _role_row(surface, cx, roles_top + role_step * i + role_step / 2, role, name, color, cfg)

        # ── Lineup grid ─────────────────────────────────────────────────────
        bar_y = cfg.px(310)
        surface.rect((cfg.px(80), bar_y, w - cfg.px(80), bar_y + cfg.px(30)), fill=(255, 255, 255, 25))
        surface.text((cfg.px(100), bar_y + cfg.px(15)), "CREW LINEUP", get_font(cfg.px(18), "sans", "bold"),
                     _GREEN, anchor="lm")

        stroke_side, bow_side = split_columns(seats)
        grid_top = bar_y + cfg.px(44)
        rows = max(1, len(stroke_side))
        pitch = max(1, min(cfg.px(50), int(max(1, roles_top - cfg.px(16) - grid_top) / rows)))
        cell_h = max(1, pitch - cfg.px(6))

        gx0, gx1 = cfg.px(80), w - cfg.px(80)
        gap = cfg.px(24)
        if bow_side:
            mid = (gx0 + gx1) / 2
            columns = ((gx0, mid - gap / 2, stroke_side), (mid + gap / 2, gx1, bow_side))
        else:
            columns = ((gx0, gx1, stroke_side),)

        rng = texture_rng(crew)
        for x0, x1, entries in columns:
            for i, entry in enumerate(entries):
                y0 = grid_top + i * pitch
                _lineup_cell(surface, entry, (x0, y0, x1, y0 + cell_h), rng.uniform(0.7, 1.0), cfg)

        _tech_grid(surface, cfg)
        draw_emblem(surface, cfg, "top-right", cfg.px(40))
