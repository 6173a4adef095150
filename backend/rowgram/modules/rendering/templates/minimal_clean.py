# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Minimal Clean Template
White page, one accent colour, lots of space. Seat labels sit right-
aligned in a narrow gutter with names flush left beside them; cox and
coach follow the rowers with red and green labels.
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment
from rowgram.modules.rendering.base import RenderConfig, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name

_PAGE = (255, 255, 255)
_HEADING = (31, 41, 55)
_INK = (55, 65, 81)
_MUTED = (107, 114, 128)
_RULE = (229, 231, 235)
_DOT = (209, 213, 219)
_COX = (220, 38, 38)
_COACH = (5, 150, 105)


class MinimalCleanTemplate:
    template_id = "minimal-clean"
    display_name = "Minimal Clean"
    description = "Simple, elegant layout with clean typography"

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

        surface.clear(_PAGE)
        surface.rect((0, 0, w, cfg.px(6)), fill=cfg.primary)

        # ── Header ──────────────────────────────────────────────────────────
        reserve = int(min(w, h) * cfg.emblem_fraction) + cfg.px(48) if cfg.emblem is not None else cfg.px(60)
        text_w = w - 2 * reserve
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(36), "sans")
        surface.text((cx, cfg.px(80)), club, club_font, _HEADING, anchor="ms")
        designation, des_font = fit_line(crew.designation, text_w, cfg.px(28), "sans")
        surface.text((cx, cfg.px(120)), designation, des_font, cfg.primary, anchor="ms")
        line, line_font = fit_line(crew.class_and_race, text_w, cfg.px(20), "sans")
        surface.text((cx, cfg.px(160)), line, line_font, _MUTED, anchor="ms")
        surface.line([(cx - cfg.px(100), cfg.px(180)), (cx + cfg.px(100), cfg.px(180))], _RULE, cfg.px(1))

        # ── Lineup ──────────────────────────────────────────────────────────
        rows = [(entry.seat_label, entry.occupant_name, cfg.primary) for entry in seats.rowers]
        roles = []
        if seats.cox is not None:
            roles.append(("Cox", seats.cox.occupant_name, _COX))
        if crew.coach_name:
            roles.append(("Coach", crew.coach_name, _COACH))

        top = cfg.px(210)
        bottom = h - cfg.px(40)
        role_gap = cfg.px(30) if roles else 0
        count = max(1, len(rows) + len(roles))
        line_h = max(1, min(cfg.px(40), int(max(1, bottom - top - role_gap) / count)))
        label_font = get_font(max(1, min(cfg.px(20), int(line_h * 0.55))), "sans", "bold")
        name_font = get_font(max(1, min(cfg.px(22), int(line_h * 0.6))), "sans", "regular")
        dot_font = get_font(max(1, min(cfg.px(16), int(line_h * 0.45))), "sans", "regular")

        start_x = cx - cfg.px(200)
        label_x = start_x + cfg.px(60)
        name_x = start_x + cfg.px(80)
        name_box = min(w - cfg.px(20), cx + cfg.px(200)) - name_x

        y = top + line_h / 2
        for i, (label, name, color) in enumerate(rows):
            surface.text((label_x, y), label, label_font, color, anchor="rm")
            fitted = fit_name(name, name_font, name_box, cfg.name_char_budget)
            surface.text((name_x, y), fitted, name_font, _INK, anchor="lm")
            if i < len(rows) - 1:
                surface.text((cx, y + line_h / 2), "•", dot_font, _DOT, anchor="mm")
            y += line_h

        y += role_gap
        for label, name, color in roles:
            surface.text((label_x, y), label, label_font, color, anchor="rm")
            fitted = fit_name(name, name_font, name_box, cfg.name_char_budget)
            surface.text((name_x, y), fitted, name_font, _INK, anchor="lm")
            y += line_h

        surface.rect((cx - cfg.px(50), h - cfg.px(20), cx + cfg.px(50), h - cfg.px(17)), fill=cfg.primary)
        draw_emblem(surface, cfg, "top-left", cfg.px(24))
