# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Classic Lineup Template
Traditional roster sheet on a primary-to-secondary vertical gradient.

  Header:  club, designation and class • race in white, over a white rule
  Roster:  one line per seat on a dark translucent panel, stroke first
  Roles:   Cox and Coach lines under the rowers, set off by a thin rule
  Emblem:  top-right corner
"""

from __future__ import annotations

from rowgram.models.crew import Crew, SeatAssignment
from rowgram.modules.rendering.base import RenderConfig, draw_emblem
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.utils.image_utils import linear_gradient

_WHITE = (255, 255, 255)
_SOFT_WHITE = (226, 232, 240)
_PANEL = (0, 0, 0, 90)
_COX = (251, 191, 36)


class ClassicLineupTemplate:
    template_id = "classic-lineup"
    display_name = "Classic Lineup"
    description = "Traditional roster layout with clean presentation"

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
        m = cfg.px(80)

        surface.blit(linear_gradient(w, h, [(0.0, cfg.primary), (1.0, cfg.secondary)]))

        # ── Header ──────────────────────────────────────────────────────────
        reserve = int(min(w, h) * cfg.emblem_fraction) + cfg.px(40) if cfg.emblem is not None else m
        text_w = w - 2 * reserve
        club, club_font = fit_line(crew.club_name, text_w, cfg.px(48), "sans", "bold")
        surface.text((cx, cfg.px(80)), club, club_font, _WHITE, anchor="ms")
        designation, des_font = fit_line(crew.designation, text_w, cfg.px(32), "sans")
        surface.text((cx, cfg.px(130)), designation, des_font, _WHITE, anchor="ms")
        line, line_font = fit_line(crew.class_and_race, text_w, cfg.px(24), "sans")
        surface.text((cx, cfg.px(170)), line, line_font, _SOFT_WHITE, anchor="ms")
        surface.line([(m, cfg.px(190)), (w - m, cfg.px(190))], _WHITE, cfg.px(3))

        # ── Roster panel ────────────────────────────────────────────────────
        lines = [(entry.seat_label, entry.occupant_name) for entry in seats.rowers]
        roles = []
        if seats.cox is not None:
            roles.append(("Cox", seats.cox.occupant_name))
        if crew.coach_name:
            roles.append(("Coach", crew.coach_name))

        panel = (m - cfg.px(20), cfg.px(215), w - m + cfg.px(20), h - cfg.px(40))
        surface.rounded_rect(panel, cfg.px(16), fill=_PANEL)

        top = panel[1] + cfg.px(20)
        role_gap = cfg.px(24) if roles else 0
        count = max(1, len(lines) + len(roles))
        available = max(1, panel[3] - cfg.px(20) - top - role_gap)
        line_h = max(1, min(cfg.px(56), int(available / count)))
        size = max(1, min(cfg.px(28), int(line_h * 0.6)))
        label_font = get_font(size, "sans", "bold")
        name_font = get_font(size, "sans", "regular")

        label_x = m + cfg.px(10)
        name_x = label_x + cfg.px(150)
        name_box = panel[2] - cfg.px(20) - name_x

        y = top + line_h / 2
        for label, name in lines:
            surface.text((label_x, y), label, label_font, _SOFT_WHITE, anchor="lm")
            fitted = fit_name(name, name_font, name_box, cfg.name_char_budget)
            surface.text((name_x, y), fitted, name_font, _WHITE, anchor="lm")
            y += line_h

        if roles:
            rule_y = y - line_h / 2 + role_gap / 2
            surface.line([(label_x, rule_y), (panel[2] - cfg.px(20), rule_y)], _SOFT_WHITE, cfg.px(1))
            y += role_gap
            for label, name in roles:
                surface.text((label_x, y), label, label_font, _COX if label == "Cox" else _SOFT_WHITE, anchor="lm")
                fitted = fit_name(name, name_font, name_box, cfg.name_char_budget)
                surface.text((name_x, y), fitted, name_font, _WHITE, anchor="lm")
                y += line_h

        draw_emblem(surface, cfg, "top-right", cfg.px(20))
