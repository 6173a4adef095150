# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Oxbridge Herald Template
Academic heraldic style on aged parchment:

  Border:  double rule in primary with cross-and-saltire corner marks
  Header:  shield crest bearing the club initials, motto, club name,
           crew designation, boat class • race
  Roster:  single column: seat label (primary) · name (ink) · Latin gloss
  Roles:   scroll boxes for Gubernator (cox) and Magister (coach)
  Footer:  seal with ring of marks and a Latin inscription
  Emblem:  top-left, inside the inner border
"""

from __future__ import annotations

import math

from rowgram.models.crew import Crew, SeatAssignment
from rowgram.modules.rendering.base import (
    RenderConfig,
    contrast_ink,
    draw_emblem,
    texture_rng,
)
from rowgram.modules.rendering.fonts import get_font
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name
from rowgram.utils.image_utils import linear_gradient

_INK = (44, 24, 16)           # sepia ink for names
_MUTED = (107, 114, 128)
_GOLD = (212, 175, 55)
_PARCHMENT = [
    (0.0, (253, 246, 227)),
    (0.5, (247, 243, 233)),
    (1.0, (237, 228, 211)),
]

_LATIN = {
    "Bow": "Prora",
    "2": "Secundus",
    "3": "Tertius",
    "4": "Quartus",
    "5": "Quintus",
    "6": "Sextus",
    "7": "Septimus",
    "Stroke": "Primus",
    "Single": "Solus",
}


def _initials(club_name: str) -> str:
    words = [w for w in club_name.replace("-", " ").split() if w[:1].isalpha()]
    return "".join(w[0].upper() for w in words[:3]) or "RC"


def _parchment(surface: DrawingSurface, crew: Crew, cfg: RenderConfig) -> None:
    surface.blit(linear_gradient(cfg.width, cfg.height, _PARCHMENT, diagonal=True))

    rng = texture_rng(crew)
    # Age spots
    for _ in range(50):
        x, y = rng.uniform(0, cfg.width), rng.uniform(0, cfg.height)
        alpha = int(rng.uniform(0, 0.1) * 255)
        surface.circle((x, y), cfg.px(rng.uniform(1, 4)), fill=(139, 125, 107, alpha))
    # Paper grain
    for _ in range(200):
        x, y = rng.uniform(0, cfg.width), rng.uniform(0, cfg.height)
        alpha = int(rng.uniform(0, 0.05) * 255)
        surface.rect((x, y, x + 1, y + cfg.px(rng.uniform(1, 6))), fill=(160, 142, 120, alpha))


def _corner_mark(surface: DrawingSurface, x: float, y: float, size: int, color, width: int) -> None:
    surface.line([(x - size, y), (x + size, y)], color, width)
    surface.line([(x, y - size), (x, y + size)], color, width)
    half = size / 2
    surface.line([(x - half, y - half), (x + half, y + half)], color, width)
    surface.line([(x + half, y - half), (x - half, y + half)], color, width)


def _border(surface: DrawingSurface, cfg: RenderConfig) -> int:
    w, h = cfg.width, cfg.height
    outer, inner = cfg.px(30), cfg.px(45)
    surface.rect((outer, outer, w - outer, h - outer), outline=cfg.primary, width=cfg.px(6))
    surface.rect((inner, inner, w - inner, h - inner), outline=cfg.primary, width=cfg.px(2))
    for x, y in ((inner, inner), (w - inner, inner), (inner, h - inner), (w - inner, h - inner)):
        _corner_mark(surface, x, y, cfg.px(25), cfg.primary, cfg.px(2))
    return inner


def _shield(surface: DrawingSurface, cx: float, top: float, cfg: RenderConfig, crew: Crew) -> float:
    sw, sh = cfg.px(150), cfg.px(112)
    x = cx - sw / 2
    points = [
        (cx, top),
        (x + sw, top + sh / 4),
        (x + sw, top + sh * 3 / 4),
        (cx, top + sh),
        (x, top + sh * 3 / 4),
        (x, top + sh / 4),
    ]
    surface.polygon(points, fill=cfg.primary, outline=_GOLD, width=cfg.px(3))
    surface.text(
        (cx, top + sh * 0.45),
        _initials(crew.club_name),
        get_font(cfg.px(30), "serif", "bold"),
        contrast_ink(cfg.primary),
        anchor="mm",
    )
    surface.text(
        (cx, top + sh * 0.72),
        "ROWING CLUB",
        get_font(cfg.px(11), "serif", "regular"),
        contrast_ink(cfg.primary),
        anchor="mm",
    )
    return top + sh


def _divider(surface: DrawingSurface, cx: float, y: float, cfg: RenderConfig) -> None:
    half = cfg.px(100)
    surface.line([(cx - half, y), (cx + half, y)], cfg.primary, cfg.px(1))
    for offset in (-60, -30, 30, 60):
        surface.circle((cx + offset * cfg.scale, y), cfg.px(2), fill=cfg.primary)
    surface.star((cx, y), cfg.px(7), cfg.px(3), 8, fill=cfg.primary)


def _role_scroll(
    surface: DrawingSurface,
    cx: float,
    y: float,
    title: str,
    name: str,
    color,
    cfg: RenderConfig,
) -> None:
    half_w, half_h = cfg.px(170), cfg.px(17)
    surface.rect((cx - half_w, y - half_h, cx + half_w, y + half_h), fill=(255, 255, 255, 204))
    surface.rect((cx - half_w, y - half_h, cx + half_w, y + half_h), outline=color, width=cfg.px(2))

    title_font = get_font(cfg.px(16), "serif", "italic")
    name_font = get_font(cfg.px(17), "serif", "bold")
    surface.text((cx - cfg.px(8), y), f"{title}:", title_font, color, anchor="rm")
    fitted = fit_name(name, name_font, half_w - cfg.px(8), cfg.name_char_budget)
    surface.text((cx + cfg.px(8), y), fitted, name_font, _INK, anchor="lm")


def _seal(surface: DrawingSurface, cx: float, cy: float, cfg: RenderConfig) -> None:
    surface.circle((cx, cy), cfg.px(35), outline=cfg.primary, width=cfg.px(4))
    surface.circle((cx, cy), cfg.px(25), outline=cfg.primary, width=cfg.px(1))
    surface.rect((cx - cfg.px(15), cy - cfg.px(10), cx + cfg.px(15), cy + cfg.px(10)), fill=cfg.primary)
    cross = contrast_ink(cfg.primary)
    surface.line([(cx - cfg.px(8), cy), (cx + cfg.px(8), cy)], cross, cfg.px(2))
    surface.line([(cx, cy - cfg.px(6)), (cx, cy + cfg.px(6))], cross, cfg.px(2))
    for i in range(12):
        angle = i * math.pi / 6
        surface.circle(
            (cx + math.cos(angle) * cfg.px(45), cy + math.sin(angle) * cfg.px(45)),
            cfg.px(1.5),
            fill=cfg.primary,
        )


class OxbridgeHeraldTemplate:
    template_id = "oxbridge-herald"
    display_name = "Oxbridge Herald"
    description = "Academic heraldic design with Latin styling"

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

        _parchment(surface, crew, cfg)
        inner = _border(surface, cfg)
        draw_emblem(surface, cfg, "top-left", inner + cfg.px(15))

        # ── Header ──────────────────────────────────────────────────────────
        text_w = w - 2 * (inner + cfg.px(40))
        y = _shield(surface, cx, inner + cfg.px(20), cfg, crew) + cfg.px(28)

        surface.text((cx, y), "Per Mare Per Terram", get_font(cfg.px(18), "serif", "italic"),
                     cfg.secondary, anchor="mm")
        y += cfg.px(44)

        club, club_font = fit_line(crew.club_name, text_w, cfg.px(42), "serif", "bold")
        surface.text((cx, y), club, club_font, _INK, anchor="mm")
        y += cfg.px(44)

        designation, des_font = fit_line(f"The {crew.designation}", text_w, cfg.px(28), "serif")
        surface.text((cx, y), designation, des_font, cfg.primary, anchor="mm")
        y += cfg.px(34)

        line, line_font = fit_line(crew.class_and_race, text_w, cfg.px(22), "serif")
        surface.text((cx, y), line, line_font, cfg.secondary, anchor="mm")
        y += cfg.px(30)

        _divider(surface, cx, y, cfg)
        y += cfg.px(38)
        surface.text((cx, y), "COLLEGIUM REMIGUM", get_font(cfg.px(24), "serif", "bold"), _INK, anchor="mm")
        roster_top = y + cfg.px(30)

        # ── Footer + roles reserve space from the bottom up ─────────────────
        seal_cy = h - inner - cfg.px(95)
        roles = []
        if seats.cox is not None:
            roles.append(("Gubernator", seats.cox.occupant_name, cfg.primary))
        if crew.coach_name:
            roles.append(("Magister", crew.coach_name, cfg.secondary))
        role_step = cfg.px(46)
        roles_top = seal_cy - cfg.px(60) - role_step * len(roles)

        # ── Roster ──────────────────────────────────────────────────────────
        rowers = seats.rowers
        available = max(1, roles_top - roster_top - cfg.px(10))
        line_h = max(1, min(cfg.px(44), available // max(1, len(rowers))))
        name_size = max(1, min(cfg.px(22), int(line_h * 0.6)))
        label_font = get_font(name_size, "serif", "bold")
        name_font = get_font(name_size, "serif", "regular")
        gloss_font = get_font(max(1, int(name_size * 0.8)), "serif", "italic")

        label_x = cx - cfg.px(150)
        name_x = cx - cfg.px(130)
        gloss_x = cx + cfg.px(230)
        name_box = gloss_x - name_x - cfg.px(110)

        for i, entry in enumerate(rowers):
            ry = roster_top + line_h * i + line_h / 2
            surface.text((label_x, ry), entry.seat_label, label_font, cfg.primary, anchor="rm")
            fitted = fit_name(entry.occupant_name, name_font, name_box, cfg.name_char_budget)
            surface.text((name_x, ry), fitted, name_font, _INK, anchor="lm")
            surface.text((gloss_x, ry), _LATIN.get(entry.seat_label, ""), gloss_font,
                         cfg.secondary, anchor="rm")
            if i < len(rowers) - 1:
                surface.circle((gloss_x + cfg.px(20), ry + line_h / 2), cfg.px(1.5), fill=cfg.primary)

        for i, (title, name, color) in enumerate(roles):
            _role_scroll(surface, cx, roles_top + role_step * i + role_step / 2, title, name, color, cfg)

        # ── Footer ──────────────────────────────────────────────────────────
        _seal(surface, cx, seal_cy, cfg)
        surface.text(
            (cx, h - inner - cfg.px(28)),
            "Pro Gloria Et Honore",
            get_font(cfg.px(16), "serif", "italic"),
            _MUTED,
            anchor="mm",
        )
