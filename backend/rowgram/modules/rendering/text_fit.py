# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Text Fitting
Per-entry truncation of roster names and shrink-to-fit for title lines.

Truncation rules for a roster entry:
  - len(name) <= budget          → name unchanged
  - len(name) >  budget          → first (budget - 1) chars + "…"
  - still wider than its box     → drop trailing chars until it fits
Names are never wrapped onto a second line.
"""

from __future__ import annotations

from PIL import ImageFont

from rowgram.modules.rendering.fonts import Family, Style, get_font

ELLIPSIS = "…"


def text_width(text: str, font: ImageFont.FreeTypeFont) -> float:
    return font.getlength(text)


def truncate_to_budget(name: str, budget: int) -> str:
    """Character-budget truncation. Result length never exceeds budget."""
    if budget <= 0:
        return ""
    if len(name) <= budget:
        return name
    if budget == 1:
        return ELLIPSIS
    return name[: budget - 1].rstrip() + ELLIPSIS


def fit_name(
    name: str,
    font: ImageFont.FreeTypeFont,
    max_width: float,
    budget: int,
) -> str:
    """
    Apply the character budget, then shorten further until the rendered
    width is within max_width. Returns "" only when not even the ellipsis
    fits the box.
    """
    fitted = truncate_to_budget(name, budget)
    if text_width(fitted, font) <= max_width:
        return fitted

    stem = fitted[:-1] if fitted.endswith(ELLIPSIS) else fitted
    while stem:
        stem = stem[:-1].rstrip()
        candidate = stem + ELLIPSIS
        if text_width(candidate, font) <= max_width:
            return candidate
    return ELLIPSIS if text_width(ELLIPSIS, font) <= max_width else ""


def fit_font(
    text: str,
    max_width: float,
    size: int,
    family: Family = "sans",
    style: Style = "regular",
    min_size: int = 10,
) -> ImageFont.FreeTypeFont:
    """
    Largest font no bigger than `size` at which `text` fits max_width.
    Stops at min_size; callers pair this with fit_name when the text may
    still overflow at the minimum.
    """
    size = max(size, 1)
    min_size = max(1, min(min_size, size))
    font = get_font(size, family, style)
    while size > min_size and text_width(text, font) > max_width:
        size = max(min_size, int(size * 0.92))
        font = get_font(size, family, style)
    return font


def fit_line(
    text: str,
    max_width: float,
    size: int,
    family: Family = "sans",
    style: Style = "regular",
    min_size: int = 10,
) -> tuple[str, ImageFont.FreeTypeFont]:
    """Shrink to fit, then ellipsize whatever still overflows at min_size."""
    font = fit_font(text, max_width, size, family, style, min_size)
    if text_width(text, font) > max_width:
        text = fit_name(text, font, max_width, budget=len(text))
    return text, font
