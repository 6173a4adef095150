# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Font Lookup
Resolves serif / sans faces (regular, bold, italic) to TrueType files.

Resolution order per face:
  1. Explicit path from Settings (SERIF_FONT_PATH, SANS_BOLD_FONT_PATH, …)
  2. A matching file inside Settings.font_dir
  3. Common system font locations (Liberation, DejaVu, Noto, macOS, Windows)
  4. Pillow's bundled default font at the requested size

Loaded fonts are cached per (family, weight, style, size); ImageFont
objects are read-only once loaded, so the cache is shared across renders.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from PIL import ImageFont

from rowgram.config import get_settings
from rowgram.utils.logger import get_logger

log = get_logger(__name__)

Family = Literal["serif", "sans"]
Style = Literal["regular", "bold", "italic"]

_CANDIDATES: dict[tuple[str, str], list[str]] = {
    ("serif", "regular"): [
        "/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf",
        "/usr/share/fonts/liberation/LiberationSerif-Regular.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf",
        "/usr/share/fonts/dejavu/DejaVuSerif.ttf",
        "/usr/share/fonts/truetype/noto/NotoSerif-Regular.ttf",
        "/System/Library/Fonts/Supplemental/Times New Roman.ttf",
        "/Library/Fonts/Times New Roman.ttf",
        "C:/Windows/Fonts/times.ttf",
    ],
    ("serif", "bold"): [
        "/usr/share/fonts/truetype/liberation/LiberationSerif-Bold.ttf",
        "/usr/share/fonts/liberation/LiberationSerif-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSerif-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSerif-Bold.ttf",
        "/usr/share/fonts/truetype/noto/NotoSerif-Bold.ttf",
        "/System/Library/Fonts/Supplemental/Times New Roman Bold.ttf",
        "/Library/Fonts/Times New Roman Bold.ttf",
        "C:/Windows/Fonts/timesbd.ttf",
    ],
    ("serif", "italic"): [
        "/usr/share/fonts/truetype/liberation/LiberationSerif-Italic.ttf",
        "/usr/share/fonts/liberation/LiberationSerif-Italic.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSerif-Italic.ttf",
        "/usr/share/fonts/dejavu/DejaVuSerif-Italic.ttf",
        "/usr/share/fonts/truetype/noto/NotoSerif-Italic.ttf",
        "/System/Library/Fonts/Supplemental/Times New Roman Italic.ttf",
        "C:/Windows/Fonts/timesi.ttf",
    ],
    ("sans", "regular"): [
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
        "/Library/Fonts/Arial.ttf",
        "C:/Windows/Fonts/arial.ttf",
    ],
    ("sans", "bold"): [
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/noto/NotoSans-Bold.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
        "/Library/Fonts/Arial Bold.ttf",
        "C:/Windows/Fonts/arialbd.ttf",
    ],
    ("sans", "italic"): [
        "/usr/share/fonts/truetype/liberation/LiberationSans-Italic.ttf",
        "/usr/share/fonts/liberation/LiberationSans-Italic.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Oblique.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Oblique.ttf",
        "C:/Windows/Fonts/ariali.ttf",
    ],
}


def _configured_path(family: str, style: str) -> Optional[Path]:
    settings = get_settings()
    explicit = {
        ("serif", "regular"): settings.serif_font_path,
        ("serif", "bold"): settings.serif_bold_font_path,
        ("sans", "regular"): settings.sans_font_path,
        ("sans", "bold"): settings.sans_bold_font_path,
    }.get((family, style))
    if explicit is not None and explicit.is_file():
        return explicit

    if settings.font_dir is not None and settings.font_dir.is_dir():
        for candidate in _CANDIDATES[(family, style)]:
            local = settings.font_dir / Path(candidate).name
            if local.is_file():
                return local
    return None


@lru_cache(maxsize=None)
def find_font_path(family: Family, style: Style) -> Optional[str]:
    """Return a TrueType path for the face, or None if nothing was found."""
    configured = _configured_path(family, style)
    if configured is not None:
        return str(configured)

    for p in _CANDIDATES[(family, style)]:
        if os.path.exists(p):
            return p

    if style == "italic":
        return find_font_path(family, "regular")

    log.warning("font_not_found", family=family, style=style, fallback="pillow_default")
    return None


@lru_cache(maxsize=256)
def get_font(
    size: int,
    family: Family = "sans",
    style: Style = "regular",
) -> ImageFont.FreeTypeFont:
    """
    Load a font at a pixel size. Falls back to Pillow's bundled font
    (scalable since Pillow 10.1) when no system face is available.
    """
    size = max(1, int(size))
    path = find_font_path(family, style)
    if path is not None:
        try:
            return ImageFont.truetype(path, size)
        except OSError as e:
            log.warning("font_load_failed", path=path, error=str(e))
    return ImageFont.load_default(size=size)
