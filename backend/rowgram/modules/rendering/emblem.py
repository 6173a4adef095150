# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Club Emblem Handling
Decodes emblem bytes and composites them into a fixed corner region.

The region is a square whose side is a fraction of the canvas's shorter
edge, so its size never depends on how long the roster is. The emblem is
scaled to fit inside the square (aspect preserved) and centred in it.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from PIL import Image

from rowgram.api.middleware.error_handler import EmblemInvalid
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.utils.image_utils import array_to_pil, bytes_to_rgba, resize_to_fit
from rowgram.utils.logger import get_logger

log = get_logger(__name__)

Corner = Literal["top-left", "top-right", "bottom-left", "bottom-right"]


def decode_emblem(data: bytes) -> Image.Image:
    """
    Decode emblem bytes into an RGBA PIL image.

    Raises:
        EmblemInvalid: empty or undecodable bytes.
    """
    try:
        rgba = bytes_to_rgba(data)
    except ValueError as e:
        raise EmblemInvalid(f"Emblem image could not be decoded: {e}") from e
    log.debug("emblem_decoded", shape=rgba.shape)
    return array_to_pil(rgba)


def emblem_region(
    width: int,
    height: int,
    corner: Corner,
    fraction: float,
    margin: int,
) -> tuple[int, int, int, int]:
    """Square (x0, y0, x1, y1) reserved for the emblem in the given corner."""
    side = max(1, int(round(min(width, height) * fraction)))
    x0 = margin if corner.endswith("left") else width - margin - side
    y0 = margin if corner.startswith("top") else height - margin - side
    return x0, y0, x0 + side, y0 + side


def place_emblem(
    surface: DrawingSurface,
    emblem: Image.Image,
    region: tuple[int, int, int, int],
) -> None:
    """Scale the emblem into region, centred, alpha-composited."""
    x0, y0, x1, y1 = region
    box_w, box_h = x1 - x0, y1 - y0
    fitted = resize_to_fit(np.asarray(emblem.convert("RGBA")), box_w, box_h)
    fh, fw = fitted.shape[:2]
    surface.blit(fitted, (x0 + (box_w - fw) // 2, y0 + (box_h - fh) // 2))
