# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Drawing Surface
Fixed-size 2D canvas that templates issue draw commands against.

Backed by an RGB PIL image with an RGBA-blending ImageDraw, so
translucent fills composite onto what is already drawn. Gradients and
textures are built as numpy arrays and blitted in. Serialisation to PNG
goes through OpenCV.

One surface per render call; nothing on it is shared between requests.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from rowgram.utils.image_utils import array_to_pil, pil_to_array, rgb_to_png_bytes

Color = Union[tuple[int, int, int], tuple[int, int, int, int]]
Point = tuple[float, float]
Box = tuple[float, float, float, float]


class DrawingSurface:
    """
    Thin command layer over PIL.

    Coordinates are pixels, origin top-left. Boxes are (x0, y0, x1, y1).
    Text anchors follow PIL's two-letter scheme ("mm" centre, "lm"
    left-middle, "rm" right-middle, "mt" middle-top, …).
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = (255, 255, 255),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface dimensions must be positive, got {width}×{height}")
        self.width = width
        self.height = height
        self._image = Image.new("RGB", (width, height), background[:3])
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    # ─── Introspection ───────────────────────────────────────────────────────

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        return self._image.getpixel((x, y))

    def to_array(self) -> np.ndarray:
        """RGB uint8 copy of the current canvas."""
        return pil_to_array(self._image)

    def to_png(self) -> bytes:
        return rgb_to_png_bytes(self.to_array())

    # ─── Fills ───────────────────────────────────────────────────────────────

    def clear(self, color: Color) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=color)

    def blit(self, img: np.ndarray, xy: tuple[int, int] = (0, 0)) -> None:
        """Paste an RGB or RGBA array at xy; RGBA is alpha-composited."""
        tile = array_to_pil(img)
        if tile.mode == "RGBA":
            self._image.paste(tile, (int(xy[0]), int(xy[1])), tile)
        else:
            self._image.paste(tile, (int(xy[0]), int(xy[1])))

    def rect(
        self,
        box: Box,
        fill: Optional[Color] = None,
        outline: Optional[Color] = None,
        width: int = 1,
    ) -> None:
        self._draw.rectangle(_box(box), fill=fill, outline=outline, width=max(1, int(width)))

    def rounded_rect(
        self,
        box: Box,
        radius: float,
        fill: Optional[Color] = None,
        outline: Optional[Color] = None,
        width: int = 1,
    ) -> None:
        x0, y0, x1, y1 = _box(box)
        radius = max(0, min(int(radius), int((x1 - x0) / 2), int((y1 - y0) / 2)))
        self._draw.rounded_rectangle(
            (x0, y0, x1, y1), radius=radius, fill=fill, outline=outline, width=max(1, int(width))
        )

    def polygon(
        self,
        points: Sequence[Point],
        fill: Optional[Color] = None,
        outline: Optional[Color] = None,
        width: int = 1,
    ) -> None:
        pts = [(float(x), float(y)) for x, y in points]
        self._draw.polygon(pts, fill=fill, outline=outline, width=max(1, int(width)))

    def circle(
        self,
        center: Point,
        radius: float,
        fill: Optional[Color] = None,
        outline: Optional[Color] = None,
        width: int = 1,
    ) -> None:
        cx, cy = center
        r = max(0.5, float(radius))
        self._draw.ellipse(
            (cx - r, cy - r, cx + r, cy + r), fill=fill, outline=outline, width=max(1, int(width))
        )

    def ellipse(self, box: Box, fill: Optional[Color] = None, outline: Optional[Color] = None) -> None:
        self._draw.ellipse(_box(box), fill=fill, outline=outline)

    # ─── Strokes ─────────────────────────────────────────────────────────────

    def line(self, points: Sequence[Point], color: Color, width: int = 1) -> None:
        pts = [(float(x), float(y)) for x, y in points]
        self._draw.line(pts, fill=color, width=max(1, int(width)), joint="curve")

    def star(self, center: Point, outer: float, inner: float, points: int, fill: Color) -> None:
        """Regular star polygon, first point straight up."""
        cx, cy = center
        verts = []
        for i in range(points * 2):
            r = outer if i % 2 == 0 else inner
            angle = -math.pi / 2 + i * math.pi / points
            verts.append((cx + math.cos(angle) * r, cy + math.sin(angle) * r))
        self.polygon(verts, fill=fill)

    # ─── Text ────────────────────────────────────────────────────────────────

    def text(
        self,
        xy: Point,
        text: str,
        font: ImageFont.FreeTypeFont,
        fill: Color,
        anchor: str = "la",
    ) -> None:
        if not text:
            return
        self._draw.text((float(xy[0]), float(xy[1])), text, font=font, fill=fill, anchor=anchor)


def _box(box: Box) -> tuple[float, float, float, float]:
    x0, y0, x1, y1 = box
    return min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)
