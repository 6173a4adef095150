# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Image I/O and Conversion Utilities
Shared helpers for the drawing surface and emblem handling.
Drawing happens on RGB PIL images; OpenCV is used at the byte
boundaries (decode uploaded emblems, encode the final PNG), where its
arrays are BGR(A). Conversions happen only at those boundaries.
"""

from __future__ import annotations

import cv2
import numpy as np
from PIL import Image

RGB = tuple[int, int, int]


# ─── Decode / Encode ─────────────────────────────────────────────────────────

def bytes_to_rgba(data: bytes) -> np.ndarray:
    """
    Decode raw image bytes to an RGBA uint8 array, keeping any alpha.
    Grayscale and BGR inputs are promoted to RGBA with an opaque alpha.
    Raises ValueError if the bytes cannot be decoded as an image.
    """
    if not data:
        raise ValueError("Image bytes are empty.")
    arr = np.frombuffer(data, dtype=np.uint8)
    try:
        img = cv2.imdecode(arr, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        raise ValueError(f"Could not decode image bytes: {e}") from e
    if img is None:
        raise ValueError("Could not decode image bytes.")

    if img.dtype != np.uint8:
        # 16-bit PNGs decode as uint16 under IMREAD_UNCHANGED
        img = cv2.convertScaleAbs(img, alpha=255.0 / 65535.0)

    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ValueError(f"Unsupported channel count: {img.shape[2]}")


def rgb_to_png_bytes(img: np.ndarray) -> bytes:
    """Encode an RGB uint8 array to PNG bytes (lossless)."""
    success, buf = cv2.imencode(".png", rgb_to_bgr(img))
    if not success:
        raise RuntimeError("Failed to encode image to PNG bytes.")
    return buf.tobytes()


# ─── Color Space ─────────────────────────────────────────────────────────────

def rgb_to_bgr(img: np.ndarray) -> np.ndarray:
    return cv2.cvtColor(img, cv2.COLOR_RGB2BGR)


# ─── Resize ──────────────────────────────────────────────────────────────────

def resize_to_fit(img: np.ndarray, max_w: int, max_h: int) -> np.ndarray:
    """
    Resize so the image fits inside max_w×max_h, preserving aspect ratio.
    Downscales with INTER_AREA, upscales with INTER_CUBIC.
    """
    h, w = img.shape[:2]
    scale = min(max_w / w, max_h / h)
    new_w = max(1, int(round(w * scale)))
    new_h = max(1, int(round(h * scale)))
    interp = cv2.INTER_AREA if scale < 1.0 else cv2.INTER_CUBIC
    return cv2.resize(img, (new_w, new_h), interpolation=interp)


# ─── Gradients ───────────────────────────────────────────────────────────────

def linear_gradient(
    width: int,
    height: int,
    stops: list[tuple[float, RGB]],
    diagonal: bool = False,
) -> np.ndarray:
    """
    Build an RGB gradient image from (offset, colour) stops in [0, 1].
    Vertical by default; diagonal runs top-left to bottom-right.
    """
    if diagonal:
        ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
        t = (xs / max(width - 1, 1) + ys / max(height - 1, 1)) / 2.0
    else:
        t = np.repeat(
            np.linspace(0.0, 1.0, height, dtype=np.float32)[:, np.newaxis],
            width, axis=1,
        )
    return _apply_stops(t, stops)


def radial_gradient(
    width: int,
    height: int,
    stops: list[tuple[float, RGB]],
) -> np.ndarray:
    """Radial RGB gradient centred on the image, radius = half the long edge."""
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    cx, cy = (width - 1) / 2.0, (height - 1) / 2.0
    radius = max(width, height) / 2.0
    t = np.clip(np.hypot(xs - cx, ys - cy) / radius, 0.0, 1.0)
    return _apply_stops(t, stops)


def _apply_stops(t: np.ndarray, stops: list[tuple[float, RGB]]) -> np.ndarray:
    offsets = np.array([s[0] for s in stops], dtype=np.float32)
    colours = np.array([s[1] for s in stops], dtype=np.float32)
    out = np.empty(t.shape + (3,), dtype=np.float32)
    for c in range(3):
        out[..., c] = np.interp(t, offsets, colours[:, c])
    return np.clip(out, 0, 255).astype(np.uint8)


# ─── PIL Bridge ──────────────────────────────────────────────────────────────

def array_to_pil(img: np.ndarray) -> Image.Image:
    """Wrap an RGB or RGBA uint8 array as a PIL image."""
    return Image.fromarray(np.ascontiguousarray(img))


def pil_to_array(pil_img: Image.Image) -> np.ndarray:
    """PIL image → RGB uint8 array."""
    return np.array(pil_img.convert("RGB"))
