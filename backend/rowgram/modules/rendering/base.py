# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Template Renderer Contract
Interface every visual style implements, plus the per-render values
handed to it and a few layout helpers shared by all styles.

A renderer is stateless: render() reads only its arguments and writes
only to the surface, so one instance serves concurrent requests.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol, runtime_checkable

import numpy as np
from PIL import Image

from rowgram.models.crew import Crew, SeatAssignment
from rowgram.modules.rendering.emblem import Corner, emblem_region, place_emblem
from rowgram.modules.rendering.surface import DrawingSurface

RGB = tuple[int, int, int]

# Reference canvas edge that all style metrics are authored against
_REFERENCE_EDGE = 1080.0


@dataclass(frozen=True)
class RenderConfig:
    """Resolved per-render styling inputs."""
    width: int
    height: int
    primary: RGB
    secondary: RGB
    emblem: Optional[Image.Image] = None
    name_char_budget: int = 12
    emblem_fraction: float = 0.14

    @property
    def scale(self) -> float:
        return min(self.width, self.height) / _REFERENCE_EDGE

    def px(self, value: float) -> int:
        """Scale a 1080-reference measurement to this canvas, min 1px."""
        return max(1, int(round(value * self.scale)))


@runtime_checkable
class TemplateRenderer(Protocol):
    template_id: ClassVar[str]
    display_name: ClassVar[str]
    description: ClassVar[str]

    def render(
        self,
        surface: DrawingSurface,
        crew: Crew,
        seats: SeatAssignment,
        config: RenderConfig,
    ) -> None:
        """Draw the full image for one crew onto a cleared surface."""
        ...


def draw_emblem(
    surface: DrawingSurface,
    config: RenderConfig,
    corner: Corner,
    margin: int,
) -> Optional[tuple[int, int, int, int]]:
    """Composite the emblem (if any) into its corner; returns the region used."""
    if config.emblem is None:
        return None
    region = emblem_region(config.width, config.height, corner, config.emblem_fraction, margin)
    place_emblem(surface, config.emblem, region)
    return region


def texture_rng(crew: Crew) -> np.random.Generator:
    """Deterministic RNG for decorative noise, seeded from crew content."""
    key = "|".join((crew.club_name, crew.boat_name, crew.race_name, *crew.rower_names))
    seed = int.from_bytes(hashlib.sha256(key.encode("utf-8")).digest()[:8], "big")
    return np.random.default_rng(seed)


def luminance(color: RGB) -> float:
    r, g, b = (c / 255.0 for c in color[:3])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ink(background: RGB) -> RGB:
    """Black or white, whichever reads better on background."""
    return (17, 24, 39) if luminance(background) > 0.55 else (255, 255, 255)
