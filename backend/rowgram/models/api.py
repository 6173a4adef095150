# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — HTTP Request / Response Models
JSON shapes for the thin transport adapter. Everything optional on the
wire is filled from Settings before the engine sees it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Base64Bytes, BaseModel, Field

from rowgram.config import Settings
from rowgram.models.crew import CrewPayload
from rowgram.models.render import ClubEmblem, ColorScheme, Dimensions, RenderRequest


class EmblemBody(ClubEmblem):
    """Emblem over JSON: base64 image data, or a club preset reference."""

    data: Optional[Base64Bytes] = Field(None, repr=False)


class RenderRequestBody(BaseModel):
    crew: CrewPayload
    template_id: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    colors: Optional[ColorScheme] = None
    emblem: Optional[EmblemBody] = None

    def to_render_request(
        self,
        settings: Settings,
        preset_colors: Optional[ColorScheme] = None,
    ) -> RenderRequest:
        """
        Apply defaults. Colours fall back to the referenced preset's
        colours when given, then to the configured defaults.
        """
        colors = self.colors or preset_colors or ColorScheme(
            primary=settings.default_primary_color,
            secondary=settings.default_secondary_color,
        )
        dimensions = self.dimensions or Dimensions(
            width=settings.default_width,
            height=settings.default_height,
        )
        emblem = None
        if self.emblem is not None:
            emblem = ClubEmblem(
                data=self.emblem.data,
                preset_reference=self.emblem.preset_reference,
            )
        return RenderRequest(
            crew=self.crew,
            template_id=self.template_id or settings.default_template_id,
            dimensions=dimensions,
            colors=colors,
            emblem=emblem,
        )


class TemplateInfo(BaseModel):
    template_id: str
    display_name: str
    description: str


class BoatClassInfo(BaseModel):
    code: str
    name: str
    rower_count: int
    has_cox: bool
    seat_names: list[str]
