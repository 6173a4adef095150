# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Render Request / Result Models
Value objects built fresh for each render call: the template
configuration, the full request, and the immutable PNG result.
"""

from __future__ import annotations

import hashlib
from typing import Optional

from PIL import ImageColor
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rowgram.models.crew import CrewPayload


class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class ColorScheme(BaseModel):
    """
    Primary/secondary club colours. Any value Pillow's ImageColor
    understands is accepted: '#1e40af', '#fff', 'rgb(30,64,175)', 'navy'.
    """
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str

    @field_validator("primary", "secondary")
    @classmethod
    def _well_formed(cls, v: str) -> str:
        v = v.strip()
        try:
            ImageColor.getrgb(v)
        except ValueError as e:
            raise ValueError(f"'{v}' is not a recognised colour value") from e
        return v

    @property
    def primary_rgb(self) -> tuple[int, int, int]:
        return ImageColor.getrgb(self.primary)[:3]

    @property
    def secondary_rgb(self) -> tuple[int, int, int]:
        return ImageColor.getrgb(self.secondary)[:3]


class ClubEmblem(BaseModel):
    """
    Optional club logo: either raw image bytes or a reference to a club
    preset whose logo is looked up by the caller-supplied preset lookup.
    """
    model_config = ConfigDict(frozen=True)

    data: Optional[bytes] = Field(None, repr=False)
    preset_reference: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "ClubEmblem":
        if (self.data is None) == (self.preset_reference is None):
            raise ValueError("Emblem needs exactly one of 'data' or 'preset_reference'")
        return self

    @property
    def identity(self) -> str:
        """Stable identity for cache hashing."""
        if self.data is not None:
            return "sha256:" + hashlib.sha256(self.data).hexdigest()
        return f"preset:{self.preset_reference}"


class TemplateConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    template_id: str
    dimensions: Dimensions
    colors: ColorScheme
    emblem: Optional[ClubEmblem] = None


class RenderRequest(BaseModel):
    """One render call: a crew plus how to draw it."""
    model_config = ConfigDict(frozen=True)

    crew: CrewPayload
    template_id: str
    dimensions: Dimensions
    colors: ColorScheme
    emblem: Optional[ClubEmblem] = None

    @property
    def template_config(self) -> TemplateConfig:
        return TemplateConfig(
            template_id=self.template_id,
            dimensions=self.dimensions,
            colors=self.colors,
            emblem=self.emblem,
        )


class RenderResult(BaseModel):
    """Encoded image plus the dimensions actually used."""
    model_config = ConfigDict(frozen=True)

    image_bytes: bytes = Field(..., repr=False)
    width: int
    height: int
    media_type: str = "image/png"
    warnings: tuple[str, ...] = ()
