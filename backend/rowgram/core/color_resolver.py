# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Colour Scheme + Club Emblem Resolver
Turns the request's colours and optional emblem into the RenderConfig a
template draws with.

Emblem sources:
  data              raw image bytes supplied with the request
  preset_reference  looked up through a ClubPresetStore; the preset's logo
                    becomes the emblem

An emblem that fails to decode, or a preset that is unknown or has no
logo, never fails the render: it is logged, reported as a warning on the
result, and the image is drawn without it.
"""

from __future__ import annotations

import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rowgram.api.middleware.error_handler import EmblemInvalid
from rowgram.config import Settings, get_settings
from rowgram.models.render import ColorScheme, RenderRequest
from rowgram.modules.rendering.base import RenderConfig
from rowgram.modules.rendering.emblem import decode_emblem
from rowgram.utils.logger import get_logger

log = get_logger(__name__)


class ClubPreset(BaseModel):
    """Saved club branding: colours plus an optional logo."""
    model_config = ConfigDict(frozen=True)

    preset_reference: str
    club_name: str = ""
    colors: ColorScheme
    logo: Optional[bytes] = Field(None, repr=False)


# ─── Preset Lookup ───────────────────────────────────────────────────────────

class ClubPresetStore(ABC):
    """Read access to club presets, keyed by preset reference."""

    @abstractmethod
    def get_preset(self, preset_reference: str) -> Optional[ClubPreset]:
        """Return the preset, or None if the reference is unknown."""


class InMemoryClubPresetStore(ClubPresetStore):
    """Thread-safe dict-backed preset store."""

    def __init__(self, presets: Optional[list[ClubPreset]] = None) -> None:
        self._store: dict[str, ClubPreset] = {}
        self._lock = threading.RLock()
        for preset in presets or []:
            self.put_preset(preset)

    def put_preset(self, preset: ClubPreset) -> None:
        with self._lock:
            self._store[preset.preset_reference] = preset
        log.debug("club_preset_stored", preset_reference=preset.preset_reference)

    def get_preset(self, preset_reference: str) -> Optional[ClubPreset]:
        with self._lock:
            return self._store.get(preset_reference)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def load_presets_file(path: Path) -> InMemoryClubPresetStore:
    """
    Load presets from a JSON list:
        [{"preset_reference": "...", "club_name": "...",
          "colors": {"primary": "...", "secondary": "..."},
          "logo_path": "crest.png"}]
    logo_path is optional and relative to the JSON file.
    """
    entries = json.loads(Path(path).read_text(encoding="utf-8"))
    presets = []
    for entry in entries:
        logo_path = entry.pop("logo_path", None)
        if logo_path:
            entry["logo"] = (Path(path).parent / logo_path).read_bytes()
        presets.append(ClubPreset.model_validate(entry))
    log.info("club_presets_loaded", path=str(path), count=len(presets))
    return InMemoryClubPresetStore(presets)


# ─── Resolution ──────────────────────────────────────────────────────────────

def _emblem_bytes(request: RenderRequest, presets: Optional[ClubPresetStore]) -> bytes:
    emblem = request.emblem
    if emblem.data is not None:
        return emblem.data

    ref = emblem.preset_reference
    preset = presets.get_preset(ref) if presets is not None else None
    if preset is None:
        raise EmblemInvalid(f"Club preset '{ref}' was not found.")
    if not preset.logo:
        raise EmblemInvalid(f"Club preset '{ref}' has no logo.")
    return preset.logo


def resolve_theme(
    request: RenderRequest,
    presets: Optional[ClubPresetStore] = None,
    settings: Optional[Settings] = None,
) -> tuple[RenderConfig, tuple[str, ...]]:
    """
    Build the RenderConfig for one request.

    Returns:
        (config, warnings). warnings is empty unless the emblem was dropped.
    """
    settings = settings or get_settings()
    warnings: list[str] = []
    emblem_img = None

    if request.emblem is not None:
        try:
            emblem_img = decode_emblem(_emblem_bytes(request, presets))
        except EmblemInvalid as e:
            log.warning("emblem_dropped", source=request.emblem.identity, reason=str(e))
            warnings.append(f"{EmblemInvalid.code}: {e}")

    config = RenderConfig(
        width=request.dimensions.width,
        height=request.dimensions.height,
        primary=request.colors.primary_rgb,
        secondary=request.colors.secondary_rgb,
        emblem=emblem_img,
        name_char_budget=settings.name_char_budget,
        emblem_fraction=settings.emblem_region_fraction,
    )
    return config, tuple(warnings)
