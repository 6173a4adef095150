# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — FastAPI Dependencies
Singleton providers for the club preset store and the render coordinator.
Both are created once at startup via the lifespan event in main.py and
injected into route handlers with Depends().
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from rowgram.config import get_settings
from rowgram.core.color_resolver import (
    ClubPresetStore,
    InMemoryClubPresetStore,
    load_presets_file,
)
from rowgram.core.coordinator import RenderCoordinator
from rowgram.utils.logger import get_logger

log = get_logger(__name__)

# ─── Preset Store Singleton ──────────────────────────────────────────────────

_preset_store: ClubPresetStore | None = None


def init_preset_store() -> None:
    """Load presets from CLUB_PRESETS_PATH if set, else start empty."""
    global _preset_store
    settings = get_settings()

    if settings.club_presets_path is not None:
        log.info("init_preset_store", source="file", path=str(settings.club_presets_path))
        _preset_store = load_presets_file(settings.club_presets_path)
    else:
        log.info("init_preset_store", source="memory")
        _preset_store = InMemoryClubPresetStore()


def get_preset_store() -> ClubPresetStore:
    if _preset_store is None:
        raise RuntimeError(
            "Preset store has not been initialised. "
            "Ensure init_preset_store() is called during app lifespan startup."
        )
    return _preset_store


PresetStoreDep = Annotated[ClubPresetStore, Depends(get_preset_store)]


# ─── Coordinator Singleton ───────────────────────────────────────────────────

_coordinator: RenderCoordinator | None = None


def init_coordinator() -> None:
    """Build the coordinator over the preset store. Call after init_preset_store()."""
    global _coordinator
    _coordinator = RenderCoordinator(presets=get_preset_store())
    log.info("init_coordinator")


def get_coordinator() -> RenderCoordinator:
    if _coordinator is None:
        raise RuntimeError(
            "RenderCoordinator has not been initialised. "
            "Ensure init_coordinator() is called during app lifespan startup."
        )
    return _coordinator


CoordinatorDep = Annotated[RenderCoordinator, Depends(get_coordinator)]
