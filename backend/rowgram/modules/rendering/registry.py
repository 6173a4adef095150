# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Template Registry
Read-only template_id → renderer lookup. Renderers hold no per-request
state, so each is instantiated once here and shared.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rowgram.api.middleware.error_handler import UnknownTemplate
from rowgram.modules.rendering.base import TemplateRenderer
from rowgram.modules.rendering.templates import (
    ChampionshipGoldTemplate,
    ClassicLineupTemplate,
    ElitePerformanceTemplate,
    HenleyPosterTemplate,
    MinimalCleanTemplate,
    ModernCardTemplate,
    OxbridgeHeraldTemplate,
    RaceDayTemplate,
    RegattaRoyalTemplate,
    VintageClassicTemplate,
)

TEMPLATE_REGISTRY: Mapping[str, TemplateRenderer] = MappingProxyType({
    renderer.template_id: renderer
    for renderer in (
        OxbridgeHeraldTemplate(),
        ModernCardTemplate(),
        RaceDayTemplate(),
        ChampionshipGoldTemplate(),
        ClassicLineupTemplate(),
        MinimalCleanTemplate(),
        VintageClassicTemplate(),
        ElitePerformanceTemplate(),
        RegattaRoyalTemplate(),
        HenleyPosterTemplate(),
    )
})


def get_renderer(
    template_id: str,
    registry: Mapping[str, TemplateRenderer] = TEMPLATE_REGISTRY,
) -> TemplateRenderer:
    """
    Raises:
        UnknownTemplate: template_id is not registered.
    """
    try:
        return registry[template_id]
    except KeyError:
        raise UnknownTemplate(template_id) from None


def list_templates() -> list[dict[str, str]]:
    return [
        {
            "template_id": r.template_id,
            "display_name": r.display_name,
            "description": r.description,
        }
        for r in TEMPLATE_REGISTRY.values()
    ]
