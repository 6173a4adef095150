# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Rendering Module
Public API for the drawing surface, text fitting and template registry.
"""

from rowgram.modules.rendering.base import RenderConfig, TemplateRenderer
from rowgram.modules.rendering.emblem import decode_emblem, emblem_region, place_emblem
from rowgram.modules.rendering.registry import (
    TEMPLATE_REGISTRY,
    get_renderer,
    list_templates,
)
from rowgram.modules.rendering.surface import DrawingSurface
from rowgram.modules.rendering.text_fit import fit_line, fit_name, truncate_to_budget

__all__ = [
    # Contract
    "RenderConfig",
    "TemplateRenderer",
    "DrawingSurface",
    # Registry
    "TEMPLATE_REGISTRY",
    "get_renderer",
    "list_templates",
    # Emblem
    "decode_emblem",
    "emblem_region",
    "place_emblem",
    # Text
    "fit_line",
    "fit_name",
    "truncate_to_budget",
]
