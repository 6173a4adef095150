# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — GET /templates + GET /boat-classes
Read-only listings for populating editor dropdowns.
"""

from __future__ import annotations

from fastapi import APIRouter

from rowgram.models.api import BoatClassInfo, TemplateInfo
from rowgram.modules.rendering.registry import list_templates
from rowgram.modules.roster.boat_classes import list_boat_classes

router = APIRouter(tags=["catalog"])


@router.get("/templates", response_model=list[TemplateInfo], summary="List template styles")
async def get_templates() -> list[TemplateInfo]:
    return [TemplateInfo(**t) for t in list_templates()]


@router.get("/boat-classes", response_model=list[BoatClassInfo], summary="List boat classes")
async def get_boat_classes() -> list[BoatClassInfo]:
    return [
        BoatClassInfo(
            code=bc.code,
            name=bc.name,
            rower_count=bc.rower_count,
            has_cox=bc.has_cox,
            seat_names=list(bc.seat_names),
        )
        for bc in list_boat_classes()
    ]
