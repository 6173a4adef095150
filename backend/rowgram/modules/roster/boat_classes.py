# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Boat Class Registry
Static, read-only table of rowing shell configurations.

Each class fixes the rower count, whether a coxswain sits in the boat,
and the canonical bow-to-stroke seat names:

  8+   Cox, Bow, 2, 3, 4, 5, 6, 7, Stroke
  4+   Cox, Bow, 2, 3, Stroke
  4-   Bow, 2, 3, Stroke
  4x   Bow, 2, 3, Stroke
  2-   Bow, Stroke
  2x   Bow, Stroke
  1x   Single

The table is built once at import time and exposed through a
MappingProxyType, so concurrent renders share it without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rowgram.api.middleware.error_handler import InvalidBoatClass
from rowgram.models.boat import (
    BOW_LABEL,
    COX_LABEL,
    SINGLE_LABEL,
    STROKE_LABEL,
    BoatClassSpec,
)


def _seat_names(rower_count: int, has_cox: bool) -> tuple[str, ...]:
    if rower_count == 1:
        rowers: list[str] = [SINGLE_LABEL]
    else:
        middle = [str(n) for n in range(2, rower_count)]
        rowers = [BOW_LABEL, *middle, STROKE_LABEL]
    return tuple([COX_LABEL] + rowers) if has_cox else tuple(rowers)


def _spec(code: str, name: str, rower_count: int, has_cox: bool) -> BoatClassSpec:
    return BoatClassSpec(
        code=code,
        name=name,
        rower_count=rower_count,
        has_cox=has_cox,
        seat_names=_seat_names(rower_count, has_cox),
    )


BOAT_CLASSES: Mapping[str, BoatClassSpec] = MappingProxyType({
    spec.code: spec
    for spec in (
        _spec("8+", "Eight with Coxswain", 8, True),
        _spec("4+", "Four with Coxswain", 4, True),
        _spec("4-", "Four without Coxswain", 4, False),
        _spec("4x", "Quad Sculls", 4, False),
        _spec("2-", "Coxless Pair", 2, False),
        _spec("2x", "Double Sculls", 2, False),
        _spec("1x", "Single Sculls", 1, False),
    )
})

# Long-form slugs accepted wherever a code is
BOAT_CLASS_ALIASES: Mapping[str, str] = MappingProxyType({
    "eight-with-cox": "8+",
    "eight": "8+",
    "four-with-cox": "4+",
    "four-without-cox": "4-",
    "coxless-four": "4-",
    "quad": "4x",
    "quad-sculls": "4x",
    "coxless-pair": "2-",
    "pair": "2-",
    "double": "2x",
    "double-sculls": "2x",
    "single": "1x",
    "single-sculls": "1x",
})


def get_boat_class(code: str) -> BoatClassSpec:
    """
    Look up a boat class by code or alias.

    Raises:
        InvalidBoatClass: if neither the code nor an alias matches.
    """
    key = code.strip() if isinstance(code, str) else code
    spec = BOAT_CLASSES.get(key)
    if spec is None and isinstance(key, str):
        spec = BOAT_CLASSES.get(BOAT_CLASS_ALIASES.get(key.lower(), ""))
    if spec is None:
        raise InvalidBoatClass(str(code))
    return spec


def list_boat_classes() -> list[BoatClassSpec]:
    """All registered boat classes, largest crew first."""
    return sorted(
        BOAT_CLASSES.values(),
        key=lambda s: (-s.rower_count, not s.has_cox, s.code),
    )
