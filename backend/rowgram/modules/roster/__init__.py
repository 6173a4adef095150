# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Roster Module
Public API for boat classes and seat assignment.
"""

from rowgram.modules.roster.boat_classes import (
    BOAT_CLASS_ALIASES,
    BOAT_CLASSES,
    get_boat_class,
    list_boat_classes,
)
from rowgram.modules.roster.seat_assigner import (
    assign_crew,
    assign_seats,
    build_crew,
    split_columns,
)

__all__ = [
    # Registry
    "BOAT_CLASSES",
    "BOAT_CLASS_ALIASES",
    "get_boat_class",
    "list_boat_classes",
    # Seat assignment
    "assign_seats",
    "assign_crew",
    "build_crew",
    "split_columns",
]
