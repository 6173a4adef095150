# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Boat Class Model
Immutable description of one rowing shell configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

COX_LABEL = "Cox"
BOW_LABEL = "Bow"
STROKE_LABEL = "Stroke"
SINGLE_LABEL = "Single"


@dataclass(frozen=True)
class BoatClassSpec:
    """One shell configuration. seat_names runs bow to stroke, cox first."""
    code: str
    name: str
    rower_count: int
    has_cox: bool
    seat_names: tuple[str, ...]

    def __post_init__(self) -> None:
        expected = self.rower_count + (1 if self.has_cox else 0)
        if len(self.seat_names) != expected:
            raise ValueError(
                f"Boat class {self.code} declares {len(self.seat_names)} seats, "
                f"expected {expected}"
            )

    @property
    def rower_seat_names(self) -> tuple[str, ...]:
        """Rower seats only, bow to stroke."""
        return self.seat_names[1:] if self.has_cox else self.seat_names
