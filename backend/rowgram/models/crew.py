# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Crew Data Models
A crew as supplied by the caller (CrewPayload), the validated crew bound
to its boat class (Crew), and the derived seat assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rowgram.models.boat import COX_LABEL, BoatClassSpec


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CrewPayload(BaseModel):
    """
    Crew record as handed over by the surrounding application.
    rower_names runs in display order: stroke first, bow last.
    """
    model_config = ConfigDict(frozen=True)

    club_name: str = Field(..., description="Club name shown in the title block")
    race_name: str = Field("", description="Race or event name")
    boat_name: str = Field("", description="Crew designation, e.g. 'M1' or 'Blue Boat'")
    boat_class: str = Field(..., description="Boat class code, e.g. '8+' or 'coxless-pair'")
    rower_names: list[str] = Field(default_factory=list)
    cox_name: Optional[str] = None
    coach_name: Optional[str] = None

    @field_validator("club_name", "race_name", "boat_name", "boat_class")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    @field_validator("rower_names")
    @classmethod
    def _strip_names(cls, v: list[str]) -> list[str]:
        return [name.strip() for name in v]

    @field_validator("cox_name", "coach_name")
    @classmethod
    def _optional_name(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class Crew(BaseModel):
    """A crew whose roster has been checked against its boat class."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    club_name: str
    race_name: str = ""
    boat_name: str = ""
    boat_class: BoatClassSpec
    rower_names: tuple[str, ...]
    cox_name: Optional[str] = None
    coach_name: Optional[str] = None

    @property
    def designation(self) -> str:
        """Crew/boat line for title blocks; falls back to the class name."""
        return self.boat_name or self.boat_class.name

    @property
    def class_and_race(self) -> str:
        parts = [self.boat_class.name]
        if self.race_name:
            parts.append(self.race_name)
        return " • ".join(parts)


@dataclass(frozen=True)
class SeatEntry:
    seat_label: str
    occupant_name: str

    @property
    def is_cox(self) -> bool:
        return self.seat_label == COX_LABEL


@dataclass(frozen=True)
class SeatAssignment:
    """
    Ordered seat → occupant mapping in display order.
    Cox first when present, then stroke through bow.
    """
    boat_class: str
    entries: tuple[SeatEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SeatEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> SeatEntry:
        return self.entries[index]

    @property
    def cox(self) -> Optional[SeatEntry]:
        if self.entries and self.entries[0].is_cox:
            return self.entries[0]
        return None

    @property
    def rowers(self) -> tuple[SeatEntry, ...]:
        return tuple(e for e in self.entries if not e.is_cox)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(e.seat_label for e in self.entries)

    def as_pairs(self) -> list[tuple[str, str]]:
        return [(e.seat_label, e.occupant_name) for e in self.entries]
