# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Rowgram — Seat Assigner
Derives the display-order seat assignment for a crew.

Display order is the order templates read top-to-bottom:
  Cox (if any), Stroke, 7, 6, … 2, Bow

Rower names are supplied in the same order (stroke first), so the
assignment is a straight zip of reversed registry seat names with the
names list. Identical input always yields an equal SeatAssignment, which
the preview cache relies on.

Column split for two-column rosters:
  Rowers are split by index parity in display order. In an eight this
  puts Stroke, 6, 4, 2 in one column (stroke side) and 7, 5, 3, Bow in
  the other (bow side), matching a conventionally rigged boat rather
  than a first-half/second-half split.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rowgram.api.middleware.error_handler import RosterMismatch
from rowgram.models.boat import COX_LABEL, BoatClassSpec
from rowgram.models.crew import Crew, CrewPayload, SeatAssignment, SeatEntry
from rowgram.modules.roster.boat_classes import get_boat_class
from rowgram.utils.logger import get_logger

log = get_logger(__name__)


def _check_roster(
    boat_class: BoatClassSpec,
    rower_names: Sequence[str],
    cox_name: Optional[str],
) -> None:
    if len(rower_names) != boat_class.rower_count:
        raise RosterMismatch(
            boat_class.code,
            expected=boat_class.rower_count,
            actual=len(rower_names),
        )

    has_cox_name = bool(cox_name and cox_name.strip())
    if has_cox_name != boat_class.has_cox:
        raise RosterMismatch(
            boat_class.code,
            expected=1 if boat_class.has_cox else 0,
            actual=1 if has_cox_name else 0,
            field="cox",
        )


def assign_seats(
    boat_class: BoatClassSpec,
    rower_names: Sequence[str],
    cox_name: Optional[str] = None,
) -> SeatAssignment:
    """
    Build the display-order seat assignment for one crew.

    Args:
        boat_class:  Registry entry for the shell
        rower_names: Rower names, stroke first, bow last
        cox_name:    Coxswain name; required iff the class carries a cox

    Returns:
        SeatAssignment of length rower_count (+1 with cox), cox first.

    Raises:
        RosterMismatch: wrong number of rowers, or cox presence disagrees
                        with the boat class. Never truncates or pads.
    """
    _check_roster(boat_class, rower_names, cox_name)

    labels = tuple(reversed(boat_class.rower_seat_names))
    entries = [
        SeatEntry(seat_label=label, occupant_name=name)
        for label, name in zip(labels, rower_names)
    ]
    if boat_class.has_cox:
        entries.insert(0, SeatEntry(seat_label=COX_LABEL, occupant_name=cox_name.strip()))

    return SeatAssignment(boat_class=boat_class.code, entries=tuple(entries))


def build_crew(payload: CrewPayload) -> Crew:
    """
    Bind a caller-supplied crew to its boat class and check the roster.

    Raises:
        InvalidBoatClass: unknown boat class code
        RosterMismatch:   roster disagrees with the class definition
    """
    boat_class = get_boat_class(payload.boat_class)
    _check_roster(boat_class, payload.rower_names, payload.cox_name)

    return Crew(
        club_name=payload.club_name,
        race_name=payload.race_name,
        boat_name=payload.boat_name,
        boat_class=boat_class,
        rower_names=tuple(payload.rower_names),
        cox_name=payload.cox_name,
        coach_name=payload.coach_name,
    )


def assign_crew(crew: Crew) -> SeatAssignment:
    """Convenience wrapper: seat assignment for an already-built Crew."""
    return assign_seats(crew.boat_class, crew.rower_names, crew.cox_name)


def split_columns(
    seats: SeatAssignment,
) -> tuple[tuple[SeatEntry, ...], tuple[SeatEntry, ...]]:
    """
    Split the rower entries (cox excluded) into two columns by parity of
    their display index.

    Returns:
        (stroke_side, bow_side). For an eight:
        (Stroke, 6, 4, 2) and (7, 5, 3, Bow).
    """
    rowers = seats.rowers
    return rowers[0::2], rowers[1::2]
