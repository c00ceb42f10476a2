"""Effective availability state of a reviewer on a given day.

Slots may overlap freely. The covering slot with the highest precedence
type wins, and among equal types the most recently created slot wins.
Every team-level computation goes through ``effective_state`` so the
summary, the common-availability finder and the overlap matrix always agree.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType

from peerreview.availability.intervals import date_sequence
from peerreview.availability.types import AvailabilitySlot, AvailabilityType, DateRange, as_date

logger = logging.getLogger("peerreview.availability.resolver")


def covering_slots(day: date | datetime, slots: Iterable[AvailabilitySlot]) -> list[AvailabilitySlot]:
    d = as_date(day)
    return [s for s in slots if s.start_date <= d <= s.end_date]


def effective_slot(day: date | datetime, slots: Iterable[AvailabilitySlot]) -> AvailabilitySlot | None:
    covering = covering_slots(day, slots)
    if not covering:
        return None
    return max(covering, key=lambda s: (s.availability_type.precedence, s.created_at))


def effective_state(day: date | datetime, slots: Iterable[AvailabilitySlot]) -> AvailabilityType | None:
    """Return the governing state for ``day``, or None when no slot covers it."""
    winner = effective_slot(day, slots)
    return winner.availability_type if winner else None


@dataclass(frozen=True)
class StateTable:
    """Effective state of every (reviewer, date) pair over a period.

    Built once per query; read by the finder and the matrix builder.
    """

    period: DateRange
    reviewer_ids: tuple[str, ...]
    dates: tuple[date, ...]
    states: Mapping[tuple[str, date], AvailabilityType | None]

    @classmethod
    def build(cls, team_slots: Mapping[str, Sequence[AvailabilitySlot]], period: DateRange) -> "StateTable":
        dates = tuple(date_sequence(period.start, period.end))
        reviewer_ids = tuple(team_slots)
        states = {
            (reviewer_id, day): effective_state(day, team_slots[reviewer_id])
            for reviewer_id in reviewer_ids
            for day in dates
        }
        logger.debug(
            "Built state table reviewers=%d days=%d", len(reviewer_ids), len(dates)
        )
        return cls(period, reviewer_ids, dates, MappingProxyType(states))

    def state(self, reviewer_id: str, day: date) -> AvailabilityType | None:
        return self.states[(reviewer_id, day)]

    def available_subset(self, day: date) -> tuple[str, ...]:
        """Reviewers, in team order, who are AVAILABLE or TENTATIVE on ``day``."""
        return tuple(
            reviewer_id
            for reviewer_id in self.reviewer_ids
            if (state := self.states[(reviewer_id, day)]) is not None and state.counts_as_available
        )
