"""Guards used before a slot is written or a reviewer is proposed for a period."""

from collections.abc import Iterable, Sequence
from datetime import date

from peerreview.availability.intervals import date_sequence, overlaps
from peerreview.availability.resolver import effective_state
from peerreview.availability.types import AvailabilitySlot, AvailabilityType, DateRange


class ReadOnlyAvailabilityError(Exception):
    """Raised when a user-facing edit targets a system-managed state."""

    def __init__(self, availability_type: AvailabilityType) -> None:
        self.availability_type = availability_type
        super().__init__(f"{availability_type} slots are managed by review assignments")


def assert_editable(availability_type: AvailabilityType) -> None:
    if not availability_type.is_editable:
        raise ReadOnlyAvailabilityError(availability_type)


def assignment_conflicts(
    start: date, end: date, existing_slots: Iterable[AvailabilitySlot]
) -> list[AvailabilitySlot]:
    """ON_ASSIGNMENT slots overlapping ``[start, end]``."""
    candidate = DateRange(start, end)
    return [
        s
        for s in existing_slots
        if s.availability_type is AvailabilityType.ON_ASSIGNMENT and overlaps(candidate, s.date_range)
    ]


def has_assignment_conflict(start: date, end: date, existing_slots: Iterable[AvailabilitySlot]) -> bool:
    return bool(assignment_conflicts(start, end, existing_slots))


def is_available_for_period(
    slots: Sequence[AvailabilitySlot],
    period: DateRange,
    accept_tentative: bool = False,
) -> bool:
    for day in date_sequence(period.start, period.end):
        state = effective_state(day, slots)
        if state is AvailabilityType.AVAILABLE:
            continue
        if accept_tentative and state is AvailabilityType.TENTATIVE:
            continue
        return False
    return True
