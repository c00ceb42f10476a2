"""Per-reviewer availability summaries and statistics."""

import logging
from collections import Counter
from collections.abc import Sequence

from peerreview.availability.intervals import date_sequence, days_between, group_consecutive, overlaps
from peerreview.availability.resolver import effective_state
from peerreview.availability.types import (
    AssignmentWindow,
    AvailabilitySlot,
    AvailabilitySummary,
    AvailabilityType,
    DateRange,
    DateRangeWithInfo,
    ReviewerAvailabilityStats,
)

logger = logging.getLogger("peerreview.availability.summary")


def availability_percentage(available_days: int, tentative_days: int, total_days: int) -> int:
    """``round(100 * (available + tentative / 2) / total)``, halves rounded up."""
    if total_days <= 0:
        return 0
    numerator = 100 * (2 * available_days + tentative_days)
    denominator = 2 * total_days
    return (2 * numerator + denominator) // (2 * denominator)


def calculate_summary(slots: Sequence[AvailabilitySlot], period: DateRange) -> AvailabilitySummary:
    """Count the days of ``period`` in each effective state.

    A day no slot covers counts as unavailable: a reviewer who never stated
    availability is not assumed schedulable.
    """
    total_days = days_between(period.start, period.end)
    counts = Counter(
        effective_state(day, slots) or AvailabilityType.UNAVAILABLE
        for day in date_sequence(period.start, period.end)
    )
    available = counts[AvailabilityType.AVAILABLE]
    tentative = counts[AvailabilityType.TENTATIVE]
    return AvailabilitySummary(
        total_days=total_days,
        available_days=available,
        tentative_days=tentative,
        unavailable_days=counts[AvailabilityType.UNAVAILABLE],
        on_assignment_days=counts[AvailabilityType.ON_ASSIGNMENT],
        availability_percentage=availability_percentage(available, tentative, total_days),
    )


def available_stretches(slots: Sequence[AvailabilitySlot], period: DateRange) -> list[DateRangeWithInfo]:
    """Maximal runs of days whose effective state is AVAILABLE."""
    days = [
        day
        for day in date_sequence(period.start, period.end)
        if effective_state(day, slots) is AvailabilityType.AVAILABLE
    ]
    return [
        DateRangeWithInfo.from_range(run, label=f"{days_between(run.start, run.end)} days")
        for run in group_consecutive(days)
    ]


def calculate_stats(
    reviewer_id: str,
    slots: Sequence[AvailabilitySlot],
    period: DateRange,
) -> ReviewerAvailabilityStats:
    stretches = available_stretches(slots, period)
    # max() keeps the first of equally long stretches
    longest = max(stretches, key=lambda r: r.days_count) if stretches else None
    assignments = sorted(
        (
            AssignmentWindow(
                slot_id=s.id,
                review_id=s.review_id,
                start_date=s.start_date,
                end_date=s.end_date,
                title=s.title,
            )
            for s in slots
            if s.availability_type is AvailabilityType.ON_ASSIGNMENT and overlaps(s.date_range, period)
        ),
        key=lambda a: (a.start_date, a.end_date),
    )
    logger.debug(
        "Stats for reviewer=%s stretches=%d assignments=%d", reviewer_id, len(stretches), len(assignments)
    )
    return ReviewerAvailabilityStats(
        reviewer_id=reviewer_id,
        period=period,
        summary=calculate_summary(slots, period),
        next_available_period=stretches[0] if stretches else None,
        longest_available_stretch=longest,
        upcoming_assignments=tuple(assignments),
    )
