"""Date ranges where a whole team is available at once."""

import logging
from collections.abc import Mapping, Sequence

from peerreview.availability.intervals import group_consecutive
from peerreview.availability.resolver import StateTable
from peerreview.availability.types import AvailabilitySlot, AvailabilityType, DateRange, DateRangeWithInfo

logger = logging.getLogger("peerreview.availability.common")

DEFAULT_MIN_DAYS = 5


def qualifies(state: AvailabilityType | None, required_type: AvailabilityType) -> bool:
    """Whether one reviewer's state satisfies ``required_type``.

    TENTATIVE is accepted when AVAILABLE is required. A day with no slot at
    all never qualifies, which is not the same as an explicit UNAVAILABLE.
    """
    if state is None:
        return False
    if state is required_type:
        return True
    return required_type is AvailabilityType.AVAILABLE and state is AvailabilityType.TENTATIVE


def find_common_availability(
    team_slots: Mapping[str, Sequence[AvailabilitySlot]],
    period: DateRange,
    min_days: int = DEFAULT_MIN_DAYS,
    required_type: AvailabilityType = AvailabilityType.AVAILABLE,
    *,
    table: StateTable | None = None,
) -> list[DateRangeWithInfo]:
    """Maximal consecutive runs in ``period`` where every reviewer qualifies.

    Runs shorter than ``min_days`` are dropped. An empty team yields no runs.
    """
    if not team_slots:
        return []
    table = table or StateTable.build(team_slots, period)
    qualifying = [
        day
        for day in table.dates
        if all(qualifies(table.state(reviewer_id, day), required_type) for reviewer_id in table.reviewer_ids)
    ]
    runs = [DateRangeWithInfo.from_range(run) for run in group_consecutive(qualifying)]
    kept = [run for run in runs if run.days_count >= min_days]
    logger.debug(
        "Common availability team=%d qualifying_days=%d runs=%d kept=%d min_days=%d type=%s",
        len(table.reviewer_ids),
        len(qualifying),
        len(runs),
        len(kept),
        min_days,
        required_type,
    )
    return kept
