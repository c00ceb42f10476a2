"""Team availability: summaries, common windows and the overlap matrix in one pass."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from peerreview.availability.common import find_common_availability
from peerreview.availability.overlap import build_overlap_matrix
from peerreview.availability.resolver import StateTable
from peerreview.availability.summary import calculate_summary
from peerreview.availability.types import (
    AvailabilityType,
    DateRange,
    ReviewerAvailabilityResult,
    TeamAvailabilityResult,
    TeamMember,
)

logger = logging.getLogger("peerreview.availability.team")


def _reviewer_result(member: TeamMember, period: DateRange) -> ReviewerAvailabilityResult:
    return ReviewerAvailabilityResult(
        reviewer_id=member.reviewer_id,
        reviewer_name=member.name,
        organization_name=member.organization,
        slots=tuple(member.slots),
        summary=calculate_summary(member.slots, period),
    )


def compute_team_availability(
    reviewers: Sequence[TeamMember],
    period: DateRange,
    max_workers: int | None = None,
) -> TeamAvailabilityResult:
    """Compute everything the team scheduling view needs for ``period``.

    Per-reviewer summaries run on a thread pool when ``max_workers`` is above
    one; results always come back in the order of ``reviewers``.
    """
    if not reviewers:
        return TeamAvailabilityResult()

    if max_workers and max_workers > 1 and len(reviewers) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(reviewers))) as pool:
            results = tuple(pool.map(lambda m: _reviewer_result(m, period), reviewers))
    else:
        results = tuple(_reviewer_result(m, period) for m in reviewers)

    team_slots = {m.reviewer_id: m.slots for m in reviewers}
    table = StateTable.build(team_slots, period)
    common = find_common_availability(
        team_slots, period, min_days=1, required_type=AvailabilityType.AVAILABLE, table=table
    )
    matrix = build_overlap_matrix(team_slots, period, table=table)

    logger.info(
        "Team availability reviewers=%d period=%s..%s common=%d partial=%d",
        len(reviewers),
        period.start,
        period.end,
        len(common),
        len(matrix.partial_available_dates),
    )
    return TeamAvailabilityResult(
        reviewers=results,
        common_available_dates=tuple(common),
        partial_available_dates=matrix.partial_available_dates,
        overlap_matrix=matrix.entries,
    )
