"""Overlap matrix: which part of a team is available on which days."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from peerreview.availability.common import find_common_availability
from peerreview.availability.intervals import is_next_day
from peerreview.availability.resolver import StateTable
from peerreview.availability.types import (
    AvailabilitySlot,
    AvailabilityType,
    DateRange,
    DateRangeWithInfo,
    OverlapMatrixEntry,
)

logger = logging.getLogger("peerreview.availability.overlap")


@dataclass(frozen=True)
class OverlapMatrix:
    partial_available_dates: tuple[DateRangeWithInfo, ...]
    entries: tuple[OverlapMatrixEntry, ...]


def availability_label(available_count: int, total_reviewers: int) -> str:
    return f"{available_count}/{total_reviewers} available"


def _partial_runs(table: StateTable) -> list[tuple[DateRange, tuple[str, ...]]]:
    """Runs of consecutive days sharing the same non-empty, non-full subset."""
    team_size = len(table.reviewer_ids)
    runs: list[tuple[DateRange, tuple[str, ...]]] = []
    for day in table.dates:
        subset = table.available_subset(day)
        if not subset or len(subset) == team_size:
            continue
        if runs:
            last_range, last_subset = runs[-1]
            if last_subset == subset and is_next_day(last_range.end, day):
                runs[-1] = (DateRange(last_range.start, day), subset)
                continue
        runs.append((DateRange(day, day), subset))
    return runs


def build_overlap_matrix(
    team_slots: Mapping[str, Sequence[AvailabilitySlot]],
    period: DateRange,
    *,
    table: StateTable | None = None,
) -> OverlapMatrix:
    """Decompose ``period`` into runs labelled with the available subset.

    Team order is the iteration order of ``team_slots``; every subset keeps it.
    """
    if not team_slots:
        return OverlapMatrix((), ())
    table = table or StateTable.build(team_slots, period)
    team = table.reviewer_ids
    total = len(team)

    partial_runs = _partial_runs(table)
    partial_dates = tuple(
        DateRangeWithInfo.from_range(run, label=availability_label(len(subset), total))
        for run, subset in partial_runs
    )
    partial_entries = [
        OverlapMatrixEntry(
            date_range=run,
            available_reviewer_ids=subset,
            available_count=len(subset),
            total_reviewers=total,
            is_full_overlap=False,
        )
        for run, subset in partial_runs
    ]
    full_entries = [
        OverlapMatrixEntry(
            date_range=DateRange(run.start, run.end),
            available_reviewer_ids=team,
            available_count=total,
            total_reviewers=total,
            is_full_overlap=True,
        )
        for run in find_common_availability(
            team_slots, period, min_days=1, required_type=AvailabilityType.AVAILABLE, table=table
        )
    ]
    entries = sorted(partial_entries + full_entries, key=lambda e: e.date_range.start)
    logger.debug("Overlap matrix team=%d partial=%d full=%d", total, len(partial_entries), len(full_entries))
    return OverlapMatrix(partial_dates, tuple(entries))
