"""Reviewer availability and team-scheduling engine.

Pure computations over slot snapshots supplied by the caller. Nothing here
performs I/O or mutates its inputs.
"""

from peerreview.availability.checks import (
    ReadOnlyAvailabilityError,
    assert_editable,
    assignment_conflicts,
    has_assignment_conflict,
    is_available_for_period,
)
from peerreview.availability.common import DEFAULT_MIN_DAYS, find_common_availability
from peerreview.availability.intervals import (
    contains,
    date_sequence,
    days_between,
    group_consecutive,
    intersect,
    is_next_day,
    merge_ranges,
    overlaps,
)
from peerreview.availability.merge import merge_overlapping_slots
from peerreview.availability.overlap import OverlapMatrix, build_overlap_matrix
from peerreview.availability.recurrence import (
    RecurrenceParseError,
    RecurrenceRule,
    expand_recurrence,
    parse_recurrence_rule,
)
from peerreview.availability.resolver import StateTable, effective_slot, effective_state
from peerreview.availability.summary import calculate_stats, calculate_summary
from peerreview.availability.team import compute_team_availability
from peerreview.availability.types import (
    AssignmentWindow,
    AvailabilitySlot,
    AvailabilitySummary,
    AvailabilityType,
    DateRange,
    DateRangeWithInfo,
    InvalidDateRangeError,
    OverlapMatrixEntry,
    ReviewerAvailabilityResult,
    ReviewerAvailabilityStats,
    TeamAvailabilityResult,
    TeamMember,
)

__all__ = [
    "DEFAULT_MIN_DAYS",
    "AssignmentWindow",
    "AvailabilitySlot",
    "AvailabilitySummary",
    "AvailabilityType",
    "DateRange",
    "DateRangeWithInfo",
    "InvalidDateRangeError",
    "OverlapMatrix",
    "OverlapMatrixEntry",
    "ReadOnlyAvailabilityError",
    "RecurrenceParseError",
    "RecurrenceRule",
    "ReviewerAvailabilityResult",
    "ReviewerAvailabilityStats",
    "StateTable",
    "TeamAvailabilityResult",
    "TeamMember",
    "assert_editable",
    "assignment_conflicts",
    "build_overlap_matrix",
    "calculate_stats",
    "calculate_summary",
    "compute_team_availability",
    "contains",
    "date_sequence",
    "days_between",
    "effective_slot",
    "effective_state",
    "expand_recurrence",
    "find_common_availability",
    "group_consecutive",
    "has_assignment_conflict",
    "intersect",
    "is_available_for_period",
    "is_next_day",
    "merge_ranges",
    "merge_overlapping_slots",
    "overlaps",
    "parse_recurrence_rule",
]
