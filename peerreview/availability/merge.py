"""Collapse same-type slots into minimal non-overlapping slots."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from itertools import groupby

from peerreview.availability.intervals import ONE_DAY
from peerreview.availability.types import AvailabilitySlot

logger = logging.getLogger("peerreview.availability.merge")

NOTES_SEPARATOR = "; "


def _combine_notes(run: list[AvailabilitySlot]) -> str | None:
    notes: tuple[str, ...] = ()
    for slot in run:
        if slot.notes and slot.notes not in notes:
            notes += (slot.notes,)
    return NOTES_SEPARATOR.join(notes) or None


def _merge_same_type(slots: list[AvailabilitySlot]) -> list[AvailabilitySlot]:
    runs: list[list[AvailabilitySlot]] = []
    end = None
    for slot in sorted(slots, key=lambda s: (s.start_date, s.end_date)):
        if runs and slot.start_date <= end + ONE_DAY:
            runs[-1].append(slot)
            end = max(end, slot.end_date)
        else:
            runs.append([slot])
            end = slot.end_date
    return [
        replace(run[0], end_date=max(s.end_date for s in run), notes=_combine_notes(run))
        for run in runs
    ]


def merge_overlapping_slots(slots: Iterable[AvailabilitySlot]) -> list[AvailabilitySlot]:
    """Merge overlapping or adjacent slots of the same availability type.

    Slots of different types are left alone even when they overlap; which
    one governs a day is decided by the resolver at read time. The merged
    slot keeps the identity (id, title, created_at) of the earliest slot of
    its run. Result is ordered by start date.
    """
    by_type = sorted(slots, key=lambda s: s.availability_type.precedence)
    merged = [
        slot
        for _, group in groupby(by_type, key=lambda s: s.availability_type)
        for slot in _merge_same_type(list(group))
    ]
    logger.debug("Merged %d slots into %d", len(by_type), len(merged))
    return sorted(merged, key=lambda s: (s.start_date, -s.availability_type.precedence, s.id))
