"""Calendar-date range primitives.

All ranges are inclusive on both ends.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from peerreview.availability.types import DateRange, InvalidDateRangeError, as_date

ONE_DAY = timedelta(days=1)


def days_between(a: date | datetime, b: date | datetime) -> int:
    """Inclusive number of days between two dates, in either order."""
    return abs((as_date(b) - as_date(a)).days) + 1


def is_next_day(previous: date, candidate: date) -> bool:
    """True when ``candidate`` is the calendar day right after ``previous``."""
    return candidate - previous == ONE_DAY


def contains(date_range: DateRange, day: date | datetime) -> bool:
    return date_range.start <= as_date(day) <= date_range.end


def overlaps(r1: DateRange, r2: DateRange) -> bool:
    return r1.start <= r2.end and r2.start <= r1.end


def intersect(r1: DateRange, r2: DateRange) -> DateRange | None:
    if not overlaps(r1, r2):
        return None
    return DateRange(max(r1.start, r2.start), min(r1.end, r2.end))


def merge_ranges(ranges: Iterable[DateRange]) -> list[DateRange]:
    """Merge overlapping ranges and ranges separated by at most one day."""
    merged: list[DateRange] = []
    for current in sorted(ranges, key=lambda r: (r.start, r.end)):
        if merged and current.start <= merged[-1].end + ONE_DAY:
            last = merged[-1]
            merged[-1] = DateRange(last.start, max(last.end, current.end))
        else:
            merged.append(current)
    return merged


def date_sequence(start: date | datetime, end: date | datetime) -> list[date]:
    """Every calendar date in ``[start, end]``, in order."""
    first, last = as_date(start), as_date(end)
    if last < first:
        raise InvalidDateRangeError(first, last)
    return [first + timedelta(days=offset) for offset in range((last - first).days + 1)]


def group_consecutive(days: Iterable[date]) -> list[DateRange]:
    """Group ascending dates into maximal runs of consecutive days.

    A single missing day ends a run.
    """
    runs: list[DateRange] = []
    for day in days:
        if runs and is_next_day(runs[-1].end, day):
            runs[-1] = DateRange(runs[-1].start, day)
        else:
            runs.append(DateRange(day, day))
    return runs
