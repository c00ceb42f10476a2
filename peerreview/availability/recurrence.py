"""Minimal RRULE support for recurring availability slots.

Only ``FREQ``, ``INTERVAL``, ``BYDAY`` and ``UNTIL`` are understood; other
parts are ignored. A rule is parsed once into one of the frozen variants
below and expanded without touching the text again.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from peerreview.availability.types import InvalidDateRangeError, as_date

DEFAULT_MAX_OCCURRENCES = 100

WEEKDAY_CODES = {"MO": 0, "TU": 1, "WE": 2, "TH": 3, "FR": 4, "SA": 5, "SU": 6}


class RecurrenceParseError(ValueError):
    pass


@dataclass(frozen=True)
class Daily:
    interval: int = 1
    until: date | None = None


@dataclass(frozen=True)
class Weekly:
    interval: int = 1
    until: date | None = None
    days: frozenset[int] = frozenset()


@dataclass(frozen=True)
class Monthly:
    interval: int = 1
    until: date | None = None


@dataclass(frozen=True)
class Yearly:
    interval: int = 1
    until: date | None = None


RecurrenceRule = Daily | Weekly | Monthly | Yearly

_FREQUENCIES: dict[str, type] = {"DAILY": Daily, "WEEKLY": Weekly, "MONTHLY": Monthly, "YEARLY": Yearly}


def _parse_until(value: str) -> date:
    digits = value.replace("-", "")[:8]
    try:
        return datetime.strptime(digits, "%Y%m%d").date()
    except ValueError as e:
        raise RecurrenceParseError(f"invalid UNTIL: {value}") from e


def _parse_interval(value: str) -> int:
    try:
        interval = int(value)
    except ValueError as e:
        raise RecurrenceParseError(f"invalid INTERVAL: {value}") from e
    if interval < 1:
        raise RecurrenceParseError(f"INTERVAL must be positive: {value}")
    return interval


def _parse_days(value: str) -> frozenset[int]:
    codes = [code.strip().upper() for code in value.split(",") if code.strip()]
    unknown = [code for code in codes if code not in WEEKDAY_CODES]
    if unknown:
        raise RecurrenceParseError(f"invalid BYDAY: {','.join(unknown)}")
    return frozenset(WEEKDAY_CODES[code] for code in codes)


def parse_recurrence_rule(rule: str | None) -> RecurrenceRule | None:
    """Parse ``FREQ=WEEKLY;BYDAY=MO,TU`` style text. Empty text gives None.

    FREQ defaults to WEEKLY when absent.
    """
    if not rule or not rule.strip():
        return None
    parts: dict[str, str] = {}
    for part in rule.strip().removeprefix("RRULE:").split(";"):
        if not part:
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise RecurrenceParseError(f"malformed rule part: {part}")
        parts[key.strip().upper()] = value.strip()

    frequency = parts.get("FREQ", "WEEKLY").upper()
    if frequency not in _FREQUENCIES:
        raise RecurrenceParseError(f"unsupported FREQ: {frequency}")
    interval = _parse_interval(parts["INTERVAL"]) if "INTERVAL" in parts else 1
    until = _parse_until(parts["UNTIL"]) if "UNTIL" in parts else None
    if frequency == "WEEKLY":
        days = _parse_days(parts["BYDAY"]) if "BYDAY" in parts else frozenset()
        return Weekly(interval=interval, until=until, days=days)
    return _FREQUENCIES[frequency](interval=interval, until=until)


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year, month = start.year + month_index // 12, month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _weekday_candidates(start: date, rule: Weekly):
    week_zero = start - timedelta(days=start.weekday())
    day = start
    while True:
        week_index = (day - week_zero).days // 7
        if day.weekday() in rule.days and week_index % rule.interval == 0:
            yield day
        day += timedelta(days=1)


def _candidates(start: date, rule: RecurrenceRule):
    if isinstance(rule, Weekly) and rule.days:
        yield from _weekday_candidates(start, rule)
        return
    step = 0
    while True:
        if isinstance(rule, Daily):
            yield start + timedelta(days=step * rule.interval)
        elif isinstance(rule, Weekly):
            yield start + timedelta(weeks=step * rule.interval)
        elif isinstance(rule, Monthly):
            yield _add_months(start, step * rule.interval)
        else:
            yield _add_months(start, 12 * step * rule.interval)
        step += 1


def expand_recurrence(
    start: date | datetime,
    end: date | datetime,
    rule: RecurrenceRule | None,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[date]:
    """Occurrence dates of ``rule`` from ``start`` up to ``min(end, until)``.

    Without a rule the start date is the only occurrence.
    """
    first, last = as_date(start), as_date(end)
    if last < first:
        raise InvalidDateRangeError(first, last)
    if rule is None:
        return [first]
    if rule.until is not None:
        last = min(last, rule.until)
    occurrences: list[date] = []
    for day in _candidates(first, rule):
        if day > last or len(occurrences) >= max_occurrences:
            break
        occurrences.append(day)
    return occurrences
