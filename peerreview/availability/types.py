"""Value types for reviewer availability.

Everything here is immutable. Dates are calendar dates; a ``datetime`` passed
where a date is expected is truncated to its date, time of day is ignored.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class InvalidDateRangeError(ValueError):
    """Raised when a range ends before it starts."""

    def __init__(self, start: date, end: date) -> None:
        self.start = start
        self.end = end
        super().__init__(f"End date must be on or after start date ({start} > {end})")


def as_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def as_utc(value: datetime) -> datetime:
    """Read a naive timestamp as UTC so naive and aware values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AvailabilityType(str, Enum):
    """Availability states, declared lowest precedence first.

    Precedence comes from declaration order, so adding a member cannot leave
    a priority value behind.
    """

    AVAILABLE = ("AVAILABLE", "Available", "Disponible")
    TENTATIVE = ("TENTATIVE", "Tentative", "Provisoire")
    UNAVAILABLE = ("UNAVAILABLE", "Unavailable", "Indisponible")
    ON_ASSIGNMENT = ("ON_ASSIGNMENT", "On Assignment", "En mission")

    def __new__(cls, value: str, label_en: str, label_fr: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label_en = label_en
        obj.label_fr = label_fr
        return obj

    @property
    def precedence(self) -> int:
        return type(self)._member_names_.index(self.name) + 1

    @property
    def is_editable(self) -> bool:
        # ON_ASSIGNMENT is written by the assignment workflow only
        return self is not AvailabilityType.ON_ASSIGNMENT

    @property
    def counts_as_available(self) -> bool:
        return self in (AvailabilityType.AVAILABLE, AvailabilityType.TENTATIVE)

    def label(self, locale: str = "en") -> str:
        return self.label_fr if locale == "fr" else self.label_en

    def __lt__(self, other):
        if not isinstance(other, AvailabilityType):
            return NotImplemented
        return self.precedence < other.precedence

    def __le__(self, other):
        if not isinstance(other, AvailabilityType):
            return NotImplemented
        return self.precedence <= other.precedence

    def __gt__(self, other):
        if not isinstance(other, AvailabilityType):
            return NotImplemented
        return self.precedence > other.precedence

    def __ge__(self, other):
        if not isinstance(other, AvailabilityType):
            return NotImplemented
        return self.precedence >= other.precedence

    def __str__(self) -> str:
        return self._value_


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_date(self.start))
        object.__setattr__(self, "end", as_date(self.end))
        if self.end < self.start:
            raise InvalidDateRangeError(self.start, self.end)


@dataclass(frozen=True)
class DateRangeWithInfo(DateRange):
    label: str | None = None
    days_count: int = field(init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "days_count", (self.end - self.start).days + 1)

    @classmethod
    def from_range(cls, date_range: DateRange, label: str | None = None) -> "DateRangeWithInfo":
        return cls(date_range.start, date_range.end, label)


@dataclass(frozen=True)
class AvailabilitySlot:
    """A time-bounded availability claim by one reviewer."""

    id: str
    reviewer_id: str
    start_date: date
    end_date: date
    availability_type: AvailabilityType
    created_at: datetime
    title: str | None = None
    notes: str | None = None
    review_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", as_date(self.start_date))
        object.__setattr__(self, "end_date", as_date(self.end_date))
        object.__setattr__(self, "availability_type", AvailabilityType(self.availability_type))
        object.__setattr__(self, "created_at", as_utc(self.created_at))
        if self.end_date < self.start_date:
            raise InvalidDateRangeError(self.start_date, self.end_date)

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)


@dataclass(frozen=True)
class TeamMember:
    """One reviewer of a team together with their slot snapshot."""

    reviewer_id: str
    name: str = ""
    organization: str = ""
    slots: tuple[AvailabilitySlot, ...] = ()


@dataclass(frozen=True)
class AvailabilitySummary:
    total_days: int
    available_days: int
    tentative_days: int
    unavailable_days: int
    on_assignment_days: int
    availability_percentage: int


@dataclass(frozen=True)
class AssignmentWindow:
    slot_id: str
    review_id: str | None
    start_date: date
    end_date: date
    title: str | None = None


@dataclass(frozen=True)
class ReviewerAvailabilityStats:
    reviewer_id: str
    period: DateRange
    summary: AvailabilitySummary
    next_available_period: DateRangeWithInfo | None
    longest_available_stretch: DateRangeWithInfo | None
    upcoming_assignments: tuple[AssignmentWindow, ...] = ()


@dataclass(frozen=True)
class OverlapMatrixEntry:
    date_range: DateRange
    available_reviewer_ids: tuple[str, ...]
    available_count: int
    total_reviewers: int
    is_full_overlap: bool


@dataclass(frozen=True)
class ReviewerAvailabilityResult:
    reviewer_id: str
    reviewer_name: str
    organization_name: str
    slots: tuple[AvailabilitySlot, ...]
    summary: AvailabilitySummary


@dataclass(frozen=True)
class TeamAvailabilityResult:
    reviewers: tuple[ReviewerAvailabilityResult, ...] = ()
    common_available_dates: tuple[DateRangeWithInfo, ...] = ()
    partial_available_dates: tuple[DateRangeWithInfo, ...] = ()
    overlap_matrix: tuple[OverlapMatrixEntry, ...] = ()
