from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from peerreview.availability import AvailabilitySlot, AvailabilityType, DateRange, TeamMember

DATE_ORDER_MESSAGE = "End date must be on or after start date"


class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class Slot(_FromEngine):
    id: str = Field(min_length=1)
    reviewer_id: str = Field(min_length=1)
    start_date: date
    end_date: date
    availability_type: AvailabilityType = AvailabilityType.AVAILABLE
    created_at: datetime
    title: str | None = Field(default=None, max_length=200)
    notes: str | None = Field(default=None, max_length=1000)
    review_id: str | None = None

    @model_validator(mode="after")
    def check_date_order(self) -> "Slot":
        if self.end_date < self.start_date:
            raise ValueError(DATE_ORDER_MESSAGE)
        return self

    def to_engine(self) -> AvailabilitySlot:
        return AvailabilitySlot(
            id=self.id,
            reviewer_id=self.reviewer_id,
            start_date=self.start_date,
            end_date=self.end_date,
            availability_type=self.availability_type,
            created_at=self.created_at,
            title=self.title,
            notes=self.notes,
            review_id=self.review_id,
        )


class Period(BaseModel):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_date_order(self) -> "Period":
        if self.end_date < self.start_date:
            raise ValueError(DATE_ORDER_MESSAGE)
        return self

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_engine(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)


class TeamMemberIn(BaseModel):
    reviewer_id: str = Field(min_length=1)
    name: str = ""
    organization: str = ""
    slots: list[Slot] = []

    def to_engine(self) -> TeamMember:
        return TeamMember(
            reviewer_id=self.reviewer_id,
            name=self.name,
            organization=self.organization,
            slots=tuple(s.to_engine() for s in self.slots),
        )


class SummaryRequest(BaseModel):
    reviewer_id: str = Field(min_length=1)
    period: Period
    slots: list[Slot] = []


class StateRequest(BaseModel):
    day: date
    slots: list[Slot] = []


class MergeRequest(BaseModel):
    slots: list[Slot]


class TeamRequest(BaseModel):
    period: Period
    reviewers: list[TeamMemberIn]


class CommonAvailabilityRequest(BaseModel):
    period: Period
    reviewers: list[TeamMemberIn] = Field(min_length=2)
    min_days: int | None = Field(default=None, ge=1, le=90)
    required_type: AvailabilityType = AvailabilityType.AVAILABLE


class ConflictRequest(BaseModel):
    start_date: date
    end_date: date
    availability_type: AvailabilityType = AvailabilityType.AVAILABLE
    existing_slots: list[Slot] = []

    @model_validator(mode="after")
    def check_date_order(self) -> "ConflictRequest":
        if self.end_date < self.start_date:
            raise ValueError(DATE_ORDER_MESSAGE)
        return self


class RecurrenceRequest(BaseModel):
    start_date: date
    end_date: date
    rule: str = Field(max_length=500)
    max_occurrences: int | None = Field(default=None, ge=1)


class DateRangeOut(_FromEngine):
    start: date
    end: date


class DateRangeWithInfoOut(DateRangeOut):
    days_count: int
    label: str | None = None


class SummaryResponse(_FromEngine):
    total_days: int
    available_days: int
    tentative_days: int
    unavailable_days: int
    on_assignment_days: int
    availability_percentage: int


class AssignmentOut(_FromEngine):
    slot_id: str
    review_id: str | None = None
    start_date: date
    end_date: date
    title: str | None = None


class StatsResponse(_FromEngine):
    reviewer_id: str
    period: DateRangeOut
    summary: SummaryResponse
    next_available_period: DateRangeWithInfoOut | None = None
    longest_available_stretch: DateRangeWithInfoOut | None = None
    upcoming_assignments: list[AssignmentOut] = []


class StateResponse(BaseModel):
    day: date
    state: AvailabilityType | None = None
    slot_id: str | None = None


class MergeResponse(_FromEngine):
    slots: list[Slot]
    input_count: int
    merged_count: int


class OverlapMatrixEntryOut(_FromEngine):
    date_range: DateRangeOut
    available_reviewer_ids: list[str]
    available_count: int
    total_reviewers: int
    is_full_overlap: bool


class ReviewerAvailabilityOut(_FromEngine):
    reviewer_id: str
    reviewer_name: str
    organization_name: str
    slots: list[Slot]
    summary: SummaryResponse


class TeamAvailabilityResponse(_FromEngine):
    reviewers: list[ReviewerAvailabilityOut]
    common_available_dates: list[DateRangeWithInfoOut]
    partial_available_dates: list[DateRangeWithInfoOut]
    overlap_matrix: list[OverlapMatrixEntryOut]


class CommonAvailabilityResponse(_FromEngine):
    ranges: list[DateRangeWithInfoOut]
    min_days: int
    required_type: AvailabilityType


class ConflictResponse(BaseModel):
    has_conflict: bool
    conflicting_slot_ids: list[str]


class RecurrenceResponse(BaseModel):
    frequency: str
    interval: int
    until: date | None = None
    dates: list[date]
