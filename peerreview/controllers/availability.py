import logging

from fastapi import APIRouter

from peerreview.availability import (
    assert_editable,
    assignment_conflicts,
    calculate_stats,
    calculate_summary,
    compute_team_availability,
    effective_slot,
    expand_recurrence,
    find_common_availability,
    merge_overlapping_slots,
    parse_recurrence_rule,
)
from peerreview.dependencies import SchedulingConfig
from peerreview.errors import BadRequestError
from peerreview.models.availability import (
    CommonAvailabilityRequest,
    CommonAvailabilityResponse,
    ConflictRequest,
    ConflictResponse,
    DateRangeWithInfoOut,
    MergeRequest,
    MergeResponse,
    Period,
    RecurrenceRequest,
    RecurrenceResponse,
    Slot,
    StateRequest,
    StateResponse,
    StatsResponse,
    SummaryRequest,
    SummaryResponse,
    TeamAvailabilityResponse,
    TeamMemberIn,
    TeamRequest,
)

logger = logging.getLogger("peerreview.availability.api")
router = APIRouter(prefix="/availability", tags=["availability"])


def _check_period(period: Period, config: SchedulingConfig) -> None:
    if period.days > config.max_period_days:
        raise BadRequestError(
            detail=f"Period must not exceed {config.max_period_days} days",
            error_code="PERIOD_TOO_LONG",
            days=period.days,
        )


def _check_team(reviewers: list[TeamMemberIn], config: SchedulingConfig) -> None:
    if len(reviewers) > config.max_team_size:
        raise BadRequestError(
            detail=f"At most {config.max_team_size} reviewers per query",
            error_code="TEAM_TOO_LARGE",
            reviewers=len(reviewers),
        )
    ids = [r.reviewer_id for r in reviewers]
    if len(set(ids)) != len(ids):
        raise BadRequestError(detail="Duplicate reviewer ids", error_code="DUPLICATE_REVIEWER")


@router.post("/summary", response_model=SummaryResponse)
def summary(req: SummaryRequest, config: SchedulingConfig) -> SummaryResponse:
    logger.info("POST /availability/summary reviewer=%s slots=%d", req.reviewer_id, len(req.slots))
    _check_period(req.period, config)
    result = calculate_summary([s.to_engine() for s in req.slots], req.period.to_engine())
    return SummaryResponse.model_validate(result)


@router.post("/stats", response_model=StatsResponse)
def stats(req: SummaryRequest, config: SchedulingConfig) -> StatsResponse:
    logger.info("POST /availability/stats reviewer=%s slots=%d", req.reviewer_id, len(req.slots))
    _check_period(req.period, config)
    result = calculate_stats(req.reviewer_id, [s.to_engine() for s in req.slots], req.period.to_engine())
    return StatsResponse.model_validate(result)


@router.post("/state", response_model=StateResponse)
def state(req: StateRequest) -> StateResponse:
    winner = effective_slot(req.day, [s.to_engine() for s in req.slots])
    return StateResponse(
        day=req.day,
        state=winner.availability_type if winner else None,
        slot_id=winner.id if winner else None,
    )


@router.post("/merge", response_model=MergeResponse)
def merge(req: MergeRequest) -> MergeResponse:
    merged = merge_overlapping_slots([s.to_engine() for s in req.slots])
    logger.info("POST /availability/merge slots=%d merged=%d", len(req.slots), len(merged))
    return MergeResponse(
        slots=[Slot.model_validate(s) for s in merged],
        input_count=len(req.slots),
        merged_count=len(merged),
    )


@router.post("/team", response_model=TeamAvailabilityResponse)
def team(req: TeamRequest, config: SchedulingConfig) -> TeamAvailabilityResponse:
    logger.info(
        "POST /availability/team reviewers=%d period=%s..%s",
        len(req.reviewers),
        req.period.start_date,
        req.period.end_date,
    )
    _check_period(req.period, config)
    _check_team(req.reviewers, config)
    result = compute_team_availability(
        [r.to_engine() for r in req.reviewers],
        req.period.to_engine(),
        max_workers=config.summary_workers,
    )
    return TeamAvailabilityResponse.model_validate(result)


@router.post("/common", response_model=CommonAvailabilityResponse)
def common(req: CommonAvailabilityRequest, config: SchedulingConfig) -> CommonAvailabilityResponse:
    min_days = req.min_days or config.default_min_days
    logger.info(
        "POST /availability/common reviewers=%d min_days=%d type=%s",
        len(req.reviewers),
        min_days,
        req.required_type,
    )
    _check_period(req.period, config)
    _check_team(req.reviewers, config)
    team_slots = {r.reviewer_id: [s.to_engine() for s in r.slots] for r in req.reviewers}
    ranges = find_common_availability(team_slots, req.period.to_engine(), min_days, req.required_type)
    return CommonAvailabilityResponse(
        ranges=[DateRangeWithInfoOut.model_validate(r) for r in ranges],
        min_days=min_days,
        required_type=req.required_type,
    )


@router.post("/conflicts", response_model=ConflictResponse)
def conflicts(req: ConflictRequest) -> ConflictResponse:
    assert_editable(req.availability_type)
    found = assignment_conflicts(req.start_date, req.end_date, [s.to_engine() for s in req.existing_slots])
    if found:
        logger.info("Slot %s..%s overlaps %d assignment(s)", req.start_date, req.end_date, len(found))
    return ConflictResponse(has_conflict=bool(found), conflicting_slot_ids=[s.id for s in found])


@router.post("/recurrence/expand", response_model=RecurrenceResponse)
def expand(req: RecurrenceRequest, config: SchedulingConfig) -> RecurrenceResponse:
    rule = parse_recurrence_rule(req.rule)
    if rule is None:
        raise BadRequestError(detail="rule must not be empty", error_code="INVALID_RECURRENCE")
    limit = min(req.max_occurrences or config.max_recurrence_occurrences, config.max_recurrence_occurrences)
    dates = expand_recurrence(req.start_date, req.end_date, rule, max_occurrences=limit)
    logger.info("POST /availability/recurrence/expand rule=%s occurrences=%d", req.rule, len(dates))
    return RecurrenceResponse(
        frequency=type(rule).__name__.upper(),
        interval=rule.interval,
        until=rule.until,
        dates=dates,
    )
