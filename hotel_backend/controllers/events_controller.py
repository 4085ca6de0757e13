"""HTTP controller layer for venue recommendation and event scheduling."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from hotel_backend.controllers.dependencies import (
    get_event_scheduler,
    get_front_desk_service,
    get_venue_catalog,
    require_operator,
)
from hotel_backend.domain.models import (
    Event,
    EventCostReport,
    EventProposal,
    Venue,
    VenueRecommendation,
    VenueSpec,
    Weekday,
)
from hotel_backend.services.event_service import (
    EventScheduler,
    EventValidationError,
    SchedulingConflictError,
)
from hotel_backend.services.front_desk_service import FrontDeskService, FrontDeskValidationError
from hotel_backend.services.venue_service import IneligibleGuestCountError, VenueCatalog
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["events"], dependencies=[Depends(require_operator)])


class VenueResponse(BaseModel):
    venue: Venue
    display_name: str
    capacity: int = Field(gt=0)
    overflow_seats: int = Field(ge=0)


class VenuesResponse(BaseModel):
    venues: list[VenueResponse]


class RecommendVenueRequest(BaseModel):
    guest_count: int


class RecommendationResponse(BaseModel):
    venue: VenueResponse
    guest_count: int
    extra_seats: int = Field(ge=0)
    needs_overflow_seating: bool


class AvailabilityRequest(BaseModel):
    venue: Venue
    weekday: Weekday
    start_hour: int = Field(ge=0)
    duration_hours: int = Field(gt=0)


class EventRow(BaseModel):
    company: str
    weekday: Weekday
    start_hour: int
    end_hour: int
    duration_hours: int
    venue: Venue
    guest_count: int


class AvailabilityResponse(BaseModel):
    available: bool
    open_hour: int
    close_hour: int
    conflicts: list[EventRow]


class CostQuoteRequest(BaseModel):
    guest_count: int = Field(gt=0)
    duration_hours: int = Field(gt=0)


class CateringRow(BaseModel):
    coffee_liters: float = Field(ge=0.0)
    water_liters: float = Field(ge=0.0)
    snack_count: int = Field(ge=0)


class CostReportResponse(BaseModel):
    guest_count: int
    duration_hours: int
    staff_count: int = Field(ge=0)
    staff_cost: float = Field(ge=0.0)
    catering: CateringRow
    catering_cost: float = Field(ge=0.0)
    total_cost: float = Field(ge=0.0)


class EventRequest(BaseModel):
    company: str = Field(min_length=1)
    guest_count: int = Field(gt=0)
    weekday: Weekday
    start_hour: int = Field(ge=0)
    duration_hours: int = Field(gt=0)
    venue: Venue | None = None


class EventProposalResponse(BaseModel):
    event: EventRow
    recommendation: RecommendationResponse
    costs: CostReportResponse
    available: bool
    open_hour: int
    close_hour: int


class EventsResponse(BaseModel):
    events: list[EventRow]


def _venue_response(spec: VenueSpec) -> VenueResponse:
    return VenueResponse(
        venue=spec.venue,
        display_name=spec.display_name,
        capacity=spec.capacity,
        overflow_seats=spec.overflow_seats,
    )


def _recommendation_response(recommendation: VenueRecommendation) -> RecommendationResponse:
    return RecommendationResponse(
        venue=_venue_response(recommendation.spec),
        guest_count=recommendation.guest_count,
        extra_seats=recommendation.extra_seats,
        needs_overflow_seating=recommendation.needs_overflow_seating,
    )


def _event_row(event: Event) -> EventRow:
    return EventRow(
        company=event.company,
        weekday=event.weekday,
        start_hour=event.start_hour,
        end_hour=event.end_hour,
        duration_hours=event.duration_hours,
        venue=event.venue,
        guest_count=event.guest_count,
    )


def _cost_response(report: EventCostReport) -> CostReportResponse:
    return CostReportResponse(
        guest_count=report.guest_count,
        duration_hours=report.duration_hours,
        staff_count=report.staff_count,
        staff_cost=report.staff_cost,
        catering=CateringRow(
            coffee_liters=report.catering.coffee_liters,
            water_liters=report.catering.water_liters,
            snack_count=report.catering.snack_count,
        ),
        catering_cost=report.catering_cost,
        total_cost=report.total_cost,
    )


def _proposal_response(proposal: EventProposal) -> EventProposalResponse:
    return EventProposalResponse(
        event=_event_row(proposal.event),
        recommendation=_recommendation_response(proposal.recommendation),
        costs=_cost_response(proposal.costs),
        available=proposal.available,
        open_hour=proposal.operating_window.open_hour,
        close_hour=proposal.operating_window.close_hour,
    )


@router.get("/venues", response_model=VenuesResponse, status_code=status.HTTP_200_OK)
async def list_venues(catalog: VenueCatalog = Depends(get_venue_catalog)) -> VenuesResponse:
    return VenuesResponse(venues=[_venue_response(spec) for spec in catalog.list_venues()])


@router.post(
    "/venues/recommend",
    response_model=RecommendationResponse,
    status_code=status.HTTP_200_OK,
)
async def recommend_venue(
    payload: RecommendVenueRequest,
    catalog: VenueCatalog = Depends(get_venue_catalog),
) -> RecommendationResponse:
    try:
        return _recommendation_response(catalog.recommend(payload.guest_count))
    except IneligibleGuestCountError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post(
    "/events/availability",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_200_OK,
)
async def check_availability(
    payload: AvailabilityRequest,
    scheduler: EventScheduler = Depends(get_event_scheduler),
) -> AvailabilityResponse:
    end_hour = payload.start_hour + payload.duration_hours
    window = scheduler.operating_window(payload.weekday)
    conflicts = scheduler.find_conflicts(
        payload.weekday,
        payload.start_hour,
        end_hour,
        payload.venue,
    )
    return AvailabilityResponse(
        available=scheduler.is_available(
            payload.weekday,
            payload.start_hour,
            end_hour,
            payload.venue,
        ),
        open_hour=window.open_hour,
        close_hour=window.close_hour,
        conflicts=[_event_row(event) for event in conflicts],
    )


@router.post("/events/quote", response_model=CostReportResponse, status_code=status.HTTP_200_OK)
async def quote_event(
    payload: CostQuoteRequest,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> CostReportResponse:
    try:
        report = front_desk.quote_event(payload.guest_count, payload.duration_hours)
    except FrontDeskValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _cost_response(report)


@router.post("/events/plan", response_model=EventProposalResponse, status_code=status.HTTP_200_OK)
async def plan_event(
    payload: EventRequest,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> EventProposalResponse:
    """Recommend a venue, check the slot and derive costs without booking."""
    try:
        proposal = front_desk.plan_event(
            company=payload.company.strip(),
            guest_count=payload.guest_count,
            weekday=payload.weekday,
            start_hour=payload.start_hour,
            duration_hours=payload.duration_hours,
            venue=payload.venue,
        )
        return _proposal_response(proposal)
    except (IneligibleGuestCountError, FrontDeskValidationError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/events", response_model=EventProposalResponse, status_code=status.HTTP_201_CREATED)
async def book_event(
    payload: EventRequest,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> EventProposalResponse:
    try:
        proposal = front_desk.book_event(
            company=payload.company.strip(),
            guest_count=payload.guest_count,
            weekday=payload.weekday,
            start_hour=payload.start_hour,
            duration_hours=payload.duration_hours,
            venue=payload.venue,
        )
        return _proposal_response(proposal)
    except (IneligibleGuestCountError, FrontDeskValidationError, EventValidationError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SchedulingConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"reason": exc.reason, "message": str(exc)},
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected event booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book event",
        ) from exc


@router.get("/events", response_model=EventsResponse, status_code=status.HTTP_200_OK)
async def list_events(scheduler: EventScheduler = Depends(get_event_scheduler)) -> EventsResponse:
    return EventsResponse(events=[_event_row(event) for event in scheduler.list_events()])
