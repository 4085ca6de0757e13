"""HTTP controller layer for rooms, stays and guests."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from hotel_backend.controllers.dependencies import (
    get_front_desk_service,
    get_guest_registry,
    get_room_inventory,
    require_operator,
)
from hotel_backend.domain.models import Guest, Reservation, RoomAvailability
from hotel_backend.services.front_desk_service import (
    FrontDeskService,
    FrontDeskValidationError,
    RoomNotAvailableError,
)
from hotel_backend.services.guest_service import (
    CapacityExceededError,
    GuestRegistry,
    GuestValidationError,
)
from hotel_backend.services.room_service import InvalidRoomNumberError, RoomInventory
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["lodging"], dependencies=[Depends(require_operator)])


class RoomRow(BaseModel):
    number: int = Field(gt=0)
    occupied: bool


class RoomsResponse(BaseModel):
    rooms: list[RoomRow]
    free_count: int = Field(ge=0)


class RoomAvailabilityResponse(BaseModel):
    room_number: int = Field(gt=0)
    availability: RoomAvailability


class StayQuoteRequest(BaseModel):
    daily_rate: float = Field(ge=0.0)
    days: int = Field(gt=0)


class StayQuoteResponse(BaseModel):
    daily_rate: float
    days: int
    total_value: float = Field(ge=0.0)


class BookStayRequest(BaseModel):
    guest_name: str = Field(min_length=1)
    guest_age: int = Field(default=0, ge=0)
    room_number: int = Field(gt=0)
    daily_rate: float = Field(ge=0.0)
    days: int = Field(gt=0)


class GuestRow(BaseModel):
    name: str
    age: int = Field(ge=0)


class ReservationResponse(BaseModel):
    guest: GuestRow
    room_number: int = Field(gt=0)
    daily_rate: float
    days: int
    total_value: float


class ReservationsResponse(BaseModel):
    reservations: list[ReservationResponse]


class CheckoutResponse(BaseModel):
    room_number: int
    released: bool = True
    reservation: ReservationResponse | None = None


class RegisterGuestRequest(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(default=0, ge=0)


class GuestsResponse(BaseModel):
    guests: list[GuestRow]
    capacity: int
    remaining: int = Field(ge=0)


class GroupPricingRequest(BaseModel):
    daily_rate: float = Field(ge=0.0)
    guests: list[GuestRow] = Field(min_length=1)


class GroupPricingResponse(BaseModel):
    total: float = Field(ge=0.0)
    free_count: int = Field(ge=0)
    half_count: int = Field(ge=0)


def _guest_row(guest: Guest) -> GuestRow:
    return GuestRow(name=guest.name, age=guest.age)


def _reservation_response(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse(
        guest=_guest_row(reservation.guest),
        room_number=reservation.room_number,
        daily_rate=reservation.daily_rate,
        days=reservation.days,
        total_value=reservation.total_value,
    )


def _room_not_found(exc: InvalidRoomNumberError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/rooms", response_model=RoomsResponse, status_code=status.HTTP_200_OK)
async def list_rooms(inventory: RoomInventory = Depends(get_room_inventory)) -> RoomsResponse:
    return RoomsResponse(
        rooms=[RoomRow(number=number, occupied=occupied) for number, occupied in inventory.status_report()],
        free_count=inventory.free_count,
    )


@router.get(
    "/rooms/{room_number}/availability",
    response_model=RoomAvailabilityResponse,
    status_code=status.HTTP_200_OK,
)
async def room_availability(
    room_number: int,
    inventory: RoomInventory = Depends(get_room_inventory),
) -> RoomAvailabilityResponse:
    try:
        lookup = inventory.find_free_room(room_number)
    except InvalidRoomNumberError as exc:
        raise _room_not_found(exc) from exc
    return RoomAvailabilityResponse(room_number=lookup.number, availability=lookup.availability)


@router.post("/stays/quote", response_model=StayQuoteResponse, status_code=status.HTTP_200_OK)
async def quote_stay(
    payload: StayQuoteRequest,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> StayQuoteResponse:
    try:
        total_value = front_desk.quote_stay(payload.daily_rate, payload.days)
    except FrontDeskValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return StayQuoteResponse(
        daily_rate=payload.daily_rate,
        days=payload.days,
        total_value=total_value,
    )


@router.get("/stays", response_model=ReservationsResponse, status_code=status.HTTP_200_OK)
async def list_stays(
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> ReservationsResponse:
    return ReservationsResponse(
        reservations=[_reservation_response(item) for item in front_desk.list_reservations()]
    )


@router.post("/stays", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def book_stay(
    payload: BookStayRequest,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> ReservationResponse:
    """Allocate a free room and register its guest in one step."""
    try:
        reservation = front_desk.book_stay(
            guest_name=payload.guest_name.strip(),
            room_number=payload.room_number,
            daily_rate=payload.daily_rate,
            days=payload.days,
            guest_age=payload.guest_age,
        )
        return _reservation_response(reservation)
    except FrontDeskValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except InvalidRoomNumberError as exc:
        raise _room_not_found(exc) from exc
    except (RoomNotAvailableError, CapacityExceededError) as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected stay booking failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to book stay",
        ) from exc


@router.post(
    "/stays/{room_number}/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_200_OK,
)
async def check_out(
    room_number: int,
    front_desk: FrontDeskService = Depends(get_front_desk_service),
) -> CheckoutResponse:
    try:
        reservation = front_desk.check_out(room_number)
    except InvalidRoomNumberError as exc:
        raise _room_not_found(exc) from exc
    return CheckoutResponse(
        room_number=room_number,
        reservation=_reservation_response(reservation) if reservation else None,
    )


@router.get("/guests", response_model=GuestsResponse, status_code=status.HTTP_200_OK)
async def list_guests(registry: GuestRegistry = Depends(get_guest_registry)) -> GuestsResponse:
    guests = registry.list_guests()
    return GuestsResponse(
        guests=[_guest_row(guest) for guest in guests],
        capacity=registry.capacity,
        remaining=max(0, registry.capacity - len(guests)),
    )


@router.post("/guests", response_model=GuestRow, status_code=status.HTTP_201_CREATED)
async def register_guest(
    payload: RegisterGuestRequest,
    registry: GuestRegistry = Depends(get_guest_registry),
) -> GuestRow:
    try:
        return _guest_row(registry.register(payload.name.strip(), payload.age))
    except GuestValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CapacityExceededError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.get("/guests/search", response_model=GuestRow, status_code=status.HTTP_200_OK)
async def search_guest(
    name: str = Query(min_length=1),
    registry: GuestRegistry = Depends(get_guest_registry),
) -> GuestRow:
    guest = registry.find(name.strip())
    if guest is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Guest '{name.strip()}' not found",
        )
    return _guest_row(guest)


@router.post("/guests/pricing", response_model=GroupPricingResponse, status_code=status.HTTP_200_OK)
async def price_guest_group(
    payload: GroupPricingRequest,
    registry: GuestRegistry = Depends(get_guest_registry),
) -> GroupPricingResponse:
    pricing = registry.price_group(
        payload.daily_rate,
        [Guest(name=row.name, age=row.age) for row in payload.guests],
    )
    return GroupPricingResponse(
        total=pricing.total,
        free_count=pricing.free_count,
        half_count=pricing.half_count,
    )
