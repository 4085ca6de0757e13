"""Front desk orchestration for lodging stays and event bookings."""

from __future__ import annotations

from threading import RLock
from typing import Optional

from hotel_backend.domain.models import (
    Event,
    EventCostReport,
    EventProposal,
    Reservation,
    Venue,
    VenueRecommendation,
    Weekday,
)
from hotel_backend.services.cost_service import cost_config_from_settings, derive_event_costs
from hotel_backend.services.event_service import EventScheduler
from hotel_backend.services.guest_service import CapacityExceededError, GuestRegistry
from hotel_backend.services.room_service import RoomInventory
from hotel_backend.services.venue_service import IneligibleGuestCountError, VenueCatalog
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class FrontDeskError(Exception):
    """Base exception for front desk workflow failures."""


class FrontDeskValidationError(FrontDeskError):
    """Raised when workflow inputs are invalid."""


class RoomNotAvailableError(FrontDeskError):
    """Raised when a stay is booked into an occupied room."""


class FrontDeskService:
    """Coordinates room -> guest stays and recommend -> cost -> commit events."""

    def __init__(
        self,
        room_inventory: Optional[RoomInventory] = None,
        guest_registry: Optional[GuestRegistry] = None,
        venue_catalog: Optional[VenueCatalog] = None,
        event_scheduler: Optional[EventScheduler] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._rooms = room_inventory or RoomInventory(self._settings)
        self._guests = guest_registry or GuestRegistry(self._settings)
        self._venues = venue_catalog or VenueCatalog(self._settings)
        self._scheduler = event_scheduler or EventScheduler(
            settings=self._settings,
            venue_catalog=self._venues,
        )
        self._cost_config = cost_config_from_settings(self._settings)
        self._reservations: dict[int, Reservation] = {}
        self._lock = RLock()

    def _validate_stay(self, daily_rate: float, days: int) -> None:
        if daily_rate < 0.0:
            raise FrontDeskValidationError("daily_rate must be >= 0")
        if not 1 <= days <= self._settings.max_stay_days:
            raise FrontDeskValidationError(
                f"days must be between 1 and {self._settings.max_stay_days}"
            )

    def quote_stay(self, daily_rate: float, days: int) -> float:
        self._validate_stay(daily_rate, days)
        return daily_rate * days

    def book_stay(
        self,
        *,
        guest_name: str,
        room_number: int,
        daily_rate: float,
        days: int,
        guest_age: int = 0,
    ) -> Reservation:
        self._validate_stay(daily_rate, days)
        if not guest_name.strip():
            raise FrontDeskValidationError("guest_name must be non-empty")

        with self._lock:
            lookup = self._rooms.find_free_room(room_number)
            if not lookup.is_free or lookup.room is None:
                logger.warning("Stay rejected on occupied room | room_number=%s", room_number)
                raise RoomNotAvailableError(f"Room {room_number} is already occupied")
            if self._guests.is_full:
                raise CapacityExceededError(
                    f"Guest registry is full ({self._guests.capacity} guests)"
                )

            self._rooms.allocate(lookup.room)
            guest = self._guests.register(guest_name, guest_age)
            reservation = Reservation(
                guest=guest,
                room_number=room_number,
                daily_rate=daily_rate,
                days=days,
            )
            self._reservations[room_number] = reservation

        logger.info(
            "Stay booked | guest=%s | room_number=%s | days=%s | total=%.2f",
            guest.name,
            room_number,
            days,
            reservation.total_value,
        )
        return reservation

    def check_out(self, room_number: int) -> Optional[Reservation]:
        with self._lock:
            room = self._rooms.get_room(room_number)
            self._rooms.release(room)
            return self._reservations.pop(room_number, None)

    def list_reservations(self) -> list[Reservation]:
        with self._lock:
            return [self._reservations[number] for number in sorted(self._reservations)]

    def quote_event(self, guest_count: int, duration_hours: int) -> EventCostReport:
        if guest_count <= 0:
            raise FrontDeskValidationError("guest_count must be > 0")
        if duration_hours <= 0:
            raise FrontDeskValidationError("duration_hours must be > 0")
        return derive_event_costs(guest_count, duration_hours, self._cost_config)

    def plan_event(
        self,
        *,
        company: str,
        guest_count: int,
        weekday: Weekday,
        start_hour: int,
        duration_hours: int,
        venue: Optional[Venue] = None,
    ) -> EventProposal:
        costs = self.quote_event(guest_count, duration_hours)
        recommendation = self._venues.recommend(guest_count)
        if venue is not None and venue is not recommendation.venue:
            spec = self._venues.get(venue)
            if guest_count > spec.max_guests:
                logger.warning(
                    "Venue override rejected | venue=%s | guest_count=%s | max_guests=%s",
                    venue.value,
                    guest_count,
                    spec.max_guests,
                )
                raise IneligibleGuestCountError(
                    f"{spec.display_name} seats at most {spec.max_guests} guests"
                )
            recommendation = VenueRecommendation(spec=spec, guest_count=guest_count)
        event = Event(
            company=company,
            weekday=weekday,
            start_hour=start_hour,
            duration_hours=duration_hours,
            venue=recommendation.venue,
            guest_count=guest_count,
        )
        return EventProposal(
            event=event,
            recommendation=recommendation,
            costs=costs,
            available=self._scheduler.is_available(
                event.weekday,
                event.start_hour,
                event.end_hour,
                event.venue,
            ),
            operating_window=self._scheduler.operating_window(weekday),
        )

    def book_event(
        self,
        *,
        company: str,
        guest_count: int,
        weekday: Weekday,
        start_hour: int,
        duration_hours: int,
        venue: Optional[Venue] = None,
    ) -> EventProposal:
        with self._lock:
            proposal = self.plan_event(
                company=company,
                guest_count=guest_count,
                weekday=weekday,
                start_hour=start_hour,
                duration_hours=duration_hours,
                venue=venue,
            )
            self._scheduler.commit(proposal.event)
        logger.info(
            "Event booked | company=%s | total_cost=%.2f",
            company,
            proposal.costs.total_cost,
        )
        return proposal
