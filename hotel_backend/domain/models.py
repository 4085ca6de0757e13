"""Domain models for room allocation, venue scheduling and event costing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class Room:
    number: int
    occupied: bool = False


class RoomAvailability(str, Enum):
    FREE = "FREE"
    OCCUPIED = "OCCUPIED"


@dataclass(frozen=True)
class RoomLookup:
    """Outcome of a free-room search for an existing room number."""

    number: int
    availability: RoomAvailability
    room: Optional[Room] = None

    @property
    def is_free(self) -> bool:
        return self.availability is RoomAvailability.FREE


@dataclass(frozen=True)
class Guest:
    name: str
    age: int = 0


@dataclass(frozen=True)
class Reservation:
    guest: Guest
    room_number: int
    daily_rate: float
    days: int

    @property
    def total_value(self) -> float:
        return self.daily_rate * self.days


@dataclass(frozen=True)
class GroupPricing:
    total: float
    free_count: int
    half_count: int


class Venue(str, Enum):
    SMALL = "SMALL"
    LARGE = "LARGE"

    @classmethod
    def from_number(cls, number: int) -> "Venue":
        members = list(cls)
        if not 1 <= number <= len(members):
            raise ValueError(f"venue number must be between 1 and {len(members)}")
        return members[number - 1]


@dataclass(frozen=True)
class VenueSpec:
    venue: Venue
    display_name: str
    capacity: int
    overflow_seats: int = 0

    @property
    def max_guests(self) -> int:
        return self.capacity + self.overflow_seats


@dataclass(frozen=True)
class VenueRecommendation:
    """Recommended venue plus the extra chairs needed beyond its capacity."""

    spec: VenueSpec
    guest_count: int

    @property
    def venue(self) -> Venue:
        return self.spec.venue

    @property
    def extra_seats(self) -> int:
        return max(0, self.guest_count - self.spec.capacity)

    @property
    def needs_overflow_seating(self) -> bool:
        return self.extra_seats > 0


class Weekday(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_number(cls, number: int) -> "Weekday":
        """Map 1 (Monday) through 7 (Sunday) to a weekday."""
        members = list(cls)
        if not 1 <= number <= len(members):
            raise ValueError("weekday number must be between 1 and 7")
        return members[number - 1]

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


@dataclass(frozen=True)
class OperatingWindow:
    """Start hours in [open_hour, close_hour]; the last slot runs through the closing hour."""

    open_hour: int
    close_hour: int

    @property
    def last_end_hour(self) -> int:
        return self.close_hour + 1

    def contains(self, hour: int) -> bool:
        return self.open_hour <= hour <= self.close_hour

    def admits(self, start_hour: int, end_hour: int) -> bool:
        """Start within [open_hour, close_hour]; end by close_hour + 1 on every day.

        A slot starting at the closing hour still runs its full hour, so
        weekdays accept 16-24 and weekends accept 7-16.
        """
        return self.contains(start_hour) and start_hour < end_hour <= self.last_end_hour


@dataclass(frozen=True)
class Event:
    company: str
    weekday: Weekday
    start_hour: int
    duration_hours: int
    venue: Venue
    guest_count: int

    @property
    def end_hour(self) -> int:
        return self.start_hour + self.duration_hours


@dataclass(frozen=True)
class Catering:
    coffee_liters: float
    water_liters: float
    snack_count: int


@dataclass(frozen=True)
class EventCostReport:
    guest_count: int
    duration_hours: int
    staff_count: int
    staff_cost: float
    catering: Catering
    catering_cost: float

    @property
    def total_cost(self) -> float:
        return self.staff_cost + self.catering_cost


@dataclass(frozen=True)
class EventProposal:
    event: Event
    recommendation: VenueRecommendation
    costs: EventCostReport
    available: bool
    operating_window: OperatingWindow
