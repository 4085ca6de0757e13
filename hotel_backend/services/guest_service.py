"""Bounded guest registry and group lodging price calculation."""

from __future__ import annotations

from threading import RLock
from typing import Iterable, Optional

from hotel_backend.domain.models import Guest, GroupPricing
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class GuestRegistryError(Exception):
    """Base exception for guest registry failures."""


class CapacityExceededError(GuestRegistryError):
    """Raised when the registry already holds its maximum number of guests."""


class GuestValidationError(GuestRegistryError):
    """Raised when guest attributes are invalid."""


def price_group(
    daily_rate: float,
    guests: Iterable[Guest],
    *,
    free_age_limit: int = 6,
    half_price_age: int = 60,
) -> GroupPricing:
    """Price one night for a group.

    Guests younger than ``free_age_limit`` stay free, guests older than
    ``half_price_age`` pay half the rate, everybody else pays the full rate.
    """
    total = 0.0
    free_count = 0
    half_count = 0
    for guest in guests:
        if guest.age < free_age_limit:
            free_count += 1
        elif guest.age > half_price_age:
            half_count += 1
            total += daily_rate / 2
        else:
            total += daily_rate
    return GroupPricing(total=total, free_count=free_count, half_count=half_count)


class GuestRegistry:
    """Keeps registered guests in registration order up to a fixed limit."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._limit = self._settings.guest_registry_limit
        self._guests: list[Guest] = []
        self._lock = RLock()

    @property
    def capacity(self) -> int:
        return self._limit

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._guests)

    @property
    def is_full(self) -> bool:
        with self._lock:
            return len(self._guests) >= self._limit

    def register(self, name: str, age: int = 0) -> Guest:
        name = name.strip()
        if not name:
            raise GuestValidationError("name must be non-empty")
        if age < 0:
            raise GuestValidationError("age must be >= 0")
        with self._lock:
            if len(self._guests) >= self._limit:
                logger.warning(
                    "Guest registration rejected | name=%s | limit=%s",
                    name,
                    self._limit,
                )
                raise CapacityExceededError(
                    f"Guest registry is full ({self._limit} guests)"
                )
            guest = Guest(name=name, age=age)
            self._guests.append(guest)
            registered = len(self._guests)
        logger.info("Guest registered | name=%s | registered=%s", name, registered)
        return guest

    def find(self, name: str) -> Optional[Guest]:
        wanted = name.casefold()
        with self._lock:
            for guest in self._guests:
                if guest.name.casefold() == wanted:
                    return guest
        return None

    def list_guests(self) -> list[Guest]:
        with self._lock:
            return list(self._guests)

    def price_group(self, daily_rate: float, guests: Iterable[Guest]) -> GroupPricing:
        return price_group(
            daily_rate,
            guests,
            free_age_limit=self._settings.free_age_limit,
            half_price_age=self._settings.half_price_age,
        )
