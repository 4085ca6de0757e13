"""Catalog of the two auditoriums and guest-count based recommendation."""

from __future__ import annotations

from typing import Optional

from hotel_backend.domain.constraints import validate_venue_spec
from hotel_backend.domain.models import Venue, VenueRecommendation, VenueSpec
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class VenueError(Exception):
    """Base exception for venue catalog failures."""


class IneligibleGuestCountError(VenueError):
    """Raised when no venue can host the requested number of guests."""


class VenueCatalog:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._specs = {
            Venue.SMALL: VenueSpec(
                venue=Venue.SMALL,
                display_name=self._settings.small_venue_name,
                capacity=self._settings.small_venue_capacity,
                overflow_seats=self._settings.small_venue_overflow_seats,
            ),
            Venue.LARGE: VenueSpec(
                venue=Venue.LARGE,
                display_name=self._settings.large_venue_name,
                capacity=self._settings.large_venue_capacity,
                overflow_seats=self._settings.large_venue_overflow_seats,
            ),
        }
        for spec in self._specs.values():
            validate_venue_spec(spec.display_name, spec.capacity, spec.overflow_seats)

    def get(self, venue: Venue) -> VenueSpec:
        return self._specs[venue]

    def list_venues(self) -> list[VenueSpec]:
        return [self._specs[venue] for venue in Venue]

    def recommend(self, guest_count: int) -> VenueRecommendation:
        """Pick the venue for ``guest_count`` guests.

        The small venue is returned up to its capacity plus overflow seats;
        callers read ``extra_seats`` to know how many chairs to add.
        """
        small = self._specs[Venue.SMALL]
        large = self._specs[Venue.LARGE]
        if guest_count < 0 or guest_count > large.capacity:
            logger.warning(
                "Venue recommendation rejected | guest_count=%s | max_capacity=%s",
                guest_count,
                large.capacity,
            )
            raise IneligibleGuestCountError(
                f"Guest count {guest_count} is invalid or exceeds the maximum "
                f"capacity of {large.capacity}"
            )
        spec = small if guest_count <= small.max_guests else large
        recommendation = VenueRecommendation(spec=spec, guest_count=guest_count)
        logger.debug(
            "Venue recommended | guest_count=%s | venue=%s | extra_seats=%s",
            guest_count,
            spec.venue.value,
            recommendation.extra_seats,
        )
        return recommendation
