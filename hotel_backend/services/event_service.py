"""Event scheduler: operating-hour and overlap rules for venue bookings."""

from __future__ import annotations

from threading import RLock
from typing import Optional

from hotel_backend.domain.constraints import ScheduleConfig, validate_schedule_config
from hotel_backend.domain.models import Event, OperatingWindow, Venue, Weekday
from hotel_backend.services.venue_service import VenueCatalog
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class SchedulingError(Exception):
    """Base exception for event scheduling failures."""


class EventValidationError(SchedulingError):
    """Raised when an event carries non-positive guests or duration."""


class SchedulingConflictError(SchedulingError):
    """Raised when an event falls outside operating hours or overlaps another."""

    def __init__(self, message: str, *, reason: str, conflicts: Optional[list[Event]] = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.conflicts = list(conflicts or [])


REASON_OUTSIDE_HOURS = "OUTSIDE_OPERATING_HOURS"
REASON_OVERLAP = "OVERLAP"


def _overlaps(start_hour: int, end_hour: int, event: Event) -> bool:
    return start_hour < event.end_hour and end_hour > event.start_hour


class EventScheduler:
    """Append-only list of committed events, checked per venue and weekday."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        venue_catalog: Optional[VenueCatalog] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._venue_catalog = venue_catalog or VenueCatalog(self._settings)
        self._schedule = ScheduleConfig(
            weekday_open_hour=self._settings.weekday_open_hour,
            weekday_close_hour=self._settings.weekday_close_hour,
            weekend_open_hour=self._settings.weekend_open_hour,
            weekend_close_hour=self._settings.weekend_close_hour,
        )
        validate_schedule_config(self._schedule)
        self._events: list[Event] = []
        self._lock = RLock()

    def operating_window(self, weekday: Weekday) -> OperatingWindow:
        if weekday.is_weekend:
            return OperatingWindow(
                open_hour=self._schedule.weekend_open_hour,
                close_hour=self._schedule.weekend_close_hour,
            )
        return OperatingWindow(
            open_hour=self._schedule.weekday_open_hour,
            close_hour=self._schedule.weekday_close_hour,
        )

    def is_within_operating_window(self, weekday: Weekday, start_hour: int, end_hour: int) -> bool:
        return self.operating_window(weekday).admits(start_hour, end_hour)

    def find_conflicts(
        self,
        weekday: Weekday,
        start_hour: int,
        end_hour: int,
        venue: Venue,
    ) -> list[Event]:
        with self._lock:
            return [
                event
                for event in self._events
                if event.venue == venue
                and event.weekday == weekday
                and _overlaps(start_hour, end_hour, event)
            ]

    def is_available(self, weekday: Weekday, start_hour: int, end_hour: int, venue: Venue) -> bool:
        if not self.is_within_operating_window(weekday, start_hour, end_hour):
            return False
        return not self.find_conflicts(weekday, start_hour, end_hour, venue)

    def commit(self, event: Event) -> Event:
        if event.guest_count <= 0:
            raise EventValidationError("guest_count must be > 0")
        if event.duration_hours <= 0:
            raise EventValidationError("duration_hours must be > 0")

        with self._lock:
            if not self.is_within_operating_window(event.weekday, event.start_hour, event.end_hour):
                window = self.operating_window(event.weekday)
                logger.warning(
                    "Event rejected outside operating hours | company=%s | weekday=%s | "
                    "start=%s | end=%s | window=%s-%s",
                    event.company,
                    event.weekday.value,
                    event.start_hour,
                    event.end_hour,
                    window.open_hour,
                    window.close_hour,
                )
                raise SchedulingConflictError(
                    f"{event.weekday.value.title()} events must start between "
                    f"{window.open_hour}h and {window.close_hour}h and end by {window.last_end_hour}h",
                    reason=REASON_OUTSIDE_HOURS,
                )

            conflicts = self.find_conflicts(
                event.weekday,
                event.start_hour,
                event.end_hour,
                event.venue,
            )
            if conflicts:
                logger.warning(
                    "Event rejected by overlap | company=%s | venue=%s | weekday=%s | "
                    "start=%s | end=%s | conflicts=%s",
                    event.company,
                    event.venue.value,
                    event.weekday.value,
                    event.start_hour,
                    event.end_hour,
                    len(conflicts),
                )
                raise SchedulingConflictError(
                    f"{self._venue_catalog.get(event.venue).display_name} is already booked "
                    f"on {event.weekday.value.title()} between "
                    f"{event.start_hour}h and {event.end_hour}h",
                    reason=REASON_OVERLAP,
                    conflicts=conflicts,
                )

            self._events.append(event)

        logger.info(
            "Event committed | company=%s | venue=%s | weekday=%s | start=%s | end=%s | guests=%s",
            event.company,
            event.venue.value,
            event.weekday.value,
            event.start_hour,
            event.end_hour,
            event.guest_count,
        )
        return event

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events)

    def events_by_venue(self) -> dict[Venue, list[Event]]:
        grouped: dict[Venue, list[Event]] = {
            spec.venue: [] for spec in self._venue_catalog.list_venues()
        }
        for event in self.list_events():
            grouped[event.venue].append(event)
        return grouped
