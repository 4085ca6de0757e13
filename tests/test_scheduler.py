from __future__ import annotations

from dataclasses import replace

import pytest

from hotel_backend.domain.models import Event, Venue, Weekday
from hotel_backend.services.event_service import (
    REASON_OUTSIDE_HOURS,
    REASON_OVERLAP,
    EventScheduler,
    EventValidationError,
    SchedulingConflictError,
)
from hotel_backend.utils.config import get_settings


WEEKDAYS = [
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
]


def _event(
    *,
    start_hour: int,
    duration_hours: int,
    venue: Venue = Venue.LARGE,
    weekday: Weekday = Weekday.MONDAY,
    company: str = "Acme",
    guest_count: int = 100,
) -> Event:
    return Event(
        company=company,
        weekday=weekday,
        start_hour=start_hour,
        duration_hours=duration_hours,
        venue=venue,
        guest_count=guest_count,
    )


@pytest.mark.parametrize("weekday", list(Weekday))
@pytest.mark.parametrize("duration_hours", [1, 4, 8])
def test_start_before_opening_is_never_available(weekday: Weekday, duration_hours: int) -> None:
    scheduler = EventScheduler(get_settings())

    assert not scheduler.is_available(weekday, 6, 6 + duration_hours, Venue.SMALL)


@pytest.mark.parametrize("weekday", WEEKDAYS)
def test_late_event_fits_weekday_window(weekday: Weekday) -> None:
    scheduler = EventScheduler(get_settings())

    assert scheduler.is_within_operating_window(weekday, 16, 24)
    assert scheduler.is_available(weekday, 23, 24, Venue.LARGE)


@pytest.mark.parametrize("weekday", WEEKDAYS)
def test_event_past_weekday_closing_is_rejected(weekday: Weekday) -> None:
    scheduler = EventScheduler(get_settings())

    assert not scheduler.is_within_operating_window(weekday, 16, 25)
    assert not scheduler.is_within_operating_window(weekday, 24, 25)


@pytest.mark.parametrize("weekday", [Weekday.SATURDAY, Weekday.SUNDAY])
def test_weekend_window_closes_at_fifteen(weekday: Weekday) -> None:
    scheduler = EventScheduler(get_settings())

    window = scheduler.operating_window(weekday)
    assert (window.open_hour, window.close_hour) == (7, 15)
    assert scheduler.is_available(weekday, 7, 16, Venue.SMALL)
    assert not scheduler.is_available(weekday, 16, 24, Venue.SMALL)
    assert not scheduler.is_available(weekday, 12, 17, Venue.SMALL)


def test_touching_events_do_not_overlap() -> None:
    scheduler = EventScheduler(get_settings())
    scheduler.commit(_event(start_hour=10, duration_hours=2))

    assert scheduler.is_available(Weekday.MONDAY, 12, 14, Venue.LARGE)
    assert scheduler.is_available(Weekday.MONDAY, 8, 10, Venue.LARGE)


def test_overlapping_candidate_is_unavailable() -> None:
    scheduler = EventScheduler(get_settings())
    booked = scheduler.commit(_event(start_hour=10, duration_hours=2))

    assert not scheduler.is_available(Weekday.MONDAY, 11, 13, Venue.LARGE)
    assert not scheduler.is_available(Weekday.MONDAY, 9, 14, Venue.LARGE)
    assert scheduler.find_conflicts(Weekday.MONDAY, 11, 13, Venue.LARGE) == [booked]


def test_same_slot_on_other_venue_or_day_is_available() -> None:
    scheduler = EventScheduler(get_settings())
    scheduler.commit(_event(start_hour=10, duration_hours=2))

    assert scheduler.is_available(Weekday.MONDAY, 10, 12, Venue.SMALL)
    assert scheduler.is_available(Weekday.TUESDAY, 10, 12, Venue.LARGE)


def test_committing_same_event_twice_conflicts_with_itself() -> None:
    scheduler = EventScheduler(get_settings())
    event = _event(start_hour=10, duration_hours=2)

    assert scheduler.commit(event) is event
    with pytest.raises(SchedulingConflictError) as exc_info:
        scheduler.commit(event)

    assert exc_info.value.reason == REASON_OVERLAP
    assert exc_info.value.conflicts == [event]
    assert scheduler.list_events() == [event]


def test_commit_outside_operating_hours_stores_nothing() -> None:
    scheduler = EventScheduler(get_settings())

    with pytest.raises(SchedulingConflictError) as exc_info:
        scheduler.commit(_event(start_hour=14, duration_hours=3, weekday=Weekday.SATURDAY))

    assert exc_info.value.reason == REASON_OUTSIDE_HOURS
    assert scheduler.list_events() == []


@pytest.mark.parametrize(
    ("guest_count", "duration_hours"),
    [(0, 2), (-5, 2), (10, 0)],
)
def test_commit_rejects_non_positive_guests_or_duration(guest_count: int, duration_hours: int) -> None:
    scheduler = EventScheduler(get_settings())

    with pytest.raises(EventValidationError):
        scheduler.commit(
            _event(start_hour=10, duration_hours=duration_hours, guest_count=guest_count)
        )


def test_list_events_keeps_insertion_order_and_groups_by_venue() -> None:
    scheduler = EventScheduler(get_settings())
    first = scheduler.commit(_event(start_hour=14, duration_hours=2, company="B"))
    second = scheduler.commit(_event(start_hour=8, duration_hours=2, company="A", venue=Venue.SMALL))
    third = scheduler.commit(_event(start_hour=9, duration_hours=2, company="C"))

    assert scheduler.list_events() == [first, second, third]
    grouped = scheduler.events_by_venue()
    assert grouped[Venue.LARGE] == [first, third]
    assert grouped[Venue.SMALL] == [second]


def test_operating_hours_follow_settings() -> None:
    settings = replace(get_settings(), weekend_open_hour=9, weekend_close_hour=18)
    scheduler = EventScheduler(settings)

    assert scheduler.is_available(Weekday.SUNDAY, 15, 19, Venue.LARGE)
    assert not scheduler.is_available(Weekday.SUNDAY, 8, 10, Venue.LARGE)


def test_weekday_from_number() -> None:
    assert Weekday.from_number(1) is Weekday.MONDAY
    assert Weekday.from_number(7) is Weekday.SUNDAY
    assert Weekday.from_number(6).is_weekend
    with pytest.raises(ValueError):
        Weekday.from_number(0)
