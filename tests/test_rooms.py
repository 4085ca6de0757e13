from __future__ import annotations

from dataclasses import replace

import pytest

from hotel_backend.domain.models import RoomAvailability
from hotel_backend.services.room_service import InvalidRoomNumberError, RoomInventory
from hotel_backend.utils.config import get_settings


def test_inventory_starts_with_all_rooms_free() -> None:
    inventory = RoomInventory(get_settings())

    rooms = inventory.list_rooms()
    assert [room.number for room in rooms] == list(range(1, 21))
    assert not any(room.occupied for room in rooms)
    assert inventory.free_count == 20


def test_room_count_follows_settings() -> None:
    inventory = RoomInventory(replace(get_settings(), total_rooms=5))

    assert inventory.total_rooms == 5
    assert inventory.status_report()[-1] == (5, False)


@pytest.mark.parametrize("number", [0, -1, 21])
def test_find_free_room_rejects_numbers_outside_range(number: int) -> None:
    inventory = RoomInventory(get_settings())

    with pytest.raises(InvalidRoomNumberError):
        inventory.find_free_room(number)


def test_allocate_then_release_toggles_availability() -> None:
    inventory = RoomInventory(get_settings())

    lookup = inventory.find_free_room(7)
    assert lookup.is_free
    room = lookup.room
    assert room is not None and room.number == 7

    inventory.allocate(room)
    occupied = inventory.find_free_room(7)
    assert occupied.availability is RoomAvailability.OCCUPIED
    assert occupied.room is None
    assert inventory.free_count == 19

    inventory.release(room)
    again = inventory.find_free_room(7)
    assert again.is_free
    assert again.room is not None and again.room.number == 7


def test_allocating_an_occupied_room_is_a_programming_error() -> None:
    inventory = RoomInventory(get_settings())
    room = inventory.find_free_room(3).room
    inventory.allocate(room)

    with pytest.raises(AssertionError):
        inventory.allocate(room)


def test_free_lookup_hands_out_a_copy() -> None:
    inventory = RoomInventory(get_settings())
    room = inventory.find_free_room(4).room
    assert room is not None

    room.occupied = True

    assert inventory.find_free_room(4).is_free
    assert inventory.free_count == 20
    inventory.allocate(inventory.find_free_room(4).room)
    assert inventory.get_room(4).occupied


def test_list_rooms_returns_snapshot() -> None:
    inventory = RoomInventory(get_settings())

    snapshot = inventory.list_rooms()
    snapshot[0].occupied = True

    assert inventory.find_free_room(1).is_free


def test_status_report_reflects_allocations() -> None:
    inventory = RoomInventory(get_settings())
    inventory.allocate(inventory.find_free_room(2).room)

    report = inventory.status_report()

    assert report[0] == (1, False)
    assert report[1] == (2, True)
    assert len(report) == 20
