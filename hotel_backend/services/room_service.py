"""Room inventory: fixed set of numbered rooms with an occupancy flag."""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from typing import Optional

from hotel_backend.domain.constraints import validate_lodging_limits
from hotel_backend.domain.models import Room, RoomAvailability, RoomLookup
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class RoomInventoryError(Exception):
    """Base exception for room inventory failures."""


class InvalidRoomNumberError(RoomInventoryError):
    """Raised when a room number is outside the inventory range."""


class RoomInventory:
    """Owns rooms 1..N, all free at construction."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        validate_lodging_limits(
            total_rooms=self._settings.total_rooms,
            guest_registry_limit=self._settings.guest_registry_limit,
        )
        self._rooms = [Room(number=number) for number in range(1, self._settings.total_rooms + 1)]
        self._lock = RLock()

    @property
    def total_rooms(self) -> int:
        return len(self._rooms)

    @property
    def free_count(self) -> int:
        with self._lock:
            return sum(1 for room in self._rooms if not room.occupied)

    def _room_at(self, number: int) -> Room:
        if not 1 <= number <= len(self._rooms):
            raise InvalidRoomNumberError(
                f"Room number {number} is outside 1-{len(self._rooms)}"
            )
        return self._rooms[number - 1]

    def get_room(self, number: int) -> Room:
        with self._lock:
            return replace(self._room_at(number))

    def list_rooms(self) -> list[Room]:
        with self._lock:
            return [replace(room) for room in self._rooms]

    def find_free_room(self, number: int) -> RoomLookup:
        with self._lock:
            room = self._room_at(number)
            if room.occupied:
                return RoomLookup(number=number, availability=RoomAvailability.OCCUPIED)
            return RoomLookup(number=number, availability=RoomAvailability.FREE, room=replace(room))

    def allocate(self, room: Room) -> None:
        with self._lock:
            target = self._room_at(room.number)
            assert not target.occupied, f"room {room.number} is already occupied"
            target.occupied = True
            room.occupied = True
        logger.info("Room allocated | room_number=%s", room.number)

    def release(self, room: Room) -> None:
        with self._lock:
            target = self._room_at(room.number)
            target.occupied = False
            room.occupied = False
        logger.info("Room released | room_number=%s", room.number)

    def status_report(self) -> list[tuple[int, bool]]:
        with self._lock:
            return [(room.number, room.occupied) for room in self._rooms]
