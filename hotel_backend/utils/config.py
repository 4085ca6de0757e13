"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else default


def _env_optional_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value.replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class Settings:
    app_name: str = "Hotel Paraiso Reservations"
    app_version: str = "1.0.0"
    hotel_name: str = "Hotel Paraiso"
    log_level: str = "INFO"
    admin_passphrase: Optional[str] = None

    total_rooms: int = 20
    guest_registry_limit: int = 15
    max_stay_days: int = 30
    free_age_limit: int = 6
    half_price_age: int = 60

    small_venue_name: str = "Laranja Auditorium"
    small_venue_capacity: int = 150
    small_venue_overflow_seats: int = 70
    large_venue_name: str = "Colorado Auditorium"
    large_venue_capacity: int = 350
    large_venue_overflow_seats: int = 0

    weekday_open_hour: int = 7
    weekday_close_hour: int = 23
    weekend_open_hour: int = 7
    weekend_close_hour: int = 15

    guests_per_staff: int = 12
    staff_hourly_rate: float = 10.50
    coffee_liters_per_guest: float = 0.20
    water_liters_per_guest: float = 0.50
    snacks_per_guest: float = 7
    coffee_price_per_liter: float = 0.80
    water_price_per_liter: float = 0.40
    snack_unit_price: float = 0.34


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process; call ``cache_clear`` to re-read env."""
    defaults = Settings()
    return Settings(
        app_name=_env_str("HOTEL_APP_NAME", defaults.app_name),
        app_version=_env_str("HOTEL_APP_VERSION", defaults.app_version),
        hotel_name=_env_str("HOTEL_NAME", defaults.hotel_name),
        log_level=_env_str("HOTEL_LOG_LEVEL", defaults.log_level),
        admin_passphrase=_env_optional_str("HOTEL_ADMIN_PASSPHRASE"),
        total_rooms=_env_int("HOTEL_TOTAL_ROOMS", defaults.total_rooms),
        guest_registry_limit=_env_int("HOTEL_GUEST_LIMIT", defaults.guest_registry_limit),
        max_stay_days=_env_int("HOTEL_MAX_STAY_DAYS", defaults.max_stay_days),
        free_age_limit=_env_int("HOTEL_FREE_AGE_LIMIT", defaults.free_age_limit),
        half_price_age=_env_int("HOTEL_HALF_PRICE_AGE", defaults.half_price_age),
        small_venue_name=_env_str("HOTEL_SMALL_VENUE_NAME", defaults.small_venue_name),
        small_venue_capacity=_env_int(
            "HOTEL_SMALL_VENUE_CAPACITY", defaults.small_venue_capacity
        ),
        small_venue_overflow_seats=_env_int(
            "HOTEL_SMALL_VENUE_OVERFLOW_SEATS", defaults.small_venue_overflow_seats
        ),
        large_venue_name=_env_str("HOTEL_LARGE_VENUE_NAME", defaults.large_venue_name),
        large_venue_capacity=_env_int(
            "HOTEL_LARGE_VENUE_CAPACITY", defaults.large_venue_capacity
        ),
        large_venue_overflow_seats=_env_int(
            "HOTEL_LARGE_VENUE_OVERFLOW_SEATS", defaults.large_venue_overflow_seats
        ),
        weekday_open_hour=_env_int("HOTEL_WEEKDAY_OPEN_HOUR", defaults.weekday_open_hour),
        weekday_close_hour=_env_int("HOTEL_WEEKDAY_CLOSE_HOUR", defaults.weekday_close_hour),
        weekend_open_hour=_env_int("HOTEL_WEEKEND_OPEN_HOUR", defaults.weekend_open_hour),
        weekend_close_hour=_env_int("HOTEL_WEEKEND_CLOSE_HOUR", defaults.weekend_close_hour),
        guests_per_staff=_env_int("HOTEL_GUESTS_PER_STAFF", defaults.guests_per_staff),
        staff_hourly_rate=_env_float("HOTEL_STAFF_HOURLY_RATE", defaults.staff_hourly_rate),
        coffee_liters_per_guest=_env_float(
            "HOTEL_COFFEE_LITERS_PER_GUEST", defaults.coffee_liters_per_guest
        ),
        water_liters_per_guest=_env_float(
            "HOTEL_WATER_LITERS_PER_GUEST", defaults.water_liters_per_guest
        ),
        snacks_per_guest=_env_float("HOTEL_SNACKS_PER_GUEST", defaults.snacks_per_guest),
        coffee_price_per_liter=_env_float(
            "HOTEL_COFFEE_PRICE_PER_LITER", defaults.coffee_price_per_liter
        ),
        water_price_per_liter=_env_float(
            "HOTEL_WATER_PRICE_PER_LITER", defaults.water_price_per_liter
        ),
        snack_unit_price=_env_float("HOTEL_SNACK_UNIT_PRICE", defaults.snack_unit_price),
    )
