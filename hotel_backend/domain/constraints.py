"""Domain-level validation rules for lodging, scheduling and event costing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleConfig:
    weekday_open_hour: int = 7
    weekday_close_hour: int = 23
    weekend_open_hour: int = 7
    weekend_close_hour: int = 15


@dataclass(frozen=True)
class CostConfig:
    guests_per_staff: int = 12
    staff_hourly_rate: float = 10.50
    coffee_liters_per_guest: float = 0.20
    water_liters_per_guest: float = 0.50
    snacks_per_guest: float = 7
    coffee_price_per_liter: float = 0.80
    water_price_per_liter: float = 0.40
    snack_unit_price: float = 0.34


def validate_lodging_limits(total_rooms: int, guest_registry_limit: int) -> None:
    if total_rooms <= 0:
        raise ValueError("total_rooms must be > 0")
    if guest_registry_limit <= 0:
        raise ValueError("guest_registry_limit must be > 0")


def validate_schedule_config(config: ScheduleConfig) -> None:
    windows = (
        ("weekday", config.weekday_open_hour, config.weekday_close_hour),
        ("weekend", config.weekend_open_hour, config.weekend_close_hour),
    )
    for label, open_hour, close_hour in windows:
        if not 0 <= open_hour <= 23 or not 0 <= close_hour <= 23:
            raise ValueError(f"{label} operating hours must be between 0 and 23")
        if open_hour >= close_hour:
            raise ValueError(f"{label} open hour must be before close hour")


def validate_venue_spec(name: str, capacity: int, overflow_seats: int) -> None:
    if not name.strip():
        raise ValueError("venue name must be non-empty")
    if capacity <= 0:
        raise ValueError(f"capacity of '{name}' must be > 0")
    if overflow_seats < 0:
        raise ValueError(f"overflow_seats of '{name}' must be >= 0")


def validate_cost_config(config: CostConfig) -> None:
    if config.guests_per_staff <= 0:
        raise ValueError("guests_per_staff must be > 0")
    if config.staff_hourly_rate < 0.0:
        raise ValueError("staff_hourly_rate must be >= 0")
    quantities = (
        config.coffee_liters_per_guest,
        config.water_liters_per_guest,
        config.snacks_per_guest,
    )
    if any(quantity < 0 for quantity in quantities):
        raise ValueError("per-guest catering quantities must be >= 0")
    prices = (
        config.coffee_price_per_liter,
        config.water_price_per_liter,
        config.snack_unit_price,
    )
    if any(price < 0.0 for price in prices):
        raise ValueError("catering unit prices must be >= 0")
