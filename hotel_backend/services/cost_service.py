"""Staffing and catering cost derivation for booked events.

All functions are pure: they only read their arguments and an optional
``CostConfig``. Staff headcount rounds the guest term up and truncates the
duration term, so ``staff_count(100, 4) == 9 + 2``.
"""

from __future__ import annotations

import math
from typing import Optional

from hotel_backend.domain.constraints import CostConfig, validate_cost_config
from hotel_backend.domain.models import Catering, Event, EventCostReport
from hotel_backend.utils.config import Settings


DEFAULT_COST_CONFIG = CostConfig()


def cost_config_from_settings(settings: Settings) -> CostConfig:
    config = CostConfig(
        guests_per_staff=settings.guests_per_staff,
        staff_hourly_rate=settings.staff_hourly_rate,
        coffee_liters_per_guest=settings.coffee_liters_per_guest,
        water_liters_per_guest=settings.water_liters_per_guest,
        snacks_per_guest=settings.snacks_per_guest,
        coffee_price_per_liter=settings.coffee_price_per_liter,
        water_price_per_liter=settings.water_price_per_liter,
        snack_unit_price=settings.snack_unit_price,
    )
    validate_cost_config(config)
    return config


def _validate_inputs(guest_count: int, duration_hours: int) -> None:
    if guest_count < 0:
        raise ValueError("guest_count must be >= 0")
    if duration_hours < 0:
        raise ValueError("duration_hours must be >= 0")


def staff_count(
    guest_count: int,
    duration_hours: int,
    config: Optional[CostConfig] = None,
) -> int:
    config = config or DEFAULT_COST_CONFIG
    _validate_inputs(guest_count, duration_hours)
    return math.ceil(guest_count / config.guests_per_staff) + duration_hours // 2


def staff_cost(
    guest_count: int,
    duration_hours: int,
    config: Optional[CostConfig] = None,
) -> float:
    config = config or DEFAULT_COST_CONFIG
    headcount = staff_count(guest_count, duration_hours, config)
    return headcount * config.staff_hourly_rate * duration_hours


def catering(guest_count: int, config: Optional[CostConfig] = None) -> Catering:
    config = config or DEFAULT_COST_CONFIG
    _validate_inputs(guest_count, 0)
    return Catering(
        coffee_liters=config.coffee_liters_per_guest * guest_count,
        water_liters=config.water_liters_per_guest * guest_count,
        snack_count=math.floor(config.snacks_per_guest * guest_count),
    )


def catering_cost(provision: Catering, config: Optional[CostConfig] = None) -> float:
    config = config or DEFAULT_COST_CONFIG
    return (
        provision.coffee_liters * config.coffee_price_per_liter
        + provision.water_liters * config.water_price_per_liter
        + provision.snack_count * config.snack_unit_price
    )


def derive_event_costs(
    guest_count: int,
    duration_hours: int,
    config: Optional[CostConfig] = None,
) -> EventCostReport:
    config = config or DEFAULT_COST_CONFIG
    provision = catering(guest_count, config)
    return EventCostReport(
        guest_count=guest_count,
        duration_hours=duration_hours,
        staff_count=staff_count(guest_count, duration_hours, config),
        staff_cost=staff_cost(guest_count, duration_hours, config),
        catering=provision,
        catering_cost=catering_cost(provision, config),
    )


def total_cost(event: Event, config: Optional[CostConfig] = None) -> float:
    return derive_event_costs(event.guest_count, event.duration_hours, config).total_cost
