"""Tests for configuration validation rules.

Covers every branch of the validate_* helpers in domain.constraints.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from hotel_backend.domain.constraints import (
    CostConfig,
    ScheduleConfig,
    validate_cost_config,
    validate_lodging_limits,
    validate_schedule_config,
    validate_venue_spec,
)


# --- Baseline pass ---

def test_default_configs_pass() -> None:
    validate_schedule_config(ScheduleConfig())
    validate_cost_config(CostConfig())
    validate_lodging_limits(total_rooms=20, guest_registry_limit=15)
    validate_venue_spec("Laranja Auditorium", 150, 70)


# --- lodging limits ---

def test_zero_rooms_raises() -> None:
    with pytest.raises(ValueError):
        validate_lodging_limits(total_rooms=0, guest_registry_limit=15)


def test_zero_guest_limit_raises() -> None:
    with pytest.raises(ValueError):
        validate_lodging_limits(total_rooms=20, guest_registry_limit=0)


# --- schedule ---

def test_weekday_open_after_close_raises() -> None:
    with pytest.raises(ValueError):
        validate_schedule_config(ScheduleConfig(weekday_open_hour=23, weekday_close_hour=7))


def test_weekend_equal_open_and_close_raises() -> None:
    with pytest.raises(ValueError):
        validate_schedule_config(ScheduleConfig(weekend_open_hour=10, weekend_close_hour=10))


def test_close_hour_at_midnight_raises() -> None:
    """The last bookable hour runs through its end, so 24 would spill past midnight."""
    with pytest.raises(ValueError):
        validate_schedule_config(ScheduleConfig(weekday_close_hour=24))


def test_close_hour_at_last_hour_passes() -> None:
    validate_schedule_config(ScheduleConfig(weekday_close_hour=23))


# --- venues ---

def test_blank_venue_name_raises() -> None:
    with pytest.raises(ValueError):
        validate_venue_spec("  ", 150, 0)


def test_zero_venue_capacity_raises() -> None:
    with pytest.raises(ValueError):
        validate_venue_spec("Colorado Auditorium", 0, 0)


def test_negative_overflow_seats_raises() -> None:
    with pytest.raises(ValueError):
        validate_venue_spec("Laranja Auditorium", 150, -1)


# --- costs ---

def test_zero_guests_per_staff_raises() -> None:
    with pytest.raises(ValueError):
        validate_cost_config(CostConfig(guests_per_staff=0))


def test_negative_staff_rate_raises() -> None:
    with pytest.raises(ValueError):
        validate_cost_config(CostConfig(staff_hourly_rate=-0.01))


def test_negative_catering_quantity_raises() -> None:
    with pytest.raises(ValueError):
        validate_cost_config(replace(CostConfig(), water_liters_per_guest=-0.5))


def test_negative_unit_price_raises() -> None:
    with pytest.raises(ValueError):
        validate_cost_config(replace(CostConfig(), snack_unit_price=-0.34))


def test_free_staff_rate_passes() -> None:
    """Zero is a valid (if generous) hourly rate."""
    validate_cost_config(CostConfig(staff_hourly_rate=0.0))
