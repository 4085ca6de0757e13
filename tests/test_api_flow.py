from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from hotel_backend.main import create_app
from hotel_backend.utils.config import get_settings


PASSPHRASE = "2678"


def _client(**overrides) -> TestClient:
    settings = replace(get_settings(), admin_passphrase=PASSPHRASE, **overrides)
    return TestClient(create_app(settings))


def _login(client: TestClient) -> dict[str, str]:
    response = client.post("/login", json={"operator_name": "Maria", "passphrase": PASSPHRASE})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert "Maria" in body["greeting"]
    return {"Authorization": f"Bearer {body['access_token']}"}


def test_operator_endpoints_require_login() -> None:
    client = _client()

    assert client.get("/rooms").status_code == 401
    assert client.get("/events", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_login_with_wrong_passphrase_is_rejected() -> None:
    client = _client()

    response = client.post("/login", json={"operator_name": "Maria", "passphrase": "0000"})

    assert response.status_code == 401


def test_endpoints_open_without_configured_passphrase() -> None:
    client = TestClient(create_app(replace(get_settings(), admin_passphrase=None)))

    assert client.get("/rooms").status_code == 200
    assert client.post("/login", json={"operator_name": "Maria", "passphrase": "x"}).status_code == 401


def test_room_and_stay_flow() -> None:
    client = _client()
    headers = _login(client)

    rooms = client.get("/rooms", headers=headers).json()
    assert rooms["free_count"] == 20
    assert len(rooms["rooms"]) == 20

    quote = client.post("/stays/quote", json={"daily_rate": 100.0, "days": 3}, headers=headers)
    assert quote.status_code == 200
    assert quote.json()["total_value"] == 300.0

    payload = {
        "guest_name": "Ana",
        "guest_age": 30,
        "room_number": 4,
        "daily_rate": 100.0,
        "days": 3,
    }
    booked = client.post("/stays", json=payload, headers=headers)
    assert booked.status_code == 201
    assert booked.json()["guest"]["name"] == "Ana"

    availability = client.get("/rooms/4/availability", headers=headers).json()
    assert availability["availability"] == "OCCUPIED"

    again = client.post("/stays", json={**payload, "guest_name": "Bruno"}, headers=headers)
    assert again.status_code == 409

    missing = client.post("/stays", json={**payload, "room_number": 99}, headers=headers)
    assert missing.status_code == 404

    checkout = client.post("/stays/4/checkout", headers=headers)
    assert checkout.status_code == 200
    assert checkout.json()["reservation"]["room_number"] == 4
    assert client.get("/rooms/4/availability", headers=headers).json()["availability"] == "FREE"


def test_guest_registry_flow() -> None:
    client = _client(guest_registry_limit=2)
    headers = _login(client)

    assert client.post("/guests", json={"name": "Ana", "age": 4}, headers=headers).status_code == 201
    assert client.post("/guests", json={"name": "Bruno", "age": 70}, headers=headers).status_code == 201
    blank = client.post("/guests", json={"name": "   ", "age": 10}, headers=headers)
    assert blank.status_code == 400
    full = client.post("/guests", json={"name": "Carla", "age": 30}, headers=headers)
    assert full.status_code == 409

    listing = client.get("/guests", headers=headers).json()
    assert [guest["name"] for guest in listing["guests"]] == ["Ana", "Bruno"]
    assert listing["remaining"] == 0

    found = client.get("/guests/search", params={"name": "bruno"}, headers=headers)
    assert found.status_code == 200
    assert found.json()["age"] == 70
    assert client.get("/guests/search", params={"name": "Zed"}, headers=headers).status_code == 404

    pricing = client.post(
        "/guests/pricing",
        json={"daily_rate": 100.0, "guests": listing["guests"]},
        headers=headers,
    ).json()
    assert pricing == {"total": 50.0, "free_count": 1, "half_count": 1}


def test_venue_and_event_flow() -> None:
    client = _client()
    headers = _login(client)

    venues = client.get("/venues", headers=headers).json()["venues"]
    assert [venue["venue"] for venue in venues] == ["SMALL", "LARGE"]

    recommendation = client.post("/venues/recommend", json={"guest_count": 221}, headers=headers)
    assert recommendation.json()["venue"]["venue"] == "LARGE"
    ineligible = client.post("/venues/recommend", json={"guest_count": 351}, headers=headers)
    assert ineligible.status_code == 400

    quote = client.post(
        "/events/quote",
        json={"guest_count": 100, "duration_hours": 4},
        headers=headers,
    ).json()
    assert quote["staff_count"] == 11
    assert quote["total_cost"] == pytest.approx(736.0)

    event = {
        "company": "Acme",
        "guest_count": 100,
        "weekday": "MONDAY",
        "start_hour": 10,
        "duration_hours": 2,
    }
    plan = client.post("/events/plan", json=event, headers=headers).json()
    assert plan["available"] is True
    assert plan["event"]["venue"] == "SMALL"

    booked = client.post("/events", json=event, headers=headers)
    assert booked.status_code == 201
    assert booked.json()["event"]["end_hour"] == 12

    conflict = client.post("/events", json=event, headers=headers)
    assert conflict.status_code == 409
    assert conflict.json()["detail"]["reason"] == "OVERLAP"

    availability = client.post(
        "/events/availability",
        json={"venue": "SMALL", "weekday": "MONDAY", "start_hour": 11, "duration_hours": 2},
        headers=headers,
    ).json()
    assert availability["available"] is False
    assert len(availability["conflicts"]) == 1

    weekend = client.post("/events", json={**event, "weekday": "SATURDAY", "start_hour": 16}, headers=headers)
    assert weekend.status_code == 409
    assert weekend.json()["detail"]["reason"] == "OUTSIDE_OPERATING_HOURS"

    crowded = client.post(
        "/events",
        json={**event, "guest_count": 340, "weekday": "TUESDAY", "venue": "SMALL"},
        headers=headers,
    )
    assert crowded.status_code == 400

    events = client.get("/events", headers=headers).json()["events"]
    assert len(events) == 1
