"""Streamlit operator console for the Hotel Paraiso reservation API."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import pandas as pd
import requests
import streamlit as st

# ==========================================
# Configuration & Constants
# ==========================================
API_BASE_URL = os.getenv("HOTEL_API_BASE_URL", "http://127.0.0.1:8000")
WEEKDAYS = ["MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY"]

st.set_page_config(
    page_title="Hotel Paraiso Console",
    page_icon="🏨",
    layout="wide",
)


# ==========================================
# API Helper Functions
# ==========================================
def _headers() -> Dict[str, str]:
    token = st.session_state.get("access_token")
    return {"Authorization": f"Bearer {token}"} if token else {}


def _error_detail(response: requests.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        return response.text
    if isinstance(detail, dict):
        return str(detail.get("message", detail))
    return str(detail)


def call_api(method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """Call the backend and surface failures in the page instead of raising."""
    try:
        response = requests.request(
            method,
            f"{API_BASE_URL}{path}",
            json=payload,
            headers=_headers(),
            timeout=5,
        )
    except requests.exceptions.RequestException as e:
        st.error(f"Backend connection failed: {e}")
        return None
    if response.status_code >= 400:
        st.error(_error_detail(response))
        return None
    return response.json()


def money(value: float) -> str:
    return f"R${value:.2f}"


# ==========================================
# UI Page Functions
# ==========================================
def render_login() -> None:
    st.sidebar.subheader("Operator login")
    operator_name = st.sidebar.text_input("Name")
    passphrase = st.sidebar.text_input("Passphrase", type="password")
    if st.sidebar.button("Login"):
        result = call_api(
            "POST",
            "/login",
            {"operator_name": operator_name, "passphrase": passphrase},
        )
        if result:
            st.session_state["access_token"] = result["access_token"]
            st.sidebar.success(result["greeting"])


def render_rooms_page() -> None:
    st.header("🛏️ Rooms & Stays")

    rooms = call_api("GET", "/rooms")
    if rooms:
        st.metric("Free rooms", rooms["free_count"])
        df = pd.DataFrame(rooms["rooms"])
        df["status"] = df["occupied"].map({True: "occupied", False: "free"})
        st.dataframe(df[["number", "status"]], use_container_width=True)

    st.subheader("New stay")
    col1, col2, col3 = st.columns(3)
    with col1:
        guest_name = st.text_input("Guest name")
        guest_age = st.number_input("Guest age", min_value=0, max_value=130, value=30)
    with col2:
        daily_rate = st.number_input("Daily rate", min_value=0.0, value=150.0)
        days = st.number_input("Days", min_value=1, max_value=30, value=1)
    with col3:
        room_number = st.number_input("Room number", min_value=1, value=1)

    stay_quote = call_api("POST", "/stays/quote", {"daily_rate": daily_rate, "days": int(days)})
    if stay_quote:
        st.info(f"{int(days)} day(s) of lodging cost {money(stay_quote['total_value'])}")

    if st.button("Confirm stay", type="primary"):
        result = call_api(
            "POST",
            "/stays",
            {
                "guest_name": guest_name,
                "guest_age": int(guest_age),
                "room_number": int(room_number),
                "daily_rate": daily_rate,
                "days": int(days),
            },
        )
        if result:
            st.success(f"Stay booked for {result['guest']['name']} in room {result['room_number']}.")

    stays = call_api("GET", "/stays")
    if stays and stays["reservations"]:
        st.subheader("Active stays")
        df = pd.json_normalize(stays["reservations"])
        st.dataframe(df, use_container_width=True)
        checkout_room = st.selectbox("Check out room", df["room_number"].tolist())
        if st.button("Check out"):
            if call_api("POST", f"/stays/{checkout_room}/checkout"):
                st.success(f"Room {checkout_room} released.")


def render_guests_page() -> None:
    st.header("🧳 Guests")

    guests = call_api("GET", "/guests")
    if guests:
        st.caption(f"{guests['remaining']} of {guests['capacity']} registrations left")
        if guests["guests"]:
            st.dataframe(pd.DataFrame(guests["guests"]), use_container_width=True)
        else:
            st.info("No guests registered.")

    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Name")
        age = st.number_input("Age", min_value=0, max_value=130, value=30)
        if st.button("Register guest", type="primary"):
            if call_api("POST", "/guests", {"name": name, "age": int(age)}):
                st.success(f"Guest {name} registered.")
    with col2:
        search = st.text_input("Search by name")
        if st.button("Search") and search:
            found = call_api("GET", f"/guests/search?name={quote(search)}")
            if found:
                st.success(f"Guest {found['name']} was found.")

    if guests and guests["guests"]:
        st.subheader("Group pricing")
        daily_rate = st.number_input("Daily rate for the group", min_value=0.0, value=100.0)
        pricing = call_api(
            "POST",
            "/guests/pricing",
            {"daily_rate": daily_rate, "guests": guests["guests"]},
        )
        if pricing:
            col_a, col_b, col_c = st.columns(3)
            col_a.metric("Total", money(pricing["total"]))
            col_b.metric("Free", pricing["free_count"])
            col_c.metric("Half price", pricing["half_count"])


def render_events_page() -> None:
    st.header("🎤 Events")

    col1, col2 = st.columns(2)
    with col1:
        company = st.text_input("Company")
        guest_count = st.number_input("Guests", min_value=1, max_value=350, value=100)
    with col2:
        weekday = st.selectbox("Weekday", WEEKDAYS)
        start_hour = st.number_input("Start hour", min_value=0, max_value=23, value=9)
        duration_hours = st.number_input("Duration (hours)", min_value=1, max_value=16, value=4)

    payload = {
        "company": company or "-",
        "guest_count": int(guest_count),
        "weekday": weekday,
        "start_hour": int(start_hour),
        "duration_hours": int(duration_hours),
    }
    proposal = call_api("POST", "/events/plan", payload)
    if proposal:
        recommendation = proposal["recommendation"]
        venue_name = recommendation["venue"]["display_name"]
        if recommendation["needs_overflow_seating"]:
            st.info(f"Use the {venue_name} (add {recommendation['extra_seats']} chairs)")
        else:
            st.info(f"Use the {venue_name}")

        costs = proposal["costs"]
        col_a, col_b, col_c, col_d = st.columns(4)
        col_a.metric("Staff", costs["staff_count"])
        col_b.metric("Staff cost", money(costs["staff_cost"]))
        col_c.metric("Catering cost", money(costs["catering_cost"]))
        col_d.metric("Total cost", money(costs["total_cost"]))
        st.write(
            f"Catering: {costs['catering']['coffee_liters']} L coffee, "
            f"{costs['catering']['water_liters']} L water, "
            f"{costs['catering']['snack_count']} snacks"
        )
        window = f"{proposal['open_hour']}h-{proposal['close_hour']}h"
        if proposal["available"]:
            st.success(f"Slot available (operating hours {window}).")
        else:
            st.warning(f"Slot unavailable (operating hours {window}).")

        if st.button("Confirm event", type="primary", disabled=not company):
            if call_api("POST", "/events", payload):
                st.success("Event booked.")

    events = call_api("GET", "/events")
    if events and events["events"]:
        st.subheader("Booked events")
        st.dataframe(pd.DataFrame(events["events"]), use_container_width=True)


# ==========================================
# Main App Router
# ==========================================
def main() -> None:
    st.sidebar.title("Hotel Paraiso")
    render_login()
    st.sidebar.markdown("---")

    page = st.sidebar.radio("Navigation", ["Rooms & Stays", "Guests", "Events"])

    if page == "Rooms & Stays":
        render_rooms_page()
    elif page == "Guests":
        render_guests_page()
    elif page == "Events":
        render_events_page()


if __name__ == "__main__":
    main()
