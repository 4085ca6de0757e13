"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hotel_backend.services.auth_service import (
    AuthService,
    InvalidPassphraseError,
    PassphraseNotConfiguredError,
)
from hotel_backend.services.event_service import EventScheduler
from hotel_backend.services.front_desk_service import FrontDeskService
from hotel_backend.services.guest_service import GuestRegistry
from hotel_backend.services.room_service import RoomInventory
from hotel_backend.services.venue_service import VenueCatalog
from hotel_backend.utils.config import get_settings


bearer_scheme = HTTPBearer(auto_error=False)


def _require_state(request: Request, name: str, label: str):
    service = getattr(request.app.state, name, None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} is not initialized",
        )
    return service


def get_auth_service(request: Request) -> AuthService:
    service = getattr(request.app.state, "auth_service", None)
    if service is None:
        service = AuthService(settings=get_settings())
        request.app.state.auth_service = service
    return service


def get_room_inventory(request: Request) -> RoomInventory:
    return _require_state(request, "room_inventory", "Room inventory")


def get_guest_registry(request: Request) -> GuestRegistry:
    return _require_state(request, "guest_registry", "Guest registry")


def get_venue_catalog(request: Request) -> VenueCatalog:
    return _require_state(request, "venue_catalog", "Venue catalog")


def get_event_scheduler(request: Request) -> EventScheduler:
    return _require_state(request, "event_scheduler", "Event scheduler")


def get_front_desk_service(request: Request) -> FrontDeskService:
    return _require_state(request, "front_desk_service", "Front desk service")


async def require_operator(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    if not auth_service.auth_enabled:
        return
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header with Bearer token is required",
        )
    try:
        auth_service.validate_bearer_token(credentials.credentials)
    except (PassphraseNotConfiguredError, InvalidPassphraseError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
