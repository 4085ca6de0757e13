"""FastAPI application bootstrap and lifecycle wiring."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from hotel_backend.controllers.events_controller import router as events_router
from hotel_backend.controllers.lodging_controller import router as lodging_router
from hotel_backend.controllers.session_controller import router as session_router
from hotel_backend.services.auth_service import AuthService
from hotel_backend.services.event_service import EventScheduler
from hotel_backend.services.front_desk_service import FrontDeskService
from hotel_backend.services.guest_service import GuestRegistry
from hotel_backend.services.room_service import RoomInventory
from hotel_backend.services.venue_service import VenueCatalog
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app; every engine component is owned by this app instance."""
    settings = settings or get_settings()
    room_inventory = RoomInventory(settings)
    guest_registry = GuestRegistry(settings)
    venue_catalog = VenueCatalog(settings)
    event_scheduler = EventScheduler(settings=settings, venue_catalog=venue_catalog)
    front_desk_service = FrontDeskService(
        room_inventory=room_inventory,
        guest_registry=guest_registry,
        venue_catalog=venue_catalog,
        event_scheduler=event_scheduler,
        settings=settings,
    )
    auth_service = AuthService(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(session_router)
    app.include_router(lodging_router)
    app.include_router(events_router)

    app.state.settings = settings
    app.state.room_inventory = room_inventory
    app.state.guest_registry = guest_registry
    app.state.venue_catalog = venue_catalog
    app.state.event_scheduler = event_scheduler
    app.state.front_desk_service = front_desk_service
    app.state.auth_service = auth_service

    return app


def startup(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    auth_service: AuthService = app.state.auth_service
    if not auth_service.auth_enabled:
        logger.warning("HOTEL_ADMIN_PASSPHRASE is not set; operator endpoints are open")
    logger.info(
        "System startup completed | hotel=%s | rooms=%s | guest_limit=%s",
        settings.hotel_name,
        settings.total_rooms,
        settings.guest_registry_limit,
    )


app = create_app()
