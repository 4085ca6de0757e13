"""Controller layer for the operator passphrase gate."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from hotel_backend.controllers.dependencies import get_auth_service
from hotel_backend.services.auth_service import (
    AuthService,
    InvalidPassphraseError,
    PassphraseNotConfiguredError,
)
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["session"])


class LoginRequest(BaseModel):
    operator_name: str = Field(min_length=1)
    passphrase: str = Field(min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    greeting: str


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
async def login(
    payload: LoginRequest,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    operator_name = payload.operator_name.strip()
    try:
        bearer = auth_service.login(operator_name, payload.passphrase.strip())
    except (PassphraseNotConfiguredError, InvalidPassphraseError) as exc:
        logger.warning("Operator login rejected | operator=%s", operator_name)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected login failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to login",
        ) from exc

    logger.info("Operator logged in | operator=%s", operator_name)
    return LoginResponse(
        access_token=bearer,
        greeting=f"Welcome to {request.app.state.settings.hotel_name}, {operator_name}.",
    )
