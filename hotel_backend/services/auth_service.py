"""Shared operator passphrase authentication service."""

from __future__ import annotations

import secrets
from typing import Optional

from hotel_backend.utils.config import Settings, get_settings


class AuthenticationError(Exception):
    """Base authentication failure."""


class PassphraseNotConfiguredError(AuthenticationError):
    """Raised when HOTEL_ADMIN_PASSPHRASE is missing."""


class InvalidPassphraseError(AuthenticationError):
    """Raised when provided passphrase or token is invalid."""


class AuthService:
    """Validates the operator passphrase and the resulting bearer session."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._session_token: str | None = None
        self._operator_name: str | None = None

    @property
    def auth_enabled(self) -> bool:
        return bool(self._settings.admin_passphrase)

    @property
    def operator_name(self) -> str | None:
        return self._operator_name

    def _expected_passphrase(self) -> str:
        if not self._settings.admin_passphrase:
            raise PassphraseNotConfiguredError(
                "HOTEL_ADMIN_PASSPHRASE is not configured. Set it in environment variables."
            )
        return self._settings.admin_passphrase

    def login(self, operator_name: str, passphrase: str) -> str:
        expected = self._expected_passphrase()
        if not secrets.compare_digest(passphrase, expected):
            raise InvalidPassphraseError("Invalid passphrase")
        self._session_token = secrets.token_urlsafe(32)
        self._operator_name = operator_name
        return self._session_token

    def validate_bearer_token(self, bearer_token: str) -> None:
        if not self.auth_enabled:
            return
        if self._session_token is None:
            raise InvalidPassphraseError("No active session. Login first.")
        if not secrets.compare_digest(bearer_token, self._session_token):
            raise InvalidPassphraseError("Invalid bearer token")
