"""Demo credential check for the admin dashboard (no sessions, no hashing)."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from workboard.core.config import get_settings

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Raised when the submitted username/password pair does not match."""


@dataclass(frozen=True)
class LoginResult:
    username: str
    token: str


class AuthService:
    """Compares credentials against the configured demo account."""

    def login(self, username: str | None, password: str | None) -> LoginResult:
        settings = get_settings()
        user = username if isinstance(username, str) else ""
        pwd = password if isinstance(password, str) else ""
        user_ok = secrets.compare_digest(user.encode(), settings.admin_username.encode())
        pwd_ok = secrets.compare_digest(pwd.encode(), settings.admin_password.encode())
        if not (user and user_ok and pwd_ok):
            logger.warning("Failed login attempt for %r", user)
            raise InvalidCredentialsError("Invalid credentials")
        return LoginResult(username=user, token=settings.admin_token)
