"""Cookie-based session provider backed by the users table."""
import logging
import secrets
from typing import Optional

from fastapi import Request
from fastapi.responses import Response
from sqlalchemy.orm import Session as DBSession

from app.config import Settings
from app.models.user import User
from app.services.auth.base import SessionProvider
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def _app_settings(request: Request) -> Settings:
    return request.app.state.settings


class CookieSessionProvider(SessionProvider):
    """
    Session provider reading an opaque token from a cookie.

    The token is stored on the user row when the user registers, so
    resolving it is a single lookup on ``users.session_id``. Cookie name,
    path and lifetime come from the settings of the app serving the request.
    """

    def get_session_token(self, request: Request) -> Optional[str]:
        cookie_name = _app_settings(request).session_cookie_name
        return request.cookies.get(cookie_name) or None

    def generate_session_token(self) -> str:
        """Generate a cryptographically secure session token."""
        return secrets.token_urlsafe(32)

    def set_session_cookie(self, request: Request, response: Response, token: str) -> None:
        """Attach the session cookie, scoped to the meals routes."""
        settings = _app_settings(request)
        response.set_cookie(
            key=settings.session_cookie_name,
            value=token,
            path=settings.session_cookie_path,
            max_age=settings.session_max_age,
            httponly=True,
            samesite="lax",
            secure=settings.session_cookie_secure,
        )

    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        token = self.get_session_token(request)
        if not token:
            return None

        user = UserService.get_user_by_session_id(db, token)
        if not user:
            logger.warning("Rejected unknown session token on %s", request.url.path)
        return user


# Singleton instance
cookie_session_provider = CookieSessionProvider()
