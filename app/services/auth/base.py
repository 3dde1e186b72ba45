"""Abstract base class for session providers."""
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request
from fastapi.responses import Response
from sqlalchemy.orm import Session as DBSession

from app.models.user import User


class SessionProvider(ABC):
    """
    Abstract session provider interface.

    Maps the session token carried by a request to the user that owns it.
    """

    @abstractmethod
    def get_session_token(self, request: Request) -> Optional[str]:
        """Return the raw session token from the request, if any."""
        pass

    @abstractmethod
    def generate_session_token(self) -> str:
        """Return a fresh, unguessable session token."""
        pass

    @abstractmethod
    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        """
        Resolve the request's session token to a user.

        Returns User if a user owns the token, None otherwise.
        """
        pass

    @abstractmethod
    def set_session_cookie(self, request: Request, response: Response, token: str) -> None:
        """Attach the session token to an outgoing response."""
        pass
