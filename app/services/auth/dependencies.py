"""FastAPI dependencies for session authentication."""
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.services.auth import get_session_provider


async def check_session_id_exists(request: Request) -> None:
    """
    Session guard for protected routers.

    Rejects the request with 401 when no session cookie is present. Does not
    touch the database; resolving the token is get_current_user's job.
    """
    if not get_session_provider().get_session_token(request):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )


async def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    """
    Get the user owning the request's session cookie.

    Raises 401 if the cookie is missing or no user owns it.
    """
    session_provider = get_session_provider()
    user = await session_provider.get_user_from_request(db, request)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )

    return user
