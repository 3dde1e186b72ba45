"""API endpoints for user registration."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.schemas import UserCreate
from app.database import get_db
from app.services.auth import get_session_provider
from app.services.user_service import EmailAlreadyRegisteredError, user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    payload: UserCreate,
    db: Session = Depends(get_db),
):
    """
    Register a new user.

    A session token is issued only when the request carries no session
    cookie; it is stored on the user row and returned as a cookie scoped to
    the meals routes.
    """
    session_provider = get_session_provider()

    token = None
    if not session_provider.get_session_token(request):
        token = session_provider.generate_session_token()

    try:
        user_service.register_user(
            db=db,
            name=payload.name,
            email=payload.email,
            address=payload.address,
            weight=payload.weight,
            height=payload.height,
            session_id=token,
        )
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=400, detail=str(e))

    response = Response(status_code=status.HTTP_201_CREATED)
    if token:
        session_provider.set_session_cookie(request, response, token)
    return response
