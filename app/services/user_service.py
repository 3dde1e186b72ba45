"""Business logic for user registration and lookup."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(ValueError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self, email: str):
        super().__init__("Email is already registered to a user")
        self.email = email


class UserService:
    """Service for user-related operations."""

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def get_user_by_session_id(db: Session, session_id: str) -> Optional[User]:
        return db.query(User).filter(User.session_id == session_id).first()

    @staticmethod
    def register_user(
        db: Session,
        name: str,
        email: str,
        address: str,
        weight: float,
        height: int,
        session_id: Optional[str] = None,
    ) -> User:
        """
        Create a new user.

        Args:
            db: Database session
            name: Display name
            email: Email address (stored lower-cased)
            address: Postal address
            weight: Weight in kilograms
            height: Height in centimetres
            session_id: Session token to bind to the user, if one was issued

        Returns:
            Created User object

        Raises:
            EmailAlreadyRegisteredError: if the email is taken, either by an
                existing row or by a concurrent registration that won the
                unique index.
        """
        email = email.lower()
        if UserService.get_user_by_email(db, email):
            raise EmailAlreadyRegisteredError(email)

        user = User(
            name=name,
            email=email,
            address=address,
            weight=weight,
            height=height,
            session_id=session_id,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Concurrent registration lost the race for %s", email)
            raise EmailAlreadyRegisteredError(email)
        db.refresh(user)

        logger.info("Registered user %s", user.id)
        return user


user_service = UserService()
