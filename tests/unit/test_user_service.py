"""
Unit tests for UserService.

Tests registration, duplicate detection and session lookups.
"""
from unittest.mock import patch

import pytest
from sqlalchemy.orm import Session

from app.models import User
from app.services.user_service import EmailAlreadyRegisteredError, UserService
from tests.factories import create_user


def _register(db: Session, email: str = "new@example.com", session_id=None) -> User:
    return UserService.register_user(
        db,
        name="New User",
        email=email,
        address="Somewhere",
        weight=72.25,
        height=180,
        session_id=session_id,
    )


class TestRegisterUser:
    """Tests for user registration."""

    def test_register_user(self, db: Session):
        user = _register(db, session_id="token-abc")

        assert user.id is not None
        assert user.email == "new@example.com"
        assert user.session_id == "token-abc"
        assert float(user.weight) == 72.25

    def test_register_user_without_session(self, db: Session):
        user = _register(db)

        assert user.session_id is None

    def test_register_user_lowercases_email(self, db: Session):
        user = _register(db, email="New@Example.COM")

        assert user.email == "new@example.com"

    def test_duplicate_email_raises(self, db: Session):
        _register(db)

        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            _register(db)

        assert exc_info.value.email == "new@example.com"
        assert "already registered" in str(exc_info.value)

    def test_duplicate_error_is_value_error(self):
        assert issubclass(EmailAlreadyRegisteredError, ValueError)

    def test_lost_race_maps_to_duplicate_error(self, db: Session):
        """Test that the unique index catches a duplicate the pre-check missed."""
        create_user(db, email="race@example.com")

        with patch.object(UserService, "get_user_by_email", return_value=None):
            with pytest.raises(EmailAlreadyRegisteredError):
                _register(db, email="race@example.com")

        assert db.query(User).filter(User.email == "race@example.com").count() == 1


class TestLookups:
    """Tests for user lookups."""

    def test_get_user_by_email(self, db: Session):
        user = create_user(db, email="find@example.com")

        assert UserService.get_user_by_email(db, "FIND@example.com").id == user.id
        assert UserService.get_user_by_email(db, "missing@example.com") is None

    def test_get_user_by_session_id(self, db: Session):
        user = create_user(db)

        assert UserService.get_user_by_session_id(db, user.session_id).id == user.id
        assert UserService.get_user_by_session_id(db, "nope") is None
