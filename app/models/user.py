from sqlalchemy import Column, String, Text, DateTime, Numeric, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from app.database import Base


class User(Base):
    """Registered user; owns meals and carries its session token."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    address = Column(Text, nullable=False)
    weight = Column(Numeric(5, 2), nullable=False)
    height = Column(Numeric(3, 0), nullable=False)
    session_id = Column(
        String(64), unique=True, index=True, nullable=True
    )  # Set on the first registration request lacking a cookie
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
