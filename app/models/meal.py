from sqlalchemy import Column, Text, Boolean, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from app.database import Base


class Meal(Base):
    """A meal logged by a user, flagged as on or off the diet."""

    __tablename__ = "meals"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    is_on_the_diet = Column("isOnTheDiet", Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="meals")

    __table_args__ = (
        Index("idx_meals_user_id", "user_id"),
        Index("idx_meals_user_id_on_diet", "user_id", "isOnTheDiet"),
    )
