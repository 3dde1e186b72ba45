"""
Database models for Daily Diet.

Import all models here so Alembic can detect them for migrations.
"""

from app.database import Base
from app.models.user import User
from app.models.meal import Meal

__all__ = [
    "Base",
    "User",
    "Meal",
]
