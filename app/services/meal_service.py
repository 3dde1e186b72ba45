"""Business logic for meal management."""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.meal import Meal

logger = logging.getLogger(__name__)


class MealService:
    """Service for meal-related operations.

    Every lookup goes through the ownership filter: a meal is only visible to
    the user that created it. A meal owned by someone else is indistinguishable
    from one that does not exist.
    """

    @staticmethod
    def create_meal(
        db: Session,
        user_id: UUID,
        name: str,
        description: str,
        is_on_the_diet: bool,
    ) -> Meal:
        """
        Create a new meal entry.

        Args:
            db: Database session
            user_id: Owner's user ID
            name: Meal name
            description: Free-text description
            is_on_the_diet: Whether the meal complies with the diet

        Returns:
            Created Meal object
        """
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            is_on_the_diet=is_on_the_diet,
        )
        db.add(meal)
        db.commit()
        db.refresh(meal)
        logger.info("User %s created meal %s", user_id, meal.id)
        return meal

    @staticmethod
    def get_user_meals(db: Session, user_id: UUID) -> List[Meal]:
        """Get all meals for a user, oldest first."""
        return (
            db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.created_at, Meal.id)
            .all()
        )

    @staticmethod
    def get_user_meal(db: Session, meal_id: UUID, user_id: UUID) -> Optional[Meal]:
        """Get a single meal by ID, only if the user owns it."""
        return (
            db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    @staticmethod
    def update_meal(
        db: Session,
        meal_id: UUID,
        user_id: UUID,
        name: str,
        description: str,
        is_on_the_diet: bool,
    ) -> Optional[Meal]:
        """
        Overwrite a meal's fields.

        Returns:
            Updated Meal, or None if the user has no meal with that ID
        """
        meal = MealService.get_user_meal(db, meal_id, user_id)
        if not meal:
            return None

        meal.name = name
        meal.description = description
        meal.is_on_the_diet = is_on_the_diet
        db.commit()
        db.refresh(meal)
        logger.info("User %s updated meal %s", user_id, meal_id)
        return meal

    @staticmethod
    def delete_meal(db: Session, meal_id: UUID, user_id: UUID) -> bool:
        """
        Delete a meal.

        Returns:
            True if deleted, False if the user has no meal with that ID
        """
        meal = MealService.get_user_meal(db, meal_id, user_id)
        if not meal:
            return False

        db.delete(meal)
        db.commit()
        logger.info("User %s deleted meal %s", user_id, meal_id)
        return True

    @staticmethod
    def get_summary(db: Session, user_id: UUID) -> Dict[str, int]:
        """
        Count a user's meals: total, on the diet and off the diet.

        Three independent count queries; nothing is cached.
        """
        base = db.query(Meal).filter(Meal.user_id == user_id)

        total = base.count()
        on_diet = base.filter(Meal.is_on_the_diet.is_(True)).count()
        off_diet = base.filter(Meal.is_on_the_diet.is_(False)).count()

        return {
            "total_meals": total,
            "meals_on_diet": on_diet,
            "meals_off_diet": off_diet,
        }


meal_service = MealService()
