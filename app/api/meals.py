"""API endpoints for meal logging and management."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.schemas import (
    MealCreate,
    MealListResponse,
    MealRead,
    MealResponse,
    MealSummary,
    MealSummaryResponse,
    MealUpdate,
)
from app.database import get_db
from app.models.user import User
from app.services.meal_service import meal_service
from app.services.auth.dependencies import check_session_id_exists, get_current_user

router = APIRouter(
    prefix="/meals",
    tags=["meals"],
    dependencies=[Depends(check_session_id_exists)],
)

MEAL_NOT_FOUND = "Meal not found"


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MealResponse)
async def create_meal(
    payload: MealCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new meal owned by the current user."""
    meal = meal_service.create_meal(
        db=db,
        user_id=user.id,
        name=payload.name,
        description=payload.description,
        is_on_the_diet=payload.is_on_the_diet,
    )
    return {"meal": MealRead.model_validate(meal)}


@router.get("", response_model=MealListResponse)
async def list_meals(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List every meal of the current user."""
    meals = meal_service.get_user_meals(db, user.id)
    return {"meals": [MealRead.model_validate(meal) for meal in meals]}


# Registered ahead of /{meal_id} so "summary" is never parsed as an ID
@router.get("/summary", response_model=MealSummaryResponse)
async def get_summary(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Meal counts for the current user: total, on the diet, off the diet."""
    counts = meal_service.get_summary(db, user.id)
    return {"summary": MealSummary(**counts)}


@router.get("/{meal_id}", response_model=MealResponse)
async def get_meal(
    meal_id: UUID,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a single meal owned by the current user."""
    meal = meal_service.get_user_meal(db, meal_id, user.id)
    if not meal:
        raise HTTPException(status_code=404, detail=MEAL_NOT_FOUND)

    return {"meal": MealRead.model_validate(meal)}


@router.put("/{meal_id}", status_code=status.HTTP_202_ACCEPTED)
async def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Overwrite a meal's name, description and on-diet flag."""
    meal = meal_service.update_meal(
        db=db,
        meal_id=meal_id,
        user_id=user.id,
        name=payload.name,
        description=payload.description,
        is_on_the_diet=payload.is_on_the_diet,
    )
    if not meal:
        raise HTTPException(status_code=404, detail=MEAL_NOT_FOUND)

    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.delete("/{meal_id}", status_code=status.HTTP_202_ACCEPTED)
async def delete_meal(
    meal_id: UUID,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Permanently delete a meal."""
    if not meal_service.delete_meal(db, meal_id, user.id):
        raise HTTPException(status_code=404, detail=MEAL_NOT_FOUND)

    return Response(status_code=status.HTTP_202_ACCEPTED)
