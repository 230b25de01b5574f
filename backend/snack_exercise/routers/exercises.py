"""Exercise catalog API routes (read-only)."""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from snack_exercise.dependencies import get_exercise_service
from snack_exercise.models.exercise import ExerciseCategory
from snack_exercise.schemas.exercise import ExerciseOut
from snack_exercise.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("/", response_model=list[ExerciseOut])
def list_exercises(
    category: Optional[ExerciseCategory] = Query(None),
    service: ExerciseService = Depends(get_exercise_service),
):
    """List the exercise catalog, optionally filtered by category."""
    return service.get_exercises(category)


@router.get("/{exercise_id}", response_model=ExerciseOut)
def get_exercise(exercise_id: int, service: ExerciseService = Depends(get_exercise_service)):
    return service.get_exercise(exercise_id)
