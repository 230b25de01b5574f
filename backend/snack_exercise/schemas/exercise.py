"""Pydantic schemas for the exercise catalog."""
from typing import Optional
from pydantic import BaseModel

from snack_exercise.models.exercise import ExerciseCategory


class ExerciseOut(BaseModel):
    exercise_id: int
    name: str
    exercise_category: ExerciseCategory
    video_link: Optional[str] = None
    description: Optional[str] = None
    min_per_kcal: Optional[int] = None

    model_config = {"from_attributes": True}
