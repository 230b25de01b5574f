"""Exercise catalog lookups."""
from typing import Optional

from snack_exercise.exceptions import ExerciseNotFoundException
from snack_exercise.models.base import Status
from snack_exercise.models.exercise import ExerciseCategory
from snack_exercise.repositories.exercise_repository import ExerciseRepository
from snack_exercise.schemas.exercise import ExerciseOut


class ExerciseService:

    def __init__(self, exercise_repository: ExerciseRepository):
        self.exercise_repository = exercise_repository

    def get_exercises(self, category: Optional[ExerciseCategory] = None) -> list[ExerciseOut]:
        return [
            ExerciseOut.model_validate(exercise)
            for exercise in self.exercise_repository.find_all_by_status(Status.active, category)
        ]

    def get_exercise(self, exercise_id: int) -> ExerciseOut:
        exercise = self.exercise_repository.find_by_id_and_status(exercise_id, Status.active)
        if exercise is None:
            raise ExerciseNotFoundException()
        return ExerciseOut.model_validate(exercise)
