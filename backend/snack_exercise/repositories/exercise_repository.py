"""Exercise catalog queries."""
from typing import Optional

from snack_exercise.models.base import Status
from snack_exercise.models.exercise import Exercise, ExerciseCategory
from snack_exercise.repositories.base_repository import BaseRepository


class ExerciseRepository(BaseRepository):

    def find_by_id_and_status(self, exercise_id: int, status: Status) -> Optional[Exercise]:
        return (
            self.db.query(Exercise)
            .filter(Exercise.exercise_id == exercise_id, Exercise.status == status)
            .first()
        )

    def find_all_by_status(
        self, status: Status, category: Optional[ExerciseCategory] = None,
    ) -> list[Exercise]:
        query = self.db.query(Exercise).filter(Exercise.status == status)
        if category:
            query = query.filter(Exercise.exercise_category == category)
        return query.order_by(Exercise.exercise_id).all()
