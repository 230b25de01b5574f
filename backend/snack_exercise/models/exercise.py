"""Exercise ORM model: read-only catalog data."""
import enum
from sqlalchemy import Column, Integer, String, Enum as SAEnum

from snack_exercise.database import Base
from snack_exercise.models.base import StatusMixin


class ExerciseCategory(str, enum.Enum):
    upper_body = "UPPER_BODY"
    lower_body = "LOWER_BODY"
    core = "CORE"
    full_body = "FULL_BODY"
    stretching = "STRETCHING"


class Exercise(StatusMixin, Base):
    __tablename__ = "exercises"

    exercise_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    exercise_category = Column(SAEnum(ExerciseCategory), nullable=False)
    video_link = Column(String(500), nullable=True)
    description = Column(String(1000), nullable=True)
    min_per_kcal = Column(Integer, nullable=True)  # kcal burned per minute
