"""Member ORM model."""
from sqlalchemy import Column, Integer, String

from snack_exercise.database import Base
from snack_exercise.models.base import StatusMixin


class Member(StatusMixin, Base):
    __tablename__ = "members"

    member_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    nickname = Column(String(50), nullable=False)
    profile_image = Column(String(500), nullable=True)
