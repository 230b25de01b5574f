"""Exgroup ORM model."""
from datetime import datetime
from typing import Any

from sqlalchemy import Column, DateTime, Integer, String, Time
from sqlalchemy.orm import relationship

from snack_exercise.database import Base
from snack_exercise.exceptions import ExgroupAlreadyStartedException, MaxMemberNumLessThanCurrentException
from snack_exercise.models.base import StatusMixin

# Fields a host may change through an update; code and status are not among them.
UPDATABLE_FIELDS = (
    "name",
    "emoji",
    "color",
    "description",
    "max_member_num",
    "goal_relay_num",
    "start_time",
    "end_time",
    "penalty",
    "mission_interval_time",
    "check_interval_time",
    "check_max_num",
)


class Exgroup(StatusMixin, Base):
    __tablename__ = "exgroups"

    exgroup_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    emoji = Column(String(20), nullable=True)
    color = Column(String(20), nullable=True)
    description = Column(String(500), nullable=True)
    max_member_num = Column(Integer, nullable=False)
    goal_relay_num = Column(Integer, nullable=False)
    start_time = Column(Time, nullable=False)  # local time-of-day
    end_time = Column(Time, nullable=False)
    penalty = Column(String(255), nullable=True)
    code = Column(String(20), nullable=False, index=True)  # unique among active groups
    mission_interval_time = Column(Integer, nullable=False)  # minutes
    check_interval_time = Column(Integer, nullable=False)  # minutes
    check_max_num = Column(Integer, nullable=False)  # checks per day
    started_at = Column(DateTime(timezone=True), nullable=True)

    join_lists = relationship("JoinList", back_populates="exgroup")

    def update_max_member_num(self, current_member_num: int, max_member_num: int) -> None:
        if max_member_num < current_member_num:
            raise MaxMemberNumLessThanCurrentException(
                f"max_member_num {max_member_num} is lower than the current member count {current_member_num}"
            )
        self.max_member_num = max_member_num

    def update(self, fields: dict[str, Any]) -> None:
        for field, value in fields.items():
            if field in UPDATABLE_FIELDS:
                setattr(self, field, value)

    def start(self, now: datetime) -> None:
        if self.started_at is not None:
            raise ExgroupAlreadyStartedException()
        self.started_at = now
