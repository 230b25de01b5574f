"""JoinList ORM model: links a member to an exgroup with a role."""
import enum
from sqlalchemy import Column, ForeignKey, Integer, Enum as SAEnum
from sqlalchemy.orm import relationship

from snack_exercise.database import Base
from snack_exercise.models.base import StatusMixin, utcnow


class JoinType(str, enum.Enum):
    host = "HOST"
    member = "MEMBER"


class JoinList(StatusMixin, Base):
    __tablename__ = "join_lists"

    join_list_id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False, index=True)
    exgroup_id = Column(Integer, ForeignKey("exgroups.exgroup_id"), nullable=False, index=True)
    join_type = Column(SAEnum(JoinType), nullable=False, default=JoinType.member)
    out_count = Column(Integer, nullable=False, default=0)

    member = relationship("Member")
    exgroup = relationship("Exgroup", back_populates="join_lists")

    @property
    def is_host(self) -> bool:
        return self.join_type == JoinType.host

    def promote_to_host(self) -> None:
        self.join_type = JoinType.host

    def add_one_out_count(self) -> None:
        self.out_count = (self.out_count or 0) + 1

    def rejoin(self) -> None:
        """Reactivate a past membership as a MEMBER; out_count is kept."""
        self.activate()
        self.join_type = JoinType.member
        # join order restarts from the rejoin
        self.created_at = utcnow()
