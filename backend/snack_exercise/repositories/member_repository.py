"""Member queries."""
from typing import Optional

from snack_exercise.models.base import Status
from snack_exercise.models.member import Member
from snack_exercise.repositories.base_repository import BaseRepository


class MemberRepository(BaseRepository):

    def find_by_email_and_status(self, email: str, status: Status) -> Optional[Member]:
        return (
            self.db.query(Member)
            .filter(Member.email == email, Member.status == status)
            .first()
        )

    def find_by_id_and_status(self, member_id: int, status: Status) -> Optional[Member]:
        return (
            self.db.query(Member)
            .filter(Member.member_id == member_id, Member.status == status)
            .first()
        )

    def find_by_email(self, email: str) -> Optional[Member]:
        """Any member holding the email, withdrawn ones included."""
        return self.db.query(Member).filter(Member.email == email).first()
