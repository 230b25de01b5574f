"""JoinList queries: membership, host lookups and counts."""
from typing import Optional

from snack_exercise.models.base import Status
from snack_exercise.models.exgroup import Exgroup
from snack_exercise.models.join_list import JoinList, JoinType
from snack_exercise.models.member import Member
from snack_exercise.repositories.base_repository import BaseRepository


class JoinListRepository(BaseRepository):

    def find_by_exgroup_and_member_and_status(
        self, exgroup: Exgroup, member: Member, status: Status,
    ) -> Optional[JoinList]:
        return (
            self.db.query(JoinList)
            .filter(
                JoinList.exgroup_id == exgroup.exgroup_id,
                JoinList.member_id == member.member_id,
                JoinList.status == status,
            )
            .first()
        )

    def find_latest_by_exgroup_and_member(self, exgroup: Exgroup, member: Member) -> Optional[JoinList]:
        """Most recent membership of the member in the group, whatever its status."""
        return (
            self.db.query(JoinList)
            .filter(JoinList.exgroup_id == exgroup.exgroup_id, JoinList.member_id == member.member_id)
            .order_by(JoinList.join_list_id.desc())
            .first()
        )

    def exists_by_exgroup_and_member_and_join_type_and_status(
        self, exgroup: Exgroup, member: Member, join_type: JoinType, status: Status,
    ) -> bool:
        return (
            self.db.query(JoinList.join_list_id)
            .filter(
                JoinList.exgroup_id == exgroup.exgroup_id,
                JoinList.member_id == member.member_id,
                JoinList.join_type == join_type,
                JoinList.status == status,
            )
            .first()
        ) is not None

    def exists_by_exgroup_and_status(self, exgroup: Exgroup, status: Status) -> bool:
        return (
            self.db.query(JoinList.join_list_id)
            .filter(JoinList.exgroup_id == exgroup.exgroup_id, JoinList.status == status)
            .first()
        ) is not None

    def count_active_by_exgroup(self, exgroup: Exgroup) -> int:
        return (
            self.db.query(JoinList)
            .filter(JoinList.exgroup_id == exgroup.exgroup_id, JoinList.status == Status.active)
            .count()
        )

    def find_first_by_exgroup_and_status_order_by_created_at(
        self, exgroup: Exgroup, status: Status,
    ) -> Optional[JoinList]:
        """Earliest joined membership; join_list_id breaks created_at ties."""
        return (
            self.db.query(JoinList)
            .filter(JoinList.exgroup_id == exgroup.exgroup_id, JoinList.status == status)
            .order_by(JoinList.created_at.asc(), JoinList.join_list_id.asc())
            .first()
        )

    def find_all_by_exgroup(self, exgroup: Exgroup) -> list[JoinList]:
        return (
            self.db.query(JoinList)
            .filter(JoinList.exgroup_id == exgroup.exgroup_id)
            .order_by(JoinList.created_at.asc(), JoinList.join_list_id.asc())
            .all()
        )

    def find_all_by_member_and_status(self, member: Member, status: Status) -> list[JoinList]:
        return (
            self.db.query(JoinList)
            .filter(JoinList.member_id == member.member_id, JoinList.status == status)
            .all()
        )
