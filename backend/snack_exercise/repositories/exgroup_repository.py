"""Exgroup queries."""
from typing import Optional

from snack_exercise.models.base import Status
from snack_exercise.models.exgroup import Exgroup
from snack_exercise.repositories.base_repository import BaseRepository


class ExgroupRepository(BaseRepository):

    def find_by_id_and_status(self, exgroup_id: int, status: Status) -> Optional[Exgroup]:
        return (
            self.db.query(Exgroup)
            .filter(Exgroup.exgroup_id == exgroup_id, Exgroup.status == status)
            .first()
        )

    def find_by_code_and_status(self, code: str, status: Status) -> Optional[Exgroup]:
        return (
            self.db.query(Exgroup)
            .filter(Exgroup.code == code, Exgroup.status == status)
            .first()
        )

    def exists_by_code(self, code: str) -> bool:
        """True if an active exgroup already uses this join code."""
        return (
            self.db.query(Exgroup.exgroup_id)
            .filter(Exgroup.code == code, Exgroup.status == Status.active)
            .first()
        ) is not None
