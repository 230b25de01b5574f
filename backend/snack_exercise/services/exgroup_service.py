"""Exgroup service: host permissions, membership rules and host succession.

Responsibilities:
- Create groups with a join code unique among active groups
- Host-only update / start / member removal
- max_member_num may never drop below the active member count
- Join by code (one active membership per member and group, capacity)
- Leaving: when the host leaves, the earliest-joined remaining member
  becomes host; when the last member leaves, the group is deactivated

Every write method runs inside one ``transaction`` scope, so a raised
domain exception rolls back everything the method touched.
"""
import logging
from datetime import datetime

import pytz
from sqlalchemy.orm import Session

from snack_exercise.config import settings
from snack_exercise.database import transaction
from snack_exercise.exceptions import (
    AlreadyJoinedExgroupException,
    ExgroupCodeGenerationException,
    ExgroupFullException,
    ExgroupNotFoundException,
    JoinListNotFoundException,
    MemberNotFoundException,
    NotExgroupHostException,
    NotExgroupMemberException,
)
from snack_exercise.models.base import Status
from snack_exercise.models.exgroup import Exgroup
from snack_exercise.models.join_list import JoinList, JoinType
from snack_exercise.models.member import Member
from snack_exercise.repositories.exgroup_repository import ExgroupRepository
from snack_exercise.repositories.join_list_repository import JoinListRepository
from snack_exercise.repositories.member_repository import MemberRepository
from snack_exercise.schemas.exgroup import (
    ExgroupCreate,
    ExgroupCreateOut,
    ExgroupJoin,
    ExgroupMemberOut,
    ExgroupOut,
    ExgroupUpdate,
)
from snack_exercise.services.exgroup_code import generate_exgroup_code

logger = logging.getLogger(__name__)


class ExgroupService:

    def __init__(
        self,
        db: Session,
        exgroup_repository: ExgroupRepository,
        member_repository: MemberRepository,
        join_list_repository: JoinListRepository,
    ):
        self.db = db
        self.exgroup_repository = exgroup_repository
        self.member_repository = member_repository
        self.join_list_repository = join_list_repository

    # ── lookups ────────────────────────────────────────────────────

    def _get_active_member(self, email: str) -> Member:
        member = self.member_repository.find_by_email_and_status(email, Status.active)
        if member is None:
            raise MemberNotFoundException()
        return member

    def _get_active_exgroup(self, exgroup_id: int) -> Exgroup:
        exgroup = self.exgroup_repository.find_by_id_and_status(exgroup_id, Status.active)
        if exgroup is None:
            raise ExgroupNotFoundException()
        return exgroup

    def _check_host(self, exgroup: Exgroup, member: Member) -> None:
        if not self.join_list_repository.exists_by_exgroup_and_member_and_join_type_and_status(
            exgroup, member, JoinType.host, Status.active,
        ):
            raise NotExgroupHostException()

    def _generate_unique_code(self) -> str:
        for attempt in range(1, settings.EXGROUP_CODE_MAX_ATTEMPTS + 1):
            code = generate_exgroup_code(settings.EXGROUP_CODE_LENGTH)
            if not self.exgroup_repository.exists_by_code(code):
                logger.info("Generated exgroup code %s (attempt %d)", code, attempt)
                return code
            logger.warning("Exgroup code collision on %s (attempt %d)", code, attempt)
        raise ExgroupCodeGenerationException()

    # ── operations ─────────────────────────────────────────────────

    def create(self, payload: ExgroupCreate, email: str) -> ExgroupCreateOut:
        """Create an exgroup; the creator becomes its host."""
        with transaction(self.db):
            member = self._get_active_member(email)
            code = self._generate_unique_code()

            exgroup = Exgroup(**payload.model_dump(), code=code, status=Status.active)
            self.exgroup_repository.save(exgroup)

            self.join_list_repository.save(JoinList(
                member=member,
                exgroup=exgroup,
                join_type=JoinType.host,
                status=Status.active,
                out_count=0,
            ))
            result = ExgroupCreateOut.from_entity(exgroup)

        logger.info("Created exgroup '%s' (%s) hosted by member %s", result.name, result.exgroup_id, member.member_id)
        return result

    def read(self, exgroup_id: int) -> ExgroupOut:
        return ExgroupOut.from_entity(self._get_active_exgroup(exgroup_id))

    def get_members(self, exgroup_id: int) -> list[ExgroupMemberOut]:
        """All memberships of the group, in join order, with their role and status."""
        exgroup = self._get_active_exgroup(exgroup_id)
        return [
            ExgroupMemberOut.from_join_list(join_list)
            for join_list in self.join_list_repository.find_all_by_exgroup(exgroup)
        ]

    def update(self, exgroup_id: int, email: str, payload: ExgroupUpdate) -> ExgroupOut:
        with transaction(self.db):
            exgroup = self._get_active_exgroup(exgroup_id)
            member = self._get_active_member(email)
            self._check_host(exgroup, member)

            fields = payload.model_dump(exclude_unset=True, exclude_none=True)
            if "max_member_num" in fields:
                current_member_num = self.join_list_repository.count_active_by_exgroup(exgroup)
                exgroup.update_max_member_num(current_member_num, fields.pop("max_member_num"))
            exgroup.update(fields)
            self.exgroup_repository.save(exgroup)
            result = ExgroupOut.from_entity(exgroup)

        logger.info("Updated exgroup %s by host %s", exgroup_id, member.member_id)
        return result

    def join(self, payload: ExgroupJoin, email: str) -> ExgroupCreateOut:
        """Join the active group holding ``payload.code`` as a MEMBER."""
        with transaction(self.db):
            member = self._get_active_member(email)
            exgroup = self.exgroup_repository.find_by_code_and_status(payload.code, Status.active)
            if exgroup is None:
                raise ExgroupNotFoundException("No active exgroup uses this code")

            join_list = self.join_list_repository.find_latest_by_exgroup_and_member(exgroup, member)
            if join_list is not None and join_list.is_active:
                raise AlreadyJoinedExgroupException()
            if self.join_list_repository.count_active_by_exgroup(exgroup) >= exgroup.max_member_num:
                raise ExgroupFullException()

            # one row per member and group, so out_count survives leaving and removal
            if join_list is None:
                join_list = JoinList(
                    member=member,
                    exgroup=exgroup,
                    join_type=JoinType.member,
                    status=Status.active,
                    out_count=0,
                )
            else:
                join_list.rejoin()
            self.join_list_repository.save(join_list)
            result = ExgroupCreateOut.from_entity(exgroup)

        logger.info("Member %s joined exgroup %s", member.member_id, result.exgroup_id)
        return result

    # TODO: advance the mission rotation when the removed member is the one currently on mission
    def remove_member(self, exgroup_id: int, member_id: int, email: str) -> None:
        """Host kicks an active MEMBER out; the membership's out_count goes up."""
        with transaction(self.db):
            exgroup = self._get_active_exgroup(exgroup_id)
            current_member = self._get_active_member(email)
            self._check_host(exgroup, current_member)

            target_member = self.member_repository.find_by_id_and_status(member_id, Status.active)
            if target_member is None:
                raise MemberNotFoundException()
            if not self.join_list_repository.exists_by_exgroup_and_member_and_join_type_and_status(
                exgroup, target_member, JoinType.member, Status.active,
            ):
                raise NotExgroupMemberException()

            join_list = self.join_list_repository.find_by_exgroup_and_member_and_status(
                exgroup, target_member, Status.active,
            )
            if join_list is None:
                raise JoinListNotFoundException()

            join_list.deactivate()
            join_list.add_one_out_count()
            self.join_list_repository.save(join_list)

        logger.info("Host %s removed member %s from exgroup %s", current_member.member_id, member_id, exgroup_id)

    def leave(self, exgroup_id: int, email: str) -> None:
        with transaction(self.db):
            member = self._get_active_member(email)
            exgroup = self._get_active_exgroup(exgroup_id)
            join_list = self.join_list_repository.find_by_exgroup_and_member_and_status(
                exgroup, member, Status.active,
            )
            if join_list is None:
                raise JoinListNotFoundException()
            self._leave(exgroup, join_list)

        logger.info("Member %s left exgroup %s", member.member_id, exgroup_id)

    def leave_all(self, member: Member) -> None:
        """Leave every group the member is active in.

        Runs inside the caller's transaction.
        """
        for join_list in self.join_list_repository.find_all_by_member_and_status(member, Status.active):
            self._leave(join_list.exgroup, join_list)

    def _leave(self, exgroup: Exgroup, join_list: JoinList) -> None:
        was_host = join_list.is_host
        join_list.deactivate()
        self.join_list_repository.save(join_list)

        if not self.join_list_repository.exists_by_exgroup_and_status(exgroup, Status.active):
            exgroup.deactivate()
            self.exgroup_repository.save(exgroup)
            logger.info("Exgroup %s has no active members left, deactivated", exgroup.exgroup_id)
            return

        if was_host:
            successor = self.join_list_repository.find_first_by_exgroup_and_status_order_by_created_at(
                exgroup, Status.active,
            )
            if successor is None:
                raise JoinListNotFoundException("No active member left to take over as host")
            successor.promote_to_host()
            self.join_list_repository.save(successor)
            logger.info("Member %s is the new host of exgroup %s", successor.member_id, exgroup.exgroup_id)

    def start(self, exgroup_id: int, email: str) -> ExgroupOut:
        with transaction(self.db):
            member = self._get_active_member(email)
            exgroup = self._get_active_exgroup(exgroup_id)
            self._check_host(exgroup, member)

            exgroup.start(datetime.now(pytz.timezone(settings.TIMEZONE)))
            self.exgroup_repository.save(exgroup)
            result = ExgroupOut.from_entity(exgroup)

        logger.info("Exgroup %s started by host %s", exgroup_id, member.member_id)
        return result
