"""Member service: registration, profile and withdrawal."""
import logging

from sqlalchemy.orm import Session

from snack_exercise.database import transaction
from snack_exercise.exceptions import MemberAlreadyExistsException, MemberNotFoundException
from snack_exercise.models.base import Status
from snack_exercise.models.member import Member
from snack_exercise.repositories.member_repository import MemberRepository
from snack_exercise.schemas.member import MemberCreate, MemberOut
from snack_exercise.services.exgroup_service import ExgroupService

logger = logging.getLogger(__name__)


class MemberService:

    def __init__(self, db: Session, member_repository: MemberRepository, exgroup_service: ExgroupService):
        self.db = db
        self.member_repository = member_repository
        self.exgroup_service = exgroup_service

    def register(self, payload: MemberCreate) -> MemberOut:
        """Register a new member, or bring a withdrawn one back under the same id."""
        with transaction(self.db):
            member = self.member_repository.find_by_email(payload.email)
            if member is not None and member.is_active:
                raise MemberAlreadyExistsException()
            if member is None:
                member = Member(**payload.model_dump(), status=Status.active)
            else:
                member.activate()
                member.nickname = payload.nickname
                member.profile_image = payload.profile_image
                logger.info("Reactivating withdrawn member %s", member.member_id)
            self.member_repository.save(member)
            result = MemberOut.model_validate(member)

        logger.info("Registered member %s (%s)", result.member_id, result.nickname)
        return result

    def get_me(self, email: str) -> MemberOut:
        member = self.member_repository.find_by_email_and_status(email, Status.active)
        if member is None:
            raise MemberNotFoundException()
        return MemberOut.model_validate(member)

    def withdraw(self, email: str) -> None:
        """Deactivate the member after leaving every group, handing over any host role."""
        with transaction(self.db):
            member = self.member_repository.find_by_email_and_status(email, Status.active)
            if member is None:
                raise MemberNotFoundException()
            self.exgroup_service.leave_all(member)
            member.deactivate()
            self.member_repository.save(member)

        logger.info("Member %s withdrew", member.member_id)
