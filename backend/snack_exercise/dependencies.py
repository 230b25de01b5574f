"""FastAPI dependencies: caller identity and per-request services."""
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from snack_exercise.database import get_db
from snack_exercise.repositories.exercise_repository import ExerciseRepository
from snack_exercise.repositories.exgroup_repository import ExgroupRepository
from snack_exercise.repositories.join_list_repository import JoinListRepository
from snack_exercise.repositories.member_repository import MemberRepository
from snack_exercise.services.exercise_service import ExerciseService
from snack_exercise.services.exgroup_service import ExgroupService
from snack_exercise.services.member_service import MemberService


def get_current_email(x_member_email: str = Header(..., description="Caller email, resolved by the auth gateway")) -> str:
    return x_member_email


def get_exgroup_service(db: Session = Depends(get_db)) -> ExgroupService:
    return ExgroupService(
        db=db,
        exgroup_repository=ExgroupRepository(db),
        member_repository=MemberRepository(db),
        join_list_repository=JoinListRepository(db),
    )


def get_member_service(
    db: Session = Depends(get_db),
    exgroup_service: ExgroupService = Depends(get_exgroup_service),
) -> MemberService:
    return MemberService(db=db, member_repository=MemberRepository(db), exgroup_service=exgroup_service)


def get_exercise_service(db: Session = Depends(get_db)) -> ExerciseService:
    return ExerciseService(exercise_repository=ExerciseRepository(db))
