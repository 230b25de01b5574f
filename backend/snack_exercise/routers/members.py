"""Member API routes."""
from fastapi import APIRouter, Depends, status

from snack_exercise.dependencies import get_current_email, get_member_service
from snack_exercise.schemas.member import MemberCreate, MemberOut
from snack_exercise.services.member_service import MemberService

router = APIRouter()


@router.post("/", response_model=MemberOut, status_code=status.HTTP_201_CREATED)
def register_member(payload: MemberCreate, service: MemberService = Depends(get_member_service)):
    """Register a new member."""
    return service.register(payload)


@router.get("/me", response_model=MemberOut)
def get_me(email: str = Depends(get_current_email), service: MemberService = Depends(get_member_service)):
    return service.get_me(email)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def withdraw_member(email: str = Depends(get_current_email), service: MemberService = Depends(get_member_service)):
    """Withdraw: leave every exgroup, then deactivate the member."""
    service.withdraw(email)
