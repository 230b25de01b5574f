"""Exgroup API routes: delegates to ExgroupService for rule enforcement."""
from fastapi import APIRouter, Depends, status

from snack_exercise.dependencies import get_current_email, get_exgroup_service
from snack_exercise.schemas.exgroup import (
    ExgroupCreate,
    ExgroupCreateOut,
    ExgroupJoin,
    ExgroupMemberOut,
    ExgroupOut,
    ExgroupUpdate,
)
from snack_exercise.services.exgroup_service import ExgroupService

router = APIRouter()


@router.post("/", response_model=ExgroupCreateOut, status_code=status.HTTP_201_CREATED)
def create_exgroup(
    payload: ExgroupCreate,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Create a new exgroup. The caller becomes its host."""
    return service.create(payload, email)


@router.post("/join", response_model=ExgroupCreateOut, status_code=status.HTTP_201_CREATED)
def join_exgroup(
    payload: ExgroupJoin,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Join an exgroup with its join code."""
    return service.join(payload, email)


@router.get("/{exgroup_id}", response_model=ExgroupOut)
def get_exgroup(exgroup_id: int, service: ExgroupService = Depends(get_exgroup_service)):
    return service.read(exgroup_id)


@router.patch("/{exgroup_id}", response_model=ExgroupOut)
def update_exgroup(
    exgroup_id: int,
    payload: ExgroupUpdate,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Update an exgroup (host only, partial update)."""
    return service.update(exgroup_id, email, payload)


@router.get("/{exgroup_id}/members", response_model=list[ExgroupMemberOut])
def list_exgroup_members(exgroup_id: int, service: ExgroupService = Depends(get_exgroup_service)):
    """List every membership of the exgroup in join order."""
    return service.get_members(exgroup_id)


@router.delete("/{exgroup_id}/members/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_exgroup_member(
    exgroup_id: int,
    member_id: int,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Host removes a member from the exgroup."""
    service.remove_member(exgroup_id, member_id, email)


@router.post("/{exgroup_id}/leave", status_code=status.HTTP_204_NO_CONTENT)
def leave_exgroup(
    exgroup_id: int,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Leave the exgroup. A leaving host hands the role to the earliest-joined member."""
    service.leave(exgroup_id, email)


@router.post("/{exgroup_id}/start", response_model=ExgroupOut)
def start_exgroup(
    exgroup_id: int,
    email: str = Depends(get_current_email),
    service: ExgroupService = Depends(get_exgroup_service),
):
    """Start the exgroup (host only)."""
    return service.start(exgroup_id, email)
