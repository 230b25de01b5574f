"""Pydantic schemas for Members."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from snack_exercise.models.base import Status


class MemberCreate(BaseModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    nickname: str = Field(min_length=1, max_length=50)
    profile_image: Optional[str] = None


class MemberOut(BaseModel):
    member_id: int
    email: str
    nickname: str
    profile_image: Optional[str] = None
    status: Status
    created_at: datetime

    model_config = {"from_attributes": True}
