"""Pydantic schemas for Exgroups."""
from __future__ import annotations
from datetime import datetime, time
from typing import Optional
from pydantic import BaseModel, Field

from snack_exercise.models.base import Status
from snack_exercise.models.exgroup import Exgroup
from snack_exercise.models.join_list import JoinList, JoinType


class ExgroupCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    emoji: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    max_member_num: int = Field(ge=1)
    goal_relay_num: int = Field(ge=1)
    start_time: time
    end_time: time
    penalty: Optional[str] = None
    mission_interval_time: int = Field(ge=1)
    check_interval_time: int = Field(ge=1)
    check_max_num: int = Field(ge=1)


class ExgroupUpdate(BaseModel):
    """Partial update: only fields that are sent get applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    emoji: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    max_member_num: Optional[int] = Field(default=None, ge=1)
    goal_relay_num: Optional[int] = Field(default=None, ge=1)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    penalty: Optional[str] = None
    mission_interval_time: Optional[int] = Field(default=None, ge=1)
    check_interval_time: Optional[int] = Field(default=None, ge=1)
    check_max_num: Optional[int] = Field(default=None, ge=1)


class ExgroupCreateOut(BaseModel):
    exgroup_id: int
    name: str

    @staticmethod
    def from_entity(exgroup: Exgroup) -> ExgroupCreateOut:
        return ExgroupCreateOut(exgroup_id=exgroup.exgroup_id, name=exgroup.name)


class ExgroupOut(BaseModel):
    exgroup_id: int
    name: str
    emoji: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    max_member_num: int
    goal_relay_num: int
    start_time: time
    end_time: time
    penalty: Optional[str] = None
    code: str
    mission_interval_time: int
    check_interval_time: int
    check_max_num: int
    started_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @staticmethod
    def from_entity(exgroup: Exgroup) -> ExgroupOut:
        return ExgroupOut.model_validate(exgroup)


class ExgroupJoin(BaseModel):
    code: str = Field(min_length=1)


class ExgroupMemberOut(BaseModel):
    member_id: int
    profile_image: Optional[str] = None
    nickname: str
    join_type: JoinType
    status: Status

    @staticmethod
    def from_join_list(join_list: JoinList) -> ExgroupMemberOut:
        return ExgroupMemberOut(
            member_id=join_list.member.member_id,
            profile_image=join_list.member.profile_image,
            nickname=join_list.member.nickname,
            join_type=join_list.join_type,
            status=join_list.status,
        )
