"""Soft-delete status and audit timestamps shared by every entity."""
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum as SAEnum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Status(str, enum.Enum):
    active = "ACTIVE"
    inactive = "INACTIVE"


class StatusMixin:
    """Rows are deactivated, never deleted."""

    status = Column(SAEnum(Status), nullable=False, default=Status.active)
    # Python-side default keeps microseconds, join order depends on it
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == Status.active

    def activate(self) -> None:
        self.status = Status.active

    def deactivate(self) -> None:
        self.status = Status.inactive
