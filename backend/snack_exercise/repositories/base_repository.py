"""Shared session plumbing for repositories."""
from typing import TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: T) -> T:
        """Add the entity and flush so generated ids and defaults are populated."""
        self.db.add(entity)
        self.db.flush()
        return entity
