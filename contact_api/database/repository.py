from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_api.database.models import FeedbackItem, Submission
from contact_api.exceptions import StoreError
from contact_api.utils.logging import logger


RecordT = TypeVar("RecordT", Submission, FeedbackItem)


class Repository(Generic[RecordT]):
    """Insert/find/count access to a single collection.

    Records are append-only: there is no update or delete.
    """

    def __init__(self, db: Session, model: type[RecordT]) -> None:
        self.db = db
        self.model = model

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    def insert(self, record: RecordT) -> str:
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Insert into %s failed", self.collection)
            raise StoreError("insert", self.collection, cause=exc) from exc
        return record.id

    def find(self, *, newest_first: bool = True, limit: int | None = None) -> list[RecordT]:
        order = self.model.created_at.desc() if newest_first else self.model.created_at.asc()
        stmt = select(self.model).order_by(order)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Find on %s failed", self.collection)
            raise StoreError("find", self.collection, cause=exc) from exc

    def count(self) -> int:
        try:
            return int(self.db.execute(select(func.count(self.model.id))).scalar() or 0)
        except SQLAlchemyError as exc:
            logger.exception("Count on %s failed", self.collection)
            raise StoreError("count", self.collection, cause=exc) from exc
