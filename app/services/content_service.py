# app/services/content_service.py
"""
Generic CRUD for authored content.

One ContentService instance per content table. Every instance enforces the
same rules:
- reads only see rows that are not soft-deleted
- only the author may update or delete a row
- updates apply a typed patch field by field
- deletes are soft; the retention sweeper purges later
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel
from sqlalchemy.orm import Query, Session

from app.errors import ForbiddenError, NotFoundError, ServiceError, service_operation
from app.models import Account, Magazine, Post, PostStatus, utcnow

logger = logging.getLogger(__name__)


def _column_value(value: Any) -> Any:
    """Store enum members by value."""
    if isinstance(value, Enum):
        return value.value
    return value


class ContentService:
    """
    CRUD with ownership checks for one content model.

    Subclasses customize filtering, validation and read side effects through
    the _filtered, _validate and _after_read hooks.
    """

    def __init__(self, model: type, label: str, default_status: str):
        self.model = model
        self.label = label
        self.default_status = default_status

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _visible(self, db: Session) -> Query:
        return db.query(self.model).filter(self.model.deleted_at.is_(None))

    def _filtered(self, query: Query, **filters: Any) -> Query:
        return query

    def _find(self, db: Session, item_id: int):
        item = self._visible(db).filter(self.model.id == item_id).first()
        if not item:
            raise NotFoundError(f"{self.label.capitalize()} {item_id} not found")
        return item

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _validate(self, db: Session, item) -> None:
        """Cross-field checks run before create and update are committed."""

    def _after_read(self, db: Session, item) -> None:
        """Side effects of a successful single-item read."""

    def _check_author(self, item, acting: Account, action: str) -> None:
        if item.author_id != acting.id:
            raise ForbiddenError(f"You can only {action} your own {self.label}")

    def _apply_patch(self, item, patch: BaseModel) -> list[str]:
        """
        Copy the fields the client sent onto the row.

        Explicit nulls are ignored for NOT NULL columns.
        """
        columns = self.model.__table__.columns
        applied = []
        for field, value in patch.model_dump(exclude_unset=True).items():
            if value is None and not columns[field].nullable:
                continue
            setattr(item, field, _column_value(value))
            applied.append(field)
        return applied

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create(self, db: Session, payload: BaseModel, author: Account):
        with service_operation(logger, f"create {self.label}"):
            data = {key: _column_value(value) for key, value in payload.model_dump().items()}
            data.setdefault("status", self.default_status)

            item = self.model(**data, author_id=author.id)
            self._validate(db, item)

            db.add(item)
            db.commit()
            db.refresh(item)

            logger.info(
                f"Created {self.label} {item.id}",
                extra={"item_id": item.id, "account_id": author.id},
            )
            return item

    def list(self, db: Session, page: int = 1, limit: int = 10, **filters: Any) -> list:
        """Visible rows, newest first, offset = (page - 1) * limit."""
        with service_operation(logger, f"list {self.label}"):
            query = self._filtered(self._visible(db), **filters)
            return (
                query.order_by(self.model.created_at.desc(), self.model.id.desc())
                .offset((page - 1) * limit)
                .limit(limit)
                .all()
            )

    def get(self, db: Session, item_id: int):
        with service_operation(logger, f"get {self.label}"):
            item = self._find(db, item_id)
            self._after_read(db, item)
            return item

    def update(self, db: Session, item_id: int, patch: BaseModel, acting: Account):
        with service_operation(logger, f"update {self.label}"):
            item = self._find(db, item_id)
            self._check_author(item, acting, "update")

            applied = self._apply_patch(item, patch)
            try:
                self._validate(db, item)
            except ServiceError:
                # Discard the patched values
                db.rollback()
                raise

            db.add(item)
            db.commit()
            db.refresh(item)

            logger.info(
                f"Updated {self.label} {item.id} ({', '.join(applied) or 'no fields'})",
                extra={"item_id": item.id, "account_id": acting.id},
            )
            return item

    def delete(self, db: Session, item_id: int, acting: Account) -> None:
        with service_operation(logger, f"delete {self.label}"):
            item = self._find(db, item_id)
            self._check_author(item, acting, "delete")
            self._soft_delete(db, item, acting)

    def _soft_delete(self, db: Session, item, acting: Account) -> None:
        item.soft_delete(utcnow())
        db.add(item)
        db.commit()

        logger.info(
            f"Soft deleted {self.label} {item.id}",
            extra={"item_id": item.id, "account_id": acting.id},
        )


post_service = ContentService(Post, "post", PostStatus.DRAFT.value)
magazine_service = ContentService(Magazine, "magazine", PostStatus.DRAFT.value)
