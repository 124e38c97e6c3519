# app/services/taxonomy_service.py
"""
Location and employment type taxonomies for job postings.

Both tables are small admin-managed lookup lists, hard-deleted on request.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConflictError, NotFoundError, service_operation
from app.models import EmploymentType, JobPosting, Location

logger = logging.getLogger(__name__)


class TaxonomyService:
    """Create / list / delete for one lookup table referenced by job postings."""

    def __init__(self, model: type, label: str, posting_column):
        self.model = model
        self.label = label
        self.posting_column = posting_column

    def create(self, db: Session, name: str):
        with service_operation(logger, f"create {self.label}"):
            if db.query(self.model).filter(self.model.name == name).first():
                raise ConflictError(f"{self.label.capitalize()} '{name}' already exists")

            entry = self.model(name=name)
            db.add(entry)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ConflictError(f"{self.label.capitalize()} '{name}' already exists")
            db.refresh(entry)

            logger.info(f"Created {self.label} {entry.id} ({name})")
            return entry

    def list_all(self, db: Session) -> list:
        with service_operation(logger, f"list {self.label}"):
            return db.query(self.model).order_by(self.model.name).all()

    def get(self, db: Session, entry_id: int):
        entry = db.query(self.model).filter(self.model.id == entry_id).first()
        if not entry:
            raise NotFoundError(f"{self.label.capitalize()} {entry_id} not found")
        return entry

    def delete(self, db: Session, entry_id: int) -> None:
        """Remove an entry that no job posting references, soft-deleted ones included."""
        with service_operation(logger, f"delete {self.label}"):
            entry = self.get(db, entry_id)

            in_use = db.query(JobPosting.id).filter(self.posting_column == entry_id).first()
            if in_use:
                raise ConflictError(f"{self.label.capitalize()} {entry_id} is still used by job postings")

            db.delete(entry)
            db.commit()
            logger.info(f"Deleted {self.label} {entry_id}")


location_service = TaxonomyService(Location, "location", JobPosting.location_id)
employment_type_service = TaxonomyService(EmploymentType, "employment type", JobPosting.employment_type_id)
