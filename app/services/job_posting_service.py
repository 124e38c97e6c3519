# app/services/job_posting_service.py
"""
Job postings.

On top of the shared content rules:
- postings must reference an existing location and employment type
- public reads only see postings whose status is active
- listing supports search / taxonomy / salary filters and reports a total
- every successful detail read bumps view_count
"""

import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, joinedload

from app.errors import NotFoundError, ValidationFailed, service_operation
from app.models import EmploymentType, JobPosting, ListingStatus, Location
from app.services.content_service import ContentService

logger = logging.getLogger(__name__)


class JobPostingService(ContentService):
    def __init__(self):
        super().__init__(JobPosting, "job posting", ListingStatus.ACTIVE.value)

    def _published(self, db: Session) -> Query:
        return (
            self._visible(db)
            .filter(JobPosting.status == ListingStatus.ACTIVE.value)
            .options(
                joinedload(JobPosting.author),
                joinedload(JobPosting.location),
                joinedload(JobPosting.employment_type),
            )
        )

    def _filtered(
        self,
        query: Query,
        search: str | None = None,
        location_id: int | None = None,
        employment_type_id: int | None = None,
        min_salary: float | None = None,
        max_salary: float | None = None,
        **_: Any,
    ) -> Query:
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(JobPosting.title.ilike(pattern), JobPosting.company_name.ilike(pattern))
            )
        if location_id:
            query = query.filter(JobPosting.location_id == location_id)
        if employment_type_id:
            query = query.filter(JobPosting.employment_type_id == employment_type_id)
        if min_salary is not None:
            query = query.filter(JobPosting.annual_salary >= min_salary)
        if max_salary is not None:
            query = query.filter(JobPosting.annual_salary <= max_salary)
        return query

    def _validate(self, db: Session, item: JobPosting) -> None:
        if not db.get(Location, item.location_id):
            raise NotFoundError(f"Location {item.location_id} not found")
        if not db.get(EmploymentType, item.employment_type_id):
            raise NotFoundError(f"Employment type {item.employment_type_id} not found")
        if item.recruitment_end_date < item.recruitment_start_date:
            raise ValidationFailed("Recruitment end date is before its start date")

    def _after_read(self, db: Session, item: JobPosting) -> None:
        # Separate UPDATE after the read; concurrent reads may race on the count
        db.query(JobPosting).filter(JobPosting.id == item.id).update(
            {JobPosting.view_count: JobPosting.view_count + 1},
            synchronize_session=False,
        )
        db.commit()

    def list_with_total(
        self,
        db: Session,
        page: int = 1,
        limit: int = 10,
        **filters: Any,
    ) -> tuple[list[JobPosting], int]:
        """Active postings, newest first, plus the unpaginated match count."""
        with service_operation(logger, "list job posting"):
            query = self._filtered(self._published(db), **filters)
            total = query.order_by(None).count()
            items = (
                query.order_by(JobPosting.created_at.desc(), JobPosting.id.desc())
                .offset((page - 1) * limit)
                .limit(limit)
                .all()
            )
            return items, total

    def get(self, db: Session, item_id: int) -> JobPosting:
        with service_operation(logger, "get job posting"):
            item = self._published(db).filter(JobPosting.id == item_id).first()
            if not item:
                raise NotFoundError(f"Job posting {item_id} not found")
            self._after_read(db, item)
            return item


job_posting_service = JobPostingService()
