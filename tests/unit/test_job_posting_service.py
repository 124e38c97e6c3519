# tests/unit/test_job_posting_service.py
"""Unit tests for job posting service."""

from datetime import date

import pytest

from app.errors import ForbiddenError, NotFoundError, ValidationFailed
from app.models import JobPosting, UserRole
from app.schemas.job_postings import JobPostingCreate, JobPostingResponse, JobPostingUpdate
from app.services import employment_type_service, job_posting_service, location_service


@pytest.fixture
def taxonomy(db_session):
    seoul = location_service.create(db_session, "Seoul")
    busan = location_service.create(db_session, "Busan")
    full_time = employment_type_service.create(db_session, "Full-time")
    return {"seoul": seoul.id, "busan": busan.id, "full_time": full_time.id}


@pytest.fixture
def editor(make_account):
    return make_account(role=UserRole.EDITOR)


def _payload(taxonomy, **overrides):
    data = {
        "title": "Tea Sommelier",
        "company_name": "Green Leaf",
        "location_id": taxonomy["seoul"],
        "detail_location": "Gangnam-gu 12",
        "description": "Curate the tea menu",
        "recruitment_start_date": date(2026, 3, 1),
        "recruitment_end_date": date(2026, 3, 31),
        "job_title": "Sommelier",
        "employment_type_id": taxonomy["full_time"],
        "annual_salary": 42000.5,
        "preferred_skills": ["tasting"],
    }
    data.update(overrides)
    return JobPostingCreate(**data)


class TestCreate:
    def test_creates_active_posting(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        assert posting.status == "active"
        assert posting.location.name == "Seoul"
        assert posting.employment_type.name == "Full-time"
        assert posting.annual_salary == 42000.5

    def test_response_projection(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        response = JobPostingResponse.from_model(posting)

        assert response.location == "Seoul"
        assert response.employment_type == "Full-time"
        assert response.recruitment_period.end == date(2026, 3, 31)
        assert response.author.email == editor.email
        assert response.views == 0

    def test_unknown_location(self, db_session, taxonomy, editor):
        with pytest.raises(NotFoundError) as exc_info:
            job_posting_service.create(db_session, _payload(taxonomy, location_id=999), editor)

        assert exc_info.value.message == "Location 999 not found"

    def test_unknown_employment_type(self, db_session, taxonomy, editor):
        with pytest.raises(NotFoundError):
            job_posting_service.create(db_session, _payload(taxonomy, employment_type_id=999), editor)


class TestListWithTotal:
    def test_filters_and_total(self, db_session, taxonomy, editor):
        job_posting_service.create(db_session, _payload(taxonomy, title="Barista"), editor)
        job_posting_service.create(
            db_session, _payload(taxonomy, title="Tea Buyer", location_id=taxonomy["busan"]), editor
        )
        job_posting_service.create(
            db_session, _payload(taxonomy, title="Tea Taster", annual_salary=90000), editor
        )

        items, total = job_posting_service.list_with_total(db_session, search="tea")
        assert total == 2
        assert {p.title for p in items} == {"Tea Buyer", "Tea Taster"}

        items, total = job_posting_service.list_with_total(db_session, location_id=taxonomy["busan"])
        assert [p.title for p in items] == ["Tea Buyer"]

        items, total = job_posting_service.list_with_total(db_session, min_salary=50000)
        assert [p.title for p in items] == ["Tea Taster"]

        items, total = job_posting_service.list_with_total(db_session, max_salary=50000)
        assert total == 2

    def test_search_matches_company_name(self, db_session, taxonomy, editor):
        job_posting_service.create(db_session, _payload(taxonomy, title="Cashier", company_name="Oolong House"), editor)

        items, total = job_posting_service.list_with_total(db_session, search="OOLONG")

        assert total == 1

    def test_total_ignores_pagination(self, db_session, taxonomy, editor):
        for i in range(3):
            job_posting_service.create(db_session, _payload(taxonomy, title=f"Role {i}"), editor)

        items, total = job_posting_service.list_with_total(db_session, page=2, limit=2)

        assert total == 3
        assert len(items) == 1

    def test_hides_private_and_deleted(self, db_session, taxonomy, editor):
        job_posting_service.create(db_session, _payload(taxonomy, status="private"), editor)
        deleted = job_posting_service.create(db_session, _payload(taxonomy), editor)
        job_posting_service.delete(db_session, deleted.id, editor)

        items, total = job_posting_service.list_with_total(db_session)

        assert items == []
        assert total == 0


class TestGet:
    def test_each_read_counts_a_view(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        job_posting_service.get(db_session, posting.id)
        fetched = job_posting_service.get(db_session, posting.id)

        assert fetched.view_count == 2

    def test_private_posting_not_found(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy, status="private"), editor)

        with pytest.raises(NotFoundError) as exc_info:
            job_posting_service.get(db_session, posting.id)

        assert exc_info.value.message == f"Job posting {posting.id} not found"


class TestUpdate:
    def test_rejects_inverted_period(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        with pytest.raises(ValidationFailed):
            job_posting_service.update(
                db_session,
                posting.id,
                JobPostingUpdate(recruitment_end_date=date(2026, 2, 1)),
                editor,
            )

    def test_rejected_patch_is_not_committed_later(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        with pytest.raises(ValidationFailed):
            job_posting_service.update(
                db_session,
                posting.id,
                JobPostingUpdate(title="Broken", recruitment_end_date=date(2026, 2, 1)),
                editor,
            )
        # The session keeps serving later work
        db_session.commit()
        db_session.expire_all()

        stored = db_session.get(JobPosting, posting.id)
        assert stored.title == "Tea Sommelier"
        assert stored.recruitment_end_date == date(2026, 3, 31)

    def test_non_author_forbidden(self, db_session, taxonomy, editor, make_account):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)
        other = make_account(role=UserRole.EDITOR)

        with pytest.raises(ForbiddenError):
            job_posting_service.update(db_session, posting.id, JobPostingUpdate(title="Mine now"), other)

    def test_updates_salary(self, db_session, taxonomy, editor):
        posting = job_posting_service.create(db_session, _payload(taxonomy), editor)

        updated = job_posting_service.update(
            db_session, posting.id, JobPostingUpdate(annual_salary=50000), editor
        )

        assert updated.annual_salary == 50000
