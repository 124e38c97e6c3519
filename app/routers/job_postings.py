# app/routers/job_postings.py
"""
Job posting and taxonomy endpoints.

POST   /job-posting                       - Create a posting (editor)
GET    /job-posting                       - Active postings with filters + total
GET    /job-posting/location              - List locations
POST   /job-posting/location              - Create location (admin)
DELETE /job-posting/location/{id}         - Delete unused location (admin)
GET    /job-posting/employment-type       - List employment types
POST   /job-posting/employment-type       - Create employment type (admin)
DELETE /job-posting/employment-type/{id}  - Delete unused employment type (admin)
GET    /job-posting/{id}                  - Posting detail, counts a view
PATCH  /job-posting/{id}                  - Update own posting
DELETE /job-posting/{id}                  - Soft delete own posting

Taxonomy routes are registered before /{id} so they are matched first.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.auth import get_current_account, require_admin, require_editor
from app.database import get_db
from app.models import Account
from app.schemas.job_postings import (
    EmploymentTypeCreate,
    EmploymentTypeResponse,
    JobPostingCreate,
    JobPostingListResponse,
    JobPostingResponse,
    JobPostingUpdate,
    LocationCreate,
    LocationResponse,
)
from app.services import employment_type_service, job_posting_service, location_service

router = APIRouter(prefix="/job-posting", tags=["job-postings"])


# -----------------------------------------------------------------------------
# Locations
# -----------------------------------------------------------------------------


@router.get("/location", response_model=list[LocationResponse])
def list_locations(db: Session = Depends(get_db)) -> list[LocationResponse]:
    return [LocationResponse.model_validate(loc) for loc in location_service.list_all(db)]


@router.post("/location", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    payload: LocationCreate,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> LocationResponse:
    return LocationResponse.model_validate(location_service.create(db, payload.name))


@router.delete("/location/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(
    location_id: int,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> Response:
    location_service.delete(db, location_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------------------------------------------------------------
# Employment types
# -----------------------------------------------------------------------------


@router.get("/employment-type", response_model=list[EmploymentTypeResponse])
def list_employment_types(db: Session = Depends(get_db)) -> list[EmploymentTypeResponse]:
    return [EmploymentTypeResponse.model_validate(e) for e in employment_type_service.list_all(db)]


@router.post("/employment-type", response_model=EmploymentTypeResponse, status_code=status.HTTP_201_CREATED)
def create_employment_type(
    payload: EmploymentTypeCreate,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> EmploymentTypeResponse:
    return EmploymentTypeResponse.model_validate(employment_type_service.create(db, payload.name))


@router.delete("/employment-type/{employment_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employment_type(
    employment_type_id: int,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> Response:
    employment_type_service.delete(db, employment_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------------------------------------------------------------
# Job postings
# -----------------------------------------------------------------------------


@router.post("", response_model=JobPostingResponse, status_code=status.HTTP_201_CREATED)
def create_job_posting(
    payload: JobPostingCreate,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> JobPostingResponse:
    return JobPostingResponse.from_model(job_posting_service.create(db, payload, account))


@router.get("", response_model=JobPostingListResponse)
def list_job_postings(
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=100, description="Substring of title or company name"),
    location_id: int | None = Query(None, gt=0),
    employment_type_id: int | None = Query(None, gt=0),
    min_salary: float | None = Query(None, ge=0),
    max_salary: float | None = Query(None, ge=0),
) -> JobPostingListResponse:
    items, total = job_posting_service.list_with_total(
        db,
        page=page,
        limit=limit,
        search=search,
        location_id=location_id,
        employment_type_id=employment_type_id,
        min_salary=min_salary,
        max_salary=max_salary,
    )
    return JobPostingListResponse(
        data=[JobPostingResponse.from_model(item) for item in items],
        total=total,
    )


@router.get("/{posting_id}", response_model=JobPostingResponse)
def get_job_posting(posting_id: int, db: Session = Depends(get_db)) -> JobPostingResponse:
    return JobPostingResponse.from_model(job_posting_service.get(db, posting_id))


@router.patch("/{posting_id}", response_model=JobPostingResponse)
def update_job_posting(
    posting_id: int,
    patch: JobPostingUpdate,
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> JobPostingResponse:
    return JobPostingResponse.from_model(job_posting_service.update(db, posting_id, patch, account))


@router.delete("/{posting_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job_posting(
    posting_id: int,
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> Response:
    job_posting_service.delete(db, posting_id, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
