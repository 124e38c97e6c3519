# app/schemas/job_postings.py
"""
Schemas for job posting and taxonomy endpoints.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models import JobPosting, ListingStatus


class JobPostingCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    company_name: str = Field(..., min_length=1, max_length=100)
    location_id: int = Field(..., gt=0)
    detail_location: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    recruitment_start_date: date
    recruitment_end_date: date
    job_title: str = Field(..., min_length=1, max_length=50)
    employment_type_id: int = Field(..., gt=0)
    annual_salary: float = Field(..., gt=0, description="Annual salary, two decimals at most")
    preferred_skills: list[str] = Field(default_factory=list)
    tags: list[str] | None = None
    contact_info: str | None = Field(None, max_length=50)
    status: ListingStatus = ListingStatus.ACTIVE

    @model_validator(mode="after")
    def check_recruitment_period(self) -> "JobPostingCreate":
        if self.recruitment_end_date < self.recruitment_start_date:
            raise ValueError("recruitment_end_date must not be before recruitment_start_date")
        return self


class JobPostingUpdate(BaseModel):
    """Patchable job posting fields. Taxonomy references are fixed at creation."""

    title: str | None = Field(None, min_length=1, max_length=100)
    company_name: str | None = Field(None, min_length=1, max_length=100)
    detail_location: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    recruitment_start_date: date | None = None
    recruitment_end_date: date | None = None
    job_title: str | None = Field(None, min_length=1, max_length=50)
    annual_salary: float | None = Field(None, gt=0)
    preferred_skills: list[str] | None = None
    tags: list[str] | None = None
    contact_info: str | None = Field(None, max_length=50)
    status: ListingStatus | None = None


class RecruitmentPeriod(BaseModel):
    start: date
    end: date


class JobPostingAuthor(BaseModel):
    id: int
    name: str
    email: str


class JobPostingResponse(BaseModel):
    """
    Job posting as shown to clients.
    GET /job-posting/{id}
    """

    id: int
    title: str
    company_name: str
    location: str
    detail_location: str
    description: str
    recruitment_period: RecruitmentPeriod
    job_title: str
    employment_type: str
    salary: float
    preferred_skills: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    contact_info: str | None = None
    views: int
    status: str
    author: JobPostingAuthor
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, posting: JobPosting) -> "JobPostingResponse":
        return cls(
            id=posting.id,
            title=posting.title,
            company_name=posting.company_name,
            location=posting.location.name,
            detail_location=posting.detail_location,
            description=posting.description,
            recruitment_period=RecruitmentPeriod(
                start=posting.recruitment_start_date,
                end=posting.recruitment_end_date,
            ),
            job_title=posting.job_title,
            employment_type=posting.employment_type.name,
            salary=posting.annual_salary,
            preferred_skills=posting.preferred_skills or [],
            tags=posting.tags or [],
            contact_info=posting.contact_info,
            views=posting.view_count,
            status=posting.status,
            author=JobPostingAuthor(
                id=posting.author.id,
                name=posting.author.name,
                email=posting.author.email,
            ),
            created_at=posting.created_at,
            updated_at=posting.updated_at,
        )


class JobPostingListResponse(BaseModel):
    data: list[JobPostingResponse]
    total: int


# -----------------------------------------------------------------------------
# Taxonomies
# -----------------------------------------------------------------------------


class LocationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class LocationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class EmploymentTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=20)


class EmploymentTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
