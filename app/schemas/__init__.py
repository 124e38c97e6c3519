"""
Pydantic schemas for API request/response validation.
"""

from app.schemas.accounts import (
    AccountResponse,
    AccountWithContent,
    AuthorSummary,
    LoginRequest,
    SignUpRequest,
    TokenResponse,
)
from app.schemas.content import (
    MagazineCreate,
    MagazineResponse,
    MagazineUpdate,
    PostCreate,
    PostResponse,
    PostUpdate,
    TeaRatingCreate,
    TeaRatingResponse,
    TeaRatingUpdate,
)
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
from app.schemas.retention import PurgePreviewResponse, PurgeRequest, PurgeResponse

__all__ = [
    # Account schemas
    "SignUpRequest",
    "LoginRequest",
    "TokenResponse",
    "AccountResponse",
    "AccountWithContent",
    "AuthorSummary",
    # Content schemas
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "MagazineCreate",
    "MagazineUpdate",
    "MagazineResponse",
    "TeaRatingCreate",
    "TeaRatingUpdate",
    "TeaRatingResponse",
    # Job posting schemas
    "JobPostingCreate",
    "JobPostingUpdate",
    "JobPostingResponse",
    "JobPostingListResponse",
    "LocationCreate",
    "LocationResponse",
    "EmploymentTypeCreate",
    "EmploymentTypeResponse",
    # Retention schemas
    "PurgeRequest",
    "PurgeResponse",
    "PurgePreviewResponse",
]
