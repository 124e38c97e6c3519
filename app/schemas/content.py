# app/schemas/content.py
"""
Schemas for post, magazine and tea rating endpoints.

Update schemas are typed patches: only the fields they declare can be
changed, and only the fields a client actually sends are applied.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models import ListingStatus, PostStatus
from app.schemas.accounts import AuthorSummary


# -----------------------------------------------------------------------------
# Posts
# -----------------------------------------------------------------------------


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    detail: str = Field(..., min_length=1)
    category: str | None = Field(None, max_length=64)
    tags: list[str] | None = None
    image_url: str | None = None
    status: PostStatus = PostStatus.DRAFT


class PostUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    detail: str | None = Field(None, min_length=1)
    category: str | None = Field(None, max_length=64)
    tags: list[str] | None = None
    image_url: str | None = None
    status: PostStatus | None = None


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    detail: str
    category: str | None = None
    tags: list[str] | None = None
    image_url: str | None = None
    status: str
    like_count: int
    view_count: int
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


# -----------------------------------------------------------------------------
# Magazines (same shape as posts)
# -----------------------------------------------------------------------------


class MagazineCreate(PostCreate):
    pass


class MagazineUpdate(PostUpdate):
    pass


class MagazineResponse(PostResponse):
    pass


# -----------------------------------------------------------------------------
# Tea ratings
# -----------------------------------------------------------------------------


class TeaRatingCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5, description="Score from 1 to 5")
    location: str = Field(..., min_length=1, max_length=255)
    review: str = Field(..., min_length=1)
    status: ListingStatus = ListingStatus.ACTIVE


class TeaRatingUpdate(BaseModel):
    rating: int | None = Field(None, ge=1, le=5)
    location: str | None = Field(None, min_length=1, max_length=255)
    review: str | None = Field(None, min_length=1)
    status: ListingStatus | None = None


class TeaRatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rating: int
    location: str
    review: str
    status: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime
