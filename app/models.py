# app/models.py
"""
Content Platform Database Models

Tables:
- Account: user accounts, role state, soft-delete state
- Post: blog posts
- Magazine: magazine articles
- TeaRating: tea shop ratings
- JobPosting: job postings, tagged with a Location and an EmploymentType
- Location / EmploymentType: job posting taxonomies

Every content table is soft-deleted first (deleted_at) and purged for good
by the retention sweeper once the retention window has passed.
"""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from app.database import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(UTC).replace(tzinfo=None)


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class UserRole(str, Enum):
    """Authorization level of an account."""
    USER = "USER"
    EDITOR = "EDITOR"
    ADMIN = "ADMIN"


class PostStatus(str, Enum):
    """Publication state for posts and magazines."""
    DRAFT = "draft"
    PUBLISHED = "published"
    PRIVATE = "private"


class ListingStatus(str, Enum):
    """Visibility state for job postings and tea ratings."""
    ACTIVE = "active"
    PRIVATE = "private"
    EXPIRED = "expired"


class ContentLifecycle(str, Enum):
    """
    Where a content row sits in its two-phase deletion lifecycle.

    PURGED is never stored: a purged row no longer exists. PurgeResult.state
    carries it for the rows a real sweep removed.
    """
    ACTIVE = "active"
    SOFT_DELETED = "soft_deleted"
    PURGED = "purged"


# -----------------------------------------------------------------------------
# Soft delete
# -----------------------------------------------------------------------------

class SoftDeleteMixin:
    """Adds a deleted_at tombstone and the lifecycle helpers built on it."""

    deleted_at = Column(DateTime, nullable=True, index=True)

    def soft_delete(self, at: datetime | None = None) -> None:
        self.deleted_at = at or utcnow()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def lifecycle(self) -> ContentLifecycle:
        if not self.is_deleted:
            return ContentLifecycle.ACTIVE
        return ContentLifecycle.SOFT_DELETED


# -----------------------------------------------------------------------------
# Account
# -----------------------------------------------------------------------------

class Account(SoftDeleteMixin, Base):
    """
    A registered user.

    password_hash never leaves the service layer; response schemas do not
    declare it. Accounts are only ever soft-deleted so authored content keeps
    a valid author reference.
    """
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default=UserRole.USER.value)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author")
    magazines = relationship("Magazine", back_populates="author")
    tea_ratings = relationship("TeaRating", back_populates="author")
    job_postings = relationship("JobPosting", back_populates="author")


# -----------------------------------------------------------------------------
# Post / Magazine
# -----------------------------------------------------------------------------

class Post(SoftDeleteMixin, Base):
    """Blog post."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    detail = Column(Text, nullable=False)
    category = Column(String(64), nullable=True)
    tags = Column(JSON, nullable=True)
    image_url = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=PostStatus.DRAFT.value)

    like_count = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    author = relationship("Account", back_populates="posts")


class Magazine(SoftDeleteMixin, Base):
    """Magazine article. Same shape as a post, written by editors."""
    __tablename__ = "magazines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    detail = Column(Text, nullable=False)
    category = Column(String(64), nullable=True)
    tags = Column(JSON, nullable=True)
    image_url = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=PostStatus.DRAFT.value)

    like_count = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    author = relationship("Account", back_populates="magazines")


# -----------------------------------------------------------------------------
# TeaRating
# -----------------------------------------------------------------------------

class TeaRating(SoftDeleteMixin, Base):
    """A rating of a tea shop."""
    __tablename__ = "tea_ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)

    rating = Column(Integer, nullable=False)
    location = Column(String(255), nullable=False)
    review = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default=ListingStatus.ACTIVE.value)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    author = relationship("Account", back_populates="tea_ratings")


# -----------------------------------------------------------------------------
# Job posting taxonomies
# -----------------------------------------------------------------------------

class Location(Base):
    """Region a job posting is filed under (e.g. Seoul, Busan)."""
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False)

    job_postings = relationship("JobPosting", back_populates="location")


class EmploymentType(Base):
    """Employment type of a job posting (e.g. new grad, experienced)."""
    __tablename__ = "employment_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(20), unique=True, nullable=False)

    job_postings = relationship("JobPosting", back_populates="employment_type")


# -----------------------------------------------------------------------------
# JobPosting
# -----------------------------------------------------------------------------

class JobPosting(SoftDeleteMixin, Base):
    """Job posting written by an editor."""
    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=False, index=True)
    employment_type_id = Column(Integer, ForeignKey("employment_types.id"), nullable=False, index=True)

    title = Column(String(100), nullable=False)
    company_name = Column(String(100), nullable=False)
    detail_location = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    recruitment_start_date = Column(Date, nullable=False)
    recruitment_end_date = Column(Date, nullable=False)
    job_title = Column(String(50), nullable=False)
    annual_salary = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    preferred_skills = Column(JSON, nullable=True)
    tags = Column(JSON, nullable=True)
    contact_info = Column(String(50), nullable=True)
    status = Column(String(16), nullable=False, default=ListingStatus.ACTIVE.value, index=True)

    view_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    author = relationship("Account", back_populates="job_postings")
    location = relationship("Location", back_populates="job_postings")
    employment_type = relationship("EmploymentType", back_populates="job_postings")


# Content tables the retention sweeper purges, in purge order
PURGEABLE_CONTENT = (Post, Magazine, TeaRating, JobPosting)
