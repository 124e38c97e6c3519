# app/schemas/accounts.py
"""
Schemas for account and auth endpoints.

No schema here declares the password hash, so it can never be serialized.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    """POST /auth/signup"""

    name: str = Field(..., min_length=1, max_length=64, description="Unique display name")
    password: str = Field(..., min_length=6, max_length=20, description="Plaintext password, 6-20 chars")
    email: EmailStr = Field(..., description="Unique email address")


class LoginRequest(BaseModel):
    """POST /auth/login"""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=20)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AccountResponse(BaseModel):
    """Public view of an account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: datetime


class AccountWithContent(AccountResponse):
    """
    Admin listing entry.
    GET /auth/accounts
    """

    deleted_at: datetime | None = None
    posts: list[int] = Field(default_factory=list)
    job_postings: list[int] = Field(default_factory=list)
    tea_ratings: list[int] = Field(default_factory=list)
    magazines: list[int] = Field(default_factory=list)


class AuthorSummary(BaseModel):
    """Author reference embedded in content responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
