# app/schemas/retention.py
"""
Schemas for admin retention endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models import ContentLifecycle


class PurgeRequest(BaseModel):
    """Request to trigger a purge."""

    dry_run: bool = Field(False, description="Preview only, don't purge")
    confirm: bool = Field(False, description="Required confirmation for non-dry-run")


class PurgeResponse(BaseModel):
    """Purge operation result."""

    success: bool
    dry_run: bool
    threshold: datetime
    retention_months: int
    purged: dict[str, int]
    state: ContentLifecycle = Field(..., description="purged, or soft_deleted for a dry run")
    total_purged: int
    errors: list[str]


class PurgePreviewResponse(BaseModel):
    """Counts of soft-deleted content, split by the retention threshold."""

    threshold: datetime
    retention_months: int
    pending_purge: dict[str, int]
    within_window: dict[str, int]
    total_pending: int
