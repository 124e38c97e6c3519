# app/routers/admin_retention.py
"""
Admin endpoints for content retention.

GET  /v1/admin/retention/preview  - Soft-deleted counts split by the threshold
POST /v1/admin/retention/purge    - Trigger a purge run
POST /v1/admin/retention/dry-run  - Count what a purge would remove
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth import require_admin
from app.database import get_db
from app.errors import ValidationFailed
from app.models import Account
from app.schemas.retention import PurgePreviewResponse, PurgeRequest, PurgeResponse
from app.services.retention import (
    PurgeResult,
    dry_run_purge,
    get_purge_preview,
    purge_soft_deleted_content,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/admin/retention", tags=["admin-retention"])


def _to_response(result: PurgeResult) -> PurgeResponse:
    return PurgeResponse(
        success=result.success,
        dry_run=result.dry_run,
        threshold=result.threshold,
        retention_months=result.retention_months,
        purged=result.purged,
        state=result.state,
        total_purged=result.total_purged,
        errors=result.errors,
    )


@router.get("/preview", response_model=PurgePreviewResponse)
def get_preview(
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> PurgePreviewResponse:
    """
    Show how many soft-deleted rows are past the retention window and how
    many are still inside it.
    """
    return PurgePreviewResponse(**get_purge_preview(db))


@router.post("/purge", response_model=PurgeResponse)
def trigger_purge(
    request: PurgeRequest,
    db: Session = Depends(get_db),
    account: Account = Depends(require_admin),
) -> PurgeResponse:
    """
    Trigger a purge of content soft-deleted before the retention threshold.

    **WARNING**: This permanently deletes data.

    Requires `confirm: true` for non-dry-run operations.
    """
    if not request.dry_run and not request.confirm:
        raise ValidationFailed("Purge requires 'confirm: true' for non-dry-run operations")

    logger.info(f"Manual purge requested by account {account.id}", extra={"account_id": account.id})
    result = purge_soft_deleted_content(
        db,
        dry_run=request.dry_run,
        initiated_by=f"admin:{account.id}",
    )
    return _to_response(result)


@router.post("/dry-run", response_model=PurgeResponse)
def preview_purge(
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> PurgeResponse:
    """Preview what would be purged without making changes."""
    return _to_response(dry_run_purge(db))
