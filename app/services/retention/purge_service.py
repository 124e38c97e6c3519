# app/services/retention/purge_service.py
"""
Purge service for permanent deletion of soft-deleted content.

Handles:
- Computing the retention threshold (now minus the retention window)
- Hard deleting every content row soft-deleted before the threshold
- Per-table accounting, with one table's failure not blocking the others
- Previewing what the next run would purge

Runs once a day from cron through `python -m app.cli.retention purge --confirm`
or on demand from the admin retention endpoint. A failed table is not retried
within a run; its rows still match next time.
"""

import calendar
import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.config import get_settings
from app.logging_config import log_operation
from app.models import PURGEABLE_CONTENT, ContentLifecycle, utcnow

logger = logging.getLogger(__name__)


@dataclass
class PurgeResult:
    """Result of a purge run."""

    success: bool
    threshold: datetime
    retention_months: int
    dry_run: bool = False
    purged: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def total_purged(self) -> int:
        return sum(self.purged.values())

    @property
    def state(self) -> ContentLifecycle:
        """Lifecycle state of the counted rows once the run is over."""
        if self.dry_run:
            return ContentLifecycle.SOFT_DELETED
        return ContentLifecycle.PURGED


def subtract_months(moment: datetime, months: int) -> datetime:
    """
    Step back whole calendar months, clamping the day to the target month's end.

    2026-05-31 minus 3 months is 2026-02-28.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def retention_threshold(now: datetime | None = None, months: int | None = None) -> datetime:
    """Rows soft-deleted strictly before this instant are eligible for purge."""
    if months is None:
        months = get_settings().RETENTION_MONTHS
    return subtract_months(now or utcnow(), months)


def purge_soft_deleted_content(
    db: Session,
    now: datetime | None = None,
    months: int | None = None,
    dry_run: bool = False,
    initiated_by: str = "scheduler",
) -> PurgeResult:
    """
    Hard delete content soft-deleted before the retention threshold.

    Each table is deleted and committed on its own. Rows soft-deleted at or
    after the threshold are left untouched.
    """
    if months is None:
        months = get_settings().RETENTION_MONTHS
    threshold = retention_threshold(now, months)
    result = PurgeResult(success=True, threshold=threshold, retention_months=months, dry_run=dry_run)

    with log_operation("retention.purge"):
        for model in PURGEABLE_CONTENT:
            table = model.__tablename__
            expired = db.query(model).filter(
                model.deleted_at.isnot(None),
                model.deleted_at < threshold,
            )

            if dry_run:
                result.purged[table] = expired.count()
                continue

            try:
                count = expired.delete(synchronize_session=False)
                db.commit()
                result.purged[table] = count
                if count:
                    logger.info(
                        f"Purged {count} rows from {table}",
                        extra={"table": table, "purged": count},
                    )
            except Exception as e:
                db.rollback()
                logger.error(f"Failed to purge {table}: {e}", extra={"table": table}, exc_info=True)
                result.errors.append(f"{table}: {e}")
                result.success = False

    logger.info(
        f"Purge complete: {result.total_purged} rows hard deleted "
        f"(threshold={threshold.isoformat()}, initiated_by={initiated_by}, dry_run={dry_run})",
        extra={"purged": result.total_purged, "threshold": threshold.isoformat()},
    )
    return result


def dry_run_purge(db: Session, now: datetime | None = None, months: int | None = None) -> PurgeResult:
    """Count what a purge would remove without deleting anything."""
    return purge_soft_deleted_content(db, now=now, months=months, dry_run=True, initiated_by="preview")


def get_purge_preview(db: Session, now: datetime | None = None, months: int | None = None) -> dict:
    """
    Soft-deleted row counts per table, split by the retention threshold.

    Useful for admin dashboard display.
    """
    if months is None:
        months = get_settings().RETENTION_MONTHS
    threshold = retention_threshold(now, months)

    pending_purge: dict[str, int] = {}
    within_window: dict[str, int] = {}

    for model in PURGEABLE_CONTENT:
        table = model.__tablename__
        pending_purge[table] = (
            db.query(func.count(model.id))
            .filter(model.deleted_at.isnot(None), model.deleted_at < threshold)
            .scalar()
        ) or 0
        within_window[table] = (
            db.query(func.count(model.id))
            .filter(model.deleted_at.isnot(None), model.deleted_at >= threshold)
            .scalar()
        ) or 0

    return {
        "threshold": threshold,
        "retention_months": months,
        "pending_purge": pending_purge,
        "within_window": within_window,
        "total_pending": sum(pending_purge.values()),
    }
