# app/services/retention/__init__.py
"""
Retention management for soft-deleted content.

Two-phase lifecycle:
- Soft delete: content services set deleted_at on request
- Purge: rows soft-deleted longer than the retention window are hard deleted

Services:
- purge_service: threshold computation, purge runs, previews
"""

from app.services.retention.purge_service import (
    PurgeResult,
    dry_run_purge,
    get_purge_preview,
    purge_soft_deleted_content,
    retention_threshold,
)

__all__ = [
    "purge_soft_deleted_content",
    "dry_run_purge",
    "get_purge_preview",
    "retention_threshold",
    "PurgeResult",
]
