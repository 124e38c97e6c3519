# app/cli/retention.py
"""
CLI commands for content retention.

Usage:
    python -m app.cli.retention status
    python -m app.cli.retention purge --dry-run
    python -m app.cli.retention purge --confirm

Scheduled daily from cron:
    0 0 * * *  cd /srv/content-platform && python -m app.cli.retention purge --confirm
"""

import argparse
import sys

from dotenv import load_dotenv

load_dotenv()


def get_db_session():
    """Get a database session."""
    from app.database import SessionLocal

    return SessionLocal()


def _configure_logging():
    from app.config import get_settings
    from app.logging_config import configure_logging

    settings = get_settings()
    configure_logging(json_format=settings.LOG_JSON, level=settings.LOG_LEVEL)


def cmd_status(args):
    """Show soft-deleted content counts around the retention threshold."""
    from app.services.retention import get_purge_preview

    db = get_db_session()
    try:
        preview = get_purge_preview(db, months=args.months)

        print("\n=== Retention Status ===\n")
        print(f"Retention window: {preview['retention_months']} months")
        print(f"Threshold: {preview['threshold'].isoformat()}")

        print("\nPending purge:")
        for table, count in preview["pending_purge"].items():
            print(f"  {table}: {count}")

        print("\nSoft deleted, still inside the window:")
        for table, count in preview["within_window"].items():
            print(f"  {table}: {count}")

        print(f"\nTotal pending: {preview['total_pending']}")
        print()
    finally:
        db.close()


def cmd_purge(args):
    """Hard delete content soft-deleted before the retention threshold."""
    from app.services.retention import purge_soft_deleted_content

    # Safety check
    if not args.dry_run and not args.confirm:
        print("Error: Purge requires --confirm flag for non-dry-run operations")
        print("Use --dry-run to preview what would be deleted")
        sys.exit(1)

    db = get_db_session()
    try:
        print(f"\n{'DRY RUN - ' if args.dry_run else ''}Purging soft-deleted content...\n")

        result = purge_soft_deleted_content(
            db,
            months=args.months,
            dry_run=args.dry_run,
            initiated_by="cli",
        )

        print(f"Threshold: {result.threshold.isoformat()}")
        for table, count in result.purged.items():
            print(f"  {table}: {count}")
        print(f"Total: {result.total_purged} ({result.state.value})")

        if result.errors:
            print("\nErrors:")
            for error in result.errors:
                print(f"  - {error}")

        if not result.success:
            sys.exit(1)
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(
        description="Content Platform Retention CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check current status
  python -m app.cli.retention status

  # Preview what would be purged
  python -m app.cli.retention purge --dry-run

  # Purge for real (daily cron)
  python -m app.cli.retention purge --confirm
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # status command
    status_parser = subparsers.add_parser("status", help="Show retention status")
    status_parser.add_argument("--months", type=int, default=None, help="Override the retention window")
    status_parser.set_defaults(func=cmd_status)

    # purge command
    purge_parser = subparsers.add_parser("purge", help="Purge expired soft-deleted content")
    purge_parser.add_argument("--months", type=int, default=None, help="Override the retention window")
    purge_parser.add_argument("--dry-run", action="store_true", help="Preview only, don't purge")
    purge_parser.add_argument("--confirm", action="store_true", help="Confirm purge operation")
    purge_parser.set_defaults(func=cmd_purge)

    args = parser.parse_args()
    _configure_logging()
    args.func(args)


if __name__ == "__main__":
    main()
