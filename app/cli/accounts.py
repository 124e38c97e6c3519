# app/cli/accounts.py
"""
CLI commands for account administration.

Admins cannot be created through the API, so the first one comes from here.

Usage:
    python -m app.cli.accounts create --name admin --email admin@example.com --role ADMIN
    python -m app.cli.accounts list
"""

import argparse
import getpass
import sys

from dotenv import load_dotenv

load_dotenv()


def get_db_session():
    """Get a database session."""
    from app.database import SessionLocal

    return SessionLocal()


def cmd_create(args):
    """Create an account with an explicit role."""
    from app.errors import ServiceError
    from app.models import UserRole
    from app.services import account_service

    password = args.password or getpass.getpass("Password: ")
    if not 6 <= len(password) <= 20:
        print("Error: password must be 6-20 characters")
        sys.exit(1)

    db = get_db_session()
    try:
        account = account_service.sign_up(db, args.name, password, args.email, role=UserRole(args.role))
    except ServiceError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    finally:
        db.close()

    print(f"Created account {account.id} ({account.email}) with role {account.role}")


def cmd_list(args):
    """List accounts and their authored content counts."""
    from app.services import account_service

    db = get_db_session()
    try:
        accounts = account_service.list_accounts(db)
    finally:
        db.close()

    print("\n=== Accounts ===\n")
    for entry in accounts:
        deleted = " [DELETED]" if entry["deleted_at"] else ""
        print(f"{entry['id']}: {entry['name']} <{entry['email']}> {entry['role']}{deleted}")
        print(
            f"  posts={len(entry['posts'])} magazines={len(entry['magazines'])} "
            f"tea_ratings={len(entry['tea_ratings'])} job_postings={len(entry['job_postings'])}"
        )
    print()


def main():
    parser = argparse.ArgumentParser(description="Content Platform Account CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="Create an account")
    create_parser.add_argument("--name", required=True, help="Display name")
    create_parser.add_argument("--email", required=True, help="Email address")
    create_parser.add_argument("--password", default=None, help="Password (prompted when omitted)")
    create_parser.add_argument("--role", choices=["USER", "EDITOR", "ADMIN"], default="USER")
    create_parser.set_defaults(func=cmd_create)

    list_parser = subparsers.add_parser("list", help="List accounts")
    list_parser.set_defaults(func=cmd_list)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
