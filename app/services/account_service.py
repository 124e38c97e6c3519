# app/services/account_service.py
"""
Account and authorization policy.

Handles:
- Sign-up with unique email / display name
- Credential validation (one undifferentiated failure mode)
- Access token issuance
- USER <-> EDITOR role transitions (ADMIN is never assigned or revoked here)
- Self-service soft deletion
- Admin listing with authored content ids
"""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    service_operation,
)
from app.models import Account, UserRole, utcnow
from app.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _check_unique(db: Session, name: str, email: str) -> None:
    existing = (
        db.query(Account)
        .filter(or_(Account.email == email, Account.name == name))
        .first()
    )
    if existing:
        if existing.email == email:
            raise ConflictError("Email is already registered")
        raise ConflictError("Display name is already taken")


def sign_up(
    db: Session,
    name: str,
    password: str,
    email: str,
    role: UserRole = UserRole.USER,
) -> Account:
    """
    Register a new account.

    Emails and display names are unique across every stored account,
    soft-deleted ones included, since deleted rows are kept.
    """
    with service_operation(logger, "sign up"):
        _check_unique(db, name, email)

        account = Account(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=UserRole(role).value,
        )
        db.add(account)
        try:
            db.commit()
        except IntegrityError:
            # A concurrent sign-up claimed the email or name after the check
            db.rollback()
            _check_unique(db, name, email)
            raise ConflictError("Email or display name is already taken")
        db.refresh(account)

        logger.info(f"Account {account.id} signed up", extra={"account_id": account.id})
        return account


def validate_credentials(db: Session, email: str, password: str) -> Account:
    """
    Return the active account matching email + password.

    Unknown email, soft-deleted account and wrong password all raise the same
    UnauthorizedError.
    """
    with service_operation(logger, "validate credentials"):
        account = (
            db.query(Account)
            .filter(Account.email == email, Account.deleted_at.is_(None))
            .first()
        )
        if not account or not verify_password(password, account.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return account


def issue_token(account: Account) -> str:
    return create_access_token(account.id, account.email, account.role)


def get_active_account(db: Session, account_id: int) -> Account | None:
    """Fetch a non-deleted account by id, or None."""
    return (
        db.query(Account)
        .filter(Account.id == account_id, Account.deleted_at.is_(None))
        .first()
    )


def update_role(db: Session, account_id: int, target_role: UserRole) -> Account:
    """
    Move an account between USER and EDITOR.

    Raises:
        NotFoundError: no account with that id
        ConflictError: target equals current role, or either side is ADMIN
    """
    target_role = UserRole(target_role)
    with service_operation(logger, f"update role to {target_role.value}"):
        account = db.query(Account).filter(Account.id == account_id).first()
        if not account:
            raise NotFoundError(f"Account {account_id} not found")

        if account.role == target_role.value:
            raise ConflictError("Account role is already updated")

        if account.role == UserRole.ADMIN.value or target_role == UserRole.ADMIN:
            raise ConflictError("Cannot change admin role")

        previous = account.role
        account.role = target_role.value
        db.add(account)
        db.commit()
        db.refresh(account)

        logger.info(
            f"Account {account.id} role {previous} -> {account.role}",
            extra={"account_id": account.id},
        )
        return account


def soft_delete_account(db: Session, acting: Account) -> None:
    """
    Soft delete the acting account. Self-service only, no admin override.
    """
    with service_operation(logger, "soft delete account"):
        account = db.query(Account).filter(Account.id == acting.id).first()
        if not account:
            raise NotFoundError("Account not found")

        if account.is_deleted:
            raise ConflictError("Account is already deleted")

        if acting.id != account.id:
            raise UnauthorizedError("You can only delete your own account")

        account.soft_delete(utcnow())
        db.add(account)
        db.commit()

        logger.info(f"Account {account.id} soft deleted", extra={"account_id": account.id})


def list_accounts(db: Session) -> list[dict]:
    """
    All accounts with the ids of the content they authored.

    Returns plain dicts ready for AccountWithContent; no password hash.
    """
    with service_operation(logger, "list accounts"):
        accounts = (
            db.query(Account)
            .options(
                selectinload(Account.posts),
                selectinload(Account.job_postings),
                selectinload(Account.tea_ratings),
                selectinload(Account.magazines),
            )
            .order_by(Account.id)
            .all()
        )

        return [
            {
                "id": account.id,
                "name": account.name,
                "email": account.email,
                "role": account.role,
                "created_at": account.created_at,
                "deleted_at": account.deleted_at,
                "posts": [p.id for p in account.posts],
                "job_postings": [j.id for j in account.job_postings],
                "tea_ratings": [t.id for t in account.tea_ratings],
                "magazines": [m.id for m in account.magazines],
            }
            for account in accounts
        ]
