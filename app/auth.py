# app/auth.py
"""Shared authentication dependencies."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import ForbiddenError, UnauthorizedError
from app.models import Account, UserRole
from app.security import decode_access_token
from app.services import account_service

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_account(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Account:
    """Resolve the bearer token to a live account. Fails closed."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token")

    payload = decode_access_token(credentials.credentials)
    try:
        account_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid token payload")

    account = account_service.get_active_account(db, account_id)
    if not account:
        raise UnauthorizedError("Account no longer exists")
    return account


def require_roles(*roles: UserRole):
    """
    Build a dependency that admits only accounts holding one of `roles`.

    The role is read from the stored account, not the token, so a downgrade
    takes effect before the token expires.
    """
    allowed = {UserRole(role).value for role in roles}

    def dependency(account: Account = Depends(get_current_account)) -> Account:
        if account.role not in allowed:
            raise ForbiddenError("Insufficient role for this action")
        return account

    return dependency


require_admin = require_roles(UserRole.ADMIN)
require_editor = require_roles(UserRole.EDITOR, UserRole.ADMIN)
