# app/routers/accounts.py
"""
Account and auth endpoints.

POST   /auth/signup                - Register an account
POST   /auth/login                 - Exchange credentials for a bearer token
GET    /auth/profile               - Current account
DELETE /auth/account-deletion      - Soft delete the current account
PATCH  /auth/upgrade-role/{id}     - USER -> EDITOR (admin)
PATCH  /auth/downgrade-role/{id}   - EDITOR -> USER (admin)
GET    /auth/accounts              - All accounts with authored content ids (admin)
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.auth import get_current_account, require_admin
from app.database import get_db
from app.models import Account, UserRole
from app.schemas.accounts import (
    AccountResponse,
    AccountWithContent,
    LoginRequest,
    SignUpRequest,
    TokenResponse,
)
from app.services import account_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    request: SignUpRequest,
    db: Session = Depends(get_db),
) -> AccountResponse:
    account = account_service.sign_up(db, request.name, request.password, request.email)
    return AccountResponse.model_validate(account)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
) -> TokenResponse:
    account = account_service.validate_credentials(db, request.email, request.password)
    return TokenResponse(access_token=account_service.issue_token(account))


@router.get("/profile", response_model=AccountResponse)
def get_profile(account: Account = Depends(get_current_account)) -> AccountResponse:
    return AccountResponse.model_validate(account)


@router.delete("/account-deletion", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> Response:
    account_service.soft_delete_account(db, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/upgrade-role/{account_id}", response_model=AccountResponse)
def upgrade_role(
    account_id: int,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> AccountResponse:
    account = account_service.update_role(db, account_id, UserRole.EDITOR)
    return AccountResponse.model_validate(account)


@router.patch("/downgrade-role/{account_id}", response_model=AccountResponse)
def downgrade_role(
    account_id: int,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> AccountResponse:
    account = account_service.update_role(db, account_id, UserRole.USER)
    return AccountResponse.model_validate(account)


@router.get("/accounts", response_model=list[AccountWithContent])
def list_accounts(
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
) -> list[AccountWithContent]:
    return [AccountWithContent(**entry) for entry in account_service.list_accounts(db)]
