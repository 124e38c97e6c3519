# app/routers/magazines.py
"""
Magazine endpoints. Writes are limited to editors (and admins).

POST   /magazine        - Create a magazine article
GET    /magazine        - List magazine articles, newest first
GET    /magazine/{id}   - Magazine detail
PATCH  /magazine/{id}   - Update own article
DELETE /magazine/{id}   - Soft delete own article
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.auth import require_editor
from app.database import get_db
from app.models import Account
from app.schemas.content import MagazineCreate, MagazineResponse, MagazineUpdate
from app.services import magazine_service

router = APIRouter(prefix="/magazine", tags=["magazines"])


@router.post("", response_model=MagazineResponse, status_code=status.HTTP_201_CREATED)
def create_magazine(
    payload: MagazineCreate,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> MagazineResponse:
    return MagazineResponse.model_validate(magazine_service.create(db, payload, account))


@router.get("", response_model=list[MagazineResponse])
def list_magazines(
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> list[MagazineResponse]:
    return [MagazineResponse.model_validate(m) for m in magazine_service.list(db, page=page, limit=limit)]


@router.get("/{magazine_id}", response_model=MagazineResponse)
def get_magazine(magazine_id: int, db: Session = Depends(get_db)) -> MagazineResponse:
    return MagazineResponse.model_validate(magazine_service.get(db, magazine_id))


@router.patch("/{magazine_id}", response_model=MagazineResponse)
def update_magazine(
    magazine_id: int,
    patch: MagazineUpdate,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> MagazineResponse:
    return MagazineResponse.model_validate(magazine_service.update(db, magazine_id, patch, account))


@router.delete("/{magazine_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_magazine(
    magazine_id: int,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> Response:
    magazine_service.delete(db, magazine_id, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
