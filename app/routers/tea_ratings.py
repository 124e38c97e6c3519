# app/routers/tea_ratings.py
"""
Tea rating endpoints.

POST   /tea-rating             - Create a rating (editor)
GET    /tea-rating             - List ratings, newest first
GET    /tea-rating/{id}        - Rating detail
PATCH  /tea-rating/{id}        - Update own rating (editor)
DELETE /tea-rating/{id}        - Soft delete own rating (editor)
DELETE /tea-rating/{id}/admin  - Soft delete any rating (admin)
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.auth import require_admin, require_editor
from app.database import get_db
from app.models import Account
from app.schemas.content import TeaRatingCreate, TeaRatingResponse, TeaRatingUpdate
from app.services import tea_rating_service

router = APIRouter(prefix="/tea-rating", tags=["tea-ratings"])


@router.post("", response_model=TeaRatingResponse, status_code=status.HTTP_201_CREATED)
def create_tea_rating(
    payload: TeaRatingCreate,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> TeaRatingResponse:
    return TeaRatingResponse.model_validate(tea_rating_service.create(db, payload, account))


@router.get("", response_model=list[TeaRatingResponse])
def list_tea_ratings(
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> list[TeaRatingResponse]:
    return [TeaRatingResponse.model_validate(t) for t in tea_rating_service.list(db, page=page, limit=limit)]


@router.get("/{rating_id}", response_model=TeaRatingResponse)
def get_tea_rating(rating_id: int, db: Session = Depends(get_db)) -> TeaRatingResponse:
    return TeaRatingResponse.model_validate(tea_rating_service.get(db, rating_id))


@router.patch("/{rating_id}", response_model=TeaRatingResponse)
def update_tea_rating(
    rating_id: int,
    patch: TeaRatingUpdate,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> TeaRatingResponse:
    return TeaRatingResponse.model_validate(tea_rating_service.update(db, rating_id, patch, account))


@router.delete("/{rating_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tea_rating(
    rating_id: int,
    db: Session = Depends(get_db),
    account: Account = Depends(require_editor),
) -> Response:
    tea_rating_service.delete(db, rating_id, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{rating_id}/admin", status_code=status.HTTP_204_NO_CONTENT)
def admin_delete_tea_rating(
    rating_id: int,
    db: Session = Depends(get_db),
    account: Account = Depends(require_admin),
) -> Response:
    tea_rating_service.admin_delete(db, rating_id, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
