# app/routers/posts.py
"""
Post endpoints.

POST   /post        - Create a post (any signed-in account)
GET    /post        - List posts, newest first
GET    /post/{id}   - Post detail
PATCH  /post/{id}   - Update own post
DELETE /post/{id}   - Soft delete own post
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.auth import get_current_account
from app.database import get_db
from app.models import Account
from app.schemas.content import PostCreate, PostResponse, PostUpdate
from app.services import post_service

router = APIRouter(prefix="/post", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> PostResponse:
    return PostResponse.model_validate(post_service.create(db, payload, account))


@router.get("", response_model=list[PostResponse])
def list_posts(
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> list[PostResponse]:
    return [PostResponse.model_validate(p) for p in post_service.list(db, page=page, limit=limit)]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, db: Session = Depends(get_db)) -> PostResponse:
    return PostResponse.model_validate(post_service.get(db, post_id))


@router.patch("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    patch: PostUpdate,
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> PostResponse:
    return PostResponse.model_validate(post_service.update(db, post_id, patch, account))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account),
) -> Response:
    post_service.delete(db, post_id, account)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
