# app/services/tea_rating_service.py
"""Tea ratings: standard content rules plus an admin delete override."""

import logging

from sqlalchemy.orm import Session

from app.errors import ForbiddenError, service_operation
from app.models import Account, ListingStatus, TeaRating, UserRole
from app.services.content_service import ContentService

logger = logging.getLogger(__name__)


class TeaRatingService(ContentService):
    def __init__(self):
        super().__init__(TeaRating, "tea rating", ListingStatus.ACTIVE.value)

    def admin_delete(self, db: Session, item_id: int, acting: Account) -> None:
        """Soft delete any rating, regardless of author. ADMIN only."""
        with service_operation(logger, "admin delete tea rating"):
            item = self._find(db, item_id)
            if acting.role != UserRole.ADMIN.value:
                raise ForbiddenError("Only admins can remove other accounts' ratings")
            self._soft_delete(db, item, acting)


tea_rating_service = TeaRatingService()
