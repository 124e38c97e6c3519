"""
Business logic services.
"""

from app.services import account_service
from app.services.content_service import ContentService, magazine_service, post_service
from app.services.job_posting_service import JobPostingService, job_posting_service
from app.services.taxonomy_service import TaxonomyService, employment_type_service, location_service
from app.services.tea_rating_service import TeaRatingService, tea_rating_service

__all__ = [
    "account_service",
    "ContentService",
    "JobPostingService",
    "TaxonomyService",
    "TeaRatingService",
    "post_service",
    "magazine_service",
    "job_posting_service",
    "tea_rating_service",
    "location_service",
    "employment_type_service",
]
