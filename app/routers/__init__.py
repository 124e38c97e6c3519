"""
API routers.
"""

from app.routers import accounts, admin_retention, job_postings, magazines, posts, tea_ratings

__all__ = ["accounts", "admin_retention", "job_postings", "magazines", "posts", "tea_ratings"]
