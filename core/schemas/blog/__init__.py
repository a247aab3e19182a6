"""Blog-related Pydantic schemas."""

from core.schemas.blog.blog_summary import BlogSummary  # isort: skip
from core.schemas.blog.blog_detail import BlogDetail
from core.schemas.blog.blog_requests import BlogCreateRequest, BlogUpdateRequest

__all__ = [
    "BlogCreateRequest",
    "BlogDetail",
    "BlogSummary",
    "BlogUpdateRequest",
]
