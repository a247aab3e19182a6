"""Blog detail schema."""

from datetime import datetime
from typing import Any

from pydantic import Field

from core.schemas.blog.blog_summary import BlogSummary
from core.schemas.user.author_summary import AuthorSummary


class BlogDetail(BlogSummary):
    """Full blog with content and author card."""

    content_html: str
    content_json: dict[str, Any] = Field(default_factory=dict)
    updated_at: datetime
    author: AuthorSummary
