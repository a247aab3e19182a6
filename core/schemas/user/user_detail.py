"""Detailed user schema."""

from datetime import datetime

from pydantic import Field

from core.schemas.user.author_summary import AuthorSummary


class UserDetail(AuthorSummary):
    """Full user record, with relationship counts when they were annotated."""

    auth_user_id: str = Field(..., description="Identity provider subject")
    email: str = Field(default="", description="Email address")
    created_at: datetime = Field(..., description="Account creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    following_count: int | None = Field(
        None, description="Number of users this user follows"
    )
    followed_by_count: int | None = Field(
        None, description="Number of follow edges pointing at this user"
    )
    blog_count: int | None = Field(None, description="Number of published blogs")
