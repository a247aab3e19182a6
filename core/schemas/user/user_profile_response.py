"""User profile response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.blog.blog_summary import BlogSummary
from core.schemas.user.user_detail import UserDetail


class UserProfileResponse(BaseSchemaModel):
    """Profile page payload: the user, counts and latest blogs."""

    user: UserDetail
    blogs: list[BlogSummary] = Field(default_factory=list)
