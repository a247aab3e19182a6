"""Dashboard payload schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.blog import BlogDetail, BlogSummary
from core.schemas.user import AuthorSummary


class DashboardResponse(BaseSchemaModel):
    """Latest blogs, suggestions and the category filter state."""

    selected_category: str
    categories: list[str]
    latest_blogs: list[BlogDetail] = Field(default_factory=list)
    empty_message: str | None = Field(
        None, description="Set when there are no blogs to show"
    )
    suggested_blogs: list[BlogSummary] = Field(default_factory=list)
    suggested_authors: list[AuthorSummary] = Field(default_factory=list)
