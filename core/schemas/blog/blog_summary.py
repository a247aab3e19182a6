"""Blog summary schema for listings."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class BlogSummary(BaseSchemaModel):
    """Listing card for a blog: no content bodies."""

    blog_id: UUID = Field(..., description="Unique identifier for the blog")
    author_id: UUID = Field(..., description="Author's user ID")
    title: str
    description: str
    thumbnail: str = ""
    categories: list[str] = Field(default_factory=list)
    created_at: datetime
