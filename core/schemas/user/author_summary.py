"""Author summary schema embedded in blog and follow payloads."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class AuthorSummary(BaseSchemaModel):
    """Public card for a user: name, avatar and follower count."""

    user_id: UUID = Field(..., description="Unique identifier for the user")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    avatar_url: str = Field(default="", description="Avatar image URL")
    followers: int = Field(default=0, ge=0, description="Follower counter")
