"""Follow statistics schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class FollowStats(BaseSchemaModel):
    """Edge counts for a user."""

    followers: int = Field(default=0, ge=0)
    following: int = Field(default=0, ge=0)


class FollowStatusResponse(BaseSchemaModel):
    """Whether the acting user follows a target user."""

    is_following: bool
