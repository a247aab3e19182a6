"""Request schemas for profile updates."""

from pydantic import Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel


class UserProfileUpdateRequest(BaseSchemaModel):
    """Partial profile update; omitted fields are left unchanged."""

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    avatar_url: str | None = Field(None, description="Avatar image URL")

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        """Reject names that are present but blank."""
        if value is not None and not value:
            raise ValueError("First name and last name are required")
        return value


class AvatarUpdateRequest(BaseSchemaModel):
    """Avatar-only update."""

    avatar_url: str = Field(
        ..., min_length=1, description="Avatar URL is required"
    )
