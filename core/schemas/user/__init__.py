"""User-related Pydantic schemas."""

from core.schemas.user.author_summary import AuthorSummary
from core.schemas.user.user_detail import UserDetail
from core.schemas.user.user_profile_response import UserProfileResponse
from core.schemas.user.user_requests import (
    AvatarUpdateRequest,
    UserProfileUpdateRequest,
)

__all__ = [
    "AuthorSummary",
    "AvatarUpdateRequest",
    "UserDetail",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
]
