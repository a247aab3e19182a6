"""Schemas for the core app."""

from core.schemas.blog import (
    BlogCreateRequest,
    BlogDetail,
    BlogSummary,
    BlogUpdateRequest,
)
from core.schemas.dashboard import DashboardResponse
from core.schemas.follow import FollowResult, FollowStats, FollowStatusResponse
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.user import (
    AuthorSummary,
    AvatarUpdateRequest,
    UserDetail,
    UserProfileResponse,
    UserProfileUpdateRequest,
)

__all__ = [
    "AuthorSummary",
    "AvatarUpdateRequest",
    "BlogCreateRequest",
    "BlogDetail",
    "BlogSummary",
    "BlogUpdateRequest",
    "DashboardResponse",
    "DependencyHealth",
    "FollowResult",
    "FollowStats",
    "FollowStatusResponse",
    "LivenessResponse",
    "ReadinessResponse",
    "UserDetail",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
]
