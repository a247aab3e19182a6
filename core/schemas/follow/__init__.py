"""Follow-related Pydantic schemas."""

from core.schemas.follow.follow_result import FollowResult
from core.schemas.follow.follow_stats import FollowStats, FollowStatusResponse

__all__ = ["FollowResult", "FollowStats", "FollowStatusResponse"]
