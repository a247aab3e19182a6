"""Follow mutation result schema."""

from pydantic import Field

from core.enums import FollowFailureReason
from core.schemas.base_schema_model import BaseSchemaModel


class FollowResult(BaseSchemaModel):
    """Outcome of a follow or unfollow request.

    ``error`` and ``reason`` are set only when ``success`` is False.
    """

    success: bool
    error: str | None = Field(None, description="Human-readable failure message")
    reason: FollowFailureReason | None = Field(
        None, description="Machine-readable failure reason"
    )

    @classmethod
    def ok(cls) -> "FollowResult":
        """Build a successful result."""
        return cls(success=True)

    @classmethod
    def failed(cls, reason: FollowFailureReason, error: str) -> "FollowResult":
        """Build a failed result."""
        return cls(success=False, reason=reason, error=error)
