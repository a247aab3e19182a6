"""UserFollow model."""

from typing import ClassVar

from django.db import models


class UserFollow(models.Model):
    """Directed follow edge between two users.

    The edge is written in the same transaction as the followee's
    ``followers`` counter; see ``FollowService``.
    """

    follower = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="following_edges",
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="follower_edges",
        db_column="followee_id",
    )
    followed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_follows"
        ordering: ClassVar[list[str]] = ["-followed_at"]
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["follower", "followee"], name="unique_user_follow"
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of follow relationship."""
        return f"{self.follower_id} follows {self.followee_id}"

    def __repr__(self) -> str:
        """Return detailed representation of follow relationship."""
        return (
            f"<UserFollow(follower={self.follower_id}, "
            f"followee={self.followee_id})>"
        )
