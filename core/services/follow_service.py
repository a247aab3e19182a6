"""Follow service: follow edges and the denormalized follower counter.

Follow and unfollow never raise for expected failures. They return a
``FollowResult`` whose ``reason`` tells the caller what went wrong, so the UI
can revert an optimistic toggle and show ``error``.
"""

from uuid import UUID

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F

import structlog

from core.auth.context import get_current_user
from core.constants import FOLLOW_REVALIDATE_PATHS
from core.enums import FollowFailureReason
from core.models import User, UserFollow
from core.repositories import UserRepository
from core.schemas.follow import FollowResult, FollowStats
from core.services.page_cache_service import page_cache

logger = structlog.get_logger(__name__)


class _Rejected(Exception):
    """Internal signal carrying a failed precondition."""

    def __init__(self, reason: FollowFailureReason, error: str):
        self.result = FollowResult.failed(reason, error)
        super().__init__(error)


class FollowService:
    """Service for follow relationships between users."""

    def follow_user(self, target_user_id: UUID | str) -> FollowResult:
        """Make the acting user follow ``target_user_id``.

        The edge insert and the target's counter increment commit together.

        Args:
            target_user_id: User to follow

        Returns:
            FollowResult; on failure ``reason`` is one of NOT_AUTHENTICATED,
            USER_NOT_FOUND, TARGET_IS_SELF, ALREADY_FOLLOWING or STORE_ERROR
        """
        try:
            actor, target = self._resolve(target_user_id)
            if UserRepository.user_follows(actor.user_id, target.user_id):
                raise _Rejected(
                    FollowFailureReason.ALREADY_FOLLOWING,
                    "You are already following this user",
                )

            with transaction.atomic():
                UserFollow.objects.create(follower=actor, followee=target)
                User.objects.filter(user_id=target.user_id).update(
                    followers=F("followers") + 1
                )
        except _Rejected as rejected:
            return self._rejected("follow", target_user_id, rejected)
        except IntegrityError:
            # Lost a race with a concurrent follow of the same pair
            return self._rejected(
                "follow",
                target_user_id,
                _Rejected(
                    FollowFailureReason.ALREADY_FOLLOWING,
                    "You are already following this user",
                ),
            )
        except DatabaseError as e:
            return self._store_failure("follow", target_user_id, e)

        logger.info(
            "user_followed",
            follower_id=str(actor.user_id),
            followee_id=str(target.user_id),
        )
        page_cache.revalidate(*FOLLOW_REVALIDATE_PATHS)
        return FollowResult.ok()

    def unfollow_user(self, target_user_id: UUID | str) -> FollowResult:
        """Remove the acting user's follow edge to ``target_user_id``.

        The edge delete and the counter decrement commit together; the
        counter never goes below zero.

        Returns:
            FollowResult; on failure ``reason`` is one of NOT_AUTHENTICATED,
            USER_NOT_FOUND, TARGET_IS_SELF, NOT_FOLLOWING or STORE_ERROR
        """
        try:
            actor, target = self._resolve(target_user_id)
            with transaction.atomic():
                deleted, _ = UserFollow.objects.filter(
                    follower_id=actor.user_id, followee_id=target.user_id
                ).delete()
                if not deleted:
                    raise _Rejected(
                        FollowFailureReason.NOT_FOLLOWING,
                        "You are not following this user",
                    )
                User.objects.filter(
                    user_id=target.user_id, followers__gt=0
                ).update(followers=F("followers") - 1)
        except _Rejected as rejected:
            return self._rejected("unfollow", target_user_id, rejected)
        except DatabaseError as e:
            return self._store_failure("unfollow", target_user_id, e)

        logger.info(
            "user_unfollowed",
            follower_id=str(actor.user_id),
            followee_id=str(target.user_id),
        )
        page_cache.revalidate(*FOLLOW_REVALIDATE_PATHS)
        return FollowResult.ok()

    def is_following(self, target_user_id: UUID | str) -> bool:
        """Whether the acting user follows ``target_user_id``.

        False when nobody is authenticated, the acting user has no row, or
        the lookup fails.
        """
        identity = get_current_user()
        if identity is None:
            return False
        try:
            actor = UserRepository.get_by_auth_id(identity.user_id)
            if actor is None:
                return False
            return UserRepository.user_follows(actor.user_id, target_user_id)
        except DatabaseError as e:
            logger.error(
                "follow_status_lookup_failed",
                target_user_id=str(target_user_id),
                error=str(e),
            )
            return False

    def get_followers(self, user_id: UUID | str) -> list[User]:
        """Users following ``user_id``, most recent edge first."""
        return list(
            UserRepository.followers_of(user_id).order_by("-following_edges__followed_at")
        )

    def get_following(self, user_id: UUID | str) -> list[User]:
        """Users that ``user_id`` follows, most recent edge first."""
        return list(
            UserRepository.followed_by(user_id).order_by("-follower_edges__followed_at")
        )

    def get_follow_stats(self, user_id: UUID | str) -> FollowStats:
        """Edge counts for ``user_id``; zeros for unknown users."""
        return FollowStats(
            followers=UserFollow.objects.filter(followee_id=user_id).count(),
            following=UserFollow.objects.filter(follower_id=user_id).count(),
        )

    def _resolve(self, target_user_id: UUID | str) -> tuple[User, User]:
        """Check preconditions in order and load both users."""
        identity = get_current_user()
        if identity is None:
            raise _Rejected(
                FollowFailureReason.NOT_AUTHENTICATED,
                "You must be signed in to follow users",
            )

        actor = UserRepository.get_by_auth_id(identity.user_id)
        if actor is None:
            raise _Rejected(FollowFailureReason.USER_NOT_FOUND, "User not found")

        if str(actor.user_id) == str(target_user_id):
            raise _Rejected(
                FollowFailureReason.TARGET_IS_SELF, "You cannot follow yourself"
            )

        target = UserRepository.get_by_id(target_user_id)
        if target is None:
            raise _Rejected(
                FollowFailureReason.USER_NOT_FOUND, "User to follow not found"
            )
        return actor, target

    def _rejected(
        self, action: str, target_user_id: UUID | str, rejected: _Rejected
    ) -> FollowResult:
        logger.info(
            f"{action}_rejected",
            target_user_id=str(target_user_id),
            reason=rejected.result.reason,
        )
        return rejected.result

    def _store_failure(
        self, action: str, target_user_id: UUID | str, error: DatabaseError
    ) -> FollowResult:
        logger.error(
            f"{action}_failed",
            target_user_id=str(target_user_id),
            error=str(error),
            exc_info=True,
        )
        return FollowResult.failed(
            FollowFailureReason.STORE_ERROR, f"Failed to {action} user"
        )


# Global follow service instance
follow_service = FollowService()
