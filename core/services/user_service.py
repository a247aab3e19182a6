"""User service for account sync, profiles, listing and search."""

from uuid import UUID

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F, QuerySet

import structlog

from core.auth.context import require_current_user
from core.constants import (
    BLOG_PATH,
    DASHBOARD_PATH,
    PROFILE_BLOG_LIMIT,
    PROFILE_PATH,
    RANDOM_SAMPLE_DEFAULT_LIMIT,
    USER_SEARCH_DEFAULT_LIMIT,
    USER_SEARCH_MIN_LENGTH,
)
from core.exceptions import StoreError, UserNotFoundError
from core.models import User
from core.repositories import BlogRepository, UserRepository
from core.schemas.blog import BlogSummary
from core.schemas.user import (
    AvatarUpdateRequest,
    UserDetail,
    UserProfileResponse,
    UserProfileUpdateRequest,
)
from core.services.page_cache_service import page_cache
from core.utils import random_offset_sample

logger = structlog.get_logger(__name__)


class UserService:
    """Service for user accounts.

    Users are keyed externally by the identity provider subject
    (``auth_user_id``); the acting user for mutations always comes from the
    security context set during authentication.
    """

    def sync_user(self) -> tuple[User, bool]:
        """Return the acting user's row, creating it from token claims.

        Returns:
            Tuple of (user, created)

        Raises:
            NotAuthenticated: If no identity is set in the security context
            StoreError: If the row could not be read or written
        """
        identity = require_current_user()

        try:
            existing = UserRepository.get_by_auth_id(identity.user_id)
            if existing is not None:
                return existing, False

            try:
                with transaction.atomic():
                    user = User.objects.create(
                        auth_user_id=identity.user_id,
                        first_name=identity.first_name,
                        last_name=identity.last_name,
                        email=identity.email,
                        avatar_url=identity.avatar_url,
                        followers=0,
                    )
            except IntegrityError:
                # A concurrent first request created it
                return User.objects.get(auth_user_id=identity.user_id), False
        except DatabaseError as e:
            logger.error("user_sync_failed", auth_user_id=identity.user_id, error=str(e))
            raise StoreError("sync user") from e

        logger.info("user_created", user_id=str(user.user_id), auth_user_id=identity.user_id)
        return user, True

    def get_user_by_auth_id(self, auth_user_id: str) -> User | None:
        """Look up a user by identity provider subject."""
        return UserRepository.get_by_auth_id(auth_user_id)

    def get_acting_user(self) -> User:
        """Resolve the authenticated identity to its user row.

        Raises:
            NotAuthenticated: If no identity is set in the security context
            UserNotFoundError: If the identity has never been synced
        """
        identity = require_current_user()
        user = UserRepository.get_by_auth_id(identity.user_id)
        if user is None:
            raise UserNotFoundError(identity.user_id)
        return user

    def get_user_by_id(self, user_id: UUID | str) -> User:
        """Get a user annotated with following, follower and blog counts.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = UserRepository.with_counts().filter(user_id=user_id).first()
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    def get_user_profile(self, user_id: UUID | str) -> UserProfileResponse:
        """Get a user with counts and their latest blogs.

        Cached per user until a follow or blog mutation revalidates profiles.

        Args:
            user_id: The user whose profile is shown

        Returns:
            UserProfileResponse with up to PROFILE_BLOG_LIMIT newest blogs

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return page_cache.get_or_set(
            PROFILE_PATH, str(user_id), lambda: self._build_profile(user_id)
        )

    def _build_profile(self, user_id: UUID | str) -> UserProfileResponse:
        user = self.get_user_by_id(user_id)
        blogs = BlogRepository.by_author(user.user_id)[:PROFILE_BLOG_LIMIT]
        return UserProfileResponse(
            user=UserDetail.model_validate(user),
            blogs=[BlogSummary.model_validate(blog) for blog in blogs],
        )

    def update_profile(self, payload: UserProfileUpdateRequest) -> User:
        """Apply a partial profile update to the acting user."""
        user = self.get_acting_user()
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return self._save(user, changes, "update profile")

    def update_avatar(self, payload: AvatarUpdateRequest) -> User:
        """Replace the acting user's avatar URL."""
        user = self.get_acting_user()
        return self._save(user, {"avatar_url": payload.avatar_url}, "update avatar")

    def delete_user(self) -> None:
        """Delete the acting user with their edges and blogs.

        Users they followed lose one follower in the same transaction as the
        edges are removed.
        """
        user = self.get_acting_user()
        try:
            with transaction.atomic():
                followee_ids = list(
                    user.following_edges.values_list("followee_id", flat=True)
                )
                User.objects.filter(
                    user_id__in=followee_ids, followers__gt=0
                ).update(followers=F("followers") - 1)
                user.delete()
        except DatabaseError as e:
            logger.error("user_delete_failed", user_id=str(user.user_id), error=str(e))
            raise StoreError("delete user") from e

        logger.info("user_deleted", user_id=str(user.user_id))
        page_cache.revalidate(PROFILE_PATH, DASHBOARD_PATH, BLOG_PATH)

    def list_users(self, search: str | None = None) -> QuerySet[User]:
        """Users with follow counts, optionally filtered by name or email.

        Ordering and page slicing are left to the caller's paginator.
        """
        queryset: QuerySet[User] = (
            UserRepository.matching(search.strip())
            if search and search.strip()
            else User.objects.all()
        )
        return UserRepository.with_counts(queryset)

    def get_follower_count(self, user_id: UUID | str) -> int:
        """Follower counter for a user, 0 if the user is unknown."""
        count = (
            User.objects.filter(user_id=user_id)
            .values_list("followers", flat=True)
            .first()
        )
        return count or 0

    def get_random_users(
        self,
        limit: int = RANDOM_SAMPLE_DEFAULT_LIMIT,
        exclude_user_id: UUID | None = None,
    ) -> list[User]:
        """Suggested authors: a random window of users by popularity."""
        queryset = User.objects.all()
        if exclude_user_id is not None:
            queryset = queryset.exclude(user_id=exclude_user_id)
        return random_offset_sample(queryset, limit, ("-followers", "user_id"))

    def search_users(
        self, query: str, limit: int = USER_SEARCH_DEFAULT_LIMIT
    ) -> list[User]:
        """Search users by first name, last name or email.

        Queries shorter than USER_SEARCH_MIN_LENGTH after trimming return an
        empty list without touching the database.
        """
        query = (query or "").strip()
        if len(query) < USER_SEARCH_MIN_LENGTH:
            return []
        return list(
            UserRepository.matching(query).order_by("-followers", "user_id")[:limit]
        )

    def _save(self, user: User, changes: dict, operation: str) -> User:
        if not changes:
            return user
        for field, value in changes.items():
            setattr(user, field, value)
        try:
            user.save(update_fields=[*changes, "updated_at"])
        except DatabaseError as e:
            logger.error(
                "user_update_failed",
                user_id=str(user.user_id),
                operation=operation,
                error=str(e),
            )
            raise StoreError(operation) from e

        logger.info("user_updated", user_id=str(user.user_id), fields=sorted(changes))
        page_cache.revalidate(PROFILE_PATH, DASHBOARD_PATH)
        return user


# Global user service instance
user_service = UserService()
